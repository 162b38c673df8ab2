"""Diagnostic recording for random draws.

:class:`RecordingSource` wraps any :class:`RandomSource` and keeps an
ordered record of every draw, which makes it possible to check a
multi-threaded run against a single-threaded replay of the same seed.
Uses the standard ``logging`` module with the ``"fakerng"`` logger.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import Counter
from dataclasses import asdict, dataclass
from typing import Any

from fakerng.sources.base import RandomSource

logger = logging.getLogger("fakerng")

_LOG_LEVELS = frozenset({"none", "summary", "full"})


@dataclass(frozen=True, slots=True)
class DrawRecord:
    """Immutable record of a single draw.

    Attributes:
        index: Position of the draw in lock-acquisition order (0-based).
        value: The 64-bit value returned.
        thread_name: Name of the thread that made the draw.
        timestamp_ns: Wall-clock time of the draw (nanoseconds since epoch).
    """

    index: int
    value: int
    thread_name: str
    timestamp_ns: int


class RecordingSource(RandomSource):
    """Random source wrapper that records draws in acquisition order.

    Draws and reseeds of the wrapped source are serialised through the
    wrapper's own lock, so record order is exactly the order in which the
    inner source produced values. This also serialises an otherwise
    unlocked inner source.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per draw with index, thread and value.

        ``"full"``: All record fields as a dict.

    Args:
        inner: The source to wrap.
        log_level: One of ``"none"``, ``"summary"``, ``"full"``.
        diagnostic_mode: Keep every :class:`DrawRecord` in memory.

    Raises:
        ValueError: If *log_level* is not recognised.
    """

    def __init__(
        self,
        inner: RandomSource,
        log_level: str = "none",
        diagnostic_mode: bool = True,
    ) -> None:
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {log_level!r}; expected one of {sorted(_LOG_LEVELS)}")
        self._inner = inner
        self._log_level = log_level
        self._diagnostic_mode = diagnostic_mode
        self._lock = threading.Lock()
        self._records: list[DrawRecord] = []
        self._count = 0

    @property
    def inner(self) -> RandomSource:
        """The wrapped source."""
        return self._inner

    @property
    def draw_count(self) -> int:
        """Total draws made, recorded or not."""
        return self._count

    def next_uint64(self) -> int:
        with self._lock:
            value = self._inner.next_uint64()
            record = DrawRecord(
                index=self._count,
                value=value,
                thread_name=threading.current_thread().name,
                timestamp_ns=time.time_ns(),
            )
            self._count += 1
            if self._diagnostic_mode:
                self._records.append(record)
        self._log_draw(record)
        return value

    def reseed(self, seed: int) -> None:
        with self._lock:
            self._inner.reseed(seed)
        if self._log_level != "none":
            # Callers may pass an already resolved auto-seed.
            logger.info("reseed source=%s seed=<redacted>", type(self._inner).__name__)

    def _log_draw(self, record: DrawRecord) -> None:
        if self._log_level == "summary":
            logger.info(
                "draw=%d thread=%s value=%#018x",
                record.index,
                record.thread_name,
                record.value,
            )
        elif self._log_level == "full":
            logger.info("draw_record: %s", asdict(record))

    def get_records(self) -> list[DrawRecord]:
        """Return a copy of all stored records (empty unless diagnostic mode)."""
        with self._lock:
            return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        records = self.get_records()
        if not records:
            return {}

        values = [r.value for r in records]
        per_thread = Counter(r.thread_name for r in records)
        n = len(records)
        return {
            "total_draws": n,
            "distinct_values": len(set(values)),
            "threads": dict(per_thread),
            "min_value": min(values),
            "max_value": max(values),
            "mean_unit": sum(v / 2**64 for v in values) / n,
        }

    def replay_matches(self, reference: RandomSource) -> bool:
        """Check the recorded sequence against a fresh *reference* source.

        *reference* should be seeded the way the wrapped source was; it is
        drawn once per record in recorded order.

        Returns:
            True if every recorded value equals the reference draw at the
            same position.
        """
        return all(reference.next_uint64() == r.value for r in self.get_records())
