"""Random source backed directly by an entropy source."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from fakerng.sources.base import RandomSource
from fakerng.sources.registry import register_random_source

if TYPE_CHECKING:
    from fakerng.entropy.base import EntropySource


@register_random_source("crypto")
class CryptoSource(RandomSource):
    """Every draw reads 8 fresh bytes from the entropy source.

    Draws are never reproducible, so :meth:`reseed` is accepted and
    ignored. This keeps the source a drop-in replacement for the seeded
    variants.

    Args:
        entropy: Entropy source to read from. Defaults to
            :class:`~fakerng.entropy.system.SystemEntropySource`.
    """

    def __init__(self, entropy: EntropySource | None = None) -> None:
        if entropy is None:
            from fakerng.entropy.system import SystemEntropySource

            entropy = SystemEntropySource()
        self._entropy = entropy
        self._buf = bytearray(8)
        self._lock = threading.Lock()

    @property
    def entropy(self) -> EntropySource:
        """The entropy source draws are read from."""
        return self._entropy

    def next_uint64(self) -> int:
        """Return 8 fresh entropy bytes as a big-endian unsigned integer.

        Raises:
            EntropyUnavailableError: If the entropy source fails. The
                buffer lock is released before the error propagates.
        """
        with self._lock:
            self._entropy.fill(self._buf)
            return int.from_bytes(self._buf, "big")

    def reseed(self, seed: int) -> None:
        """No-op: a crypto source cannot be seeded."""
