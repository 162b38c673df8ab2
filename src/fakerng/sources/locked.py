"""Thread-safe deterministic random source."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from fakerng.seed import resolve_seed
from fakerng.sources.pcg import PCG64Core
from fakerng.sources.registry import register_random_source

if TYPE_CHECKING:
    from fakerng.entropy.base import EntropySource


@register_random_source("locked")
class LockedPRNGSource(PCG64Core):
    """PCG64 source guarded by a mutex.

    Every draw and reseed runs under one non-reentrant lock, so draws are
    totally ordered by lock acquisition and a reseed never interleaves
    with a draw in progress. Which thread wins under contention is left
    to the lock primitive.

    Args:
        seed: Signed 64-bit seed, ``0`` for auto-seed.
        entropy: Entropy source for auto-seeding. Defaults to the OS CSPRNG.
    """

    def __init__(self, seed: int = 0, entropy: EntropySource | None = None) -> None:
        self._lock = threading.Lock()
        super().__init__(seed, entropy)

    def next_uint64(self) -> int:
        with self._lock:
            return self._draw()

    def reseed(self, seed: int) -> None:
        """Reset the generator state; ``0`` draws a fresh seed first.

        The entropy read happens outside the lock.
        """
        seed = resolve_seed(seed, self._entropy)
        with self._lock:
            self._apply_seed(seed)
