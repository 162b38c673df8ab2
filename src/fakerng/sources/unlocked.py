"""Deterministic random source without synchronisation."""

from __future__ import annotations

from fakerng.seed import resolve_seed
from fakerng.sources.pcg import PCG64Core
from fakerng.sources.registry import register_random_source


@register_random_source("unlocked")
class UnlockedPRNGSource(PCG64Core):
    """PCG64 source for single-threaded callers.

    Same seeding policy and stream as :class:`LockedPRNGSource`, without
    the mutex. Sharing an instance between threads without external
    synchronisation is a caller error; the source does not detect it.

    Args:
        seed: Signed 64-bit seed, ``0`` for auto-seed.
        entropy: Entropy source for auto-seeding. Defaults to the OS CSPRNG.
    """

    def next_uint64(self) -> int:
        return self._draw()

    def reseed(self, seed: int) -> None:
        self._apply_seed(resolve_seed(seed, self._entropy))
