"""Deterministic PCG64 core shared by the locked and unlocked sources.

The draw algorithm is numpy's ``PCG64`` bit generator (128-bit LCG with
XSL-RR output). Its state is not derived through ``SeedSequence``, which
only accepts non-negative entropy: the signed 64-bit seed is masked to 64
bits and expanded with SplitMix64 into four words, giving the 128-bit
state and the (odd) 128-bit increment. Both are written straight into the
bit generator, so a given seed always yields the same stream.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from fakerng.seed import resolve_seed
from fakerng.sources.base import RandomSource

if TYPE_CHECKING:
    from fakerng.entropy.base import EntropySource

_UINT64_MASK = (1 << 64) - 1

_SPLITMIX64_GAMMA = 0x9E3779B97F4A7C15
_SPLITMIX64_MUL1 = 0xBF58476D1CE4E5B9
_SPLITMIX64_MUL2 = 0x94D049BB133111EB


def splitmix64(seed: int, count: int) -> list[int]:
    """Expand *seed* into *count* 64-bit words with SplitMix64.

    Args:
        seed: Any integer; only its low 64 bits are used.
        count: Number of words to produce.

    Returns:
        List of *count* unsigned 64-bit integers.
    """
    x = seed & _UINT64_MASK
    words = []
    for _ in range(count):
        x = (x + _SPLITMIX64_GAMMA) & _UINT64_MASK
        z = x
        z = ((z ^ (z >> 30)) * _SPLITMIX64_MUL1) & _UINT64_MASK
        z = ((z ^ (z >> 27)) * _SPLITMIX64_MUL2) & _UINT64_MASK
        words.append(z ^ (z >> 31))
    return words


def pcg64_state(seed: int) -> dict[str, Any]:
    """Build a ``PCG64.state`` dictionary for *seed*."""
    w0, w1, w2, w3 = splitmix64(seed, 4)
    return {
        "bit_generator": "PCG64",
        "state": {"state": (w0 << 64) | w1, "inc": ((w2 << 64) | w3) | 1},
        "has_uint32": 0,
        "uinteger": 0,
    }


class PCG64Core(RandomSource):
    """Unsynchronised PCG64 draw and reseed primitives.

    Subclasses decide the locking discipline around :meth:`_draw` and
    :meth:`_apply_seed`. A seed of ``0`` requests auto-seeding from
    *entropy* both at construction and on :meth:`reseed`.

    Args:
        seed: Signed 64-bit seed, ``0`` for auto-seed.
        entropy: Entropy source for auto-seeding. Defaults to the OS CSPRNG.
    """

    def __init__(self, seed: int = 0, entropy: EntropySource | None = None) -> None:
        self._entropy = entropy
        self._bit_generator = np.random.PCG64(0)
        self._apply_seed(resolve_seed(seed, entropy))

    def _draw(self) -> int:
        return int(self._bit_generator.random_raw())

    def _apply_seed(self, seed: int) -> None:
        self._bit_generator.state = pcg64_state(seed)
