"""Abstract base class for all random sources.

A random source is the single capability every faker draws through:
``next_uint64()`` returns one uniformly distributed 64-bit value and
``reseed()`` resets the source from a signed 64-bit seed. Fakers hold
sources only through this type, so any conforming implementation can be
passed to :func:`fakerng.new_custom`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class RandomSource(ABC):
    """Abstract base for all random sources."""

    @abstractmethod
    def next_uint64(self) -> int:
        """Return one draw in ``[0, 2**64)``.

        Must be callable an unbounded number of times without
        reinitialisation and must never block indefinitely.
        """

    @abstractmethod
    def reseed(self, seed: int) -> None:
        """Reset the source's state from *seed*.

        Args:
            seed: Signed 64-bit seed. Sources that cannot be seeded accept
                the call and ignore it.
        """
