"""Abstract base class for all entropy sources.

Entropy sources feed the secure seed provider and the crypto-backed random
source. The ABC provides a default ``fill()`` that delegates to
``get_random_bytes()`` and a concrete ``health_check()`` method. Subclasses
must implement the four abstract members: ``name``, ``is_available``,
``get_random_bytes()``, and ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from fakerng.exceptions import EntropyUnavailableError


class EntropySource(ABC):
    """Abstract base for all entropy sources.

    Implementations must be safe to call from several threads at once;
    the operating system pool is shared by construction.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'system'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide entropy."""

    @abstractmethod
    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy.

        Raises:
            EntropyUnavailableError: If the source cannot provide bytes.
        """

    def fill(self, buf: bytearray) -> None:
        """Overwrite *buf* in place with fresh entropy.

        Args:
            buf: Mutable buffer to fill. Its length is preserved.

        Raises:
            EntropyUnavailableError: If the source cannot provide bytes or
                returns fewer than ``len(buf)`` of them.
        """
        data = self.get_random_bytes(len(buf))
        if len(data) != len(buf):
            raise EntropyUnavailableError(
                f"Entropy source {self.name!r} returned {len(data)} bytes, expected {len(buf)}"
            )
        buf[:] = data

    @abstractmethod
    def close(self) -> None:
        """Release resources (file handles, connections)."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_available}
