"""System entropy source using ``os.urandom()``.

This is the default source for auto-seeding and for crypto-backed draws.
"""

from __future__ import annotations

import os

from fakerng.entropy.base import EntropySource
from fakerng.entropy.registry import register_entropy_source
from fakerng.exceptions import EntropyUnavailableError


@register_entropy_source("system")
class SystemEntropySource(EntropySource):
    """``os.urandom()`` wrapper - cryptographically secure.

    OS-level failures are surfaced as :class:`EntropyUnavailableError`.
    There is no fallback: a weak seed would silently break the auto-seed
    contract.
    """

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``; failures are reported per call."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from the OS CSPRNG.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy from ``os.urandom()``.

        Raises:
            EntropyUnavailableError: If the operating system cannot supply
                entropy.
        """
        try:
            return os.urandom(n)
        except (OSError, NotImplementedError) as exc:
            raise EntropyUnavailableError(f"OS entropy source unavailable: {exc}") from exc

    def close(self) -> None:
        """No-op - no resources to release."""
