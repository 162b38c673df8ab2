"""Secure seed provider.

Seeds are signed 64-bit integers. The value ``0`` is reserved: every
constructor and reseed path in fakerng treats it as "auto-seed" and
replaces it with 8 bytes of OS entropy, so ``0`` can never be chosen as a
literal deterministic seed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fakerng.config import INT64_MAX, INT64_MIN
from fakerng.exceptions import EntropyUnavailableError, InvalidSeedError

if TYPE_CHECKING:
    from fakerng.entropy.base import EntropySource

logger = logging.getLogger("fakerng")

AUTO_SEED = 0

_SEED_BYTES = 8


def generate_seed(entropy: EntropySource | None = None) -> int:
    """Draw a fresh seed from an entropy source.

    Args:
        entropy: Source to read from. Defaults to a new
            :class:`~fakerng.entropy.system.SystemEntropySource`.

    Returns:
        8 bytes of entropy interpreted as a big-endian signed 64-bit integer.

    Raises:
        EntropyUnavailableError: If the source cannot provide 8 bytes.
    """
    if entropy is None:
        from fakerng.entropy.system import SystemEntropySource

        entropy = SystemEntropySource()

    raw = entropy.get_random_bytes(_SEED_BYTES)
    if len(raw) != _SEED_BYTES:
        raise EntropyUnavailableError(
            f"Entropy source {entropy.name!r} returned {len(raw)} bytes, expected {_SEED_BYTES}"
        )
    return int.from_bytes(raw, "big", signed=True)


def check_seed(seed: int) -> int:
    """Validate that *seed* is an int in the signed 64-bit range.

    Raises:
        InvalidSeedError: If *seed* is not an int (bools included) or is
            out of range.
    """
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidSeedError(f"Seed must be an int, got {type(seed).__name__}")
    if not INT64_MIN <= seed <= INT64_MAX:
        raise InvalidSeedError(f"Seed {seed} is outside the signed 64-bit range")
    return seed


def resolve_seed(seed: int, entropy: EntropySource | None = None) -> int:
    """Return *seed*, or a freshly generated one when it is ``AUTO_SEED``.

    Args:
        seed: Caller-supplied seed; ``0`` requests auto-seeding.
        entropy: Entropy source for the auto-seed path.

    Returns:
        A validated signed 64-bit seed.

    Raises:
        InvalidSeedError: If *seed* is invalid.
        EntropyUnavailableError: If auto-seeding cannot read entropy.
    """
    seed = check_seed(seed)
    if seed != AUTO_SEED:
        return seed
    logger.debug("Auto-seeding from entropy source")
    return generate_seed(entropy)
