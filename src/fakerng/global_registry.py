"""Process-wide default faker.

When :mod:`fakerng` is imported the default is a locked PCG64 faker
auto-seeded from OS entropy. The environment and ``.env`` are not read at
import; :func:`initialize_default` installs a faker built from
:class:`~fakerng.config.FakeRNGConfig` on request. Replacing the default
is last-write-wins: handles already obtained from :func:`global_faker`
keep working against the faker they refer to, and only calls made after
the swap see the new one.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, NamedTuple

from fakerng.config import FakeRNGConfig
from fakerng.faker import Faker, build_faker, resolve_entropy
from fakerng.seed import resolve_seed
from fakerng.sources.locked import LockedPRNGSource

if TYPE_CHECKING:
    from fakerng.entropy.base import EntropySource

logger = logging.getLogger("fakerng")


class _Installed(NamedTuple):
    faker: Faker
    entropy: EntropySource | None


class GlobalFakerRegistry:
    """Slot holding the current default faker and its entropy source.

    The faker and the entropy source used to auto-seed it are stored as one
    tuple, so a reader never pairs a faker with another faker's entropy.
    Writes swap the reference under a lock; reads are a single attribute
    load and never see a partially constructed faker.

    Args:
        faker: The initial default.
        entropy: Entropy source for auto-seeding *faker* on reseed.
            ``None`` means the OS CSPRNG.
    """

    def __init__(self, faker: Faker, entropy: EntropySource | None = None) -> None:
        self._lock = threading.Lock()
        self._installed = _Installed(self._check(faker), entropy)

    @staticmethod
    def _check(faker: Faker) -> Faker:
        if not isinstance(faker, Faker):
            raise TypeError(f"Expected a Faker, got {type(faker).__name__}")
        return faker

    @property
    def current(self) -> Faker:
        """The currently installed faker (shared, not copied)."""
        return self._installed.faker

    @property
    def entropy(self) -> EntropySource | None:
        """Entropy source paired with the current faker."""
        return self._installed.entropy

    def set(self, faker: Faker, entropy: EntropySource | None = None) -> Faker:
        """Install *faker* with its auto-seed *entropy* and return the one it replaced.

        Raises:
            TypeError: If *faker* is not a Faker.
        """
        installed = _Installed(self._check(faker), entropy)
        with self._lock:
            previous, self._installed = self._installed, installed
        logger.debug("Global faker replaced: %r -> %r", previous.faker, faker)
        return previous.faker

    def reseed(self, seed: int) -> None:
        """Reseed the current faker; ``0`` draws from its paired entropy."""
        installed = self._installed
        installed.faker.reseed(resolve_seed(seed, installed.entropy))


_registry = GlobalFakerRegistry(Faker(LockedPRNGSource(0)))


def initialize_default(config: FakeRNGConfig | None = None) -> Faker:
    """Build a default faker from *config* and install it globally.

    The configured entropy source is kept alongside the faker and used by
    :func:`seed_global` for auto-seeding.

    Args:
        config: Configuration to build from. Defaults to a fresh
            ``FakeRNGConfig()`` (environment and ``.env`` applied).

    Returns:
        The newly installed faker.

    Raises:
        ConfigValidationError: If the configuration names an unknown source.
        pydantic.ValidationError: If the environment holds invalid values.
    """
    if config is None:
        config = FakeRNGConfig()
    entropy = resolve_entropy(config)
    faker = build_faker(config, entropy)
    _registry.set(faker, entropy)
    return faker


def global_faker() -> Faker:
    """Return the currently installed default faker."""
    return _registry.current


def set_global_faker(faker: Faker) -> None:
    """Replace the process-wide default faker.

    Auto-seeding through :func:`seed_global` reads the OS CSPRNG for a
    faker installed this way.

    Raises:
        TypeError: If *faker* is not a Faker.
    """
    _registry.set(faker)


def seed_global(seed: int = 0) -> None:
    """Reseed the current default faker.

    Args:
        seed: Signed 64-bit seed; ``0`` draws a fresh seed from the entropy
            source installed with the default before reseeding.

    Raises:
        InvalidSeedError: If *seed* is not a signed 64-bit int.
        EntropyUnavailableError: If auto-seeding cannot read entropy.
    """
    _registry.reseed(seed)
