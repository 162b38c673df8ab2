"""fakerng: seedable, optionally thread-safe random sources for fake data.

Every data-generation function draws 64-bit values through a :class:`Faker`,
which wraps one random source::

    import fakerng

    faker = fakerng.new(42)           # locked, deterministic
    fast = fakerng.new_unlocked(42)   # same stream, single thread only
    secure = fakerng.new_crypto()     # OS CSPRNG, unseedable

    fakerng.seed_global(7)            # reseed the process-wide default
    fakerng.global_faker().int_n(10)

A seed of ``0`` always means "auto-seed from OS entropy".
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fakerng")
except PackageNotFoundError:
    __version__ = "0.0.0"

from fakerng.config import FakeRNGConfig
from fakerng.exceptions import (
    ConfigValidationError,
    EntropyUnavailableError,
    FakeRNGError,
    InvalidSeedError,
)
from fakerng.faker import Faker, build_faker, new, new_crypto, new_custom, new_unlocked
from fakerng.global_registry import global_faker, seed_global, set_global_faker
from fakerng.sources import (
    CryptoSource,
    LockedPRNGSource,
    RandomSource,
    UnlockedPRNGSource,
)

__all__ = [
    "ConfigValidationError",
    "CryptoSource",
    "EntropyUnavailableError",
    "FakeRNGConfig",
    "FakeRNGError",
    "Faker",
    "InvalidSeedError",
    "LockedPRNGSource",
    "RandomSource",
    "UnlockedPRNGSource",
    "__version__",
    "build_faker",
    "global_faker",
    "new",
    "new_crypto",
    "new_custom",
    "new_unlocked",
    "seed_global",
    "set_global_faker",
]
