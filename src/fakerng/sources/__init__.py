"""Random source subsystem for fakerng.

Importing this package registers the built-in ``locked``, ``unlocked``
and ``crypto`` sources::

    from fakerng.sources import LockedPRNGSource, random_source_registry
"""

from fakerng.sources.base import RandomSource
from fakerng.sources.crypto import CryptoSource
from fakerng.sources.locked import LockedPRNGSource
from fakerng.sources.registry import random_source_registry, register_random_source
from fakerng.sources.unlocked import UnlockedPRNGSource

__all__ = [
    "CryptoSource",
    "LockedPRNGSource",
    "RandomSource",
    "UnlockedPRNGSource",
    "random_source_registry",
    "register_random_source",
]
