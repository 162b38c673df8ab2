"""Entropy source subsystem for fakerng.

Re-exports the ABC, registry, and the built-in system source::

    from fakerng.entropy import EntropySource, SystemEntropySource
"""

from fakerng.entropy.base import EntropySource
from fakerng.entropy.registry import entropy_source_registry, register_entropy_source
from fakerng.entropy.system import SystemEntropySource

__all__ = [
    "EntropySource",
    "SystemEntropySource",
    "entropy_source_registry",
    "register_entropy_source",
]
