"""Registry of random sources, keyed by ``source_type``.

Third-party sources register through the ``fakerng.random_sources``
entry-point group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fakerng.plugins import PluginRegistry

if TYPE_CHECKING:
    from fakerng.sources.base import RandomSource

random_source_registry: PluginRegistry[RandomSource] = PluginRegistry(
    "random source", "fakerng.random_sources"
)

register_random_source = random_source_registry.register
