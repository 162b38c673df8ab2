"""Registry of entropy sources, keyed by ``entropy_source_type``.

Third-party sources register through the ``fakerng.entropy_sources``
entry-point group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fakerng.plugins import PluginRegistry

if TYPE_CHECKING:
    from fakerng.entropy.base import EntropySource

entropy_source_registry: PluginRegistry[EntropySource] = PluginRegistry(
    "entropy source", "fakerng.entropy_sources"
)

register_entropy_source = entropy_source_registry.register
