"""Named plugin registries shared by the entropy and random source subsystems.

A :class:`PluginRegistry` maps string keys to classes. Built-in classes
register with the :meth:`PluginRegistry.register` decorator when their
module is imported; classes shipped by other distributions are found
through an entry-point group the first time a name is missing.
"""

from __future__ import annotations

import importlib.metadata
import inspect
import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("fakerng")

T = TypeVar("T")


class PluginRegistry(Generic[T]):
    """Registry mapping names to plugin classes.

    Lookup order: decorator registrations first, then the entry-point
    group, loaded once and lazily. A decorator registration always wins
    over an entry point of the same name.

    Args:
        kind: Human-readable plugin kind used in error messages
            (e.g. ``"random source"``).
        entry_point_group: Entry-point group searched for third-party
            plugins.
    """

    def __init__(self, kind: str, entry_point_group: str) -> None:
        self.kind = kind
        self.entry_point_group = entry_point_group
        self._registry: dict[str, type[T]] = {}
        self._entry_points_loaded = False

    def register(self, name: str) -> Callable[[type[T]], type[T]]:
        """Decorator that registers a class under *name*.

        Raises:
            ValueError: If *name* is already registered to another class.
        """

        def decorator(klass: type[T]) -> type[T]:
            existing = self._registry.get(name)
            if existing is not None and existing is not klass:
                raise ValueError(f"{self.kind.capitalize()} '{name}' is already registered")
            self._registry[name] = klass
            return klass

        return decorator

    def get(self, name: str) -> type[T]:
        """Return the class registered under *name*.

        Raises:
            KeyError: If *name* is not found after loading entry points.
        """
        if name not in self._registry and not self._entry_points_loaded:
            self._load_entry_points()
        if name in self._registry:
            return self._registry[name]

        available = ", ".join(sorted(self._registry)) or "(none)"
        raise KeyError(f"Unknown {self.kind}: {name!r}. Available: {available}")

    def build(self, name: str, **options: Any) -> T:
        """Instantiate the class registered under *name*.

        Only the *options* the constructor declares are passed, and
        ``None`` values are dropped so the constructor default applies.
        An unseedable random source therefore ignores ``seed`` the same
        way its ``reseed()`` does.

        Raises:
            KeyError: If *name* is not registered.
        """
        klass = self.get(name)
        try:
            params = inspect.signature(klass).parameters
        except (ValueError, TypeError):
            params = {}
        kwargs = {k: v for k, v in options.items() if k in params and v is not None}
        return klass(**kwargs)

    def list_available(self) -> list[str]:
        """Return sorted registered names, loading entry points first."""
        if not self._entry_points_loaded:
            self._load_entry_points()
        return sorted(self._registry)

    def _load_entry_points(self) -> None:
        self._entry_points_loaded = True
        try:
            eps = importlib.metadata.entry_points(group=self.entry_point_group)
        except Exception:  # Intentional: must not crash on broken metadata
            logger.warning("Failed to load entry points for %s", self.entry_point_group, exc_info=True)
            return

        for ep in eps:
            if ep.name in self._registry:
                continue
            try:
                self._registry[ep.name] = ep.load()
                logger.debug("Loaded %s %r from entry point", self.kind, ep.name)
            except Exception:  # Intentional: one bad plugin must not block others
                logger.warning(
                    "Failed to load %s entry point %r: %s",
                    self.kind,
                    ep.name,
                    ep.value,
                    exc_info=True,
                )

    def _reset(self) -> None:
        """Reset registry state. **Test-only**, not part of public API."""
        self._registry.clear()
        self._entry_points_loaded = False
