"""Plugin discovery, loading, and hook dispatch.

Discovery: entry_points (pip-installed) in the ``invoicectl.plugins``
group via pluggy's setuptools loader. The manager doubles as the
pipeline's cache invalidator and event dispatcher.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any

import pluggy

from invoicectl.plugins.hookspecs import InvoicectlHookSpec

PROJECT_NAME = "invoicectl"
ENTRY_POINT_GROUP = "invoicectl.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(InvoicectlHookSpec)

    def discover_and_load(self) -> list[str]:
        """Load plugins from the ``invoicectl.plugins`` entry-point group.

        Returns the names of all registered plugins.
        """
        count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        names = self.list_plugin_names()
        logger.debug("Loaded %d entry-point plugin(s): %s", count, names)
        return names

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Pipeline collaborator interface
    # ------------------------------------------------------------------

    def invalidate(self, path: str) -> None:
        """Relay a cache invalidation to every ``invalidate_path`` hook."""
        self._pm.hook.invalidate_path(path=path)

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> None:
        """Call hook *hook_name* with *payload* as keyword arguments.

        Raises:
            ValueError: If *hook_name* is not a declared hook.
        """
        caller = getattr(self._pm.hook, hook_name, None)
        if caller is None:
            msg = f"Unknown hook: {hook_name!r}"
            raise ValueError(msg)
        caller(**payload)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
