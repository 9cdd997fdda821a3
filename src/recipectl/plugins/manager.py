"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
Capabilities: extra layout kinds and field types for the validator registry.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import pluggy

from recipectl.plugins.hookspecs import PROJECT_NAME, RecipectlHookSpec

if TYPE_CHECKING:
    from recipectl.validators.registry import ValidatorRegistry

ENTRY_POINT_GROUP = "recipectl.plugins"

hookimpl = pluggy.HookimplMarker(PROJECT_NAME)

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery and registration of plugin validators."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(RecipectlHookSpec)
        self.warnings: list[str] = []

    def discover_and_load(self, registry: ValidatorRegistry) -> list[str]:
        """Load entry-point plugins and register their validators into *registry*.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self.register_validators(registry)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def register_validators(self, registry: ValidatorRegistry) -> None:
        """Register validators from every plugin into *registry*.

        A plugin whose hook raises or returns bad registrations is skipped
        with a warning; the remaining plugins still load.
        """
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            self._collect(
                plugin,
                plugin_name,
                "register_layout_validators",
                registry.register_layout,
            )
            self._collect(
                plugin,
                plugin_name,
                "register_field_validators",
                registry.register_field,
            )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _collect(
        self,
        plugin: object,
        plugin_name: str,
        hook_name: str,
        register: Callable[[str, Any], None],
    ) -> None:
        hook = getattr(plugin, hook_name, None)
        if hook is None:
            return

        try:
            mapping = hook()
        except Exception:
            logger.warning("Plugin %s failed in %s", plugin_name, hook_name, exc_info=True)
            self.warnings.append(f"Plugin {plugin_name} failed in {hook_name}")
            return

        if mapping is None:
            return
        if not isinstance(mapping, dict):
            logger.warning("Plugin %s returned non-dict from %s", plugin_name, hook_name)
            self.warnings.append(f"Plugin {plugin_name} returned non-dict from {hook_name}")
            return

        for name, validator in mapping.items():
            try:
                register(name, validator)
            except (TypeError, ValueError):
                logger.warning(
                    "Skipping validator %r from plugin %s",
                    name,
                    plugin_name,
                    exc_info=True,
                )
                self.warnings.append(f"Skipped validator {name!r} from plugin {plugin_name}")
            else:
                logger.debug("Plugin %s registered validator %r", plugin_name, name)

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook calls
        against class objects leave ``self`` unbound.
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
                self.warnings.append(f"Failed to instantiate plugin {plugin_name}")
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
