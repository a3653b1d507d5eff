"""Plugin manager -- entry-point discovery and registration on an app.

This module contains :class:`PluginManager`, which discovers plugins
registered as Python entry points, applies allow/deny filtering from a
:class:`~plugchain.models.PluginsConfig`, and registers each plugin on a
decorated value through its ``use`` method.

The entry-point group used for discovery is ``plugchain.plugins``.
Third-party packages register plugins by declaring an entry point under this
group in their ``pyproject.toml``::

    [project.entry-points."plugchain.plugins"]
    my-plugin = "my_package.plugin:MyPlugin"

The target may be a plain function, a :class:`~plugchain.plugins.base.Plugin`
subclass (instantiated with no arguments), or a Plugin instance.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import Any, Callable, Optional

from plugchain.decorator import ensure_decorated
from plugchain.exceptions import PluginError
from plugchain.models import PluginsConfig
from plugchain.plugins.base import Plugin

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "plugchain.plugins"
"""The entry-point group name used for plugin discovery."""


class PluginManager:
    """Discovers plugins and registers them on an app by name.

    Registration goes through ``app.use``, so discovered plugins are invoked
    immediately and their deferred results end up in the app's plugin list
    like any other plugin.

    Example:
        Typical usage::

            app = decorate(SimpleNamespace())
            manager = PluginManager()
            loaded = manager.discover(app, PluginsConfig(disabled=["noisy"]))
            print(f"Loaded {len(loaded)} plugins")
    """

    def __init__(self) -> None:
        self._plugins: dict[str, Callable[[Any], Any]] = {}

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def discover(
        self,
        app: Any,
        config: Optional[PluginsConfig] = None,
        strict: bool = False,
    ) -> list[str]:
        """Discover plugins via entry points and register them on *app*.

        Args:
            app: The value to register plugins on. Decorated with default
                options if it has no ``use`` yet.
            config: Allow/deny lists. Defaults to loading everything.
            strict: Raise instead of logging when a plugin fails to load.

        Returns:
            Names of the plugins that were registered, in discovery order.

        Raises:
            PluginError: In strict mode, when an entry point fails to load
                or its plugin raises.
        """
        config = config or PluginsConfig()
        target = ensure_decorated(app)
        loaded_names: list[str] = []
        enabled_set = set(config.enabled)
        disabled_set = set(config.disabled)

        for ep in importlib.metadata.entry_points().select(group=ENTRY_POINT_GROUP):
            name = ep.name

            if enabled_set and name not in enabled_set:
                logger.debug("Plugin '%s' not in enabled list, skipping", name)
                continue
            if name in disabled_set:
                logger.debug("Plugin '%s' is disabled, skipping", name)
                continue

            try:
                self.load_plugin(target, name, _instantiate(ep.load()))
                loaded_names.append(name)
            except Exception as exc:
                if strict:
                    if isinstance(exc, PluginError):
                        raise
                    raise PluginError(f"Failed to load plugin '{name}': {exc}") from exc
                logger.warning("Failed to load plugin '%s': %s", name, exc)

        return loaded_names

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_plugin(self, app: Any, name: str, plugin: Callable[[Any], Any]) -> None:
        """Register a single *plugin* on *app* under *name*.

        Raises:
            PluginError: If a plugin with the same *name* is already loaded.
            InvalidPluginError: If *plugin* is not callable.
        """
        if name in self._plugins:
            raise PluginError(f"Plugin '{name}' is already loaded")

        app.use(plugin)
        self._plugins[name] = plugin
        logger.info("Loaded plugin '%s' v%s", name, _version_of(plugin))

    # ------------------------------------------------------------------
    # Querying
    # ------------------------------------------------------------------

    def get_plugin(self, name: str) -> Callable[[Any], Any]:
        """Retrieve a loaded plugin by its registered name.

        Raises:
            PluginError: If no plugin with the given *name* is loaded.
        """
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginError(f"Plugin '{name}' is not loaded") from None

    def list_plugins(self) -> list[dict[str, str]]:
        """List loaded plugins with ``name``, ``version`` and ``description`` keys."""
        return [
            {
                "name": name,
                "version": _version_of(plugin),
                "description": plugin.description if isinstance(plugin, Plugin) else "",
            }
            for name, plugin in self._plugins.items()
        ]


def _instantiate(obj: Any) -> Any:
    """Turn an entry-point target into a plugin callable."""
    if isinstance(obj, type) and issubclass(obj, Plugin):
        return obj()
    return obj


def _version_of(plugin: Any) -> str:
    return plugin.version if isinstance(plugin, Plugin) else "0.1.0"
