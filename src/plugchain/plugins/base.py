"""Abstract base class for class-based plugins.

A plugin is any callable that receives the value it is being attached to.
Plugins that carry a name and version can subclass :class:`Plugin` instead;
instances are callable and can be handed to ``use`` directly or advertised
through the ``plugchain.plugins`` entry-point group and picked up by
:class:`~plugchain.plugins.manager.PluginManager`.

Example:
    Minimal class-based plugin::

        class Greeter(Plugin):
            @property
            def name(self) -> str:
                return "greeter"

            def apply(self, app):
                app.greeting = "hello"
                return Deferred(lambda child: setattr(child, "greeting", "hi"))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from plugchain.results import PluginResult


class Plugin(ABC):
    """Base class for plugins that carry a name and version.

    Subclasses implement :attr:`name` and :meth:`apply`. Calling the instance
    delegates to :meth:`apply`, so ``app.use(MyPlugin())`` works like any
    function plugin.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the unique plugin name used for discovery and logging."""
        ...

    @property
    def version(self) -> str:
        """Return the plugin version string. Defaults to ``"0.1.0"``."""
        return "0.1.0"

    @property
    def description(self) -> str:
        """Return a one-line description. Defaults to ``""``."""
        return ""

    @abstractmethod
    def apply(self, app: Any) -> PluginResult:
        """Attach the plugin to *app*.

        Args:
            app: The value the plugin is registered on, or a child value
                during replay.

        Returns:
            A :class:`~plugchain.results.Deferred` to be replayed on
            children, or :class:`~plugchain.results.Immediate` / ``None``
            when nothing should be kept.
        """

    def __call__(self, app: Any) -> PluginResult:
        return self.apply(app)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} v{self.version}>"
