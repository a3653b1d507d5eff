"""Plugin helpers for plugchain -- class-based plugins, hooks, and discovery.

Key names:

* :class:`Plugin` -- Abstract base class for plugins that carry metadata.
* :func:`merge_options` / :func:`chain_hooks` -- Ready-made pre-invocation
  hooks for :func:`~plugchain.decorator.decorate`.
* :class:`PluginManager` -- Discovers ``plugchain.plugins`` entry points
  and registers them on an app.

Example:
    Registering installed plugins on a fresh app::

        from plugchain import decorate
        from plugchain.plugins import PluginManager

        app = decorate(SimpleNamespace())
        PluginManager().discover(app)
"""

from plugchain.plugins.base import Plugin
from plugchain.plugins.hooks import chain_hooks, merge_options
from plugchain.plugins.manager import ENTRY_POINT_GROUP, PluginManager

__all__ = ["Plugin", "chain_hooks", "merge_options", "ENTRY_POINT_GROUP", "PluginManager"]
