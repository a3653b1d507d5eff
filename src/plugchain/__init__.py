"""plugchain -- cascade plugins from an object to the objects it creates.

Decorate any object or function with a plugin list, a ``use`` method that
runs a plugin immediately, and a ``run`` method that replays the plugins a
value has kept onto another (usually child) value::

    app = decorate(SimpleNamespace())
    app.use(lambda app: lambda child: setattr(child, "debug", True))
    app.run(child)

Modules:
    decorator: ``decorate`` and the shared ``use``/``run`` implementations.
    app: ``App``, a tree node implementing ``use``/``run`` natively.
    results: Tagged plugin results (``Deferred``, ``Immediate``).
    models: Pydantic option models.
    exceptions: Exception hierarchy.
    plugins: Class-based plugins, ready-made hooks, entry-point discovery.
"""

from plugchain.app import App
from plugchain.decorator import (
    Usable,
    decorate,
    ensure_decorated,
    is_decoratable,
    is_decorated,
)
from plugchain.exceptions import (
    ConfigError,
    InvalidPluginError,
    InvalidTargetError,
    PlugchainError,
    PluginError,
)
from plugchain.models import DecorateOptions, PluginsConfig
from plugchain.results import Deferred, Immediate

__version__ = "0.1.0"

__all__ = [
    "App",
    "ConfigError",
    "DecorateOptions",
    "Deferred",
    "Immediate",
    "InvalidPluginError",
    "InvalidTargetError",
    "PlugchainError",
    "PluginError",
    "PluginsConfig",
    "Usable",
    "decorate",
    "ensure_decorated",
    "is_decoratable",
    "is_decorated",
]
