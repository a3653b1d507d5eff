"""Exception hierarchy for plugchain.

All exceptions inherit from :class:`PlugchainError`. The validation errors
also inherit from the matching built-in (``TypeError`` or ``ValueError``) so
callers that only know the built-in contract can still catch them.

Every error is raised synchronously to the direct caller, before any
mutation of the target takes place. Nothing is retried or swallowed except
by :meth:`~plugchain.plugins.manager.PluginManager.discover` in non-strict
mode, which logs and skips plugins that fail to load.

Subclass hierarchy::

    PlugchainError
    +-- InvalidTargetError  (TypeError)
    +-- InvalidPluginError  (TypeError)
    +-- ConfigError         (ValueError)
    +-- PluginError
"""


class PlugchainError(Exception):
    """Base exception for all plugchain errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidTargetError(PlugchainError, TypeError):
    """Raised when a value that cannot carry attributes is decorated.

    Decoratable values are objects with an instance ``__dict__`` and plain
    functions. Primitives (``int``, ``str``, ``None``...), builtin containers
    and ``__slots__``-only instances are rejected.
    """


class InvalidPluginError(PlugchainError, TypeError):
    """Raised when ``use`` is given something that is not callable."""


class ConfigError(PlugchainError, ValueError):
    """Raised for invalid decoration options or plugin configuration."""


class PluginError(PlugchainError):
    """Raised when a plugin fails to load or is registered twice."""
