"""Ready-made pre-invocation hooks.

A hook is configured once at decoration time (``decorate(app, fn=hook)``)
and runs before every plugin registered through that value's ``use``. It is
called as ``hook(target, *args, **kwargs)`` where the extra arguments are
whatever the caller passed to ``use`` after the plugin itself.

* :func:`merge_options` -- shallow-merge an options mapping into
  ``target.options``.
* :func:`chain_hooks` -- run several hooks in order as one.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional

from plugchain.exceptions import ConfigError

Hook = Callable[..., None]


def merge_options(
    target: Any, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
) -> None:
    """Merge *options* and *kwargs* into ``target.options``.

    ``target.options`` is created as an empty dict when missing. Later keys
    win, so ``app.use(plugin, {"a": 1}, a=2)`` leaves ``a == 2``.

    Raises:
        ConfigError: If *options* is not a mapping or ``target.options``
            exists but is not a dict.
    """
    if options is not None and not isinstance(options, Mapping):
        raise ConfigError(
            f"expect `options` be a mapping, got {type(options).__name__}"
        )
    current = getattr(target, "options", None)
    if current is None:
        current = {}
        target.options = current
    elif not isinstance(current, dict):
        raise ConfigError("expect `target.options` be a dict")
    if options:
        current.update(options)
    current.update(kwargs)


def chain_hooks(*hooks: Hook) -> Hook:
    """Combine *hooks* into a single hook that calls each one in order."""
    for hook in hooks:
        if not callable(hook):
            raise ConfigError(f"expect hook be function, got {type(hook).__name__}")

    def chained(target: Any, *args: Any, **kwargs: Any) -> None:
        for hook in hooks:
            hook(target, *args, **kwargs)

    return chained
