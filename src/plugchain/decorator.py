"""Decorate arbitrary values with ``use`` and ``run``.

:func:`decorate` augments an object or function in place with three
attributes:

* a plugin list (``fns`` unless another ``prop`` is configured),
* ``use(fn, *args, **kwargs)`` -- call ``fn(target)`` immediately and keep
  the deferred function it returns, if any,
* ``run(value)`` -- make sure *value* is use-able, then replay every kept
  function onto it in registration order.

Values that already expose a callable ``use`` are considered decorated and
are left alone, whether that ``use`` came from an earlier :func:`decorate`
call or from the value's own class (see :class:`~plugchain.app.App`).

Example::

    app = decorate(SimpleNamespace())
    app.use(lambda ctx: lambda child: setattr(child, "debug", True))

    child = SimpleNamespace()
    app.run(child)
    assert child.debug is True
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableSequence
from typing import Any, Callable, Optional, Protocol, Union, runtime_checkable

from plugchain.exceptions import InvalidPluginError, InvalidTargetError
from plugchain.models import DecorateOptions
from plugchain.results import deferred_of

logger = logging.getLogger(__name__)

_OWNER_ATTR = "__plugchain_owner__"


@runtime_checkable
class Usable(Protocol):
    """A value that can register plugins and replay them onto children."""

    def use(self, fn: Callable[[Any], Any], *args: Any, **kwargs: Any) -> Any: ...

    def run(self, value: Any) -> Any: ...


def is_decorated(value: Any) -> bool:
    """Return True if *value* exposes a callable ``use`` of its own.

    A value with ``run`` but no ``use`` is not decorated. Neither is an
    instance or subclass that only reaches the ``use`` installed on a
    decorated class: that ``use`` registers plugins on the class itself.
    """
    use = getattr(value, "use", None)
    if not callable(use):
        return False
    owner = getattr(use, _OWNER_ATTR, None)
    return owner is None or owner is value


def is_decoratable(value: Any) -> bool:
    """Return True if *value* is an object or function that can carry attributes."""
    return hasattr(value, "__dict__")


def invoke_plugin(
    target: Any,
    plugins: MutableSequence[Callable[[Any], Any]],
    fn: Any,
    hook: Optional[Callable[..., Any]] = None,
    args: tuple[Any, ...] = (),
    kwargs: Optional[Mapping[str, Any]] = None,
) -> Any:
    """Register *fn* on *target*: run the hook, call the plugin, keep its result.

    Args:
        target: The value the plugin is attached to.
        plugins: The plugin list that receives a deferred result.
        fn: The plugin; must be callable.
        hook: Optional pre-invocation hook, called as
            ``hook(target, *args, **kwargs)``.
        args: Extra positional arguments given to ``use``.
        kwargs: Extra keyword arguments given to ``use``.

    Returns:
        *target*, for chaining.

    Raises:
        InvalidPluginError: If *fn* is not callable. Nothing has run yet.
    """
    if not callable(fn):
        raise InvalidPluginError("expect `fn` be function")

    if hook is not None:
        hook(target, *args, **(kwargs or {}))

    deferred = deferred_of(fn(target))
    if deferred is not None:
        plugins.append(deferred)
        logger.debug(
            "Kept deferred plugin %r on %s (%d total)",
            deferred,
            type(target).__name__,
            len(plugins),
        )
    return target


def replay(plugins: MutableSequence[Callable[[Any], Any]], value: Any) -> Usable:
    """Replay *plugins* onto *value* through ``value.use``, in order.

    *value* is decorated with default options first when it has no ``use``.
    The list is snapshotted before replaying, so functions kept while
    replaying (including onto the owner itself) are not replayed this round.

    Raises:
        InvalidTargetError: If *value* has no ``use`` and cannot be decorated.
    """
    child = ensure_decorated(value)
    snapshot = list(plugins)
    logger.debug("Replaying %d plugin(s) onto %s", len(snapshot), type(value).__name__)
    for fn in snapshot:
        child.use(fn)
    return child


def ensure_decorated(value: Any) -> Usable:
    """Return *value* as a :class:`Usable`, decorating it if needed.

    Values that already have a ``use`` are returned untouched; no plugin
    list is forced onto them.
    """
    if is_decorated(value):
        return value
    return decorate(value)


def decorate(
    target: Any,
    options: Union[DecorateOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> Any:
    """Attach a plugin list, ``use`` and ``run`` to *target*.

    Args:
        target: Any object or function with attribute storage.
        options: A :class:`~plugchain.models.DecorateOptions`, a mapping with
            ``prop`` and/or ``fn`` keys, or ``None``.
        **overrides: ``prop=`` / ``fn=`` applied on top of *options*.

    Returns:
        *target* itself, mutated in place.

    Raises:
        InvalidTargetError: If *target* cannot carry attributes.
        ConfigError: If the options are invalid.
    """
    if not is_decoratable(target):
        raise InvalidTargetError("expect `app` be an object or function")

    opts = DecorateOptions.coerce(options, **overrides)

    if is_decorated(target):
        logger.debug("%s already has `use`, leaving it as is", type(target).__name__)
        return target

    prop = opts.prop
    hook = opts.fn

    # Only the target's own list counts; an inherited one would be shared.
    if not isinstance(vars(target).get(prop), MutableSequence):
        setattr(target, prop, [])

    def use(fn: Callable[[Any], Any], *args: Any, **kwargs: Any) -> Any:
        return invoke_plugin(target, getattr(target, prop), fn, hook, args, kwargs)

    def run(value: Any) -> Any:
        replay(getattr(target, prop), value)
        return target

    setattr(use, _OWNER_ATTR, target)
    setattr(run, _OWNER_ATTR, target)

    if isinstance(target, type):
        # Keep instances from binding the closures as methods.
        target.use = staticmethod(use)
        target.run = staticmethod(run)
    else:
        target.use = use
        target.run = run

    logger.debug("Decorated %s (plugin list: %r)", type(target).__name__, prop)
    return target
