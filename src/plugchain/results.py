"""Tagged plugin results.

What a plugin returns decides whether it is kept for replay:

* :class:`Deferred` -- the wrapped function is appended to the plugin list
  and later replayed onto child values by ``run``.
* :class:`Immediate` (or ``None``) -- the plugin has done all its work and
  nothing is kept.
* A bare callable is treated as ``Deferred(callable)``; any other value is
  discarded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from plugchain.exceptions import InvalidPluginError


@dataclass(frozen=True)
class Immediate:
    """Result of a plugin that does not want to be replayed."""


@dataclass(frozen=True)
class Deferred:
    """Result of a plugin that wants *fn* replayed onto child values.

    Attributes:
        fn: The function to append to the plugin list.
    """

    fn: Callable[[Any], Any]

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise InvalidPluginError("expect `fn` be function")


PluginResult = Union[Deferred, Immediate, Callable[[Any], Any], None]


def deferred_of(result: Any) -> Optional[Callable[[Any], Any]]:
    """Return the function to keep for replay, or ``None`` if nothing is kept."""
    if isinstance(result, Deferred):
        return result.fn
    if isinstance(result, Immediate):
        return None
    if callable(result):
        return result
    return None
