"""A tree of apps that implement ``use`` and ``run`` natively.

:class:`App` is the explicit counterpart of :func:`~plugchain.decorator.decorate`:
it owns its plugin list and its children instead of having them injected at
runtime. Creating a child through :meth:`App.create` replays the parent's
deferred plugins onto it, so a plugin registered on the root reaches every
descendant, level by level, in registration order.

Example::

    root = App("root")
    root.use(lambda app: lambda child: setattr(child, "owner", app.name))
    leaf = root.create("a").create("b")
    assert leaf.parent.owner == "root"
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Optional

from plugchain.decorator import invoke_plugin, replay

logger = logging.getLogger(__name__)


class App:
    """A named node whose plugins cascade to the children it creates.

    Args:
        name: Optional display name, used by :attr:`path`.
        parent: The app that created this one, or ``None`` for a root.
        hook: Optional pre-invocation hook, called as
            ``hook(self, *args, **kwargs)`` before each plugin passed to
            :meth:`use`.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        parent: Optional["App"] = None,
        hook: Optional[Callable[..., Any]] = None,
    ) -> None:
        self.name = name
        self.parent = parent
        self.children: list[App] = []
        self.fns: list[Callable[[Any], Any]] = []
        self._hook = hook

    def use(self, fn: Callable[[Any], Any], *args: Any, **kwargs: Any) -> "App":
        """Call plugin *fn* with this app and keep its deferred result."""
        return invoke_plugin(self, self.fns, fn, self._hook, args, kwargs)

    def run(self, value: Any) -> "App":
        """Replay this app's deferred plugins onto *value*."""
        replay(self.fns, value)
        return self

    def create(self, name: Optional[str] = None) -> "App":
        """Create a child app, adopt it, and replay plugins onto it.

        The child is an instance of the same class and inherits the hook.
        """
        child = type(self)(name, parent=self, hook=self._hook)
        self.children.append(child)
        logger.debug("Created %r under %r", child.name, self.name)
        self.run(child)
        return child

    @property
    def root(self) -> "App":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def path(self) -> tuple[Optional[str], ...]:
        """Names from the root down to this app."""
        names = []
        node: Optional[App] = self
        while node is not None:
            names.append(node.name)
            node = node.parent
        return tuple(reversed(names))

    def walk(self) -> Iterator["App"]:
        """Yield this app and every descendant, depth-first, in creation order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} plugins={len(self.fns)} children={len(self.children)}>"
