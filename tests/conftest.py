"""Shared test fixtures for plugchain.

Provides a freshly decorated app and small plugin factories so that test
modules can build plugin chains without repeating boilerplate. These
fixtures are discovered by pytest and available to all test modules.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable

import pytest

from plugchain import decorate

DECORATION_NAMES = frozenset({"fns", "use", "run"})


def _setter(key: str, value: Any) -> Callable[[Any], Any]:
    """A plugin that does nothing now and defers ``ctx.<key> = value``."""

    def plugin(app: Any) -> Callable[[Any], None]:
        def apply(ctx: Any) -> None:
            setattr(ctx, key, value)

        return apply

    return plugin


def _own_attrs(value: Any) -> dict[str, Any]:
    """Return *value*'s instance attributes minus the decoration ones."""
    return {k: v for k, v in vars(value).items() if k not in DECORATION_NAMES}


@pytest.fixture
def setter() -> Callable[[str, Any], Callable[[Any], Any]]:
    """Factory for deferred attribute-setting plugins."""
    return _setter


@pytest.fixture
def own_attrs() -> Callable[[Any], dict[str, Any]]:
    """Helper returning a value's attributes without use/run/fns."""
    return _own_attrs


@pytest.fixture
def app() -> SimpleNamespace:
    """A decorated, empty namespace."""
    return decorate(SimpleNamespace())


@pytest.fixture
def ace_app(app: SimpleNamespace) -> SimpleNamespace:
    """A decorated app holding three deferred setters: a, c, e."""
    app.use(_setter("a", "b"))
    app.use(_setter("c", "d"))
    app.use(_setter("e", "f"))
    return app
