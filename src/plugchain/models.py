"""Pydantic configuration models shared across plugchain modules.

:class:`DecorateOptions` describes how :func:`~plugchain.decorator.decorate`
augments a value: the attribute name that holds the plugin list and the
optional hook that runs before every plugin invocation.

:class:`PluginsConfig` carries the allow/deny lists used by
:class:`~plugchain.plugins.manager.PluginManager` during entry-point
discovery.

All models use Pydantic v2. Both are frozen so that options captured at
decoration time cannot drift afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from plugchain.exceptions import ConfigError

DEFAULT_PROP = "fns"
"""Attribute name holding the plugin list when no ``prop`` is given."""

RESERVED_NAMES = frozenset({"use", "run"})
"""Attribute names installed by decoration; a plugin list cannot use them."""


class DecorateOptions(BaseModel):
    """Options recognised by :func:`~plugchain.decorator.decorate`.

    Example::

        DecorateOptions(prop="plugins", fn=merge_options)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    prop: str = Field(
        default=DEFAULT_PROP,
        description="Attribute name of the plugin list on the decorated value",
    )
    fn: Optional[Callable[..., Any]] = Field(
        default=None,
        description="Hook called as fn(target, *args, **kwargs) before each plugin",
    )

    @field_validator("prop")
    @classmethod
    def _check_prop(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"'{value}' is not a valid attribute name")
        if value in RESERVED_NAMES:
            raise ValueError(f"'{value}' is reserved for the decorated methods")
        return value

    @classmethod
    def coerce(
        cls,
        options: Union["DecorateOptions", Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> "DecorateOptions":
        """Build validated options from an instance, a mapping, or nothing.

        Keyword *overrides* win over values found in *options*.

        Raises:
            ConfigError: If *options* has an unsupported type or a field
                fails validation.
        """
        if options is None:
            data: dict[str, Any] = {}
        elif isinstance(options, DecorateOptions):
            if not overrides:
                return options
            data = {"prop": options.prop, "fn": options.fn}
        elif isinstance(options, Mapping):
            data = dict(options)
        else:
            raise ConfigError(
                f"expect `options` be a mapping or DecorateOptions, got {type(options).__name__}"
            )
        data.update(overrides)
        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid decorate options: {exc}") from exc


class PluginsConfig(BaseModel):
    """Explicit plugin allow/deny lists used during discovery.

    When ``enabled`` is non-empty only those plugins are loaded; otherwise
    every discovered plugin not listed in ``disabled`` is loaded.
    """

    enabled: list[str] = Field(default_factory=list)
    disabled: list[str] = Field(default_factory=list)
