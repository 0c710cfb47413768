"""Per-context access to the loaded configuration."""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from pydantic import BaseModel

from src.book_manager.runtime.config.config_data import ConfigData
from src.book_manager.runtime.config.config_template import load_config


@dataclass(frozen=True)
class AppContext:
    config: ConfigData


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=AppContext(config=load_config())
)


def get_config() -> ConfigData:
    """Configuration visible to the running request, command or test."""
    return _app_context.get().config


def set_config(config: ConfigData) -> None:
    """Replace the configuration for the current context and its children."""
    _app_context.set(AppContext(config=config))


def _explicit_fields(model: BaseModel) -> dict:
    """Fields assigned on ``model`` or on any model nested inside it.

    Nested models contribute only their own assigned fields, never their
    defaults, so an override touching ``database.echo`` leaves the other
    database settings of the parent context alone.
    """
    fields = {}
    for name in type(model).model_fields:
        value = getattr(model, name)
        if isinstance(value, BaseModel):
            nested = _explicit_fields(value)
            if nested:
                fields[name] = nested
        elif name in model.model_fields_set:
            fields[name] = value
    return fields


def _overlay(base: dict, changes: dict) -> dict:
    merged = dict(base)
    for key, value in changes.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _overlay(merged[key], value)
        else:
            merged[key] = value
    return merged


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Run a block with ``config_override`` layered over the current configuration.

    Only the fields assigned on the override take effect. Everything else
    comes from the enclosing context, and the previous configuration is
    restored on exit even if the block raises.

        override = ConfigData()
        override.database.url = "sqlite://"
        with with_context(override):
            assert get_config().database.url == "sqlite://"
    """
    if config_override is None:
        yield
        return
    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged = _overlay(get_config().model_dump(), _explicit_fields(config_override))
    token = _app_context.set(AppContext(config=ConfigData.model_validate(merged)))
    try:
        yield
    finally:
        _app_context.reset(token)
