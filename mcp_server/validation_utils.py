"""Validation utilities for MCP tools."""

from typing import Any, TypeVar

import pydantic

from .errors import ValidationError

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def require_str(arguments: dict, key: str) -> str:
    """Fetch a required string argument."""
    value = arguments.get(key)
    if not isinstance(value, str):
        raise ValidationError(key, "a string is required")
    return value


def parse_model(model: type[ModelT], data: Any, field: str) -> ModelT:
    """Validate ``data`` into ``model``, reporting failures against ``field``."""
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        where = f"{field}.{location}" if location else field
        raise ValidationError(where, first["msg"]) from e


def parse_model_list(model: type[ModelT], data: Any, field: str) -> list[ModelT]:
    """Validate a list of objects into ``model`` instances."""
    if not isinstance(data, list):
        raise ValidationError(field, "an array is required")
    return [parse_model(model, item, f"{field}[{i}]") for i, item in enumerate(data)]
