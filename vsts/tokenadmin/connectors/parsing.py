"""Helpers shared by endpoint adapters for turning bodies into models."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.exceptions import ResponseFormatError

M = TypeVar("M", bound=BaseModel)


def validate_model(model_cls: type[M], data: Any, endpoint_id: str) -> M:
    """Validate one wire object, reporting failures as ResponseFormatError."""
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise ResponseFormatError(
            f"Malformed {model_cls.__name__} in {endpoint_id} response: {e}",
            endpoint_id=endpoint_id,
        ) from e


def collection_value(data: Any, endpoint_id: str) -> list[Any]:
    """Extract the ``value`` array of a ``{"count": n, "value": [...]}`` body."""
    if not isinstance(data, dict):
        raise ResponseFormatError(
            f"Expected an object body from {endpoint_id}, got {type(data).__name__}",
            endpoint_id=endpoint_id,
        )
    value = data.get("value")
    if value is None:
        return []
    if not isinstance(value, list):
        raise ResponseFormatError(
            f"Expected 'value' to be a list in {endpoint_id} response",
            endpoint_id=endpoint_id,
        )
    return value
