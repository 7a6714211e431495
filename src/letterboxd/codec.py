"""Encoding of request models and decoding of API responses."""

from __future__ import annotations

import typing
from enum import Enum
from typing import Any, Mapping, TypeVar
from urllib.parse import parse_qs, urlencode

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from letterboxd.errors import DeserializationError, SerializationError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _dump(model: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(model, BaseModel):
        try:
            return model.model_dump(by_alias=True, exclude_none=True, mode="json")
        except PydanticSerializationError as e:
            raise SerializationError(f"Cannot serialize {type(model).__name__}: {e}") from e
    return {k: v for k, v in model.items() if v is not None}


def query_pairs(query: BaseModel | Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten a request model into ordered query pairs.

    Unset fields are skipped and list fields become repeated keys
    (``where=Watched&where=Released``).
    """
    pairs: list[tuple[str, str]] = []
    for key, value in _dump(query).items():
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _query_value(item)) for item in value)
        elif isinstance(value, dict):
            raise SerializationError(f"Nested value for query parameter '{key}' is not supported")
        else:
            pairs.append((key, _query_value(value)))
    return pairs


def encode_query(query: BaseModel | Mapping[str, Any]) -> str:
    """Serialize a request model into a query string."""
    return urlencode(query_pairs(query))


def _is_list_field(annotation: Any) -> bool:
    if typing.get_origin(annotation) is list:
        return True
    return any(typing.get_origin(arg) is list for arg in typing.get_args(annotation))


def decode_query(model_cls: type[M], query: str) -> M:
    """Parse a query string back into a request model."""
    raw = parse_qs(query, keep_blank_values=True)
    data: dict[str, Any] = {}
    for name, field in model_cls.model_fields.items():
        key = field.alias or name
        if key not in raw:
            continue
        values = raw[key]
        data[key] = values if _is_list_field(field.annotation) else values[-1]
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise DeserializationError(f"Invalid query for {model_cls.__name__}: {e}") from e


def encode_json(body: BaseModel | Mapping[str, Any]) -> bytes:
    """Serialize a request body as JSON bytes."""
    try:
        if isinstance(body, BaseModel):
            return body.model_dump_json(by_alias=True, exclude_none=True).encode()
        return TypeAdapter(Any).dump_json(dict(body))
    except PydanticSerializationError as e:
        raise SerializationError(f"Cannot serialize request body: {e}") from e


def encode_form(body: BaseModel | Mapping[str, Any]) -> bytes:
    """Serialize a request body as application/x-www-form-urlencoded."""
    return encode_query(body).encode()


def decode_json(response_model: type[T], data: bytes) -> T:
    """Deserialize a JSON response body into ``response_model``."""
    try:
        return TypeAdapter(response_model).validate_json(data)
    except ValidationError as e:
        raise DeserializationError(
            f"Response did not match {getattr(response_model, '__name__', response_model)}: {e}"
        ) from e
