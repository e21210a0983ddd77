"""Structured-data adapters: JSON documents and pydantic models.

A Duration is always embedded as a single string scalar holding its
canonical text.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Annotated, Any

from pydantic_core import core_schema

from pyduration._constants import DEFAULT_MAX_STORED_LENGTH
from pyduration._duration import Duration
from pyduration._errors import ERR_MSG_PARSE_FAILED, DeserializationError, DurationError
from pyduration._parser import parse_duration


def _parse_text(text: str) -> Duration:
    try:
        return parse_duration(text, max_length=DEFAULT_MAX_STORED_LENGTH)
    except DurationError as e:
        raise DeserializationError(
            f"{ERR_MSG_PARSE_FAILED}: {e}",
            f"{ERR_MSG_PARSE_FAILED} {text!r}: {e.internal()}",
            wrapped=e,
        ) from e


def to_json(duration: Duration) -> str:
    return json.dumps(str(duration))


def from_json(document: str | bytes) -> Duration:
    """Decode a JSON document holding a single duration string.

    The string may be up to ``DEFAULT_MAX_STORED_LENGTH`` (4096) characters.

    Raises:
        json.JSONDecodeError: If the document is not valid JSON.
        DeserializationError: If the scalar is not a string or does not parse.
    """
    value = json.loads(document)
    if not isinstance(value, str):
        raise DeserializationError(
            "duration must be a JSON string",
            f"expected a JSON string, got {type(value).__name__}",
        )
    return _parse_text(value)


class DurationJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes Duration values as their canonical text."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Duration):
            return str(o)
        return super().default(o)


def duration_object_hook(*keys: str) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """Build a ``json.loads`` object hook that parses the given keys."""
    wanted = frozenset(keys)

    def hook(obj: dict[str, Any]) -> dict[str, Any]:
        for key in wanted & obj.keys():
            if isinstance(obj[key], str):
                obj[key] = _parse_text(obj[key])
        return obj

    return hook


class DurationAdapter:
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: Any
    ) -> core_schema.CoreSchema:
        def validate_duration(value: Any) -> Duration:
            if isinstance(value, Duration):
                return value
            if isinstance(value, str):
                return _parse_text(value)
            raise ValueError(f"Cannot convert {type(value).__name__} to Duration")

        def serialize_duration(value: Duration) -> str:
            return str(value)

        return core_schema.no_info_plain_validator_function(
            validate_duration,
            serialization=core_schema.plain_serializer_function_ser_schema(
                serialize_duration,
                return_schema=core_schema.str_schema(),
            ),
        )


# Apply the adapter to Duration
DurationField = Annotated[Duration, DurationAdapter]
