"""Persistence adapters: DB-API value conversion, sqlite3 and SQLAlchemy.

Durations are stored as their canonical text.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from pyduration._constants import DEFAULT_MAX_STORED_LENGTH
from pyduration._duration import Duration
from pyduration._errors import ERR_MSG_SCAN_FAILED, DurationError, ScanError, UnsupportedSourceTypeError
from pyduration._parser import parse_duration

logger = logging.getLogger(__name__)


def to_db_value(duration: Duration) -> str:
    return str(duration)


def scan(value: Any) -> Duration:
    """Load a Duration from a stored text or byte value.

    Stored text may be up to ``DEFAULT_MAX_STORED_LENGTH`` (4096) characters.

    Raises:
        UnsupportedSourceTypeError: If value is neither str nor bytes-like.
        ScanError: If the stored value is not UTF-8 or does not parse.
    """
    if not isinstance(value, (str, bytes, bytearray, memoryview)):
        message = f"cannot scan {type(value).__name__} into Duration"
        logger.debug(message)
        raise UnsupportedSourceTypeError(message)

    try:
        text = value if isinstance(value, str) else bytes(value).decode("utf-8")
        return parse_duration(text, max_length=DEFAULT_MAX_STORED_LENGTH)
    except UnicodeDecodeError as e:
        details = f"stored bytes {bytes(value)!r} are not UTF-8: {e}"
        logger.debug(f"Failed to scan stored duration: {details}")
        raise ScanError(ERR_MSG_SCAN_FAILED, details, wrapped=e) from e
    except DurationError as e:
        details = f"parse({text!r}): {e.internal()}"
        logger.debug(f"Failed to scan stored duration: {details}")
        raise ScanError(f"{ERR_MSG_SCAN_FAILED}: {e}", details, wrapped=e) from e


def register_sqlite(type_name: str = "DURATION") -> None:
    """Register sqlite3 conversion for Duration.

    Durations bound as parameters are stored as text. Columns declared with
    ``type_name`` are converted back to Duration on connections opened with
    ``detect_types=sqlite3.PARSE_DECLTYPES``.
    """
    sqlite3.register_adapter(Duration, to_db_value)
    sqlite3.register_converter(type_name, scan)


class DurationType(TypeDecorator):
    """SQLAlchemy column type storing a Duration as a string."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value: Duration | None, dialect: Any) -> str | None:
        if value is None:
            return None
        return to_db_value(value)

    def process_result_value(self, value: Any, dialect: Any) -> Duration | None:
        if value is None:
            return None
        return scan(value)
