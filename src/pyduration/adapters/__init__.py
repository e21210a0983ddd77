"""Serialization and storage adapters for Duration.

Each adapter depends on its own third-party library, so the submodules are
only imported on first access.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "DurationAdapter",
    "DurationField",
    "DurationJSONEncoder",
    "DurationType",
    "duration_object_hook",
    "from_json",
    "register_sqlite",
    "scan",
    "to_db_value",
    "to_json",
]

_SERDE_NAMES = frozenset({
    "DurationAdapter",
    "DurationField",
    "DurationJSONEncoder",
    "duration_object_hook",
    "from_json",
    "to_json",
})

_SQL_NAMES = frozenset({
    "DurationType",
    "register_sqlite",
    "scan",
    "to_db_value",
})


def __getattr__(name: str) -> Any:
    """Lazy re-exports of adapter functions and types."""
    if name in _SERDE_NAMES:
        from pyduration.adapters import serde

        return getattr(serde, name)
    if name in _SQL_NAMES:
        from pyduration.adapters import sql

        return getattr(sql, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
