"""Resource limit constants for duration parsing."""

DEFAULT_MAX_INPUT_LENGTH = 256
"""Maximum accepted length of duration text (CWE-400 prevention)."""

NUMERIC_CHARS = frozenset("0123456789.")
"""Characters buffered into a magnitude literal."""

DEFAULT_MAX_STORED_LENGTH = 4096
"""Length limit applied when loading durations from JSON or a database."""
