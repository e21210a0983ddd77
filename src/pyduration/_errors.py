"""Exception hierarchy for duration parsing and adapters."""


class DurationError(ValueError):
    """Base exception for duration errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging (CWE-209 prevention).
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class UnexpectedInputError(DurationError):
    """Raised when a character is neither a digit, '.', nor a designator."""


class InvalidMagnitudeError(DurationError):
    """Raised when a designator closes a literal that is not a valid float."""


class TrailingMagnitudeError(DurationError):
    """Raised in strict mode when text ends with an unterminated literal."""


class MaxInputLengthExceededError(DurationError):
    """Raised when duration text exceeds the configured length limit."""


class UnsupportedSourceTypeError(DurationError):
    """Raised when a stored value is neither text nor bytes."""


class ScanError(DurationError):
    """Raised when a stored value cannot be parsed as a duration."""


class DeserializationError(DurationError):
    """Raised when structured data does not hold a valid duration."""


# Sanitized user-facing error message constants
ERR_MSG_UNEXPECTED_INPUT = "unexpected input"
ERR_MSG_INVALID_MAGNITUDE = "invalid magnitude"
ERR_MSG_TRAILING_MAGNITUDE = "unterminated magnitude"
ERR_MSG_INPUT_TOO_LONG = "duration text too long"
ERR_MSG_SCAN_FAILED = "cannot scan duration"
ERR_MSG_PARSE_FAILED = "failed to parse duration"
