"""Exception hierarchy for fancy duration parsing and adaptation."""


class FancyDurationError(Exception):
    """Base exception for fancy duration errors.

    Provides dual messaging: a short user-facing message and
    internal details (including the offending input) for logging.
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


class ParseError(FancyDurationError, ValueError):
    """Raised when text cannot be parsed into a duration."""


class EmptyInputError(ParseError):
    """Raised when the input has no content after trimming whitespace."""


class InvalidFormatError(ParseError):
    """Raised when the input does not follow the duration grammar."""


class UnknownUnitError(ParseError):
    """Raised when a term uses a unit symbol that is not in the unit table."""

    def __init__(self, symbol: str, internal_details: str = "") -> None:
        super().__init__(f"{ERR_MSG_UNKNOWN_UNIT}: {symbol!r}", internal_details)
        self.symbol = symbol


class DuplicateUnitError(ParseError):
    """Raised when the same unit appears more than once."""

    def __init__(self, symbol: str, internal_details: str = "") -> None:
        super().__init__(f"{ERR_MSG_DUPLICATE_UNIT}: {symbol!r}", internal_details)
        self.symbol = symbol


class ConstructionFailedError(ParseError):
    """Raised when the target duration type cannot represent the parsed value."""


class UnsupportedTypeError(FancyDurationError, TypeError):
    """Raised when no adapter is available for a duration type."""


# Sanitized user-facing error message constants
ERR_MSG_EMPTY = "empty duration"
ERR_MSG_INVALID_FORMAT = "invalid duration format"
ERR_MSG_UNKNOWN_UNIT = "unknown duration unit"
ERR_MSG_DUPLICATE_UNIT = "duplicate duration unit"
ERR_MSG_FRACTIONAL_UNIT = "fractional counts are only allowed for seconds"
ERR_MSG_INPUT_TOO_LONG = "duration text too long"
ERR_MSG_EXPONENT_TOO_LARGE = "duration exponent too large"
ERR_MSG_CONSTRUCTION_FAILED = "duration out of range for target type"
ERR_MSG_UNSUPPORTED_TYPE = "unsupported duration type"
