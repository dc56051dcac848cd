# =============================================================================
# core/errors.py - Converter Error Taxonomy
# =============================================================================
# Errors raised by the converter. The HTTP layer maps every ConversionError
# to a 400 response; nothing in core/ catches them.
#
# Following the same principle as the API errors:
# "Errors should tell HOW to fix, not just WHAT failed."
# =============================================================================

from typing import Any


class ConversionError(ValueError):
    """
    Base error for Roman numeral conversion failures.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
        suggestion: How to fix the input (optional)
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "CONVERSION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging and API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }


class NotIntegerError(ConversionError):
    """Raised when the value to convert is not a whole number."""

    def __init__(self, value: Any):
        super().__init__(
            message="Number must be a whole number",
            code="NOT_INTEGER",
            suggestion="Remove the fractional part; values are never rounded",
            details={"value": repr(value)},
        )
        self.value = value


class OutOfRangeError(ConversionError):
    """Raised when an integer falls outside the representable range."""

    def __init__(self, value: int | float | str, minimum: int, maximum: int):
        super().__init__(
            message=f"Number must be between {minimum} and {maximum}",
            code="OUT_OF_RANGE",
            suggestion=f"Pick a number from {minimum} to {maximum} inclusive",
            details={"value": value, "min": minimum, "max": maximum},
        )
        self.value = value


class InvalidRomanNumeralError(ConversionError):
    """Raised when a string is not a canonical Roman numeral."""

    def __init__(self, numeral: Any):
        super().__init__(
            message=f"Invalid Roman numeral: {numeral!r}",
            code="INVALID_ROMAN_NUMERAL",
            suggestion="Use only I, V, X, L, C, D, M in canonical order (e.g. XLIX)",
            details={"numeral": numeral if isinstance(numeral, str) else repr(numeral)},
        )
        self.numeral = numeral
