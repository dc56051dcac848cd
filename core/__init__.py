# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - converter.py: Arabic <-> Roman conversion and numeral validation
# - errors.py: Conversion error taxonomy
# - models/: Pydantic schemas for API responses
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================

from core.converter import (
    MAX_VALUE,
    MIN_VALUE,
    ROMAN_SYMBOLS,
    from_roman,
    is_valid_roman_numeral,
    to_roman,
)
from core.errors import (
    ConversionError,
    InvalidRomanNumeralError,
    NotIntegerError,
    OutOfRangeError,
)

__all__ = [
    # Converter
    "MAX_VALUE",
    "MIN_VALUE",
    "ROMAN_SYMBOLS",
    "from_roman",
    "is_valid_roman_numeral",
    "to_roman",
    # Errors
    "ConversionError",
    "InvalidRomanNumeralError",
    "NotIntegerError",
    "OutOfRangeError",
]
