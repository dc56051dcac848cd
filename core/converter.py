# =============================================================================
# core/converter.py - Roman Numeral Converter
# =============================================================================
# Pure conversion between Arabic integers (1-3999) and canonical Roman
# numerals, plus syntactic validation of Roman numeral strings.
#
# Usage:
#   from core.converter import to_roman, from_roman, is_valid_roman_numeral
#   to_roman(49)          # "XLIX"
#   from_roman("XLIX")    # 49
#
# No I/O, no shared mutable state: every function is safe to call
# concurrently from any number of request handlers.
# =============================================================================

import re
from typing import Any

from core.errors import InvalidRomanNumeralError, NotIntegerError, OutOfRangeError


# =============================================================================
# Constants
# =============================================================================

MIN_VALUE = 1
MAX_VALUE = 3999

# Descending by value; the greedy pass depends on this order.
ROMAN_SYMBOLS: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

SYMBOL_VALUES: dict[str, int] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

# Validation patterns
_VALID_CHARACTERS = re.compile(r"[IVXLCDM]+")
_INVALID_REPETITIONS = re.compile(r"I{4,}|X{4,}|C{4,}|M{4,}|V{2,}|L{2,}|D{2,}")
_INVALID_SUBTRACTIONS = re.compile(r"IL|IC|ID|IM|XD|XM|VX|VL|VC|VD|VM|LC|LD|LM|DM")


# =============================================================================
# Arabic -> Roman
# =============================================================================

def to_roman(number: Any) -> str:
    """
    Convert an Arabic number to its canonical Roman numeral.

    Walks the symbol table from the largest value down, appending each
    symbol while the remaining amount still covers its value. Subtractive
    pairs (CM, CD, XC, XL, IX, IV) are table entries, so the greedy pass
    alone yields the canonical form.

    Args:
        number: Whole number from 1 to 3999. Floats without a fractional
            part (42.0) are accepted.

    Returns:
        Roman numeral string, at most 15 characters long

    Raises:
        NotIntegerError: If number is not numeric or has a fractional part
        OutOfRangeError: If number is below 1 or above 3999

    Example:
        to_roman(1994)  # "MCMXCIV"
    """
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        raise NotIntegerError(number)

    if number < MIN_VALUE or number > MAX_VALUE:
        raise OutOfRangeError(number, MIN_VALUE, MAX_VALUE)

    if isinstance(number, float) and not number.is_integer():
        raise NotIntegerError(number)

    remaining = int(number)
    parts = []

    for value, symbol in ROMAN_SYMBOLS:
        while remaining >= value:
            parts.append(symbol)
            remaining -= value

    return "".join(parts)


# =============================================================================
# Validation
# =============================================================================

def is_valid_roman_numeral(numeral: Any) -> bool:
    """
    Check whether a value is a well-formed Roman numeral string.

    Three independent checks must all pass:
    1. Non-empty string of I, V, X, L, C, D, M only
    2. I, X, C, M repeat at most three times in a row; V, L, D never repeat
    3. No disallowed smaller-before-larger adjacency (IL, IC, VX, DM, ...)

    Purely syntactic: no numeric value is reconstructed. Never raises.
    """
    if not isinstance(numeral, str):
        return False

    if not _VALID_CHARACTERS.fullmatch(numeral):
        return False

    if _INVALID_REPETITIONS.search(numeral):
        return False

    if _INVALID_SUBTRACTIONS.search(numeral):
        return False

    return True


# =============================================================================
# Roman -> Arabic
# =============================================================================

def from_roman(numeral: str) -> int:
    """
    Convert a Roman numeral string to its integer value.

    Scans right to left, adding each symbol's value when it is at least the
    value seen just before it and subtracting it otherwise.

    Args:
        numeral: Roman numeral string (uppercase, e.g. "XLIX")

    Returns:
        Integer value

    Raises:
        InvalidRomanNumeralError: If the numeral fails validation,
            including the empty string

    Example:
        from_roman("MMMCMXCIX")  # 3999
    """
    if not is_valid_roman_numeral(numeral):
        raise InvalidRomanNumeralError(numeral)

    total = 0
    previous = 0

    for char in reversed(numeral):
        current = SYMBOL_VALUES[char]
        if current >= previous:
            total += current
        else:
            total -= current
        previous = current

    return total
