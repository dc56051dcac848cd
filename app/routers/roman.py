# =============================================================================
# app/routers/roman.py - Roman Numeral Endpoints
# =============================================================================
# Provides the Arabic -> Roman conversion endpoint.
#
# The router only parses the query string; range and integrality checks
# belong to core.converter, whose errors are mapped to 400 responses by
# the handlers in app/exceptions.py.
# =============================================================================

import logging
import re
from typing import Annotated

from fastapi import APIRouter, Query

from app.exceptions import InvalidNumberFormatError, MissingQueryError
from core.converter import MAX_VALUE, MIN_VALUE, to_roman
from core.errors import OutOfRangeError
from core.models import ConversionResponse

logger = logging.getLogger(__name__)

router = APIRouter()

# ASCII digits only; int() would also accept "4_2" and non-ASCII digits
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+)")


def parse_number(raw_value: str) -> int | float:
    """
    Parse a query string value into a number.

    Integers come back as int and decimals as float, so the converter can
    reject fractional values instead of silently truncating them.

    Raises:
        InvalidNumberFormatError: If the value is not a plain decimal number
        OutOfRangeError: If an integer has more digits than MAX_VALUE
    """
    text = raw_value.strip()

    if _INTEGER_PATTERN.fullmatch(text):
        # int() refuses very long digit strings; anything this long is out of range anyway
        digits = text.lstrip("+-").lstrip("0")
        if len(digits) > len(str(MAX_VALUE)):
            raise OutOfRangeError(f"{text[:12]}... ({len(digits)} digits)", MIN_VALUE, MAX_VALUE)
        return int(text)

    if _DECIMAL_PATTERN.fullmatch(text):
        return float(text)

    raise InvalidNumberFormatError(raw_value)


# =============================================================================
# Endpoints
# =============================================================================

@router.get(
    "/romannumeral",
    response_model=ConversionResponse,
    responses={400: {"description": "Missing, malformed, fractional or out-of-range query"}},
)
async def convert_to_roman(
    query: Annotated[
        str | None,
        Query(description="Whole number from 1 to 3999")
    ] = None,
):
    """
    Convert an Arabic number to a Roman numeral.

    Returns the converted number and its canonical Roman numeral:
    - `GET /romannumeral?query=42` -> `{"input": "42", "output": "XLII"}`

    Errors are plain-text 400 responses:
    - Missing query parameter
    - Invalid number format (not a decimal number)
    - Number must be a whole number
    - Number must be between 1 and 3999
    """
    if query is None or not query.strip():
        raise MissingQueryError()

    number = parse_number(query)
    numeral = to_roman(number)

    logger.debug(f"Converted {query!r} -> {numeral}")

    return ConversionResponse(input=str(int(number)), output=numeral)
