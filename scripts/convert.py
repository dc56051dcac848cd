#!/usr/bin/env python3
"""
Convert numbers and Roman numerals from the command line.

Usage:
    python scripts/convert.py 42 1994 XLIX
    python scripts/convert.py            # prints a sample table
"""

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.exceptions import InvalidNumberFormatError
from app.routers.roman import parse_number
from core.converter import from_roman, to_roman
from core.errors import ConversionError

SAMPLES = [1, 4, 9, 14, 40, 49, 90, 99, 400, 499, 900, 999, 1994, 2024, 3888, 3999]


def convert_argument(argument: str) -> str:
    """Convert one argument in whichever direction it needs."""
    try:
        number = parse_number(argument)
    except InvalidNumberFormatError:
        return str(from_roman(argument.strip().upper()))
    return to_roman(number)


def print_samples():
    """Print the sample table with a round-trip check per row."""
    print("\n" + "=" * 40)
    print("ROMAN NUMERAL SAMPLES")
    print("=" * 40)

    for number in SAMPLES:
        numeral = to_roman(number)
        status = "ok" if from_roman(numeral) == number else "MISMATCH"
        print(f"{number:>6}  {numeral:<16} {status}")


def main():
    """Convert each argument, or print samples when there are none."""
    arguments = sys.argv[1:]
    if not arguments:
        print_samples()
        return 0

    failed = 0
    for argument in arguments:
        try:
            print(f"{argument} -> {convert_argument(argument)}")
        except ConversionError as e:
            print(f"{argument} -> ERROR: {e.message}")
            if e.suggestion:
                print(f"   Suggestion: {e.suggestion}")
            failed += 1

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
