"""
geez-numerals — конверсия целых чисел 1..9999 ↔ числа Ge'ez (Ethiopic).
"""

from geez_numerals.core.domain import FormatOptions
from geez_numerals.core.numerals import (
    GeezNumeralConverter,
    GeezNumeralError,
    InvalidInputError,
    OutOfRangeError,
    decode,
    encode,
    format_numeral,
    is_valid,
)

__version__ = "1.0.0"

__all__ = [
    "FormatOptions",
    "GeezNumeralConverter",
    "GeezNumeralError",
    "InvalidInputError",
    "OutOfRangeError",
    "decode",
    "encode",
    "format_numeral",
    "is_valid",
]
