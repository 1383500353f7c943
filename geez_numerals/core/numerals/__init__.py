"""
Core numeral modules для geez-numerals

Таблицы символов, кодек int ↔ Ge'ez и форматирование.
"""

# Tables
from geez_numerals.core.numerals.tables import (
    DIGIT_TO_SYMBOL,
    GEEZ_ALPHABET,
    HUNDRED_SYMBOL,
    MAX_VALUE,
    MIN_VALUE,
    SYMBOL_TO_DIGIT,
    THOUSAND_SYMBOL,
)

# Codec
from geez_numerals.core.numerals.codec import (
    GeezNumeralError,
    InvalidInputError,
    OutOfRangeError,
    decode,
    encode,
    is_valid,
)

# Formatting
from geez_numerals.core.numerals.formatting import format_numeral, resolve_options

# Converter
from geez_numerals.core.numerals.converter import GeezNumeralConverter

__all__ = [
    # Tables — Constants
    "DIGIT_TO_SYMBOL",
    "GEEZ_ALPHABET",
    "HUNDRED_SYMBOL",
    "MAX_VALUE",
    "MIN_VALUE",
    "SYMBOL_TO_DIGIT",
    "THOUSAND_SYMBOL",
    # Codec — Exceptions
    "GeezNumeralError",
    "InvalidInputError",
    "OutOfRangeError",
    # Codec — Functions
    "decode",
    "encode",
    "is_valid",
    # Formatting
    "format_numeral",
    "resolve_options",
    # Converter
    "GeezNumeralConverter",
]
