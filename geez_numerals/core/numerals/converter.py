"""Converter facade — четыре операции кодека за одним объектом."""

from typing import Any

from geez_numerals.core.domain.format_options import FormatOptions
from geez_numerals.core.numerals.codec import decode, encode, is_valid
from geez_numerals.core.numerals.formatting import (
    OptionsLike,
    format_numeral,
    resolve_options,
)


class GeezNumeralConverter:
    """
    Конвертер чисел Ge'ez с форматированием по умолчанию.

    Stateless, кроме immutable default_options. Options, переданные
    в format(), заменяют defaults поле за полем.

    Examples:
        >>> converter = GeezNumeralConverter(FormatOptions(prefix="# "))
        >>> converter.format(42)
        '# ፵፪'
    """

    def __init__(self, default_options: OptionsLike = None):
        self._default_options = resolve_options(default_options)

    @property
    def default_options(self) -> FormatOptions:
        return self._default_options

    def encode(self, value: int) -> str:
        return encode(value)

    def decode(self, numeral: str) -> int:
        return decode(numeral)

    def is_valid(self, candidate: Any) -> bool:
        return is_valid(candidate)

    def format(self, value: int, options: OptionsLike = None, **overrides: Any) -> str:
        """
        Форматирование с учётом default_options.

        Raises:
            InvalidInputError: Невалидное значение или options
            OutOfRangeError: value > 9999
        """
        opts = self._default_options
        if options is not None:
            explicit = resolve_options(options)
            opts = opts.merged(**explicit.model_dump(exclude_unset=True))
        return format_numeral(value, opts, **overrides)
