"""
Formatting — отображение числа Ge'ez с prefix / suffix / separator.

Тонкая обёртка над encode: вся логика конверсии остаётся в codec.
"""

from typing import Any, Mapping

from pydantic import ValidationError

from geez_numerals.core.domain.format_options import FormatOptions
from geez_numerals.core.numerals.codec import InvalidInputError, encode

OptionsLike = FormatOptions | Mapping[str, Any] | None


def resolve_options(options: OptionsLike = None, **overrides: Any) -> FormatOptions:
    """
    Приведение options (FormatOptions, dict или None) к FormatOptions.

    Keyword overrides (prefix/suffix/separator) применяются поверх options.
    Значение None в options или overrides означает отсутствующее поле.

    Raises:
        InvalidInputError: Неизвестные поля или нестроковые значения
    """
    try:
        if options is None:
            resolved = FormatOptions()
        elif isinstance(options, FormatOptions):
            resolved = options
        elif isinstance(options, Mapping):
            # None равнозначен отсутствующему полю, как и в merged()
            resolved = FormatOptions.model_validate(
                {k: v for k, v in options.items() if v is not None}
            )
        else:
            raise InvalidInputError(
                f"Format options must be a mapping or FormatOptions, "
                f"got {type(options).__name__}",
                options,
            )

        if overrides:
            resolved = resolved.merged(**overrides)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid format options: {e}", options) from e

    return resolved


def format_numeral(value: int, options: OptionsLike = None, **overrides: Any) -> str:
    """
    Форматирование числа как строки Ge'ez.

    Результат: prefix + joined + suffix, где joined — запись encode(value)
    с separator между соседними символами. Для однозначной записи
    separator не применяется.

    Args:
        value: Целое число в [1, 9999]
        options: FormatOptions или dict с ключами prefix/suffix/separator
        **overrides: prefix=, suffix=, separator= поверх options

    Returns:
        Отформатированная строка

    Raises:
        InvalidInputError: Невалидное значение или невалидные options
        OutOfRangeError: value > 9999

    Examples:
        >>> format_numeral(25, {"prefix": "N: ", "suffix": " end"})
        'N: ፳፭ end'
        >>> format_numeral(1, separator="-")
        '፩'
    """
    opts = resolve_options(options, **overrides)
    numeral = encode(value)

    if opts.separator and len(numeral) > 1:
        joined = opts.separator.join(numeral)
    else:
        joined = numeral

    return f"{opts.prefix}{joined}{opts.suffix}"
