"""
Numeral Codec — конверсия целых чисел ↔ числа Ge'ez

Модуль реализует двунаправленную конверсию:
- encode: int → строка символов Ge'ez (разложение по разрядам)
- decode: строка символов Ge'ez → int (один проход слева направо)
- is_valid: предикат поверх decode, никогда не бросает исключений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. decode(encode(n)) == n для всех n в [MIN_VALUE, MAX_VALUE]
2. encode детерминирован, без side effects
3. decode отклоняет только символы вне алфавита (порядок символов не проверяется)
4. is_valid никогда не пропускает исключение наружу

АЛГОРИТМ encode:
    thousands: q = n // 1000, если q > 1 → encode(q); + ፼
    hundreds:  q = n // 100,  если q > 1 → encode(q); + ፻
    tens:      атомарный символ для (n // 10) * 10
    ones:      символ для n % 10
"""

import logging
import math
import operator
from typing import Any

from geez_numerals.core.numerals.tables import (
    DIGIT_TO_SYMBOL,
    HUNDRED,
    MAX_VALUE,
    MIN_VALUE,
    SYMBOL_TO_DIGIT,
    THOUSAND,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class GeezNumeralError(ValueError):
    """
    Базовая ошибка конверсии чисел Ge'ez.

    Наследует ValueError, поэтому существующие обработчики ValueError
    продолжают работать.

    Attributes:
        value: Значение (или символ), вызвавшее ошибку
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidInputError(GeezNumeralError):
    """
    Невалидный вход: неверный тип, пустая строка, нецелое или неположительное
    число, символ вне алфавита Ge'ez.
    """

    pass


class OutOfRangeError(GeezNumeralError):
    """Целое число вне поддерживаемого диапазона [MIN_VALUE, MAX_VALUE]."""

    pass


# =============================================================================
# ВАЛИДАЦИЯ ВХОДА
# =============================================================================


def _coerce_value(value: Any) -> int:
    """
    Приведение входа encode к int.

    bool отклоняется (хотя и является подклассом int). Float допускается
    только если он целочисленный (2.0 → 2).

    Raises:
        InvalidInputError: Нецелое, неположительное или нечисловое значение
        OutOfRangeError: value > MAX_VALUE
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"Input must be a positive integer, got {value!r}", value)

    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise InvalidInputError(
                f"Input must be a positive integer, got {value!r}", value
            )
        value = int(value)
    else:
        # Любой целочисленный тип с __index__ (например, numpy.int64)
        try:
            value = operator.index(value)
        except TypeError:
            raise InvalidInputError(
                f"Input must be a positive integer, got {type(value).__name__}", value
            ) from None

    if value < MIN_VALUE:
        raise InvalidInputError(f"Input must be a positive integer, got {value}", value)

    if value > MAX_VALUE:
        raise OutOfRangeError(
            f"Numbers larger than {MAX_VALUE} are not supported, got {value}", value
        )

    return value


# =============================================================================
# ENCODE
# =============================================================================


def encode(value: int) -> str:
    """
    Конверсия целого числа в числовую запись Ge'ez.

    Множители сотен и тысяч > 1 кодируются рекурсивно (900 → ፱፻,
    9000 → ፱፼). Десятки не требуют композиции: у каждого из 10..90 есть
    собственный символ.

    Args:
        value: Целое число в [1, 9999]

    Returns:
        Строка из одного или нескольких символов Ge'ez

    Raises:
        InvalidInputError: Нецелое или неположительное значение
        OutOfRangeError: value > 9999

    Examples:
        >>> encode(1)
        '፩'
        >>> encode(200)
        '፪፻'
        >>> encode(9999)
        '፱፼፱፻፺፱'
    """
    n = _coerce_value(value)

    # Fast path: одиночные символы
    if n in (1, 10, HUNDRED, THOUSAND):
        return DIGIT_TO_SYMBOL[n]

    parts: list[str] = []

    if n >= THOUSAND:
        thousands = n // THOUSAND
        if thousands > 1:
            parts.append(encode(thousands))
        parts.append(DIGIT_TO_SYMBOL[THOUSAND])
        n %= THOUSAND

    if n >= HUNDRED:
        hundreds = n // HUNDRED
        if hundreds > 1:
            parts.append(encode(hundreds))
        parts.append(DIGIT_TO_SYMBOL[HUNDRED])
        n %= HUNDRED

    if n >= 10:
        parts.append(DIGIT_TO_SYMBOL[(n // 10) * 10])
        n %= 10

    if n > 0:
        parts.append(DIGIT_TO_SYMBOL[n])

    return "".join(parts)


# =============================================================================
# DECODE
# =============================================================================


def decode(numeral: str) -> int:
    """
    Конверсия строки Ge'ez в целое число.

    Один проход слева направо с двумя аккумуляторами:
    - result: зафиксированная сумма
    - temp: незафиксированная сумма текущей разрядной группы (множитель)

    Группа сотен, за которой сразу следует ፼, не фиксируется и становится
    множителем тысяч (፱፻፼ → 900 × 1000). Одиночный ፻ или ፼ означает
    одну сотню или одну тысячу.

    Порядок символов не валидируется: для строк, которые encode никогда
    не порождает, результат best-effort.

    Args:
        numeral: Непустая строка из символов алфавита Ge'ez

    Returns:
        Целое значение

    Raises:
        InvalidInputError: Пустая строка, не-строка или символ вне алфавита
    """
    if not isinstance(numeral, str) or not numeral:
        raise InvalidInputError(
            f"Input must be a non-empty string, got {numeral!r}", numeral
        )

    result = 0
    temp = 0
    last = len(numeral) - 1

    for i, char in enumerate(numeral):
        digit = SYMBOL_TO_DIGIT.get(char)
        if digit is None:
            raise InvalidInputError(f"Invalid Geez numeral character: {char!r}", char)

        if digit == HUNDRED:
            temp = (temp or 1) * HUNDRED
            # Сотни остаются множителем только перед ፼
            if i == last or SYMBOL_TO_DIGIT.get(numeral[i + 1]) != THOUSAND:
                result += temp
                temp = 0
        elif digit == THOUSAND:
            result += (temp or 1) * THOUSAND
            temp = 0
        else:
            temp += digit

    return result + temp


# =============================================================================
# VALIDATION
# =============================================================================


def is_valid(candidate: Any) -> bool:
    """
    Проверка, является ли строка числовой записью Ge'ez.

    True только если candidate — непустая строка из символов алфавита
    и decode выполняется без ошибки. Никогда не бросает исключений.

    Examples:
        >>> is_valid("፩፻፳፫")
        True
        >>> is_valid("123")
        False
        >>> is_valid("")
        False
    """
    try:
        decode(candidate)
    except GeezNumeralError as e:
        logger.debug("Rejected Geez numeral candidate %r: %s", candidate, e)
        return False
    return True
