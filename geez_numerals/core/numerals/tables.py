"""
Numeral Tables — таблицы символов Ge'ez

Фиксированное соответствие значений {1..9, 10..90, 100, 1000} и 20 символов
Ethiopic (U+1369..U+137C).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ровно 20 пар значение ↔ символ, все символы уникальны
2. SYMBOL_TO_DIGIT строится из DIGIT_TO_SYMBOL и всегда является его инверсией
3. Таблицы read-only (MappingProxyType), не мутируются после импорта
"""

from types import MappingProxyType
from typing import Final, Mapping

# =============================================================================
# ДИАПАЗОН
# =============================================================================

# Минимальное кодируемое значение
MIN_VALUE: Final[int] = 1

# Максимальное кодируемое значение (символ для 10 000 не поддерживается)
MAX_VALUE: Final[int] = 9999

HUNDRED: Final[int] = 100
THOUSAND: Final[int] = 1000


# =============================================================================
# ТАБЛИЦЫ СИМВОЛОВ
# =============================================================================

DIGIT_TO_SYMBOL: Final[Mapping[int, str]] = MappingProxyType(
    {
        # Единицы
        1: "፩",
        2: "፪",
        3: "፫",
        4: "፬",
        5: "፭",
        6: "፮",
        7: "፯",
        8: "፰",
        9: "፱",
        # Десятки (у каждого свой атомарный символ)
        10: "፲",
        20: "፳",
        30: "፴",
        40: "፵",
        50: "፶",
        60: "፷",
        70: "፸",
        80: "፹",
        90: "፺",
        # Множители
        HUNDRED: "፻",
        THOUSAND: "፼",
    }
)

SYMBOL_TO_DIGIT: Final[Mapping[str, int]] = MappingProxyType(
    {symbol: digit for digit, symbol in DIGIT_TO_SYMBOL.items()}
)

HUNDRED_SYMBOL: Final[str] = DIGIT_TO_SYMBOL[HUNDRED]
THOUSAND_SYMBOL: Final[str] = DIGIT_TO_SYMBOL[THOUSAND]

GEEZ_ALPHABET: Final[frozenset[str]] = frozenset(SYMBOL_TO_DIGIT)
