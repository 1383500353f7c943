"""
Тесты для GeezNumeralConverter
"""

import pytest

from geez_numerals import FormatOptions, GeezNumeralConverter
from geez_numerals.core.numerals.codec import InvalidInputError, OutOfRangeError


@pytest.fixture
def converter():
    """Конвертер с prefix/suffix по умолчанию."""
    return GeezNumeralConverter(FormatOptions(prefix="# ", suffix=" #"))


class TestGeezNumeralConverter:
    """Тесты фасада конвертера"""

    def test_default_construction(self) -> None:
        converter = GeezNumeralConverter()
        assert converter.default_options == FormatOptions()
        assert converter.format(42) == "፵፪"

    def test_dict_defaults(self) -> None:
        converter = GeezNumeralConverter({"separator": "."})
        assert converter.format(42) == "፵.፪"

    def test_encode_decode_is_valid(self, converter) -> None:
        assert converter.encode(1984) == "፼፱፻፹፬"
        assert converter.decode("፼፱፻፹፬") == 1984
        assert converter.is_valid("፩፻፳፫") is True
        assert converter.is_valid("፩፻A") is False

    def test_format_uses_defaults(self, converter) -> None:
        assert converter.format(42) == "# ፵፪ #"

    def test_per_call_options_override_field_by_field(self, converter) -> None:
        """Переданные поля заменяют defaults, остальные сохраняются"""
        assert converter.format(42, {"separator": "."}) == "# ፵.፪ #"
        assert converter.format(42, {"prefix": ""}) == "፵፪ #"

    def test_keyword_overrides(self, converter) -> None:
        assert converter.format(42, suffix="!") == "# ፵፪!"

    def test_errors_propagate(self, converter) -> None:
        with pytest.raises(OutOfRangeError):
            converter.format(10000)
        with pytest.raises(InvalidInputError):
            converter.decode("")
        with pytest.raises(InvalidInputError):
            GeezNumeralConverter({"prefix": 1})


class TestPublicApi:
    """Публичный API пакета"""

    def test_exports(self) -> None:
        import geez_numerals

        assert set(geez_numerals.__all__) == {
            "FormatOptions",
            "GeezNumeralConverter",
            "GeezNumeralError",
            "InvalidInputError",
            "OutOfRangeError",
            "decode",
            "encode",
            "format_numeral",
            "is_valid",
        }
        for name in geez_numerals.__all__:
            assert hasattr(geez_numerals, name)
