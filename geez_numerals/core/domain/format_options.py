"""
FormatOptions — параметры отображения числа Ge'ez

Immutable Pydantic модель с тремя независимыми строковыми полями:
- prefix: добавляется перед всем результатом
- suffix: добавляется после всего результата
- separator: вставляется между соседними символами числа
"""

from typing import Any

from pydantic import BaseModel, Field


class FormatOptions(BaseModel):
    """
    Параметры форматирования.

    Все поля независимы и по умолчанию пустые. Неизвестные поля
    и нестроковые значения отклоняются (strict mode).
    """

    prefix: str = Field("", description="Текст перед числом")
    suffix: str = Field("", description="Текст после числа")
    separator: str = Field("", description="Разделитель между символами числа")

    model_config = {"frozen": True, "extra": "forbid", "strict": True}

    def merged(self, **overrides: Any) -> "FormatOptions":
        """
        Новый экземпляр, где переданные поля заменены (None игнорируется).

        Returns:
            FormatOptions с применёнными overrides
        """
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return FormatOptions.model_validate(data)
