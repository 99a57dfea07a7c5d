"""
ShareEnvelope — Модель внешнего JSON документа с точками

Формат документа:

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

- keys.n: общее число доступных точек, keys.k: сколько из них использовать
- Остальные поля: записи, ключ которых является десятичной записью x
- base может быть числом или строкой; проверяется при декодировании
- Записи разбираются лениво: невалидная запись вне первых k не мешает
"""

from typing import Any

from pydantic import BaseModel, Field, StrictStr, model_validator

KEYS_FIELD = "keys"


class EnvelopeKeys(BaseModel):
    """
    Параметры выборки: n доступных точек, k используемых.

    Инвариант: 1 <= k <= n.
    """

    n: int = Field(..., description="Общее число доступных точек")
    k: int = Field(..., ge=1, description="Число точек для интерполяции")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_k_not_greater_than_n(self) -> "EnvelopeKeys":
        if self.k > self.n:
            raise ValueError(f"k={self.k} must not exceed n={self.n}")
        return self


class ShareEntry(BaseModel):
    """Одна запись: основание и строка цифр ординаты."""

    base: Any = Field(..., description="Основание 2..36 (число или строка)")
    value: StrictStr = Field(..., description="Запись ординаты в основании base")

    model_config = {"frozen": True}


class ShareEnvelope(BaseModel):
    """
    Разобранный документ: keys + сырые записи по строковым ключам.

    Записи хранятся как есть и валидируются в момент выбора точек.
    """

    keys: EnvelopeKeys
    entries: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "ShareEnvelope":
        """Сборка из сырого JSON объекта (все поля, кроме keys, являются записями)."""
        entries = {key: value for key, value in document.items() if key != KEYS_FIELD}
        return cls(keys=document[KEYS_FIELD], entries=entries)
