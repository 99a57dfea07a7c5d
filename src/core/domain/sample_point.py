"""
SamplePoint — Точка выборки многочлена

Immutable Pydantic модель пары (x, y) целых неограниченной точности.
Создаётся один раз из декодированного входа и далее только читается
интерполятором.
"""

from typing import Iterable, Sequence, TypeAlias

from pydantic import BaseModel, Field


class SamplePoint(BaseModel):
    """
    Точка (x, y) интерполируемого многочлена.

    Только целые значения: float/complex отвергаются strict-режимом.
    """

    x: int = Field(..., description="Абсцисса точки")
    y: int = Field(..., description="Значение многочлена в точке x")

    model_config = {"frozen": True, "strict": True}

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


# Упорядоченный набор из k >= 1 точек; различие x: предусловие интерполяции
PointSet: TypeAlias = Sequence[SamplePoint]


def to_point_set(pairs: Iterable[tuple[int, int]]) -> tuple[SamplePoint, ...]:
    """
    Сборка набора точек из пар (x, y) с сохранением порядка.

    Examples:
        >>> to_point_set([(1, 4), (2, 7)])
        (SamplePoint(x=1, y=4), SamplePoint(x=2, y=7))
    """
    return tuple(SamplePoint(x=x, y=y) for x, y in pairs)
