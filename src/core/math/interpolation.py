"""
Interpolation — Точная интерполяция Лагранжа в нуле

Вычисление свободного члена P(0) единственного многочлена степени k-1,
проходящего через k точек:

    P(0) = Σ_i y_i · L_i(0),   L_i(0) = Π_{j≠i} (0 - x_j) / (x_i - x_j)

Каждое слагаемое считается как точная дробь, сокращается, затем слагаемые
суммируются слева направо в порядке точек, начиная с 0/1.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Совпадающие x → CoincidentXValues (не DivisionByZero, не мусор)
2. Детерминизм: одинаковый вход → одинаковая каноническая дробь
3. Результат не зависит от порядка точек (точная арифметика)
4. Сложность O(k²) умножений над int
"""

from typing import Sequence

from src.core.domain.sample_point import SamplePoint
from src.core.math.base_decoding import to_decimal
from src.core.math.rational import ZERO, Rational, add, reduce


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CoincidentXValues(ArithmeticError):
    """
    Две точки имеют одинаковую абсциссу: интерполяция не определена.

    Attributes:
        x: Совпадающее значение x
        indices: Индексы точек (i, j) в исходной последовательности
    """

    def __init__(self, x: int, indices: tuple[int, int]):
        self.x = x
        self.indices = indices
        super().__init__(
            f"sample points {indices[0]} and {indices[1]} share x-coordinate {to_decimal(x)}"
        )


class EmptyPointSet(ValueError):
    """Пустой набор точек: нужна хотя бы одна точка."""


# =============================================================================
# LAGRANGE AT ZERO
# =============================================================================


def lagrange_term_at_zero(points: Sequence[SamplePoint], i: int) -> Rational:
    """
    Слагаемое y_i · L_i(0) как сокращённая дробь.

    Числитель: y_i · Π(-x_j), знаменатель: Π(x_i - x_j), j ≠ i в порядке точек.

    Raises:
        CoincidentXValues: Если x_i == x_j для некоторого j ≠ i
    """
    xi = points[i].x
    numerator = points[i].y
    denominator = 1

    for j, point in enumerate(points):
        if j == i:
            continue
        diff = xi - point.x
        if diff == 0:
            raise CoincidentXValues(xi, (min(i, j), max(i, j)))
        numerator *= -point.x
        denominator *= diff

    return reduce(Rational(numerator, denominator))


def lagrange_terms_at_zero(points: Sequence[SamplePoint]) -> list[Rational]:
    """Все слагаемые y_i · L_i(0) в порядке точек."""
    return [lagrange_term_at_zero(points, i) for i in range(len(points))]


def interpolate(points: Sequence[SamplePoint]) -> Rational:
    """
    Значение интерполяционного многочлена в x = 0.

    Args:
        points: Упорядоченный набор из k >= 1 точек с попарно различными x

    Returns:
        P(0) как каноническая дробь (denominator == 1 для целого результата)

    Raises:
        EmptyPointSet: Если точек нет
        CoincidentXValues: Если две точки имеют одинаковый x

    Examples:
        >>> pts = [SamplePoint(x=1, y=4), SamplePoint(x=2, y=7), SamplePoint(x=3, y=12)]
        >>> interpolate(pts)
        Rational(numerator=3, denominator=1)
    """
    if len(points) == 0:
        raise EmptyPointSet("at least one sample point is required")

    total = ZERO
    for term in lagrange_terms_at_zero(points):
        total = add(total, term)

    return reduce(total)
