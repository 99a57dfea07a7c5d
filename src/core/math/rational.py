"""
Rational — Точная рациональная арифметика

Модуль реализует дроби над целыми неограниченной точности:
- Сокращение к каноническому виду (знаменатель > 0, gcd = 1)
- Сложение через перекрёстное умножение без промежуточного округления
- Алгоритм Евклида для НОД

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знаменатель никогда не равен нулю (→ DivisionByZero)
2. После reduce: denominator > 0 и gcd(|numerator|, denominator) == 1
3. reduce идемпотентен: reduce(reduce(r)) == reduce(r)
4. Никаких float: только int
"""

from dataclasses import dataclass

from src.core.math.base_decoding import to_decimal


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """
    Нулевой знаменатель в дроби.

    Нарушение инварианта движка. При корректной работе вызывающего кода
    недостижимо: нулевой знаменатель из интерполяции перехватывается
    раньше как CoincidentXValues.
    """


# =============================================================================
# RATIONAL
# =============================================================================


@dataclass(frozen=True)
class Rational:
    """
    Дробь numerator / denominator над int.

    Конструктор не нормализует значение: для канонической формы
    используйте reduce() или Rational.of().
    """

    numerator: int
    denominator: int = 1

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> "Rational":
        """Создание дроби сразу в каноническом виде."""
        return reduce(cls(numerator, denominator))

    @property
    def is_integer(self) -> bool:
        return self.denominator == 1

    def __add__(self, other: "Rational") -> "Rational":
        if not isinstance(other, Rational):
            return NotImplemented
        return add(self, other)

    def __str__(self) -> str:
        if self.denominator == 1:
            return to_decimal(self.numerator)
        return f"{to_decimal(self.numerator)}/{to_decimal(self.denominator)}"


ZERO = Rational(0, 1)


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    НОД по алгоритму Евклида на абсолютных значениях.

    Returns:
        Неотрицательный НОД; gcd(0, 0) == 0

    Examples:
        >>> gcd(12, -18)
        6
        >>> gcd(0, 7)
        7
        >>> gcd(0, 0)
        0
    """
    a = abs(a)
    b = abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def reduce(r: Rational) -> Rational:
    """
    Приведение дроби к каноническому виду.

    Args:
        r: Произвольная дробь

    Returns:
        Эквивалентная дробь с denominator > 0 и gcd(|numerator|, denominator) == 1

    Raises:
        DivisionByZero: Если знаменатель равен нулю

    Examples:
        >>> reduce(Rational(6, -4))
        Rational(numerator=-3, denominator=2)
    """
    numerator = r.numerator
    denominator = r.denominator

    if denominator == 0:
        raise DivisionByZero(f"zero denominator in rational {to_decimal(numerator)}/0")

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    g = gcd(numerator, denominator)
    if g > 1:
        numerator //= g
        denominator //= g

    if numerator == r.numerator and denominator == r.denominator:
        return r
    return Rational(numerator, denominator)


def add(a: Rational, b: Rational) -> Rational:
    """
    Точная сумма двух дробей.

    a/b + c/d = (a·d + c·b) / (b·d), затем reduce.

    Examples:
        >>> add(Rational(1, 3), Rational(1, 6))
        Rational(numerator=1, denominator=2)
    """
    numerator = a.numerator * b.denominator + b.numerator * a.denominator
    denominator = a.denominator * b.denominator
    return reduce(Rational(numerator, denominator))
