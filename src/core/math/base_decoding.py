"""
Base Decoding — Декодирование позиционных записей в основании 2..36

Модуль переводит строку цифр в произвольном основании в целое число
неограниченной точности (Python int):
- Обрезка пробельных символов и нормализация регистра
- Необязательный знак '+' / '-'
- Алфавит цифр: 0-9, затем a-z (значение цифры = позиция в алфавите)
- Схема Горнера: acc = acc * base + digit

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакой арифметики с плавающей точкой
2. Переполнение невозможно (int неограниченной точности)
3. Любая невалидная цифра → InvalidDigit (никакого молчаливого пропуска)
4. Функции чистые: без side effects
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Допустимый диапазон оснований (включительно)
MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36

# Алфавит цифр: значение цифры = индекс символа
DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

_DIGIT_VALUES: Final[dict[str, int]] = {ch: value for value, ch in enumerate(DIGIT_ALPHABET)}

# Размер блока для to_decimal: каждый блок заведомо короче лимита str(int)
DECIMAL_CHUNK_DIGITS: Final[int] = 18
_DECIMAL_CHUNK: Final[int] = 10**DECIMAL_CHUNK_DIGITS


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BaseDecodingError(ValueError):
    """Базовая ошибка декодирования записи в заданном основании."""


class InvalidBase(BaseDecodingError):
    """Основание вне диапазона [2, 36]."""

    def __init__(self, base: object):
        self.base = base
        super().__init__(f"base {base!r} outside supported range {MIN_BASE}..{MAX_BASE}")


class EmptyInput(BaseDecodingError):
    """После удаления знака не осталось ни одной цифры."""


class InvalidDigit(BaseDecodingError):
    """
    Символ не принадлежит алфавиту или значение цифры >= base.

    Attributes:
        char: Исходный (нормализованный) символ
        base: Основание, в котором выполнялось декодирование
    """

    def __init__(self, char: str, base: int):
        self.char = char
        self.base = base
        if char in _DIGIT_VALUES:
            message = f"digit {char!r} not valid for base {base}"
        else:
            message = f"invalid digit character: {char!r}"
        super().__init__(message)


# =============================================================================
# ВАЛИДАЦИЯ ОСНОВАНИЯ
# =============================================================================


def validate_base(base: object) -> int:
    """
    Проверка и приведение основания.

    Принимает int или строку с десятичной записью целого (например, "16"),
    так как во внешнем JSON основание часто задано строкой.

    Args:
        base: Основание (int или десятичная строка)

    Returns:
        Основание как int в диапазоне [MIN_BASE, MAX_BASE]

    Raises:
        InvalidBase: Если основание не целое или вне диапазона

    Examples:
        >>> validate_base(16)
        16
        >>> validate_base(" 2 ")
        2
    """
    if isinstance(base, bool):
        raise InvalidBase(base)

    if isinstance(base, int):
        value = base
    elif isinstance(base, str):
        try:
            value = int(base.strip(), 10)
        except ValueError:
            raise InvalidBase(base) from None
    elif isinstance(base, float) and base.is_integer():
        value = int(base)
    else:
        raise InvalidBase(base)

    if value < MIN_BASE or value > MAX_BASE:
        raise InvalidBase(base)

    return value


# =============================================================================
# ДЕКОДИРОВАНИЕ
# =============================================================================


def digit_value(char: str, base: int) -> int:
    """
    Значение одной цифры в основании base.

    Raises:
        InvalidDigit: Если символ вне алфавита или его значение >= base
    """
    value = _DIGIT_VALUES.get(char.lower())
    if value is None or value >= base:
        raise InvalidDigit(char, base)
    return value


def decode(text: str, base: int) -> int:
    """
    Декодирование знаковой строки цифр в целое число.

    Args:
        text: Запись числа (пробелы по краям допустимы, регистр не важен)
        base: Основание в диапазоне [2, 36]

    Returns:
        Целое число неограниченной точности

    Raises:
        InvalidBase: Если основание вне [2, 36]
        EmptyInput: Если после знака нет ни одной цифры
        InvalidDigit: Если встречен недопустимый для основания символ

    Examples:
        >>> decode("ff", 16)
        255
        >>> decode("-101", 2)
        -5
        >>> decode("  +Z ", 36)
        35
    """
    if not isinstance(text, str):
        raise TypeError(f"value must be a string, got {type(text).__name__}")

    base = validate_base(base)
    digits = text.strip().lower()

    sign = 1
    if digits[:1] in ("+", "-"):
        if digits[0] == "-":
            sign = -1
        digits = digits[1:]

    if not digits:
        raise EmptyInput(f"no digits in {text!r}")

    acc = 0
    for ch in digits:
        acc = acc * base + digit_value(ch, base)

    return sign * acc


def encode(value: int, base: int) -> str:
    """
    Каноническая запись целого в основании base (обратная к decode).

    Используется для диагностики и тестов: decode(encode(v, b), b) == v.
    """
    base = validate_base(base)
    if value == 0:
        return "0"

    magnitude = abs(value)
    chars = []
    while magnitude:
        magnitude, rem = divmod(magnitude, base)
        chars.append(DIGIT_ALPHABET[rem])

    if value < 0:
        chars.append("-")
    return "".join(reversed(chars))


def to_decimal(value: int) -> str:
    """
    Десятичная запись целого без ограничения на число цифр.

    str(int) в CPython >= 3.11 отказывает для значений длиннее 4300 цифр
    (sys.get_int_max_str_digits). Здесь число режется на блоки по
    DECIMAL_CHUNK_DIGITS цифр, каждый блок форматируется отдельно.

    Examples:
        >>> to_decimal(-1234567890123456789012345)
        '-1234567890123456789012345'
    """
    magnitude = abs(value)
    chunks = []
    while magnitude >= _DECIMAL_CHUNK:
        magnitude, rem = divmod(magnitude, _DECIMAL_CHUNK)
        chunks.append(f"{rem:0{DECIMAL_CHUNK_DIGITS}d}")
    chunks.append(f"{magnitude:d}")

    text = "".join(reversed(chunks))
    return "-" + text if value < 0 else text
