"""
Тесты для Base Decoding — декодирование записей в основании 2..36

Проверяемые инварианты:
1. decode(encode(v, b), b) == v для всех оснований 2..36
2. Знак '+' / '-' и пробелы по краям
3. Регистр не важен
4. InvalidDigit / EmptyInput / InvalidBase: отдельные именованные ошибки
5. Отсутствие переполнения на очень больших значениях
"""

import pytest

from src.core.math.base_decoding import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    BaseDecodingError,
    EmptyInput,
    InvalidBase,
    InvalidDigit,
    decode,
    digit_value,
    encode,
    to_decimal,
    validate_base,
)


# =============================================================================
# ТЕСТЫ: validate_base
# =============================================================================


class TestValidateBase:
    """Тесты validate_base: диапазон и приведение строк."""

    def test_bounds_accepted(self):
        assert validate_base(MIN_BASE) == 2
        assert validate_base(MAX_BASE) == 36

    def test_numeral_string_accepted(self):
        assert validate_base("16") == 16
        assert validate_base(" 8 ") == 8

    def test_integral_float_accepted(self):
        assert validate_base(10.0) == 10

    @pytest.mark.parametrize("base", [0, 1, 37, -16, 100, "1", "37"])
    def test_out_of_range(self, base):
        with pytest.raises(InvalidBase):
            validate_base(base)

    @pytest.mark.parametrize("base", ["sixteen", "", "1.5", 10.5, None, True, [16]])
    def test_not_an_integer(self, base):
        with pytest.raises(InvalidBase):
            validate_base(base)

    def test_invalid_base_is_decoding_error(self):
        """InvalidBase ловится как BaseDecodingError и как ValueError."""
        with pytest.raises(BaseDecodingError):
            validate_base(1)
        with pytest.raises(ValueError):
            validate_base(1)


# =============================================================================
# ТЕСТЫ: decode
# =============================================================================


class TestDecode:
    """Тесты decode: позиционное декодирование по схеме Горнера."""

    def test_simple_values(self):
        assert decode("4", 10) == 4
        assert decode("111", 2) == 7
        assert decode("12", 3) == 5
        assert decode("ff", 16) == 255
        assert decode("z", 36) == 35
        assert decode("10", 36) == 36

    def test_zero(self):
        assert decode("0", 2) == 0
        assert decode("000", 10) == 0
        assert decode("-0", 10) == 0

    def test_sign(self):
        assert decode("-101", 2) == -5
        assert decode("+101", 2) == 5
        assert decode("-ff", 16) == -255

    def test_whitespace_trimmed(self):
        assert decode("  42\n", 10) == 42
        assert decode("\t-7 ", 8) == -7

    def test_case_insensitive(self):
        assert decode("FF", 16) == decode("ff", 16) == 255
        assert decode("AbC", 16) == 0xABC

    def test_base_as_string(self):
        assert decode("777", "8") == 511

    def test_large_value_exact(self):
        """Значения за пределами 64 бит декодируются без потерь."""
        text = "z" * 50
        assert decode(text, 36) == 36**50 - 1

        big = "1" + "0" * 200
        assert decode(big, 10) == 10**200

    def test_matches_builtin_int(self):
        for base in (2, 7, 10, 16, 29, 36):
            text = "1" + DIGIT_ALPHABET[base - 1] * 20
            assert decode(text, base) == int(text, base)

    def test_invalid_digit_for_base(self):
        """g = 16 недопустима в основании 16."""
        with pytest.raises(InvalidDigit, match="not valid for base 16"):
            decode("1g", 16)

    def test_letter_in_base_10(self):
        with pytest.raises(InvalidDigit):
            decode("z", 10)

    def test_digit_equal_to_base(self):
        with pytest.raises(InvalidDigit):
            decode("2", 2)
        with pytest.raises(InvalidDigit):
            decode("a", 10)

    @pytest.mark.parametrize("text", ["1.5", "1_000", "1 2", "0x1f", "--1", "+-1", "é"])
    def test_character_outside_alphabet(self, text):
        with pytest.raises(InvalidDigit):
            decode(text, 16)

    def test_invalid_digit_attributes(self):
        with pytest.raises(InvalidDigit) as exc_info:
            decode("12$", 10)
        assert exc_info.value.char == "$"
        assert exc_info.value.base == 10
        assert "invalid digit character" in str(exc_info.value)

    @pytest.mark.parametrize("text", ["", "   ", "-", "+", " - "])
    def test_empty_input(self, text):
        with pytest.raises(EmptyInput):
            decode(text, 10)

    def test_invalid_base(self):
        with pytest.raises(InvalidBase):
            decode("1", 1)
        with pytest.raises(InvalidBase):
            decode("1", 37)

    def test_non_string_rejected(self):
        with pytest.raises(TypeError, match="must be a string"):
            decode(123, 10)


class TestDigitValue:
    """Тесты digit_value: значение одной цифры."""

    def test_alphabet_positions(self):
        for value, ch in enumerate(DIGIT_ALPHABET):
            assert digit_value(ch, 36) == value
            assert digit_value(ch.upper(), 36) == value

    def test_rejects_value_at_or_above_base(self):
        with pytest.raises(InvalidDigit):
            digit_value("8", 8)


# =============================================================================
# ТЕСТЫ: round-trip
# =============================================================================


class TestRoundTrip:
    """decode(encode(v)) == v и decode(-encode(v)) == -v."""

    VALUES = [0, 1, 2, 35, 36, 255, 10**6 + 3, 2**64 + 1, 3**100]

    @pytest.mark.parametrize("base", range(MIN_BASE, MAX_BASE + 1))
    def test_round_trip_all_bases(self, base):
        for value in self.VALUES:
            text = encode(value, base)
            assert decode(text, base) == value
            assert decode("-" + text, base) == -value

    def test_encode_negative(self):
        assert encode(-255, 16) == "-ff"
        assert decode(encode(-255, 16), 16) == -255

    def test_encode_beyond_int_digit_limit(self):
        assert encode(10**5000, 10) == "1" + "0" * 5000

    def test_encode_known_values(self):
        assert encode(0, 2) == "0"
        assert encode(5, 2) == "101"
        assert encode(35, 36) == "z"
        assert encode(36, 36) == "10"


# =============================================================================
# ТЕСТЫ: to_decimal
# =============================================================================


class TestToDecimal:
    """Десятичная запись без лимита str(int) на 4300 цифр."""

    @pytest.mark.parametrize(
        "value",
        [0, 1, -1, 42, 10**17, 10**18 - 1, 10**18, 10**18 + 1, -(10**36), 2**64 + 1, 3**100],
    )
    def test_matches_str_for_small_values(self, value):
        assert to_decimal(value) == str(value)

    def test_zero_padded_inner_chunks(self):
        assert to_decimal(10**40 + 7) == "1" + "0" * 39 + "7"

    def test_five_thousand_digits(self):
        text = "7" * 5000
        value = decode(text, 10)
        assert to_decimal(value) == text
        assert to_decimal(-value) == "-" + text

    def test_inverse_of_decode(self):
        text = "-" + "1234567890" * 700
        assert to_decimal(decode(text, 10)) == text
