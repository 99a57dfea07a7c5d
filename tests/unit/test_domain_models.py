"""
Тесты для доменных моделей: SamplePoint, EnvelopeKeys, ShareEntry, ShareEnvelope

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True)
3. Отказ от нецелых значений точек
4. Инвариант 1 <= k <= n
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    EnvelopeKeys,
    SamplePoint,
    ShareEntry,
    ShareEnvelope,
    to_point_set,
)


# =============================================================================
# SAMPLE POINT TESTS
# =============================================================================


class TestSamplePoint:
    """Тесты для модели SamplePoint"""

    def test_create(self):
        point = SamplePoint(x=1, y=-4)
        assert point.x == 1
        assert point.y == -4
        assert point.as_tuple() == (1, -4)

    def test_big_integers(self):
        point = SamplePoint(x=10**30, y=-(2**200))
        assert point.x == 10**30
        assert point.y == -(2**200)

    def test_frozen(self):
        point = SamplePoint(x=1, y=2)
        with pytest.raises(ValidationError):
            point.x = 5

    @pytest.mark.parametrize("y", [1.5, 2.0, "3", 1 + 2j, None])
    def test_rejects_non_integer(self, y):
        with pytest.raises(ValidationError):
            SamplePoint(x=1, y=y)

    def test_equality_by_value(self):
        assert SamplePoint(x=1, y=2) == SamplePoint(x=1, y=2)
        assert SamplePoint(x=1, y=2) != SamplePoint(x=2, y=1)

    def test_to_point_set_keeps_order(self):
        points = to_point_set([(3, 1), (1, 2), (2, 3)])
        assert [p.x for p in points] == [3, 1, 2]
        assert isinstance(points, tuple)


# =============================================================================
# ENVELOPE TESTS
# =============================================================================


class TestEnvelopeKeys:
    """Тесты для модели EnvelopeKeys"""

    def test_valid(self):
        keys = EnvelopeKeys(n=4, k=3)
        assert (keys.n, keys.k) == (4, 3)

    def test_k_equal_n(self):
        assert EnvelopeKeys(n=3, k=3).k == 3

    def test_numeral_strings_coerced(self):
        keys = EnvelopeKeys(n="10", k="7")
        assert (keys.n, keys.k) == (10, 7)

    def test_k_greater_than_n(self):
        with pytest.raises(ValidationError, match="must not exceed"):
            EnvelopeKeys(n=2, k=3)

    def test_k_zero(self):
        with pytest.raises(ValidationError):
            EnvelopeKeys(n=2, k=0)

    @pytest.mark.parametrize("value", [2.5, "two", None])
    def test_non_integer(self, value):
        with pytest.raises(ValidationError):
            EnvelopeKeys(n=value, k=1)


class TestShareEntry:
    """Тесты для модели ShareEntry"""

    def test_base_kept_raw(self):
        assert ShareEntry(base="16", value="ff").base == "16"
        assert ShareEntry(base=16, value="ff").base == 16

    def test_value_must_be_string(self):
        with pytest.raises(ValidationError):
            ShareEntry(base=10, value=42)


class TestShareEnvelope:
    """Тесты для модели ShareEnvelope"""

    def test_from_document(self):
        envelope = ShareEnvelope.from_document(
            {
                "keys": {"n": 2, "k": 1},
                "2": {"base": "10", "value": "7"},
                "1": {"base": "2", "value": "11"},
            }
        )
        assert envelope.keys == EnvelopeKeys(n=2, k=1)
        assert set(envelope.entries) == {"1", "2"}
        assert envelope.entries["1"] == {"base": "2", "value": "11"}

    def test_invalid_keys(self):
        with pytest.raises(ValidationError):
            ShareEnvelope.from_document({"keys": {"n": 1, "k": 2}})
