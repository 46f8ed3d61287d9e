"""
Тесты для модуля Numeric-Domain Conversion Helpers

Проверяет:
1. Расширение до рабочего float
2. Нулевой элемент типа
3. Общий числовой тип (numeric tower)
4. Деление с усечением к нулю
5. Определение типа элементов последовательности
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from src.core.numeric.capabilities import Capability
from src.core.numeric.conversion import (
    WORKING_FLOAT,
    common_numeric_type,
    promote_items,
    resolve_element_type,
    squared_deviation_sum,
    truncating_divide,
    widen,
    widened_sum,
    zero_of,
)
from src.core.numeric.errors import TypeIneligible


class NeedsArgs:
    def __init__(self, a, b):
        self.a = a
        self.b = b


# =============================================================================
# ТЕСТЫ РАСШИРЕНИЯ
# =============================================================================


class TestWiden:
    """Тесты для widen / widened_sum / squared_deviation_sum"""

    def test_working_float_is_double(self) -> None:
        assert WORKING_FLOAT is float

    def test_widen_returns_builtin_float(self) -> None:
        assert widen(3) == 3.0
        assert type(widen(3)) is float
        assert widen(Fraction(1, 4)) == 0.25
        assert type(widen(np.float32(0.5))) is float

    def test_widened_sum_mixed(self) -> None:
        assert widened_sum([1, Fraction(1, 2), np.float32(0.25)]) == 1.75

    def test_widened_sum_empty(self) -> None:
        assert widened_sum([]) == 0.0

    def test_squared_deviation_sum(self) -> None:
        assert squared_deviation_sum([1, 2, 3], 2.0) == 2.0
        assert squared_deviation_sum([5, 5], 5.0) == 0.0


# =============================================================================
# ТЕСТЫ НУЛЕВОГО ЭЛЕМЕНТА
# =============================================================================


class TestZeroOf:
    """Тесты для zero_of"""

    def test_builtin_zeros(self) -> None:
        assert zero_of(int) == 0
        assert type(zero_of(float)) is float
        assert zero_of(Fraction) == Fraction(0)
        assert zero_of(Decimal) == Decimal(0)

    def test_numpy_zero_keeps_width(self) -> None:
        zero = zero_of(np.int8)
        assert zero == 0
        assert isinstance(zero, np.int8)

    def test_type_without_zero(self) -> None:
        with pytest.raises(TypeIneligible, match="no zero value") as exc_info:
            zero_of(NeedsArgs, "sum")
        assert exc_info.value.capability is Capability.ADDABLE


# =============================================================================
# ТЕСТЫ ОБЩЕГО ТИПА
# =============================================================================


class TestCommonNumericType:
    """Тесты для common_numeric_type"""

    def test_single_type_preserved(self) -> None:
        assert common_numeric_type([int, int]) is int
        assert common_numeric_type([np.float32]) is np.float32

    def test_integral_promotion(self) -> None:
        assert common_numeric_type([int, np.int8]) is int

    def test_rational_promotion(self) -> None:
        assert common_numeric_type([int, Fraction]) is Fraction

    def test_real_promotion(self) -> None:
        assert common_numeric_type([int, float]) is float
        assert common_numeric_type([Fraction, float]) is float
        assert common_numeric_type([np.float32, float]) is float

    def test_complex_promotion(self) -> None:
        assert common_numeric_type([int, complex]) is complex

    def test_no_common_domain(self) -> None:
        assert common_numeric_type([]) is None
        assert common_numeric_type([int, str]) is None
        assert common_numeric_type([Decimal, float]) is None
        assert common_numeric_type([int, bool]) is None


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ С УСЕЧЕНИЕМ
# =============================================================================


class TestTruncatingDivide:
    """Тесты для truncating_divide"""

    def test_positive(self) -> None:
        assert truncating_divide(10, 4) == 2
        assert truncating_divide(7, 2) == 3

    def test_negative_truncates_toward_zero(self) -> None:
        """Усечение к нулю, а не floor: -7 / 2 → -3 (floor дал бы -4)"""
        assert truncating_divide(-7, 2) == -3
        assert truncating_divide(-3, 2) == -1
        assert truncating_divide(-1, 4) == 0

    def test_type_preserved(self) -> None:
        result = truncating_divide(np.int16(-9), 2)
        assert result == -4
        assert isinstance(result, np.int16)

    def test_count_wider_than_element_type(self) -> None:
        """count, не помещающийся в int8, не вызывает OverflowError"""
        result = truncating_divide(np.int8(100), 200)
        assert result == 0
        assert isinstance(result, np.int8)

    def test_most_negative_value_keeps_sign(self) -> None:
        """abs(int8(-128)) в int8 переполняется; деление идёт в int"""
        result = truncating_divide(np.int8(-128), 2)
        assert result == -64
        assert isinstance(result, np.int8)


# =============================================================================
# ТЕСТЫ ПРИВЕДЕНИЯ ЭЛЕМЕНТОВ
# =============================================================================


class TestPromoteItems:
    """Тесты для promote_items"""

    def test_homogeneous_returned_unchanged(self) -> None:
        values = [1, 2, 3]
        assert promote_items(values, int) is values

    def test_mixed_converted(self) -> None:
        result = promote_items([np.int8(3), 5], int)
        assert result == (3, 5)
        assert all(type(item) is int for item in result)

    def test_rational_promotion(self) -> None:
        result = promote_items([1, Fraction(1, 2)], Fraction)
        assert result == (Fraction(1), Fraction(1, 2))
        assert type(result[0]) is Fraction


# =============================================================================
# ТЕСТЫ ТИПА ЭЛЕМЕНТОВ
# =============================================================================


class TestResolveElementType:
    """Тесты для resolve_element_type"""

    def test_homogeneous_list(self) -> None:
        values = [1, 2, 3]
        items, element_type = resolve_element_type(values, "sum", Capability.ADDABLE)
        assert items is values
        assert element_type is int

    def test_mixed_numeric_promoted(self) -> None:
        _, element_type = resolve_element_type([1, 2.5], "sum", Capability.ADDABLE)
        assert element_type is float

    def test_iterable_materialised(self) -> None:
        items, element_type = resolve_element_type(
            (x for x in range(3)), "sum", Capability.ADDABLE
        )
        assert items == (0, 1, 2)
        assert element_type is int

    def test_array_dtype(self) -> None:
        _, element_type = resolve_element_type(
            np.array([1, 2], dtype=np.int32), "sum", Capability.ADDABLE
        )
        assert element_type is np.int32

    def test_empty_array_keeps_dtype(self) -> None:
        items, element_type = resolve_element_type(
            np.array([], dtype=np.float32), "sum", Capability.ADDABLE
        )
        assert len(items) == 0
        assert element_type is np.float32

    def test_empty_list_has_no_type(self) -> None:
        items, element_type = resolve_element_type([], "mean", Capability.DIVISIBLE)
        assert len(items) == 0
        assert element_type is None

    def test_text_container_rejected(self) -> None:
        for text in ("abc", b"abc", bytearray(b"abc")):
            with pytest.raises(TypeIneligible, match="text is not a numeric sequence"):
                resolve_element_type(text, "max", Capability.COMPARABLE)

    def test_mixed_with_text_rejected(self) -> None:
        with pytest.raises(TypeIneligible, match="no common numeric type") as exc_info:
            resolve_element_type([1, "a", 2], "sum", Capability.ADDABLE)
        assert exc_info.value.element_type is str
        assert exc_info.value.capability is Capability.ADDABLE
