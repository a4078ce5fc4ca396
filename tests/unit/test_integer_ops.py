"""
Тесты для модуля Integer Ops

Проверяет:
1. Wrapping-арифметику int32
2. Truncating деление и остаток
3. Валидацию целочисленных аргументов
"""

import pytest

from stark_math.core.math.integer_ops import (
    INT32_MAX,
    INT32_MIN,
    digits_to_int,
    int_to_digits,
    is_int32,
    mul_wrap_int32,
    trunc_div,
    trunc_mod,
    validate_int32,
    validate_integer,
    wrap_int32,
)


# =============================================================================
# ТЕСТЫ WRAPPING АРИФМЕТИКИ
# =============================================================================


class TestWrapInt32:
    """Тесты для wrap_int32"""

    def test_in_range_values_unchanged(self) -> None:
        """Значения в диапазоне int32 не меняются"""
        assert wrap_int32(0) == 0
        assert wrap_int32(42) == 42
        assert wrap_int32(-42) == -42
        assert wrap_int32(INT32_MAX) == INT32_MAX
        assert wrap_int32(INT32_MIN) == INT32_MIN

    def test_overflow_wraps_to_negative(self) -> None:
        """INT32_MAX + 1 переходит в INT32_MIN"""
        assert wrap_int32(INT32_MAX + 1) == INT32_MIN

    def test_underflow_wraps_to_positive(self) -> None:
        """INT32_MIN - 1 переходит в INT32_MAX"""
        assert wrap_int32(INT32_MIN - 1) == INT32_MAX

    def test_high_bits_discarded(self) -> None:
        """Биты выше 32-го отбрасываются"""
        assert wrap_int32(2**32 + 5) == 5
        assert wrap_int32(2**40) == 0
        assert wrap_int32(-(2**32)) == 0


class TestMulWrapInt32:
    """Тесты для mul_wrap_int32"""

    def test_small_product(self) -> None:
        assert mul_wrap_int32(7, 3) == 21
        assert mul_wrap_int32(-7, 3) == -21

    def test_product_overflow(self) -> None:
        """7 * 2^30 переполняет int32"""
        assert mul_wrap_int32(7, 2**30) == -1073741824

    def test_min_times_minus_one(self) -> None:
        """INT32_MIN * -1 остаётся INT32_MIN (как в two's complement)"""
        assert mul_wrap_int32(INT32_MIN, -1) == INT32_MIN


class TestIsInt32:
    """Тесты для is_int32"""

    def test_bounds(self) -> None:
        assert is_int32(INT32_MAX)
        assert is_int32(INT32_MIN)
        assert not is_int32(INT32_MAX + 1)
        assert not is_int32(INT32_MIN - 1)


# =============================================================================
# ТЕСТЫ TRUNCATING ДЕЛЕНИЯ
# =============================================================================


class TestTruncatingDivision:
    """Тесты для trunc_div и trunc_mod"""

    @pytest.mark.parametrize(
        "a, b, quotient, remainder",
        [
            (7, 2, 3, 1),
            (-7, 2, -3, -1),
            (7, -2, -3, 1),
            (-7, -2, 3, -1),
            (6, 3, 2, 0),
            (0, 5, 0, 0),
        ],
    )
    def test_known_values(self, a: int, b: int, quotient: int, remainder: int) -> None:
        """Частное усекается к нулю, знак остатка совпадает с делимым"""
        assert trunc_div(a, b) == quotient
        assert trunc_mod(a, b) == remainder

    def test_differs_from_floor_division(self) -> None:
        """Для отрицательного частного результат отличается от //"""
        assert -7 // 2 == -4
        assert trunc_div(-7, 2) == -3
        assert -7 % 2 == 1
        assert trunc_mod(-7, 2) == -1

    def test_division_identity(self) -> None:
        """trunc_div(a, b) * b + trunc_mod(a, b) == a"""
        for a in range(-20, 21):
            for b in (-7, -3, -1, 1, 2, 5, 9):
                assert trunc_div(a, b) * b + trunc_mod(a, b) == a
                assert abs(trunc_mod(a, b)) < abs(b)

    def test_big_integers(self) -> None:
        """Работает для чисел произвольной точности"""
        a = -(10**40) - 3
        assert trunc_div(a, 10**20) == -(10**20)
        assert trunc_mod(a, 10**20) == -3

    def test_zero_divisor_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            trunc_div(1, 0)
        with pytest.raises(ZeroDivisionError):
            trunc_mod(1, 0)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты для validate_integer и validate_int32"""

    def test_integer_accepted(self) -> None:
        assert validate_integer(5, "x") == 5
        assert validate_integer(-(10**30), "x") == -(10**30)

    def test_bool_rejected(self) -> None:
        """bool не считается целым"""
        with pytest.raises(TypeError, match="x must be an integer"):
            validate_integer(True, "x")

    def test_float_rejected(self) -> None:
        with pytest.raises(TypeError, match="got float"):
            validate_integer(1.0, "x")

    def test_int32_bounds(self) -> None:
        assert validate_int32(INT32_MAX, "seed") == INT32_MAX
        with pytest.raises(ValueError, match="seed must be within"):
            validate_int32(INT32_MAX + 1, "seed")
        with pytest.raises(ValueError, match="seed must be within"):
            validate_int32(INT32_MIN - 1, "seed")

    def test_int32_type_checked_first(self) -> None:
        with pytest.raises(TypeError):
            validate_int32("3", "seed")


# =============================================================================
# ТЕСТЫ ДЕСЯТИЧНОГО ПРЕДСТАВЛЕНИЯ
# =============================================================================


class TestDecimalDigits:
    """Тесты для digits_to_int и int_to_digits"""

    @pytest.mark.parametrize(
        "text, value",
        [("0", 0), ("007", 7), ("+15", 15), ("-125", -125), ("-0", 0)],
    )
    def test_short_values(self, text: str, value: int) -> None:
        assert digits_to_int(text) == value

    def test_short_rendering(self) -> None:
        assert int_to_digits(0) == "0"
        assert int_to_digits(-125) == "-125"
        assert int_to_digits(10**20) == "1" + "0" * 20

    def test_beyond_interpreter_limit(self) -> None:
        """Длиннее sys.get_int_max_str_digits() (4300 по умолчанию)"""
        text = "9" * 10001
        value = digits_to_int(text)
        assert value == 10**10001 - 1
        assert int_to_digits(value) == text
        assert int_to_digits(-value) == "-" + text

    def test_inner_zeros_preserved(self) -> None:
        """Младший блок дополняется нулями слева"""
        value = 7 * 10**6000 + 3
        text = int_to_digits(value)
        assert text == "7" + "0" * 5999 + "3"
        assert digits_to_int(text) == value

    def test_mixed_digits(self) -> None:
        text = "1234567890" * 600
        assert int_to_digits(digits_to_int(text)) == text
