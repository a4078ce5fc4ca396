"""
Integer Ops — Fixed-width и truncating примитивы над int

Модуль собирает целочисленные операции, которые нужны rational и
structural hash, но которых нет в Python напрямую:
- Эмуляция 32-битной знаковой арифметики с переполнением (wrapping)
- Деление и остаток с усечением к нулю (truncating), а не floor
- Валидация целочисленных аргументов
- Перевод в десятичную строку и обратно без лимита длины интерпретатора

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. wrap_int32 всегда возвращает значение в [INT32_MIN, INT32_MAX]
2. trunc_div(a, b) * b + trunc_mod(a, b) == a для любых a и b != 0
3. Знак trunc_mod совпадает со знаком делимого (или результат 0)
4. bool не считается целым числом при валидации
"""

from typing import Final

# =============================================================================
# INT32 КОНСТАНТЫ
# =============================================================================

INT32_BITS: Final[int] = 32

INT32_MIN: Final[int] = -(2**31)

INT32_MAX: Final[int] = 2**31 - 1

# Модуль для wrapping-арифметики (2^32)
_INT32_MODULUS: Final[int] = 2**32


# =============================================================================
# WRAPPING АРИФМЕТИКА
# =============================================================================


def wrap_int32(value: int) -> int:
    """
    Сужение произвольного int до 32-битного знакового (two's complement).

    Эквивалентно unchecked-приведению к int32: старшие биты отбрасываются.

    Args:
        value: Произвольное целое

    Returns:
        Значение в диапазоне [INT32_MIN, INT32_MAX]

    Examples:
        >>> wrap_int32(2**31)
        -2147483648
        >>> wrap_int32(-1)
        -1
        >>> wrap_int32(2**32 + 5)
        5
    """
    return ((value - INT32_MIN) % _INT32_MODULUS) + INT32_MIN


def mul_wrap_int32(a: int, b: int) -> int:
    """
    Умножение с 32-битным переполнением.

    Args:
        a: Первый множитель
        b: Второй множитель

    Returns:
        wrap_int32(a * b)

    Examples:
        >>> mul_wrap_int32(7, 3)
        21
        >>> mul_wrap_int32(7, 2**30)
        -1073741824
    """
    return wrap_int32(a * b)


def is_int32(value: int) -> bool:
    """Проверка, что значение помещается в int32 без переполнения."""
    return INT32_MIN <= value <= INT32_MAX


# =============================================================================
# TRUNCATING ДЕЛЕНИЕ
# =============================================================================


def trunc_div(a: int, b: int) -> int:
    """
    Целочисленное деление с округлением к нулю.

    Оператор // в Python округляет к -inf, поэтому для отрицательных
    частных результат отличается: -7 // 2 == -4, а trunc_div(-7, 2) == -3.

    Args:
        a: Делимое
        b: Делитель (не 0)

    Returns:
        Частное, усечённое к нулю

    Raises:
        ZeroDivisionError: если b == 0
    """
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """
    Остаток от деления с усечением: знак совпадает со знаком делимого.

    Examples:
        >>> trunc_mod(7, 3)
        1
        >>> trunc_mod(-7, 3)
        -1
        >>> trunc_mod(7, -3)
        1
    """
    r = abs(a) % abs(b)
    return -r if a < 0 else r


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_integer(value: object, name: str) -> int:
    """
    Проверка, что значение является int (bool отвергается).

    Args:
        value: Проверяемое значение
        name: Имя параметра для сообщения об ошибке

    Returns:
        То же значение как int

    Raises:
        TypeError: если значение не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def validate_int32(value: object, name: str) -> int:
    """
    Проверка, что значение является int в диапазоне int32.

    Raises:
        TypeError: если значение не int
        ValueError: если значение вне [INT32_MIN, INT32_MAX]
    """
    checked = validate_integer(value, name)
    if not is_int32(checked):
        raise ValueError(
            f"{name} must be within [{INT32_MIN}, {INT32_MAX}], "
            f"got {int_to_digits(checked)}"
        )
    return checked



# =============================================================================
# ДЕСЯТИЧНОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================

# int(str) и str(int) ограничены sys.get_int_max_str_digits() (не меньше 640),
# поэтому длинные числа переводятся блоками не длиннее этого размера
_DIGIT_CHUNK: Final[int] = 512


def digits_to_int(text: str) -> int:
    """
    Строка цифр (с необязательным знаком) → int без ограничения длины.

    Длинная строка делится пополам рекурсивно: high * 10^k + low.

    Examples:
        >>> digits_to_int("-0125")
        -125
        >>> digits_to_int("1" * 5000) == (10**5000 - 1) // 9
        True
    """
    if text[:1] in ("+", "-"):
        magnitude = _unsigned_digits_to_int(text[1:])
        return -magnitude if text[0] == "-" else magnitude
    return _unsigned_digits_to_int(text)


def _unsigned_digits_to_int(digits: str) -> int:
    if len(digits) <= _DIGIT_CHUNK:
        return int(digits)
    split = len(digits) // 2
    high = _unsigned_digits_to_int(digits[:-split])
    low = _unsigned_digits_to_int(digits[-split:])
    return high * 10**split + low


def int_to_digits(value: int) -> str:
    """
    int → десятичная строка без ограничения длины (обратное digits_to_int).

    Examples:
        >>> int_to_digits(-125)
        '-125'
        >>> len(int_to_digits(10**5000))
        5001
    """
    if value < 0:
        return "-" + _unsigned_int_to_digits(-value)
    return _unsigned_int_to_digits(value)


def _unsigned_int_to_digits(value: int) -> str:
    if value < 10**_DIGIT_CHUNK:
        return str(value)
    # log10(2) ≈ 0.30103: split ≈ половина числа цифр, high > 0
    split = value.bit_length() * 30103 // 200000
    high, low = divmod(value, 10**split)
    return _unsigned_int_to_digits(high) + _unsigned_int_to_digits(low).zfill(split)
