"""
Rational — Точная рациональная арифметика произвольной точности

Модуль обеспечивает арифметику дробей без ошибок округления float:
- Каноническая форма: gcd(|numerator|, denominator) == 1, denominator > 0
- Ноль всегда представлен как 0/1
- Парсинг десятичной записи ("2.5", "-0,125") в точную дробь
- Рендеринг в десятичную строку с явной политикой длины дробной части

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все экземпляры создаются через единственный нормализующий конструктор
2. Результат любой арифметической операции снова проходит нормализацию
3. Экземпляры immutable (каждая операция возвращает новый объект)
4. Равенство: сначала сравнение при одинаковых знаменателях, затем
   cross-multiplication (p·s == q·r)

ФОРМУЛЫ (a = p/q, b = r/s):
    a + b = (p·s + q·r) / (q·s)
    a - b = (p·s - q·r) / (q·s)
    a * b = (p·r) / (q·s)
    a / b = (p·s) / (q·r)
    a % b = ((p·s) mod (q·r)) / (q·s)   # truncating mod, знак делимого
"""

import math
import re
from typing import Any, Final, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from stark_math.core.math.integer_ops import (
    digits_to_int,
    int_to_digits,
    trunc_div,
    trunc_mod,
    validate_integer,
)
from stark_math.core.math.policies import (
    DEFAULT_RENDER_POLICY,
    DecimalRenderPolicy,
    OverflowAction,
)
from stark_math.infrastructure.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# ГРАММАТИКА ДЕСЯТИЧНОЙ ЗАПИСИ
# =============================================================================

# Необязательный знак, цифры, не более одного разделителя ('.' или ','),
# после разделителя хотя бы одна цифра
DECIMAL_PATTERN: Final[str] = r"[+-]?[0-9]+(?:[.,][0-9]+)?"

_DECIMAL_FORMAT: Final[re.Pattern] = re.compile(DECIMAL_PATTERN)

DECIMAL_SEPARATORS: Final[tuple[str, ...]] = (".", ",")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RationalZeroDivisionError(ZeroDivisionError):
    """
    Нулевой знаменатель.

    Возникает при создании дроби с denominator == 0, а также при делении
    или взятии остатка по нулевому rational.
    """
    pass


class InvalidRationalFormat(ValueError):
    """Строка не соответствует грамматике десятичного числа."""
    pass


class DecimalExpansionError(ValueError):
    """
    Десятичная запись не помещается в DecimalRenderPolicy.max_fraction_digits.

    Для периодических дробей (знаменатель содержит простые множители кроме
    2 и 5) запись бесконечна и всегда превышает любой лимит.
    """
    pass


# =============================================================================
# RATIONAL NUMBER
# =============================================================================


class RationalNumber:
    """
    Рациональное число в канонической форме.

    Конструктор RationalNumber(numerator, denominator) является единственным
    путём создания экземпляра и всегда нормализует пару:
    - denominator == 0 → RationalZeroDivisionError
    - numerator == 0 → 0/1 независимо от denominator
    - denominator < 0 → знак переносится в numerator
    - обе части делятся на gcd

    Examples:
        >>> RationalNumber(4, 8)
        RationalNumber(1, 2)
        >>> RationalNumber(3, -6)
        RationalNumber(-1, 2)
        >>> RationalNumber(1, 2) + RationalNumber(1, 3)
        RationalNumber(5, 6)
        >>> str(RationalNumber.parse("2.5"))
        '2.5'
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        numerator = validate_integer(numerator, "numerator")
        denominator = validate_integer(denominator, "denominator")

        if denominator == 0:
            raise RationalZeroDivisionError(
                f"Denominator must not be zero (numerator={int_to_digits(numerator)})"
            )
        if numerator == 0:
            # 0/m -> 0/1
            numerator, denominator = 0, 1
        elif denominator < 0:
            numerator, denominator = -numerator, -denominator

        gcd = math.gcd(numerator, denominator)
        object.__setattr__(self, "_numerator", numerator // gcd)
        object.__setattr__(self, "_denominator", denominator // gcd)

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_integer(cls, value: int) -> "RationalNumber":
        """Rational из целого: value/1."""
        return cls(value, 1)

    @classmethod
    def from_fraction(cls, numerator: int, denominator: int) -> "RationalNumber":
        """
        Rational из пары numerator/denominator.

        Raises:
            RationalZeroDivisionError: если denominator == 0
        """
        return cls(numerator, denominator)

    @classmethod
    def parse(cls, text: str) -> "RationalNumber":
        """
        Парсинг десятичной записи в точную дробь.

        Без разделителя: numerator = digits_to_int(text), denominator = 1.
        С разделителем: k цифр после разделителя дают denominator = 10^k,
        numerator = число без символа разделителя; результат сокращается.

        Args:
            text: Строка вида "-12", "2.5", "0,125"

        Returns:
            Rational в канонической форме

        Raises:
            InvalidRationalFormat: если строка не соответствует грамматике

        Examples:
            >>> RationalNumber.parse("2.5")
            RationalNumber(5, 2)
            >>> RationalNumber.parse("-0,125")
            RationalNumber(-1, 8)
        """
        if not isinstance(text, str) or _DECIMAL_FORMAT.fullmatch(text) is None:
            raise InvalidRationalFormat(f"Value is not a number: {text!r}")

        separator_index = -1
        for separator in DECIMAL_SEPARATORS:
            separator_index = text.find(separator)
            if separator_index != -1:
                break

        if separator_index == -1:
            return cls(digits_to_int(text), 1)

        fraction_digits = len(text) - separator_index - 1
        digits = text[:separator_index] + text[separator_index + 1:]
        return cls(digits_to_int(digits), 10**fraction_digits)

    @classmethod
    def try_parse(cls, text: str) -> tuple["RationalNumber", bool]:
        """
        Парсинг без exception.

        Returns:
            (value, True) при успехе
            (ZERO, False) если строка не соответствует грамматике
        """
        try:
            return cls.parse(text), True
        except InvalidRationalFormat:
            logger.debug("Rejected rational input %r", text)
            return ZERO, False

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def sign(self) -> int:
        """Знак числа: -1, 0 или 1 (знаменатель всегда положителен)."""
        return (self._numerator > 0) - (self._numerator < 0)

    def is_integer(self) -> bool:
        return self._denominator == 1

    # -------------------------------------------------------------------------
    # Immutability
    # -------------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._numerator, self._denominator))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "RationalNumber":
        # a/b + c/d == (ad + bc)/bd
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _add(self, b)

    def __radd__(self, other: object) -> "RationalNumber":
        a = _coerce(other)
        if a is None:
            return NotImplemented
        return _add(a, self)

    def __sub__(self, other: object) -> "RationalNumber":
        # a/b - c/d == (ad - bc)/bd
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _sub(self, b)

    def __rsub__(self, other: object) -> "RationalNumber":
        a = _coerce(other)
        if a is None:
            return NotImplemented
        return _sub(a, self)

    def __mul__(self, other: object) -> "RationalNumber":
        # a/b * c/d == ac/bd
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _mul(self, b)

    def __rmul__(self, other: object) -> "RationalNumber":
        a = _coerce(other)
        if a is None:
            return NotImplemented
        return _mul(a, self)

    def __truediv__(self, other: object) -> "RationalNumber":
        # a/b / c/d == ad/bc
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _div(self, b)

    def __rtruediv__(self, other: object) -> "RationalNumber":
        a = _coerce(other)
        if a is None:
            return NotImplemented
        return _div(a, self)

    def __mod__(self, other: object) -> "RationalNumber":
        # a/b % c/d == (ad % bc)/bd
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _mod(self, b)

    def __rmod__(self, other: object) -> "RationalNumber":
        a = _coerce(other)
        if a is None:
            return NotImplemented
        return _mod(a, self)

    def __neg__(self) -> "RationalNumber":
        return ZERO - self

    def __pos__(self) -> "RationalNumber":
        return self

    def __abs__(self) -> "RationalNumber":
        return RationalNumber(abs(self._numerator), self._denominator)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        if self._denominator == b._denominator:
            return self._numerator == b._numerator
        return self._numerator * b._denominator == self._denominator * b._numerator

    def __hash__(self) -> int:
        # Целые значения хешируются как int, чтобы RationalNumber(2) == 2
        # давало одинаковый hash
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __lt__(self, other: object) -> bool:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _cross_compare(self, b) < 0

    def __le__(self, other: object) -> bool:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _cross_compare(self, b) <= 0

    def __gt__(self, other: object) -> bool:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _cross_compare(self, b) > 0

    def __ge__(self, other: object) -> bool:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _cross_compare(self, b) >= 0

    # -------------------------------------------------------------------------
    # Рендеринг
    # -------------------------------------------------------------------------

    def to_decimal_string(
        self, policy: DecimalRenderPolicy = DEFAULT_RENDER_POLICY
    ) -> str:
        """
        Десятичная запись "<целая часть>.<дробная часть>".

        Целая часть: деление numerator на denominator с усечением к нулю.
        Дробная часть: long division по |остатку| до нулевого остатка.
        Знак выводится явно, поэтому -1/2 даёт "-0.5", а не "0.5".
        Целые значения получают одну нулевую цифру: 2 → "2.0".

        Длина дробной части ограничена policy.max_fraction_digits. Нужное
        число цифр известно заранее: max(v2(d), v5(d)) для знаменателя вида
        2^a·5^b, бесконечность для любого другого.

        Args:
            policy: Политика длины дробной части

        Returns:
            Десятичная строка с '.' как разделителем

        Raises:
            DecimalExpansionError: если запись длиннее лимита и
                policy.on_overflow == RAISE

        Examples:
            >>> RationalNumber(5, 2).to_decimal_string()
            '2.5'
            >>> RationalNumber(-1, 8).to_decimal_string()
            '-0.125'
        """
        numerator, denominator = self._numerator, self._denominator
        whole = trunc_div(numerator, denominator)
        remainder = abs(trunc_mod(numerator, denominator))
        sign = "-" if numerator < 0 else ""

        limit = policy.max_fraction_digits
        required = terminating_fraction_digits(denominator)

        if required is None or required > limit:
            if policy.on_overflow is OverflowAction.RAISE:
                expansion = (
                    "non-terminating" if required is None else f"{required} digits"
                )
                raise DecimalExpansionError(
                    f"Decimal expansion of {self!r} is {expansion}, "
                    f"limit is {limit} fraction digits"
                )
            logger.debug(
                "Truncating decimal expansion of %r to %d fraction digits",
                self,
                limit,
            )

        if remainder == 0:
            return f"{sign}{int_to_digits(abs(whole))}.0"

        digits = []
        while remainder != 0 and len(digits) < limit:
            remainder *= 10
            digits.append(str(remainder // denominator))
            remainder %= denominator

        return f"{sign}{int_to_digits(abs(whole))}.{''.join(digits)}"

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"{int_to_digits(self._numerator)}, {int_to_digits(self._denominator)})"
        )

    # -------------------------------------------------------------------------
    # Pydantic integration
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Поле типа RationalNumber в Pydantic моделях.

        Принимает RationalNumber, int или десятичную строку; в JSON режиме
        сериализуется в десятичную строку.
        """
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_decimal_string(),
                info_arg=False,
                when_used="json",
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> "RationalNumber":
        if isinstance(value, RationalNumber):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_integer(value)
        raise ValueError(
            f"Expected RationalNumber, int or decimal string, got {type(value).__name__}"
        )


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO: Final[RationalNumber] = RationalNumber(0)
ONE: Final[RationalNumber] = RationalNumber(1)
MINUS_ONE: Final[RationalNumber] = RationalNumber(-1)

RationalNumber.ZERO = ZERO
RationalNumber.ONE = ONE
RationalNumber.MINUS_ONE = MINUS_ONE


# =============================================================================
# HELPERS
# =============================================================================


def terminating_fraction_digits(denominator: int) -> Optional[int]:
    """
    Число цифр в конечной десятичной записи дроби с данным знаменателем.

    Args:
        denominator: Положительный знаменатель сокращённой дроби

    Returns:
        max(v2, v5) если denominator == 2^v2 · 5^v5, иначе None
        (запись бесконечна)

    Examples:
        >>> terminating_fraction_digits(8)
        3
        >>> terminating_fraction_digits(3) is None
        True
    """
    twos = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    fives = 0
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        return None
    return max(twos, fives)


def _coerce(value: object) -> Optional[RationalNumber]:
    if isinstance(value, RationalNumber):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return RationalNumber.from_integer(value)
    return None


def _require_nonzero(divisor: RationalNumber) -> None:
    if divisor._numerator == 0:
        raise RationalZeroDivisionError("Division by zero rational")


def _add(a: RationalNumber, b: RationalNumber) -> RationalNumber:
    return RationalNumber(
        a._numerator * b._denominator + a._denominator * b._numerator,
        a._denominator * b._denominator,
    )


def _sub(a: RationalNumber, b: RationalNumber) -> RationalNumber:
    return RationalNumber(
        a._numerator * b._denominator - a._denominator * b._numerator,
        a._denominator * b._denominator,
    )


def _mul(a: RationalNumber, b: RationalNumber) -> RationalNumber:
    return RationalNumber(
        a._numerator * b._numerator,
        a._denominator * b._denominator,
    )


def _div(a: RationalNumber, b: RationalNumber) -> RationalNumber:
    _require_nonzero(b)
    return RationalNumber(
        a._numerator * b._denominator,
        a._denominator * b._numerator,
    )


def _mod(a: RationalNumber, b: RationalNumber) -> RationalNumber:
    _require_nonzero(b)
    return RationalNumber(
        trunc_mod(a._numerator * b._denominator, a._denominator * b._numerator),
        a._denominator * b._denominator,
    )


def _cross_compare(a: RationalNumber, b: RationalNumber) -> int:
    left = a._numerator * b._denominator
    right = a._denominator * b._numerator
    return (left > right) - (left < right)
