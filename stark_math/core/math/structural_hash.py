"""
Structural Hash — Детерминированный int32 digest произвольного значения

Модуль вычисляет content-derived ключ для кэширования и дедупликации
составных значений:
- Примитивы (None, числа numbers.Number, str, bytes) хешируются напрямую
- Последовательности и коллекции: сумма вкладов элементов
- Записи (dataclass, pydantic, namedtuple, __slots__, __dict__): сумма вкладов
  полей в порядке объявления
- Объекты без полей (date, datetime и другие C-типы): аргументы __reduce_ex__

АЛГОРИТМ:
    acc = seed                                   # произвольная точность
    для каждого элемента/поля i:
        c_i = wrap32(offset * hash(e_i))         # 32-битное переполнение
        acc += c_i * (i + 1)                     # упорядоченные значения
        acc += c_i                               # set / mapping
    result = acc mod INT32_MAX                   # truncating mod

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Одинаковые значения дают одинаковый hash (в том числе между процессами)
2. Порядок элементов последовательности влияет на результат
3. Порядок итерации set/dict не влияет на результат
4. Циклы обнаруживаются → CyclicStructureError
5. Глубина и число узлов ограничены HashLimits → HashLimitExceeded
"""

import copyreg
import dataclasses
import hashlib
from collections.abc import Iterable, Mapping, Set
from numbers import Number
from typing import Any, Final

from pydantic import BaseModel

from stark_math.core.math.integer_ops import (
    INT32_MAX,
    mul_wrap_int32,
    trunc_mod,
    validate_int32,
    wrap_int32,
)
from stark_math.core.math.policies import DEFAULT_HASH_LIMITS, HashLimits
from stark_math.infrastructure.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_HASH_SEED: Final[int] = 3

DEFAULT_HASH_OFFSET: Final[int] = 7

# Значения, которые хешируются без рекурсии
PRIMITIVE_TYPES: Final[tuple[type, ...]] = (
    type(None),
    bool,
    int,
    float,
    complex,
    # Decimal, Fraction и другие зарегистрированные числовые типы
    Number,
    str,
    bytes,
    bytearray,
)

_TEXT_DIGEST_SIZE: Final[int] = 4


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CyclicStructureError(ValueError):
    """Значение содержит ссылку на собственного предка."""
    pass


class HashLimitExceeded(RecursionError):
    """Превышена глубина вложенности или число узлов из HashLimits."""
    pass


# =============================================================================
# PRIMITIVES
# =============================================================================


def primitive_hash(value: Any) -> int:
    """
    Hash примитивного значения без рекурсии.

    Числа используют встроенный hash Python (детерминирован между
    процессами), суженный до int32. Для str/bytes встроенный hash
    солится на каждый процесс, поэтому берутся первые 4 байта BLAKE2b.

    Args:
        value: Значение одного из PRIMITIVE_TYPES

    Returns:
        int32
    """
    if value is None:
        return 0
    if isinstance(value, str):
        return _digest_int32(value.encode("utf-8", "surrogatepass"))
    if isinstance(value, (bytes, bytearray)):
        return _digest_int32(bytes(value))
    return wrap_int32(hash(value))


def _digest_int32(data: bytes) -> int:
    digest = hashlib.blake2b(data, digest_size=_TEXT_DIGEST_SIZE).digest()
    return int.from_bytes(digest, "little", signed=True)


# =============================================================================
# RECORD FIELDS
# =============================================================================


def record_fields(value: Any) -> list[Any]:
    """
    Значения полей записи в порядке объявления.

    Порядок проверки:
    1. dataclass → dataclasses.fields()
    2. pydantic модель → model_fields
    3. namedtuple → _fields
    4. __slots__ по MRO (от базового класса к производному, приватные
       имена __x читаются как _Cls__x), затем __dict__

    Классы (type) полей не имеют.
    """
    if isinstance(value, type):
        return []
    if dataclasses.is_dataclass(value):
        return [getattr(value, f.name) for f in dataclasses.fields(value)]
    if isinstance(value, BaseModel):
        return [getattr(value, name) for name in type(value).model_fields]
    if isinstance(value, tuple) and hasattr(type(value), "_fields"):
        return [getattr(value, name) for name in value._fields]

    values = []
    for klass in reversed(type(value).__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            attribute = _slot_attribute(klass, name)
            if hasattr(value, attribute):
                values.append(getattr(value, attribute))
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        values.extend(instance_dict.values())
    return values


def _slot_attribute(klass: type, name: str) -> str:
    # __x в __slots__ класса Cls хранится под именем _Cls__x
    if name.startswith("__") and not name.endswith("__"):
        owner = klass.__name__.lstrip("_")
        if owner:
            return f"_{owner}{name}"
    return name


def reduced_state(value: Any) -> list[Any]:
    """
    Содержимое объекта без полей по протоколу pickle.

    date, datetime, timedelta и другие типы, реализованные на C, не имеют
    ни __dict__, ни __slots__; их значение доступно только через
    __reduce_ex__(2): аргументы конструктора и state. Класс, который
    copyreg.__newobj__ получает первым аргументом, в результат не входит.

    Returns:
        Аргументы и state (если есть); [] для классов и объектов с __dict__

    Raises:
        TypeError: если тип не поддерживает pickle
    """
    if isinstance(value, type) or hasattr(value, "__dict__"):
        return []

    reduced = value.__reduce_ex__(2)
    if isinstance(reduced, str):
        # Синглтоны (Ellipsis, builtin функции) сводятся к глобальному имени
        return [reduced]

    constructor, args = reduced[0], reduced[1]
    if constructor in (copyreg.__newobj__, copyreg.__newobj_ex__):
        args = args[1:]
    values = list(args)
    state = reduced[2] if len(reduced) > 2 else None
    if state is not None:
        values.append(state)
    return values


# =============================================================================
# WALKER
# =============================================================================


class _HashWalker:
    """Рекурсивный обход с защитой от циклов и ограничением ресурсов."""

    def __init__(self, seed: int, offset: int, limits: HashLimits):
        self._seed = seed
        self._offset = offset
        self._limits = limits
        self._active: set[int] = set()
        self._nodes = 0

    def hash_value(self, value: Any, depth: int) -> int:
        self._count_node()

        if isinstance(value, PRIMITIVE_TYPES):
            return primitive_hash(value)

        if depth > self._limits.max_depth:
            logger.warning(
                "Structural hash depth limit %d exceeded", self._limits.max_depth
            )
            raise HashLimitExceeded(
                f"Nesting depth exceeds max_depth={self._limits.max_depth}"
            )

        key = id(value)
        if key in self._active:
            logger.warning(
                "Cycle detected in structural hash input at depth %d", depth
            )
            raise CyclicStructureError(
                f"Value of type {type(value).__name__} refers to one of its ancestors"
            )

        self._active.add(key)
        try:
            accumulator = self._seed
            fields = record_fields(value)
            if isinstance(value, Iterable):
                accumulator += self._fold_elements(value, depth)
            elif not fields:
                fields = reduced_state(value)
            accumulator += self._fold_ordered(fields, depth)
        finally:
            self._active.discard(key)

        return trunc_mod(accumulator, INT32_MAX)

    def _fold_elements(self, value: Iterable, depth: int) -> int:
        if isinstance(value, Mapping):
            return self._fold_unordered(value.items(), depth)
        if isinstance(value, Set):
            return self._fold_unordered(value, depth)
        return self._fold_ordered(value, depth)

    def _fold_ordered(self, values: Iterable, depth: int) -> int:
        total = 0
        for index, element in enumerate(values):
            total += self._contribution(element, depth) * (index + 1)
        return total

    def _fold_unordered(self, values: Iterable, depth: int) -> int:
        total = 0
        for element in values:
            total += self._contribution(element, depth)
        return total

    def _contribution(self, element: Any, depth: int) -> int:
        return mul_wrap_int32(self._offset, self.hash_value(element, depth + 1))

    def _count_node(self) -> None:
        self._nodes += 1
        max_nodes = self._limits.max_nodes
        if max_nodes is not None and self._nodes > max_nodes:
            logger.warning("Structural hash node limit %d exceeded", max_nodes)
            raise HashLimitExceeded(f"Value graph exceeds max_nodes={max_nodes}")


# =============================================================================
# PUBLIC API
# =============================================================================


def compute_hash(
    value: Any,
    seed: int = DEFAULT_HASH_SEED,
    offset: int = DEFAULT_HASH_OFFSET,
    limits: HashLimits = DEFAULT_HASH_LIMITS,
) -> int:
    """
    Structural hash произвольного (ацикличного) значения.

    Args:
        value: Примитив, коллекция или запись
        seed: Начальное значение аккумулятора (int32)
        offset: Множитель вклада каждой части (int32)
        limits: Ограничения глубины и числа узлов

    Returns:
        Знаковое 32-битное целое

    Raises:
        CyclicStructureError: если значение ссылается на своего предка
        HashLimitExceeded: если превышены limits.max_depth или limits.max_nodes
        TypeError / ValueError: если seed или offset не int32
        TypeError: если объект без полей не поддерживает pickle

    Examples:
        >>> compute_hash(5)
        5
        >>> compute_hash([1, 2])
        38
        >>> compute_hash([2, 1])
        31
    """
    seed = validate_int32(seed, "seed")
    offset = validate_int32(offset, "offset")
    return _HashWalker(seed, offset, limits).hash_value(value, 0)
