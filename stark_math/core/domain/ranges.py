"""
Ranges — Слияние пересекающихся диапазонов

Вспомогательная утилита, поставляемая рядом с rational/hash ядром:
- MergeableRange: контракт диапазона (overlaps + merge)
- merge_overlapping_ranges: минимальный набор попарно непересекающихся
  диапазонов, покрывающий то же множество
- ClosedRange: замкнутый диапазон [start, end] с точными границами

Ядро от этого модуля не зависит.
"""

from typing import Iterable, Protocol, TypeVar

from pydantic import BaseModel, Field, field_validator

from stark_math.core.math.rational import RationalNumber

R = TypeVar("R", bound="MergeableRange")


# =============================================================================
# CONTRACT
# =============================================================================


class MergeableRange(Protocol):
    """Диапазон, умеющий проверять пересечение и сливаться с таким же."""

    def overlaps(self, other) -> bool:
        ...

    def merge(self, other):
        ...


def merge_overlapping_ranges(ranges: Iterable[R]) -> list[R]:
    """
    Слияние пересекающихся диапазонов.

    Берётся первый ожидающий диапазон; если он пересекается с другим
    ожидающим, оба заменяются результатом merge, который снова ставится
    в очередь. Иначе диапазон попадает в результат.

    Args:
        ranges: Диапазоны в произвольном порядке

    Returns:
        Попарно непересекающиеся диапазоны с тем же покрытием
    """
    pending = list(ranges)
    non_overlapping: list[R] = []

    while pending:
        current = pending.pop(0)
        for index, candidate in enumerate(pending):
            if current.overlaps(candidate):
                del pending[index]
                pending.append(current.merge(candidate))
                break
        else:
            non_overlapping.append(current)

    return non_overlapping


# =============================================================================
# CLOSED RANGE MODEL
# =============================================================================


class ClosedRange(BaseModel):
    """
    Замкнутый диапазон [start, end] с RationalNumber границами.

    Immutable модель (frozen=True). Диапазоны, касающиеся концами,
    считаются пересекающимися.
    """

    start: RationalNumber = Field(..., description="Нижняя граница (включительно)")
    end: RationalNumber = Field(..., description="Верхняя граница (включительно)")

    model_config = {"frozen": True}

    @field_validator("end")
    @classmethod
    def validate_end_not_before_start(cls, v: RationalNumber, info) -> RationalNumber:
        """Проверка, что end >= start"""
        if "start" in info.data:
            start = info.data["start"]
            if v < start:
                raise ValueError(f"end {v!r} must not be less than start {start!r}")
        return v

    @property
    def length(self) -> RationalNumber:
        return self.end - self.start

    def contains(self, value: RationalNumber) -> bool:
        return self.start <= value <= self.end

    def overlaps(self, other: "ClosedRange") -> bool:
        return self.start <= other.end and other.start <= self.end

    def merge(self, other: "ClosedRange") -> "ClosedRange":
        """
        Объединение двух пересекающихся диапазонов.

        Raises:
            ValueError: если диапазоны не пересекаются
        """
        if not self.overlaps(other):
            raise ValueError(f"Ranges {self} and {other} do not overlap")
        return ClosedRange(
            start=min(self.start, other.start),
            end=max(self.end, other.end),
        )

    def __str__(self) -> str:
        return f"[{self.start!r}, {self.end!r}]"
