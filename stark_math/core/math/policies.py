"""
Policies — Явные ограничения для рендеринга и хеширования

Immutable Pydantic модели, задающие границы вычислений, которые без
ограничений могут не завершиться:
- DecimalRenderPolicy: длина дробной части при рендеринге rational
  (например, 1/3 даёт бесконечную десятичную запись)
- HashLimits: глубина рекурсии и число узлов для structural hash

Ограничения передаются явно как аргументы; превышение приводит к
exception, если политика не разрешает усечение явно.
"""

from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field


# =============================================================================
# DEFAULTS
# =============================================================================

# Максимальное число цифр дробной части при рендеринге
DEFAULT_MAX_FRACTION_DIGITS: Final[int] = 1024

# Максимальная глубина вложенности для structural hash
# Каждый уровень занимает несколько кадров стека, поэтому лимит
# держится заметно ниже sys.getrecursionlimit()
DEFAULT_MAX_HASH_DEPTH: Final[int] = 128


# =============================================================================
# ENUMS
# =============================================================================


class OverflowAction(str, Enum):
    """Действие при превышении max_fraction_digits"""

    RAISE = "raise"
    TRUNCATE = "truncate"


# =============================================================================
# POLICY MODELS
# =============================================================================


class DecimalRenderPolicy(BaseModel):
    """
    Политика рендеринга rational в десятичную строку.

    Immutable модель (frozen=True).

    RAISE: значение, чья запись длиннее max_fraction_digits (в том числе
    любая бесконечная периодическая дробь), вызывает DecimalExpansionError.
    TRUNCATE: возвращаются первые max_fraction_digits цифр без округления.
    """

    max_fraction_digits: int = Field(
        default=DEFAULT_MAX_FRACTION_DIGITS,
        gt=0,
        description="Максимальное число цифр после разделителя",
    )
    on_overflow: OverflowAction = Field(
        default=OverflowAction.RAISE,
        description="Действие при превышении лимита (raise/truncate)",
    )

    model_config = {"frozen": True}


class HashLimits(BaseModel):
    """
    Ограничения обхода для structural hash.

    Immutable модель (frozen=True).

    max_depth ограничивает вложенность (корень имеет глубину 0),
    max_nodes ограничивает общее число посещённых значений (None = без лимита).
    """

    max_depth: int = Field(
        default=DEFAULT_MAX_HASH_DEPTH,
        gt=0,
        description="Максимальная глубина вложенности",
    )
    max_nodes: Optional[int] = Field(
        default=None,
        gt=0,
        description="Максимальное число посещённых значений (None = без лимита)",
    )

    model_config = {"frozen": True}


DEFAULT_RENDER_POLICY: Final[DecimalRenderPolicy] = DecimalRenderPolicy()

DEFAULT_HASH_LIMITS: Final[HashLimits] = HashLimits()
