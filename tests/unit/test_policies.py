"""
Тесты для Pydantic моделей политик

Проверяет:
1. Значения по умолчанию
2. Constraints (gt=0)
3. Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from stark_math.core.math.policies import (
    DEFAULT_HASH_LIMITS,
    DEFAULT_MAX_FRACTION_DIGITS,
    DEFAULT_MAX_HASH_DEPTH,
    DEFAULT_RENDER_POLICY,
    DecimalRenderPolicy,
    HashLimits,
    OverflowAction,
)


class TestDecimalRenderPolicy:
    """Тесты для DecimalRenderPolicy"""

    def test_defaults(self) -> None:
        assert DEFAULT_RENDER_POLICY.max_fraction_digits == DEFAULT_MAX_FRACTION_DIGITS
        assert DEFAULT_RENDER_POLICY.on_overflow is OverflowAction.RAISE

    def test_overflow_action_from_string(self) -> None:
        policy = DecimalRenderPolicy(on_overflow="truncate")
        assert policy.on_overflow is OverflowAction.TRUNCATE

    def test_unknown_overflow_action_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DecimalRenderPolicy(on_overflow="round")

    @pytest.mark.parametrize("digits", [0, -1])
    def test_non_positive_digits_rejected(self, digits: int) -> None:
        with pytest.raises(ValidationError):
            DecimalRenderPolicy(max_fraction_digits=digits)

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_RENDER_POLICY.max_fraction_digits = 5


class TestHashLimits:
    """Тесты для HashLimits"""

    def test_defaults(self) -> None:
        assert DEFAULT_HASH_LIMITS.max_depth == DEFAULT_MAX_HASH_DEPTH
        assert DEFAULT_HASH_LIMITS.max_nodes is None

    def test_custom_limits(self) -> None:
        limits = HashLimits(max_depth=4, max_nodes=100)
        assert limits.max_depth == 4
        assert limits.max_nodes == 100

    def test_non_positive_limits_rejected(self) -> None:
        with pytest.raises(ValidationError):
            HashLimits(max_depth=0)
        with pytest.raises(ValidationError):
            HashLimits(max_nodes=0)

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_HASH_LIMITS.max_depth = 1
