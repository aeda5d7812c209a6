"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf проверки
2. Степени и exp без OverflowError
3. Округление half-up
4. Валидацию параметров
"""

import math

import pytest

from maclaurin.core.math.numerical_safeguards import (
    is_valid_float,
    round_half_up,
    safe_exp,
    safe_pow,
    validate_non_negative,
    validate_positive,
)

# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)
        assert is_valid_float(5e-324)

    def test_nan_and_inf_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


# =============================================================================
# ТЕСТЫ БЕЗОПАСНЫХ СТЕПЕНЕЙ
# =============================================================================


class TestSafePow:
    """Тесты для safe_pow"""

    def test_regular_powers(self) -> None:
        """Обычные степени совпадают с math.pow"""
        assert safe_pow(2.0, 10) == 1024.0
        assert safe_pow(-2.0, 3) == -8.0
        assert safe_pow(1.5, 2) == pytest.approx(2.25)

    def test_zero_to_zero_is_one(self) -> None:
        """0^0 = 1 (нулевой член ряда)"""
        assert safe_pow(0.0, 0) == 1.0

    def test_overflow_positive_inf(self) -> None:
        """Переполнение → +inf вместо OverflowError"""
        assert safe_pow(10.0, 400) == math.inf

    def test_overflow_sign_for_negative_base(self) -> None:
        """Знак переполнения зависит от чётности степени"""
        assert safe_pow(-10.0, 401) == -math.inf
        assert safe_pow(-10.0, 400) == math.inf


class TestSafeExp:
    """Тесты для safe_exp"""

    def test_regular_values(self) -> None:
        """Обычные значения совпадают с math.exp"""
        assert safe_exp(0.0) == 1.0
        assert safe_exp(2.0) == math.exp(2.0)

    def test_overflow_to_inf(self) -> None:
        """Переполнение → inf"""
        assert safe_exp(1000.0) == math.inf

    def test_underflow_to_zero(self) -> None:
        """Большой отрицательный аргумент → 0.0 без ошибок"""
        assert safe_exp(-1000.0) == 0.0


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundHalfUp:
    """Тесты для round_half_up"""

    def test_rounds_to_four_decimals(self) -> None:
        """Округление до 4 знаков"""
        assert round_half_up(1.23456789, 4) == 1.2346
        assert round_half_up(1.23454, 4) == 1.2345

    def test_masks_accumulated_drift(self) -> None:
        """Дрейф накопления шага убирается"""
        drifted = 0.1 + 0.2
        assert drifted != 0.3
        assert round_half_up(drifted, 4) == 0.3

    def test_half_rounds_towards_positive_infinity(self) -> None:
        """Половина округляется в сторону +inf (в отличие от round())"""
        assert round_half_up(2.5, 0) == 3.0
        assert round_half_up(-2.5, 0) == -2.0
        assert round(2.5) == 2

    def test_non_finite_passthrough(self) -> None:
        """NaN/Inf возвращаются без изменений"""
        assert round_half_up(math.inf, 4) == math.inf
        assert math.isnan(round_half_up(float("nan"), 4))

    def test_negative_decimals_raises(self) -> None:
        """Отрицательное число знаков → ValueError"""
        with pytest.raises(ValueError, match="decimals must be non-negative"):
            round_half_up(1.0, -1)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты для validate_positive / validate_non_negative"""

    def test_validate_positive_accepts(self) -> None:
        """Положительные значения проходят"""
        validate_positive(0.01, "step")

    def test_validate_positive_rejects_zero(self) -> None:
        """Ноль не положителен"""
        with pytest.raises(ValueError, match="step must be positive"):
            validate_positive(0.0, "step")

    def test_validate_positive_rejects_nan(self) -> None:
        """NaN отклоняется"""
        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_positive(float("nan"), "step")

    def test_validate_non_negative(self) -> None:
        """Ноль допустим, отрицательные нет"""
        validate_non_negative(0, "degree")
        with pytest.raises(ValueError, match="degree must be non-negative"):
            validate_non_negative(-1, "degree")
