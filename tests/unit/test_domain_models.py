"""
Tests for Domain Models

Покрывает:
- SweepRequest: инварианты step > 0, degree >= 0, lower <= upper
- EvaluationResult: абсолютная ошибка
- ErrorSummary: свёртка максимума (strict greater, первая точка при равенстве)
- SweepResult: равная длина последовательностей, immutability,
  NaN/inf → None в контрактном словаре
"""

import math

import pytest
from pydantic import ValidationError

from maclaurin.core.domain import (
    ErrorSummary,
    EvaluationResult,
    SweepRequest,
    SweepResult,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_result_data():
    """Валидные данные SweepResult."""
    return {
        "samples": [-1.0, 0.0, 1.0],
        "labels": ["-1.00", "0.00", "1.00"],
        "true_values": [math.exp(-1.0), 1.0, math.e],
        "approx_values": [0.0, 1.0, 2.0],
        "errors": [math.exp(-1.0), 0.0, math.e - 2.0],
        "max_error": math.e - 2.0,
        "max_error_location": 1.0,
        "step": 1.0,
        "degree": 1,
    }


def _evaluation(x: float, error: float) -> EvaluationResult:
    return EvaluationResult(x=x, true_value=1.0 + error, approx_value=1.0, error=error)


# =============================================================================
# SWEEP REQUEST
# =============================================================================


class TestSweepRequest:
    """Тесты SweepRequest."""

    def test_valid_request(self):
        request = SweepRequest(lower=-2.0, upper=2.0, step=0.01, degree=9)
        assert request.substituted_fields == ()

    @pytest.mark.parametrize("step", [0.0, -0.5, float("nan"), float("inf")])
    def test_invalid_step_rejected(self, step):
        """Прямое создание с невалидным шагом → ValidationError."""
        with pytest.raises(ValidationError):
            SweepRequest(lower=-2.0, upper=2.0, step=step, degree=9)

    def test_negative_degree_rejected(self):
        with pytest.raises(ValidationError):
            SweepRequest(lower=-2.0, upper=2.0, step=0.01, degree=-1)

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValidationError, match="must not exceed upper bound"):
            SweepRequest(lower=2.0, upper=-2.0, step=0.01, degree=9)

    def test_frozen(self):
        request = SweepRequest(lower=-2.0, upper=2.0, step=0.01, degree=9)
        with pytest.raises(ValidationError):
            request.degree = 3

    def test_to_contract(self):
        request = SweepRequest(
            lower=-2.0, upper=2.0, step=0.01, degree=9, substituted_fields=("step",)
        )
        assert request.to_contract() == {
            "lower": -2.0,
            "upper": 2.0,
            "step": 0.01,
            "degree": 9,
            "substituted_fields": ["step"],
        }


# =============================================================================
# EVALUATION RESULT / ERROR SUMMARY
# =============================================================================


class TestEvaluationResult:
    def test_abs_error(self):
        assert _evaluation(0.5, -0.25).abs_error == 0.25


class TestErrorSummary:
    """Тесты свёртки ErrorSummary."""

    def test_defaults(self):
        summary = ErrorSummary()
        assert summary.max_error == 0.0
        assert summary.max_error_location == 0.0

    def test_strictly_greater_updates(self):
        summary = ErrorSummary().update(_evaluation(-1.0, 0.1))
        summary = summary.update(_evaluation(1.0, -0.3))
        assert summary.max_error == pytest.approx(0.3)
        assert summary.max_error_location == 1.0

    def test_tie_keeps_first_occurrence(self):
        """При равной |ошибке| остаётся первая (левая) точка."""
        summary = ErrorSummary().update(_evaluation(-1.0, 0.5))
        summary = summary.update(_evaluation(1.0, -0.5))
        assert summary.max_error_location == -1.0

    def test_zero_error_keeps_default_location(self):
        """Нулевая ошибка не обновляет точку (нужно строгое неравенство)."""
        summary = ErrorSummary().update(_evaluation(-2.0, 0.0))
        assert summary.max_error_location == 0.0

    def test_nan_never_updates(self):
        summary = ErrorSummary().update(_evaluation(1.0, float("nan")))
        assert summary == ErrorSummary()


# =============================================================================
# SWEEP RESULT
# =============================================================================


class TestSweepResult:
    """Тесты SweepResult."""

    def test_valid_result(self, valid_result_data):
        result = SweepResult(**valid_result_data)
        assert result.sample_count == 3
        assert result.summary == ErrorSummary(
            max_error=math.e - 2.0, max_error_location=1.0
        )

    def test_unequal_lengths_rejected(self, valid_result_data):
        """Последовательности разной длины → ValidationError."""
        valid_result_data["errors"] = valid_result_data["errors"][:2]
        with pytest.raises(ValidationError, match="differ in length"):
            SweepResult(**valid_result_data)

    def test_blank_label_rejected(self, valid_result_data):
        valid_result_data["labels"] = ["-1.00", "", "1.00"]
        with pytest.raises(ValidationError, match="empty strings"):
            SweepResult(**valid_result_data)

    def test_negative_max_error_rejected(self, valid_result_data):
        valid_result_data["max_error"] = -0.1
        with pytest.raises(ValidationError):
            SweepResult(**valid_result_data)

    def test_empty_sequences_allowed(self, valid_result_data):
        for key in ("samples", "labels", "true_values", "approx_values", "errors"):
            valid_result_data[key] = []
        assert SweepResult(**valid_result_data).sample_count == 0

    def test_frozen(self, valid_result_data):
        result = SweepResult(**valid_result_data)
        with pytest.raises(ValidationError):
            result.max_error = 0.0

    def test_json_round_trip(self, valid_result_data):
        result = SweepResult(**valid_result_data)
        assert SweepResult.model_validate_json(result.model_dump_json()) == result

    def test_samples_length_checked(self, valid_result_data):
        valid_result_data["samples"] = [-1.0, 0.0]
        with pytest.raises(ValidationError, match="differ in length"):
            SweepResult(**valid_result_data)

    def test_to_contract_replaces_non_finite_with_none(self, valid_result_data):
        """NaN и inf (результаты переполнения) → None, строгий JSON."""
        valid_result_data["approx_values"] = [math.nan, 1.0, -math.inf]
        valid_result_data["errors"] = [math.nan, 0.0, math.inf]
        valid_result_data["max_error"] = math.inf
        payload = SweepResult(**valid_result_data).to_contract()
        assert payload["approx_values"] == [None, 1.0, None]
        assert payload["errors"] == [None, 0.0, None]
        assert payload["max_error"] is None
        assert payload["true_values"] == valid_result_data["true_values"]
        assert payload["samples"] == [-1.0, 0.0, 1.0]
