"""
Sweep — Модели прогона по области определения

Модели данных для одного прохода (sweep) по дискретизированной области:
- SweepRequest: нормализованные входные параметры (границы, шаг, степень)
- EvaluationResult: результат в одной точке (эфемерный)
- ErrorSummary: свёртка максимальной абсолютной ошибки
- SweepResult: выходные последовательности и сводка ошибки

Immutable Pydantic модели (frozen=True).
Совместимы с JSON Schema (core/contracts/schema/sweep_*.json).
"""

import math
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# SWEEP REQUEST
# =============================================================================


class SweepRequest(BaseModel):
    """
    Нормализованный запрос на прогон.

    Immutable модель (frozen=True). Создаётся normalize_inputs и
    гарантирует инварианты: step > 0, degree >= 0, lower <= upper.
    Прямое создание с невалидными значениями → ValidationError.
    """

    # Область определения
    lower: float = Field(..., allow_inf_nan=False, description="Нижняя граница области")
    upper: float = Field(..., allow_inf_nan=False, description="Верхняя граница области")
    step: float = Field(..., gt=0, allow_inf_nan=False, description="Шаг дискретизации")

    # Ряд
    degree: int = Field(..., ge=0, description="Степень усечения ряда Маклорена")

    # Диагностика нормализации
    substituted_fields: tuple[str, ...] = Field(
        default=(), description="Поля, заменённые значениями по умолчанию"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds_order(self) -> "SweepRequest":
        """Проверка порядка границ: lower <= upper."""
        if self.lower > self.upper:
            raise ValueError(
                f"lower bound {self.lower} must not exceed upper bound {self.upper}"
            )
        return self

    def to_contract(self) -> dict:
        """Словарь для проверки JSON Schema (sweep_request.json)."""
        return {
            "lower": self.lower,
            "upper": self.upper,
            "step": self.step,
            "degree": self.degree,
            "substituted_fields": list(self.substituted_fields),
        }


# =============================================================================
# EVALUATION RESULT
# =============================================================================


@dataclass(frozen=True)
class EvaluationResult:
    """Результат в одной точке области."""

    x: float  # Округлённая точка
    true_value: float  # e^x
    approx_value: float  # P_n(x)
    error: float  # true_value - approx_value

    @property
    def abs_error(self) -> float:
        return abs(self.error)


# =============================================================================
# ERROR SUMMARY
# =============================================================================


class ErrorSummary(BaseModel):
    """
    Сводка ошибки по всем точкам прохода.

    Начальное значение (0.0, 0.0). Обновляется только при строго большей
    абсолютной ошибке: при равенстве остаётся первая (левая) точка.
    """

    max_error: float = Field(default=0.0, ge=0, description="Максимальная |e^x - P_n(x)|")
    max_error_location: float = Field(
        default=0.0, description="Точка, в которой достигнут максимум"
    )

    model_config = {"frozen": True}

    def update(self, evaluation: EvaluationResult) -> "ErrorSummary":
        """
        Свёртка очередной точки.

        Returns:
            Новый ErrorSummary если |error| строго больше текущего максимума,
            иначе self (NaN никогда не обновляет максимум)
        """
        abs_error = evaluation.abs_error
        if abs_error > self.max_error:
            return ErrorSummary(max_error=abs_error, max_error_location=evaluation.x)
        return self


# =============================================================================
# SWEEP RESULT
# =============================================================================


class SweepResult(BaseModel):
    """
    Результат прохода по области.

    Пять последовательностей одинаковой длины с поэлементным соответствием
    точкам области, плюс сводка ошибки и фактически использованные
    step/degree (после подстановки значений по умолчанию).
    """

    # Последовательности
    samples: list[float] = Field(..., description="Округлённые точки области")
    labels: list[str] = Field(..., description="Точки, отформатированные с 2 знаками")
    true_values: list[float] = Field(..., description="e^x в каждой точке")
    approx_values: list[float] = Field(..., description="P_n(x) в каждой точке")
    errors: list[float] = Field(..., description="e^x - P_n(x) в каждой точке")

    # Сводка ошибки
    max_error: float = Field(..., ge=0, description="Максимальная абсолютная ошибка")
    max_error_location: float = Field(..., description="Точка максимальной ошибки")

    # Фактические параметры
    step: float = Field(..., gt=0, description="Использованный шаг")
    degree: int = Field(..., ge=0, description="Использованная степень")

    model_config = {"frozen": True}

    @field_validator("labels")
    @classmethod
    def validate_labels_not_blank(cls, v: list[str]) -> list[str]:
        """Метки точек не могут быть пустыми строками."""
        for label in v:
            if not label:
                raise ValueError("labels must not contain empty strings")
        return v

    @model_validator(mode="after")
    def validate_equal_lengths(self) -> "SweepResult":
        """Все последовательности должны иметь одинаковую длину."""
        lengths = {
            "samples": len(self.samples),
            "labels": len(self.labels),
            "true_values": len(self.true_values),
            "approx_values": len(self.approx_values),
            "errors": len(self.errors),
        }
        if len(set(lengths.values())) != 1:
            raise ValueError(f"sweep sequences differ in length: {lengths}")
        return self

    @property
    def sample_count(self) -> int:
        return len(self.labels)

    @property
    def summary(self) -> ErrorSummary:
        return ErrorSummary(
            max_error=self.max_error, max_error_location=self.max_error_location
        )

    def to_contract(self) -> dict:
        """
        Словарь для проверки JSON Schema (sweep_result.json).

        NaN и ±inf (допустимые результаты переполнения) заменяются на None,
        чтобы словарь сериализовался в строгий JSON.
        """
        payload = self.model_dump(mode="python")
        for key in ("true_values", "approx_values", "errors"):
            payload[key] = [_finite_or_none(value) for value in payload[key]]
        payload["max_error"] = _finite_or_none(payload["max_error"])
        return payload


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None
