"""
Sweep — Sampling & Error Analyzer

Проход по дискретизированной области [lower, upper] с шагом step:
в каждой точке вычисляются e^x, P_n(x) и знаковая ошибка e^x - P_n(x),
ошибки сворачиваются в ErrorSummary (максимум |ошибки| и его точка).

Политика итерации:
1. Аккумулятор начинается с lower; проход прекращается, когда
   аккумулятор > upper (или достигнут max_samples)
2. Точка = аккумулятор, округлённый до sample_decimals (half → +inf),
   используется в вычислениях и в метке
3. Следующий аккумулятор = точка + step: округление применяется к самому
   аккумулятору, дрейф не накапливается больше одного сложения
4. Шаг меньше половины разрешения округления не сдвигает точку, такой
   проход обрывается на max_samples

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. run_sweep никогда не бросает исключений: вход нормализуется заранее
2. Все последовательности одной длины и соответствуют точкам поэлементно
3. Максимум обновляется только при строго большей ошибке (первая точка
   побеждает при равенстве), начальное значение (0.0, 0.0)
4. Повторный вызов с теми же аргументами даёт тот же результат
"""

import logging
from typing import Any, Final, Iterator, Mapping

from maclaurin.analysis.config import SweepConfig
from maclaurin.analysis.normalization import normalize_inputs
from maclaurin.core.domain.sweep import (
    ErrorSummary,
    EvaluationResult,
    SweepRequest,
    SweepResult,
)
from maclaurin.core.math.numerical_safeguards import round_half_up, safe_exp
from maclaurin.core.math.series import evaluate_series

logger = logging.getLogger(__name__)


# Предел числа точек за один проход (защита от шага ниже разрешения округления)
MAX_SAMPLES_DEFAULT: Final[int] = 1_000_000


# =============================================================================
# ANALYZER
# =============================================================================


class SweepAnalyzer:
    """Sampling & Error Analyzer.

    Не хранит состояние между вызовами: каждый run() пересчитывает
    всё с нуля. Конфигурация задаёт границы по умолчанию, fallback
    значения и округление.
    """

    def __init__(
        self,
        config: SweepConfig | None = None,
        max_samples: int = MAX_SAMPLES_DEFAULT,
    ):
        """
        Args:
            config: конфигурация прохода (default: SweepConfig())
            max_samples: предел числа точек за один проход
        """
        if max_samples < 1:
            raise ValueError(f"max_samples must be positive, got {max_samples}")

        self.config = config or SweepConfig()
        self.max_samples = max_samples

    def normalize(self, raw: Mapping[str, Any]) -> SweepRequest:
        """Validate-or-default сырых параметров с конфигурацией анализатора."""
        return normalize_inputs(raw, self.config)

    def iter_samples(self, request: SweepRequest) -> Iterator[float]:
        """
        Округлённые точки области в порядке неубывания.

        Args:
            request: нормализованный запрос

        Yields:
            Точки x, округлённые до sample_decimals. Граница проверяется
            до округления, поэтому последняя точка может превышать upper
            не более чем на половину разрешения округления
        """
        accumulator = request.lower
        emitted = 0
        while accumulator <= request.upper:
            if emitted >= self.max_samples:
                logger.warning(
                    "Sweep truncated at %d samples (step=%r over [%r, %r])",
                    self.max_samples,
                    request.step,
                    request.lower,
                    request.upper,
                )
                return
            sample = round_half_up(accumulator, self.config.sample_decimals)
            yield sample
            emitted += 1
            accumulator = sample + request.step

    def iter_evaluations(self, request: SweepRequest) -> Iterator[EvaluationResult]:
        """
        Результаты вычислений в каждой точке области.

        Yields:
            EvaluationResult(x, e^x, P_n(x), e^x - P_n(x))
        """
        for x in self.iter_samples(request):
            true_value = safe_exp(x)
            approx_value = evaluate_series(x, request.degree)
            yield EvaluationResult(
                x=x,
                true_value=true_value,
                approx_value=approx_value,
                error=true_value - approx_value,
            )

    def format_label(self, x: float) -> str:
        """Метка точки с label_decimals знаками после запятой."""
        return f"{x:.{self.config.label_decimals}f}"

    def run(self, request: SweepRequest) -> SweepResult:
        """
        Проход по области нормализованного запроса.

        Args:
            request: нормализованный запрос (см. normalize)

        Returns:
            SweepResult с последовательностями и сводкой ошибки
        """
        samples: list[float] = []
        labels: list[str] = []
        true_values: list[float] = []
        approx_values: list[float] = []
        errors: list[float] = []
        summary = ErrorSummary()

        for evaluation in self.iter_evaluations(request):
            samples.append(evaluation.x)
            labels.append(self.format_label(evaluation.x))
            true_values.append(evaluation.true_value)
            approx_values.append(evaluation.approx_value)
            errors.append(evaluation.error)
            summary = summary.update(evaluation)

        logger.debug(
            "Sweep finished: %d samples, degree=%d, max_error=%r at x=%r",
            len(labels),
            request.degree,
            summary.max_error,
            summary.max_error_location,
        )

        return SweepResult(
            samples=samples,
            labels=labels,
            true_values=true_values,
            approx_values=approx_values,
            errors=errors,
            max_error=summary.max_error,
            max_error_location=summary.max_error_location,
            step=request.step,
            degree=request.degree,
        )

    def run_raw(self, raw: Mapping[str, Any]) -> SweepResult:
        """Нормализация сырых параметров и проход."""
        return self.run(self.normalize(raw))


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def run_sweep(
    lower: Any,
    upper: Any,
    step: Any,
    degree: Any,
    config: SweepConfig | None = None,
) -> SweepResult:
    """
    Проход по области с подстановкой значений по умолчанию.

    Невалидные step/degree заменяются на 0.01 / 9 (или fallback из config),
    исключения не бросаются.

    Args:
        lower: нижняя граница области
        upper: верхняя граница области
        step: шаг дискретизации
        degree: степень усечения ряда
        config: конфигурация (default: SweepConfig())

    Returns:
        SweepResult

    Examples:
        >>> result = run_sweep(-2, 2, 1, 0)
        >>> result.labels
        ['-2.00', '-1.00', '0.00', '1.00', '2.00']
        >>> result.approx_values
        [1.0, 1.0, 1.0, 1.0, 1.0]
    """
    analyzer = SweepAnalyzer(config)
    return analyzer.run_raw(
        {"lower": lower, "upper": upper, "step": step, "degree": degree}
    )
