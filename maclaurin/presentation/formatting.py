"""
Formatting — текстовое представление чисел для карточки статистики и подсказок

Форматы совпадают с тем, что показывает веб-интерфейс:
- экспоненциальная запись без ведущих нулей в порядке: 3.60e-5, 1.23e+2
- фиксированная запись с заданным числом знаков
- кратчайшая запись шага: 0.01, 1, 0.00001, 1e-7
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Final

from maclaurin.core.domain.sweep import SweepResult

# Ниже этого порога максимальная ошибка показывается в экспоненциальной записи
EXPONENTIAL_THRESHOLD: Final[float] = 1e-4

# Ниже этого порога шаг показывается в экспоненциальной записи
STEP_EXPONENTIAL_THRESHOLD: Final[float] = 1e-6


def _format_non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def _strip_exponent(text: str) -> str:
    """'3.60e-05' → '3.60e-5', '1.00e+00' → '1.00e+0'."""
    mantissa, exponent = text.split("e")
    exp_value = int(exponent)
    sign = "-" if exp_value < 0 else "+"
    return f"{mantissa}e{sign}{abs(exp_value)}"


def format_exponential(value: float, digits: int) -> str:
    """
    Экспоненциальная запись с digits знаками мантиссы.

    Examples:
        >>> format_exponential(0.000036, 2)
        '3.60e-5'
        >>> format_exponential(123.4, 3)
        '1.234e+2'
    """
    if not math.isfinite(value):
        return _format_non_finite(value)
    return _strip_exponent(f"{value:.{digits}e}")


def format_fixed(value: float, digits: int) -> str:
    """
    Фиксированная запись с digits знаками после запятой.

    Examples:
        >>> format_fixed(6.38905609893065, 5)
        '6.38906'
    """
    if not math.isfinite(value):
        return _format_non_finite(value)
    return f"{value:.{digits}f}"


def format_max_error(max_error: float) -> str:
    """
    Максимальная ошибка: < 1e-4 → экспонента (2 знака), иначе фиксированная (5 знаков).

    Examples:
        >>> format_max_error(0.0000362)
        '3.62e-5'
        >>> format_max_error(0.00036)
        '0.00036'
    """
    if max_error < EXPONENTIAL_THRESHOLD:
        return format_exponential(max_error, 2)
    return format_fixed(max_error, 5)


def format_location(location: float) -> str:
    """Точка максимальной ошибки с 3 знаками."""
    return format_fixed(location, 3)


def format_step(step: float) -> str:
    """
    Кратчайшая запись шага.

    Examples:
        >>> format_step(0.01)
        '0.01'
        >>> format_step(1.0)
        '1'
        >>> format_step(0.00001)
        '0.00001'
        >>> format_step(1e-7)
        '1e-7'
    """
    if not math.isfinite(step):
        return _format_non_finite(step)
    if step.is_integer() and abs(step) < 1e21:
        return str(int(step))

    text = repr(step)
    if "e" not in text:
        return text
    if abs(step) >= STEP_EXPONENTIAL_THRESHOLD:
        return format(Decimal(text), "f")
    return _strip_exponent(text)


def format_value_tooltip(value: float) -> str:
    """Значение функции в подсказке графика (5 знаков)."""
    return format_fixed(value, 5)


def format_error_tooltip(error: float) -> str:
    """Ошибка в подсказке графика ошибок (экспонента, 3 знака)."""
    return format_exponential(error, 3)


# =============================================================================
# STATS CARD
# =============================================================================


@dataclass(frozen=True)
class StatsCard:
    """Тексты карточки статистики."""

    max_error: str
    max_error_location: str
    step: str

    @classmethod
    def from_result(cls, result: SweepResult) -> "StatsCard":
        return cls(
            max_error=format_max_error(result.max_error),
            max_error_location=format_location(result.max_error_location),
            step=format_step(result.step),
        )

    def lines(self) -> list[str]:
        return [
            f"Max |error|: {self.max_error}",
            f"At x = {self.max_error_location}",
            f"Step: {self.step}",
        ]
