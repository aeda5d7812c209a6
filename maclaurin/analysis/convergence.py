"""
Convergence — профиль ошибки ряда по степеням

|e^x - P_n(x)| для n = 0..max_degree в фиксированной точке x.
Монотонность по n не гарантируется (для x < 0 слагаемые знакопеременные),
но при |x| <= 2 ошибка при n = 20 заведомо меньше, чем при n = 0.
"""

from itertools import accumulate

from maclaurin.core.math.numerical_safeguards import (
    safe_exp,
    validate_non_negative,
    validate_positive,
)
from maclaurin.core.math.series import series_terms


def convergence_profile(x: float, max_degree: int) -> list[float]:
    """
    Абсолютная ошибка усечения для каждой степени 0..max_degree.

    Частичные суммы накапливаются за один проход, поэтому значение
    для степени n совпадает с |safe_exp(x) - evaluate_series(x, n)|.

    Args:
        x: Точка вычисления
        max_degree: Наибольшая степень (>= 0)

    Returns:
        Список длины max_degree + 1

    Raises:
        ValueError: Если max_degree < 0
    """
    validate_non_negative(max_degree, "max_degree")

    true_value = safe_exp(x)
    return [
        abs(true_value - partial_sum)
        for partial_sum in accumulate(series_terms(x, max_degree))
    ]


def degree_for_tolerance(x: float, tolerance: float, max_degree: int = 170) -> int | None:
    """
    Наименьшая степень n <= max_degree, для которой |e^x - P_n(x)| <= tolerance.

    Returns:
        Степень или None, если допуск не достигнут
    """
    validate_positive(tolerance, "tolerance")

    for degree, error in enumerate(convergence_profile(x, max_degree)):
        if error <= tolerance:
            return degree
    return None
