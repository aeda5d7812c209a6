"""
Series — Truncated Maclaurin Series of e^x

Модуль вычисляет частичную сумму ряда Маклорена для экспоненты:

    P_n(x) = Σ_{i=0..n} x^i / i!

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. P_0(x) == 1.0 для любого конечного x
2. P_n(0) == 1.0 для любого n >= 0
3. Факториал считается во float: factorial(n) == inf для n >= 171
4. Переполнение не бросает исключений: x^i → ±inf, inf/inf → NaN

Переполнение при большом degree является допустимым граничным результатом,
ядро не пытается его детектировать или подавлять.
"""

import math
from typing import Final

from maclaurin.core.math.numerical_safeguards import safe_pow

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Наибольшее n, для которого n! конечен в double (170! ≈ 7.26e306)
FACTORIAL_MAX_FINITE_N: Final[int] = 170


# Мемо-таблица факториалов: _FACTORIALS[n] == float(n!), n <= FACTORIAL_MAX_FINITE_N
_FACTORIALS: list[float] = [1.0, 1.0]


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(n: int) -> float:
    """
    Факториал во float с мемоизацией.

    factorial(0) = factorial(1) = 1
    factorial(n) = n * factorial(n - 1), n >= 2

    В отличие от math.factorial результат float, поэтому для
    n > FACTORIAL_MAX_FINITE_N возвращается inf, а не большое целое.

    Args:
        n: Неотрицательное целое

    Returns:
        n! как float (inf при переполнении)

    Raises:
        ValueError: Если n < 0

    Examples:
        >>> factorial(0)
        1.0
        >>> factorial(5)
        120.0
        >>> factorial(171)
        inf
    """
    if n < 0:
        raise ValueError(f"factorial is undefined for negative n, got {n}")
    if n > FACTORIAL_MAX_FINITE_N:
        return math.inf

    while len(_FACTORIALS) <= n:
        k = len(_FACTORIALS)
        _FACTORIALS.append(_FACTORIALS[k - 1] * k)

    return _FACTORIALS[n]


# =============================================================================
# SERIES EVALUATOR
# =============================================================================


def evaluate_series(x: float, degree: int) -> float:
    """
    Частичная сумма ряда Маклорена e^x до степени degree включительно.

    Args:
        x: Точка вычисления (конечный float)
        degree: Степень усечения (целое >= 0). Поведение для
            отрицательных значений не определено: вызывающий код
            обязан нормализовать вход (см. normalize_inputs)

    Returns:
        P_degree(x). Для очень больших degree и |x| может быть inf или NaN

    Examples:
        >>> evaluate_series(1.5, 0)
        1.0
        >>> evaluate_series(0.0, 12)
        1.0
        >>> round(evaluate_series(2.0, 9), 4)
        7.3887
    """
    result = 0.0
    for i in range(degree + 1):
        result += safe_pow(x, i) / factorial(i)
    return result


def series_terms(x: float, degree: int) -> list[float]:
    """
    Отдельные слагаемые x^i / i! для i = 0..degree.

    sum(series_terms(x, n)) совпадает с evaluate_series(x, n)
    с точностью до порядка суммирования (здесь он тот же).
    """
    return [safe_pow(x, i) / factorial(i) for i in range(degree + 1)]

