"""
Numerical Safeguards — Safe Float Primitives

Модуль обеспечивает предсказуемое поведение float-операций ядра:
- Проверка валидности float (не NaN, не Inf)
- Возведение в степень и exp без OverflowError (переполнение → ±inf)
- Округление half-up до заданного числа знаков
- Явная валидация параметров (ValueError по запросу вызывающего)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. safe_pow / safe_exp никогда не бросают исключений для float входов
2. Переполнение даёт ±inf, неопределённость (inf/inf) даёт NaN
3. Округление детерминировано: половина округляется в сторону +inf
4. Все операции детерминированы и воспроизводимы
"""

import math


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# БЕЗОПАСНЫЕ СТЕПЕНИ
# =============================================================================


def safe_pow(base: float, exponent: int) -> float:
    """
    Возведение в целую степень с переполнением в ±inf вместо OverflowError.

    math.pow бросает OverflowError при выходе за диапазон double,
    здесь результат заменяется на бесконечность с корректным знаком.

    Args:
        base: Основание (любой float)
        exponent: Неотрицательный целый показатель

    Returns:
        base ** exponent, либо ±inf при переполнении

    Examples:
        >>> safe_pow(2.0, 10)
        1024.0
        >>> safe_pow(0.0, 0)
        1.0
        >>> safe_pow(10.0, 400)
        inf
        >>> safe_pow(-10.0, 401)
        -inf
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        # Знак отрицательный только для отрицательного основания и нечётной степени
        if base < 0 and exponent % 2 == 1:
            return -math.inf
        return math.inf


def safe_exp(x: float) -> float:
    """
    e^x с переполнением в inf вместо OverflowError.

    Args:
        x: Показатель степени

    Returns:
        math.exp(x), либо inf при переполнении

    Examples:
        >>> safe_exp(0.0)
        1.0
        >>> safe_exp(1000.0)
        inf
    """
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: float, decimals: int) -> float:
    """
    Округление до заданного числа знаков после запятой (half → +inf).

    Алгоритм:
        floor(value * 10^decimals + 0.5) / 10^decimals

    Отличается от встроенного round() (banker's rounding) на
    отрицательных половинах: round_half_up(-2.5, 0) == -2.0.

    Args:
        value: Значение для округления
        decimals: Число знаков после запятой (>= 0)

    Returns:
        Округлённое значение; NaN/Inf возвращаются без изменений

    Raises:
        ValueError: Если decimals < 0

    Examples:
        >>> round_half_up(1.23456789, 4)
        1.2346
        >>> round_half_up(-1.99999999, 4)
        -2.0
        >>> round_half_up(2.5, 0)
        3.0
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    if not is_valid_float(value):
        return value

    factor = 10.0**decimals
    return math.floor(value * factor + 0.5) / factor


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение конечное и строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение конечное и неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
