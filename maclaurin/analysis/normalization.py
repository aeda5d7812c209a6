"""
Input Normalization — validate-or-default для параметров прохода

Сырые параметры (как правило, значения полей формы: строки, числа, None)
приводятся к SweepRequest. Невалидные значения не приводят к ошибке,
а заменяются значениями по умолчанию из SweepConfig:

- step: не число / не конечное / <= 0 → fallback_step (0.01)
- degree: не число / отрицательное / нецелое число → fallback_degree (9)
- lower/upper: не число / не конечное → границы из конфигурации;
  lower > upper → обе границы из конфигурации

Разбор строк повторяет семантику полей формы: берётся числовой префикс
("0.05abc" → 0.05, "9.7" → 9 для степени), строка без префикса невалидна.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. normalize_inputs никогда не бросает исключений
2. Результат всегда удовлетворяет step > 0, degree >= 0, lower <= upper
3. Функция чистая: одинаковый вход → одинаковый SweepRequest
"""

import logging
import math
import re
from typing import Any, Mapping, Optional

from maclaurin.analysis.config import SweepConfig
from maclaurin.core.domain.sweep import SweepRequest

logger = logging.getLogger(__name__)


# Числовой префикс строки (как parseFloat / parseInt полей формы)
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


# =============================================================================
# РАЗБОР ЗНАЧЕНИЙ
# =============================================================================


def parse_float(raw: Any) -> Optional[float]:
    """
    Разбор вещественного значения.

    Args:
        raw: int, float или строка; bool и прочие типы невалидны

    Returns:
        float (может быть NaN/Inf для числового входа) или None

    Examples:
        >>> parse_float("0.05abc")
        0.05
        >>> parse_float(" -1e-2")
        -0.01
        >>> parse_float("abc") is None
        True
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw)
    if isinstance(raw, str):
        match = _FLOAT_PREFIX.match(raw)
        if match is None:
            return None
        return float(match.group(1))
    return None


def parse_int(raw: Any) -> Optional[int]:
    """
    Разбор целого значения.

    Строки разбираются по целому префиксу ("9.7" → 9). Числа float
    принимаются только целые (3.0 → 3); 9.7, NaN и Inf невалидны.

    Examples:
        >>> parse_int("12")
        12
        >>> parse_int("9.7")
        9
        >>> parse_int(9.7) is None
        True
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isfinite(raw) and raw.is_integer():
            return int(raw)
        return None
    if isinstance(raw, str):
        match = _INT_PREFIX.match(raw)
        if match is None:
            return None
        return int(match.group(1))
    return None


# =============================================================================
# VALIDATE-OR-DEFAULT
# =============================================================================


def coerce_step(raw: Any, fallback: float) -> tuple[float, bool]:
    """
    Шаг дискретизации или fallback.

    Returns:
        (step, substituted): substituted=True если подставлен fallback
    """
    step = parse_float(raw)
    if step is None or not math.isfinite(step) or step <= 0:
        return (fallback, True)
    return (step, False)


def coerce_degree(raw: Any, fallback: int) -> tuple[int, bool]:
    """
    Степень усечения или fallback.

    Returns:
        (degree, substituted): substituted=True если подставлен fallback
    """
    degree = parse_int(raw)
    if degree is None or degree < 0:
        return (fallback, True)
    return (degree, False)


def coerce_bound(raw: Any, fallback: float) -> tuple[float, bool]:
    """Граница области или fallback (для не числа и NaN/Inf)."""
    bound = parse_float(raw)
    if bound is None or not math.isfinite(bound):
        return (fallback, True)
    return (bound, False)


def normalize_inputs(
    raw: Mapping[str, Any], config: SweepConfig | None = None
) -> SweepRequest:
    """
    Нормализация сырых параметров прохода.

    Args:
        raw: Mapping с ключами lower, upper, step, degree (любые могут
            отсутствовать, отсутствие равносильно невалидному значению)
        config: Конфигурация с границами и fallback значениями

    Returns:
        SweepRequest, удовлетворяющий всем инвариантам

    Examples:
        >>> normalize_inputs({"step": -1, "degree": float("nan")}).step
        0.01
        >>> normalize_inputs({"degree": "4"}).degree
        4
    """
    config = config or SweepConfig()
    substituted: list[str] = []

    lower, lower_substituted = coerce_bound(raw.get("lower"), config.lower)
    upper, upper_substituted = coerce_bound(raw.get("upper"), config.upper)
    if lower > upper:
        logger.debug(
            "lower bound %r exceeds upper bound %r, using configured bounds", lower, upper
        )
        lower, upper = config.lower, config.upper
        lower_substituted = upper_substituted = True

    step, step_substituted = coerce_step(raw.get("step"), config.fallback_step)
    degree, degree_substituted = coerce_degree(raw.get("degree"), config.fallback_degree)

    for name, flag in (
        ("lower", lower_substituted),
        ("upper", upper_substituted),
        ("step", step_substituted),
        ("degree", degree_substituted),
    ):
        if flag:
            substituted.append(name)

    if step_substituted or degree_substituted:
        logger.debug(
            "Substituted fallback inputs: step=%r -> %r, degree=%r -> %r",
            raw.get("step"),
            step,
            raw.get("degree"),
            degree,
        )

    return SweepRequest(
        lower=lower,
        upper=upper,
        step=step,
        degree=degree,
        substituted_fields=tuple(substituted),
    )
