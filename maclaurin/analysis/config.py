"""
Sweep configuration: reference domain bounds, fallbacks and rounding.
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# DEFAULTS
# =============================================================================

# Референсная область определения
DEFAULT_LOWER: Final[float] = -2.0
DEFAULT_UPPER: Final[float] = 2.0

# Значения, подставляемые вместо невалидного ввода
FALLBACK_STEP: Final[float] = 0.01
FALLBACK_DEGREE: Final[int] = 9

# Округление точки области (маскирует дрейф накопления шага)
SAMPLE_DECIMALS: Final[int] = 4

# Знаки после запятой в метках точек
LABEL_DECIMALS: Final[int] = 2


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SweepConfig:
    """Конфигурация прохода по области.

    Границы используются, когда вызывающий код не передал свои
    (или передал невалидные). fallback_* подставляются вместо
    невалидных step/degree.
    """

    lower: float = DEFAULT_LOWER
    upper: float = DEFAULT_UPPER
    fallback_step: float = FALLBACK_STEP
    fallback_degree: int = FALLBACK_DEGREE
    sample_decimals: int = SAMPLE_DECIMALS
    label_decimals: int = LABEL_DECIMALS
