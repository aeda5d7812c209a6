"""Analysis — нормализация входа, проход по области и профиль сходимости."""

from .config import (
    DEFAULT_LOWER,
    DEFAULT_UPPER,
    FALLBACK_DEGREE,
    FALLBACK_STEP,
    LABEL_DECIMALS,
    SAMPLE_DECIMALS,
    SweepConfig,
)
from .convergence import convergence_profile, degree_for_tolerance
from .normalization import (
    coerce_bound,
    coerce_degree,
    coerce_step,
    normalize_inputs,
    parse_float,
    parse_int,
)
from .sweep import MAX_SAMPLES_DEFAULT, SweepAnalyzer, run_sweep

__all__ = [
    # Config
    "DEFAULT_LOWER",
    "DEFAULT_UPPER",
    "FALLBACK_DEGREE",
    "FALLBACK_STEP",
    "LABEL_DECIMALS",
    "SAMPLE_DECIMALS",
    "SweepConfig",
    # Normalization
    "parse_float",
    "parse_int",
    "coerce_bound",
    "coerce_degree",
    "coerce_step",
    "normalize_inputs",
    # Sweep
    "MAX_SAMPLES_DEFAULT",
    "SweepAnalyzer",
    "run_sweep",
    # Convergence
    "convergence_profile",
    "degree_for_tolerance",
]
