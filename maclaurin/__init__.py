"""
maclaurin — Maclaurin series approximation of e^x with pointwise error analysis.

Public entry points:
- evaluate_series(x, degree): truncated series P_n(x)
- run_sweep(lower, upper, step, degree): sweep over a domain with error summary
"""

from maclaurin.analysis.normalization import normalize_inputs
from maclaurin.analysis.sweep import SweepAnalyzer, run_sweep
from maclaurin.core.domain.sweep import ErrorSummary, SweepRequest, SweepResult
from maclaurin.core.math.series import evaluate_series, factorial

__version__ = "0.1.0"

__all__ = [
    "evaluate_series",
    "factorial",
    "normalize_inputs",
    "run_sweep",
    "SweepAnalyzer",
    "SweepRequest",
    "SweepResult",
    "ErrorSummary",
]
