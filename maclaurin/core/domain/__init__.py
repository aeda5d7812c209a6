"""
Domain models and value objects.

Contains the sweep entities: SweepRequest, EvaluationResult, ErrorSummary, SweepResult.
"""

from maclaurin.core.domain.sweep import (
    ErrorSummary,
    EvaluationResult,
    SweepRequest,
    SweepResult,
)

__all__ = [
    "SweepRequest",
    "EvaluationResult",
    "ErrorSummary",
    "SweepResult",
]
