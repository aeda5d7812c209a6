"""
Contract Validation Module

Модуль для валидации JSON контрактов sweep_request / sweep_result.
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    SchemaLoader,
    SweepRequestValidator,
    SweepResultValidator,
    validate_sweep_request,
    validate_sweep_result,
)

__all__ = [
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SweepRequestValidator",
    "SweepResultValidator",
    # Functions
    "validate_sweep_request",
    "validate_sweep_result",
]
