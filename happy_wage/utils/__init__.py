"""유틸리티 모듈"""
from .validators import (
    DataValidator,
    ValidationResult,
    ValidationIssue,
    ValidationSeverity,
    validate_happiness_input,
    validate_snapshot_keys,
)
from .helpers import (
    safe_divide,
    clamp,
    mean,
    population_std_dev,
    format_currency,
    format_percent,
    format_hours,
)

__all__ = [
    "DataValidator",
    "ValidationResult",
    "ValidationIssue",
    "ValidationSeverity",
    "validate_happiness_input",
    "validate_snapshot_keys",
    "safe_divide",
    "clamp",
    "mean",
    "population_std_dev",
    "format_currency",
    "format_percent",
    "format_hours",
]
