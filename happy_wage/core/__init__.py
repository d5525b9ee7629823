"""코어 모듈"""
from .exceptions import (
    HappyWageError,
    ValidationError,
    PreconditionError,
    ConfigurationError,
    DataLoadError,
    ErrorCodes,
)
from .config import (
    ScoringConfig,
    PayrollConfig,
    SynergyPair,
    SYNERGY_PAIRS,
    NEUTRAL_RATING,
    DEFAULT_SCORING,
    DEFAULT_PAYROLL,
    AppSettings,
    get_settings,
    reload_settings,
)
from .logging import setup_logger

__all__ = [
    # 예외
    "HappyWageError",
    "ValidationError",
    "PreconditionError",
    "ConfigurationError",
    "DataLoadError",
    "ErrorCodes",
    # 설정
    "ScoringConfig",
    "PayrollConfig",
    "SynergyPair",
    "SYNERGY_PAIRS",
    "NEUTRAL_RATING",
    "DEFAULT_SCORING",
    "DEFAULT_PAYROLL",
    "AppSettings",
    "get_settings",
    "reload_settings",
    "setup_logger",
]
