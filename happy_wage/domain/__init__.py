"""도메인 모듈 - 순수 계산 로직"""
from .models import (
    Category,
    JobFactors,
    HealthFactors,
    FamilyFactors,
    HobbyFactors,
    SnsFactors,
    HappinessFactors,
    HappinessWeights,
    HappinessResult,
    PayPeriod,
    Frequency,
    FREQUENCY_LABELS,
    Position,
    SalaryData,
    WorkItem,
    TeamCostData,
    PositionBreakdown,
    WorkItemBreakdown,
    CostCalculationResult,
)
from .happiness import (
    HappinessEngine,
    score_description,
    improvement_suggestion,
)
from .team_cost import TeamCostEngine, ANNUAL_EXECUTIONS
from .defaults import (
    DEFAULT_WEIGHTS,
    default_factors,
    default_weights,
    default_team_cost_data,
)

__all__ = [
    # 행복도 모델
    "Category",
    "JobFactors",
    "HealthFactors",
    "FamilyFactors",
    "HobbyFactors",
    "SnsFactors",
    "HappinessFactors",
    "HappinessWeights",
    "HappinessResult",
    # 인건비 모델
    "PayPeriod",
    "Frequency",
    "FREQUENCY_LABELS",
    "Position",
    "SalaryData",
    "WorkItem",
    "TeamCostData",
    "PositionBreakdown",
    "WorkItemBreakdown",
    "CostCalculationResult",
    # 로직
    "HappinessEngine",
    "score_description",
    "improvement_suggestion",
    "TeamCostEngine",
    "ANNUAL_EXECUTIONS",
    # 기본값
    "DEFAULT_WEIGHTS",
    "default_factors",
    "default_weights",
    "default_team_cost_data",
]
