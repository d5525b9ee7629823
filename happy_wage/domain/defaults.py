"""
defaults.py - 기본 입력값

초기 로드와 "리셋"이 같은 값을 쓰도록 기본값은 이 모듈에만 둔다.
상수는 읽기 전용이고, 팩토리 함수는 매번 새 객체를 반환한다.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from ..core.config import NEUTRAL_RATING
from .models import (
    Category,
    Frequency,
    HappinessFactors,
    HappinessWeights,
    PayPeriod,
    Position,
    SalaryData,
    TeamCostData,
    WorkItem,
)


# 카테고리별 기본 가중치 (합계 100)
DEFAULT_WEIGHTS: Mapping[Category, float] = MappingProxyType({
    Category.JOB: 25,
    Category.HEALTH: 20,
    Category.FAMILY: 20,
    Category.HOBBY: 20,
    Category.SNS: 15,
})

DEFAULT_TEAM_NAME = "Work team"

# (직급명, 인원수)
DEFAULT_POSITIONS: Tuple[Tuple[str, int], ...] = (
    ("Leader", 1),
    ("Middle", 1),
    ("Junior", 3),
)

DEFAULT_PAY_PERIOD = PayPeriod.MONTHLY

# 월급 (만 단위)
DEFAULT_SALARIES: Mapping[str, float] = MappingProxyType({
    "Leader": 55,
    "Middle": 40,
    "Junior": 20,
})

# (업무명, 주기, 1회 소요시간)
DEFAULT_WORK_ITEMS: Tuple[Tuple[str, Frequency, float], ...] = (
    ("Daily stand-up", Frequency.DAILY, 0.25),
    ("Weekly team meeting", Frequency.WEEKLY, 1.0),
    ("Monthly report", Frequency.MONTHLY, 4.0),
)


def default_factors() -> HappinessFactors:
    """모든 하위항목이 중립값(5.5)인 평점"""
    return HappinessFactors.from_dict({})


def default_weights() -> HappinessWeights:
    return HappinessWeights(**{c.value: DEFAULT_WEIGHTS[c] for c in Category})


def default_team_cost_data() -> TeamCostData:
    """기본 팀 (리더 1, 미들 1, 주니어 3 / 월급제)"""
    return TeamCostData(
        name=DEFAULT_TEAM_NAME,
        positions=[Position(name=name, count=count) for name, count in DEFAULT_POSITIONS],
        work_items=[
            WorkItem(name=name, frequency=frequency, hours=hours)
            for name, frequency, hours in DEFAULT_WORK_ITEMS
        ],
        salary_data=SalaryData(
            pay_period=DEFAULT_PAY_PERIOD,
            positions=dict(DEFAULT_SALARIES),
        ),
    )


__all__ = [
    "NEUTRAL_RATING",
    "DEFAULT_WEIGHTS",
    "DEFAULT_TEAM_NAME",
    "DEFAULT_POSITIONS",
    "DEFAULT_PAY_PERIOD",
    "DEFAULT_SALARIES",
    "DEFAULT_WORK_ITEMS",
    "default_factors",
    "default_weights",
    "default_team_cost_data",
]
