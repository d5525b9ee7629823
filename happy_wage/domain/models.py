"""
models.py - 도메인 모델

순수 파이썬 데이터 클래스. UI/저장소 의존성 없음.
엔진은 이 객체들을 읽기만 하고 새 결과 객체를 반환한다.
"""

import logging
import uuid
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..core.config import NEUTRAL_RATING
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


# ============================================================
# 행복도
# ============================================================

class Category(Enum):
    """행복도 카테고리 (선언 순서 = 동점 시 우선순위)"""
    JOB = "job"             # 일
    HEALTH = "health"       # 건강
    FAMILY = "family"       # 가족/연인
    HOBBY = "hobby"         # 취미/자기투자
    SNS = "sns"             # SNS 이용


@dataclass
class JobFactors:
    """일 카테고리 평점 (1~10)"""
    growth: float = NEUTRAL_RATING
    relationships: float = NEUTRAL_RATING
    balance: float = NEUTRAL_RATING


@dataclass
class HealthFactors:
    """건강 카테고리 평점"""
    sleep: float = NEUTRAL_RATING
    exercise: float = NEUTRAL_RATING
    diet: float = NEUTRAL_RATING


@dataclass
class FamilyFactors:
    """가족 카테고리 평점"""
    time: float = NEUTRAL_RATING
    communication: float = NEUTRAL_RATING
    future: float = NEUTRAL_RATING


@dataclass
class HobbyFactors:
    """취미 카테고리 평점"""
    enjoyment: float = NEUTRAL_RATING
    investment: float = NEUTRAL_RATING
    curiosity: float = NEUTRAL_RATING


@dataclass
class SnsFactors:
    """SNS 카테고리 평점"""
    balance: float = NEUTRAL_RATING
    info: float = NEUTRAL_RATING
    comparison: float = NEUTRAL_RATING


CATEGORY_RECORDS = {
    Category.JOB: JobFactors,
    Category.HEALTH: HealthFactors,
    Category.FAMILY: FamilyFactors,
    Category.HOBBY: HobbyFactors,
    Category.SNS: SnsFactors,
}


def _ratings_of(record) -> Dict[str, float]:
    """카테고리 레코드 → {하위항목: 평점} (None은 중립값으로 읽음)"""
    ratings = {}
    for f in fields(record):
        value = getattr(record, f.name)
        ratings[f.name] = NEUTRAL_RATING if value is None else float(value)
    return ratings


def _record_from_dict(record_cls, data: Optional[Dict[str, Any]]):
    data = data or {}
    kwargs = {}
    for f in fields(record_cls):
        value = data.get(f.name)
        kwargs[f.name] = NEUTRAL_RATING if value is None else float(value)
    return record_cls(**kwargs)


@dataclass
class HappinessFactors:
    """5개 카테고리 × 3개 하위항목 평점"""
    job: JobFactors = field(default_factory=JobFactors)
    health: HealthFactors = field(default_factory=HealthFactors)
    family: FamilyFactors = field(default_factory=FamilyFactors)
    hobby: HobbyFactors = field(default_factory=HobbyFactors)
    sns: SnsFactors = field(default_factory=SnsFactors)

    def ratings(self, category: Category) -> Dict[str, float]:
        """카테고리별 평점 딕셔너리"""
        return _ratings_of(getattr(self, category.value))

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {c.value: self.ratings(c) for c in Category}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HappinessFactors":
        """누락된 하위항목은 중립값(5.5)으로 채움"""
        data = data or {}
        return cls(**{
            c.value: _record_from_dict(CATEGORY_RECORDS[c], data.get(c.value))
            for c in Category
        })


@dataclass
class HappinessWeights:
    """카테고리별 가중치 (%) - 합계 100이 정상"""
    job: float
    health: float
    family: float
    hobby: float
    sns: float

    def weight(self, category: Category) -> float:
        return float(getattr(self, category.value))

    @property
    def total(self) -> float:
        return sum(self.weight(c) for c in Category)

    def is_balanced(self) -> bool:
        """가중치 합계가 100인지"""
        return abs(self.total - 100) < 1e-9

    def to_dict(self) -> Dict[str, float]:
        return {c.value: self.weight(c) for c in Category}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HappinessWeights":
        """누락된 가중치는 0으로 취급"""
        data = data or {}
        return cls(**{c.value: float(data.get(c.value) or 0) for c in Category})


@dataclass
class HappinessResult:
    """행복도 계산 결과"""
    total_score: float                      # 가중 평균 점수
    category_scores: Dict[Category, float]  # 카테고리별 점수 (10~100)
    adjusted_hourly_wage: float             # 행복도 반영 시급
    multiplier: float                       # 시급 배율 (0.6~1.8)
    happiness_bonus: float                  # 기본 시급 대비 증감률 (%)
    balance_bonus: float                    # 밸런스 보너스 (%)
    synergy_bonus: float                    # 시너지 보너스 (%)
    improvement_areas: List[Category]       # 개선 추천 카테고리 (순서 있음)
    target_score: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_score": self.total_score,
            "category_scores": {c.value: s for c, s in self.category_scores.items()},
            "adjusted_hourly_wage": self.adjusted_hourly_wage,
            "multiplier": self.multiplier,
            "happiness_bonus": self.happiness_bonus,
            "balance_bonus": self.balance_bonus,
            "synergy_bonus": self.synergy_bonus,
            "target_score": self.target_score,
            "improvement_areas": [c.value for c in self.improvement_areas],
        }


# ============================================================
# 팀 인건비
# ============================================================

class PayPeriod(Enum):
    """급여 기간 종류"""
    HOURLY = "hourly"       # 시급 (통화/시간)
    MONTHLY = "monthly"     # 월급 (만 단위/월)
    ANNUAL = "annual"       # 연봉 (만 단위/년)

    @classmethod
    def parse(cls, value: Union["PayPeriod", str, None]) -> Optional["PayPeriod"]:
        """알 수 없는 값은 None (0으로 계산됨)"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"알 수 없는 급여 기간: {value!r}")
            return None


class Frequency(Enum):
    """업무 반복 주기"""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @property
    def label(self) -> str:
        return FREQUENCY_LABELS[self]

    @classmethod
    def parse(cls, value: Union["Frequency", str, None]) -> Optional["Frequency"]:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"알 수 없는 반복 주기: {value!r}")
            return None


FREQUENCY_LABELS: Dict[Frequency, str] = {
    Frequency.DAILY: "Every day",
    Frequency.WEEKLY: "Every week",
    Frequency.MONTHLY: "Every month",
    Frequency.YEARLY: "Every year",
}


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


@dataclass
class Position:
    """직급 (이름은 자유 입력, 급여는 이름으로 연결됨)"""
    name: str
    count: int = 1                          # 인원수 (0 이상)
    id: str = field(default_factory=lambda: _new_id("pos"))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "count": self.count}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Position":
        return cls(
            id=data.get("id") or _new_id("pos"),
            name=data.get("name", ""),
            count=int(data.get("count", 0)),
        )


@dataclass
class SalaryData:
    """직급명 → 급여액

    금액 단위는 pay_period에 따름. period_overrides로 직급별 기간을 따로 지정 가능
    (예: 정규직은 월급, 업무위탁은 시급).
    """
    pay_period: Optional[PayPeriod] = PayPeriod.MONTHLY
    positions: Dict[str, float] = field(default_factory=dict)
    period_overrides: Dict[str, PayPeriod] = field(default_factory=dict)

    def amount_for(self, position_name: str) -> float:
        """미설정 급여는 0"""
        return float(self.positions.get(position_name) or 0)

    def period_for(self, position_name: str) -> Optional[PayPeriod]:
        return self.period_overrides.get(position_name, self.pay_period)

    def has_salary(self, position_name: str) -> bool:
        """급여가 설정되어 있는지 (0은 미설정으로 취급)"""
        return position_name in self.positions and self.amount_for(position_name) != 0

    def rename_position(self, old_name: str, new_name: str, keep_old: bool = False) -> "SalaryData":
        """직급명 변경 시 급여 항목을 새 이름으로 옮긴 사본 반환

        keep_old=True면 이전 이름의 항목을 남겨 두고 복사한다
        (같은 이름을 쓰는 다른 직급이 남아 있는 경우).
        """
        positions = dict(self.positions)
        overrides = dict(self.period_overrides)
        if old_name == new_name:
            return replace(self, positions=positions, period_overrides=overrides)

        if old_name in self.positions:
            positions[new_name] = self.positions[old_name]
            if not keep_old:
                del positions[old_name]

        if old_name in self.period_overrides:
            overrides[new_name] = self.period_overrides[old_name]
            if not keep_old:
                del overrides[old_name]

        return replace(self, positions=positions, period_overrides=overrides)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pay_period": self.pay_period.value if self.pay_period else None,
            "positions": dict(self.positions),
            "period_overrides": {k: v.value for k, v in self.period_overrides.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SalaryData":
        """스냅샷 로드

        직급별 {"type": ..., "amount": ...} 형식(구버전 저장 데이터)도 허용한다.
        """
        data = data or {}
        pay_period = PayPeriod.parse(data.get("pay_period", PayPeriod.MONTHLY.value))

        positions: Dict[str, float] = {}
        overrides: Dict[str, PayPeriod] = {}
        for name, value in (data.get("positions") or {}).items():
            if isinstance(value, dict):
                positions[name] = float(value.get("amount") or 0)
                period = PayPeriod.parse(value.get("type"))
                if period is not None and period != pay_period:
                    overrides[name] = period
            else:
                positions[name] = float(value or 0)

        for name, value in (data.get("period_overrides") or {}).items():
            period = PayPeriod.parse(value)
            if period is not None:
                overrides[name] = period

        return cls(pay_period=pay_period, positions=positions, period_overrides=overrides)


@dataclass
class WorkItem:
    """반복 업무"""
    name: str
    frequency: Optional[Frequency]
    hours: float                            # 1회 소요시간 (> 0)
    id: str = field(default_factory=lambda: _new_id("work"))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "frequency": self.frequency.value if self.frequency else None,
            "hours": self.hours,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkItem":
        return cls(
            id=data.get("id") or _new_id("work"),
            name=data.get("name", ""),
            frequency=Frequency.parse(data.get("frequency", Frequency.MONTHLY.value)),
            hours=float(data.get("hours") or 0),
        )


@dataclass
class TeamCostData:
    """팀 인건비 입력 (호출자 소유, 엔진은 변경하지 않음)"""
    name: str
    positions: List[Position] = field(default_factory=list)
    work_items: List[WorkItem] = field(default_factory=list)
    salary_data: SalaryData = field(default_factory=SalaryData)
    id: str = field(default_factory=lambda: _new_id("team"))
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    # 법정복리비 / 간접비 (급여 집계에만 반영)
    # 비율이 None이면 엔진의 PayrollConfig 값을 사용
    include_welfare_cost: bool = False
    welfare_rate: Optional[float] = None
    include_overhead_cost: bool = False
    overhead_rate: Optional[float] = None

    def rename_position(self, position_id: str, new_name: str) -> "TeamCostData":
        """직급명 변경 + 급여 재연결된 사본 반환

        같은 이름의 다른 직급이 있으면 급여를 옮기지 않고 복사한다.

        Raises:
            ValidationError: 다른 직급이 이미 new_name을 사용 중
        """
        target = next((p for p in self.positions if p.id == position_id), None)
        others = [p for p in self.positions if p.id != position_id]

        salary_data = replace(
            self.salary_data,
            positions=dict(self.salary_data.positions),
            period_overrides=dict(self.salary_data.period_overrides),
        )
        if target is not None and target.name != new_name:
            if any(p.name == new_name for p in others):
                raise ValidationError(
                    f"position name already in use: {new_name}",
                    field="name",
                    value=new_name,
                )
            shared = any(p.name == target.name for p in others)
            salary_data = self.salary_data.rename_position(target.name, new_name, keep_old=shared)

        positions = [
            replace(p, name=new_name) if p.id == position_id else p
            for p in self.positions
        ]

        return replace(
            self,
            positions=positions,
            work_items=list(self.work_items),
            salary_data=salary_data,
            updated_at=datetime.now(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "positions": [p.to_dict() for p in self.positions],
            "work_items": [w.to_dict() for w in self.work_items],
            "salary_data": self.salary_data.to_dict(),
            "include_welfare_cost": self.include_welfare_cost,
            "welfare_rate": self.welfare_rate,
            "include_overhead_cost": self.include_overhead_cost,
            "overhead_rate": self.overhead_rate,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamCostData":
        return cls(
            id=data.get("id") or _new_id("team"),
            name=data.get("name", ""),
            positions=[Position.from_dict(p) for p in data.get("positions") or []],
            work_items=[WorkItem.from_dict(w) for w in data.get("work_items") or []],
            salary_data=SalaryData.from_dict(data.get("salary_data") or {}),
            include_welfare_cost=bool(data.get("include_welfare_cost", False)),
            welfare_rate=_optional_float(data.get("welfare_rate")),
            include_overhead_cost=bool(data.get("include_overhead_cost", False)),
            overhead_rate=_optional_float(data.get("overhead_rate")),
            created_at=datetime.fromisoformat(data["created_at"]) if data.get("created_at") else datetime.now(),
            updated_at=datetime.fromisoformat(data["updated_at"]) if data.get("updated_at") else datetime.now(),
        )


@dataclass
class PositionBreakdown:
    """직급별 내역"""
    position_name: str
    count: int
    annual_salary_per_person: float
    total_annual_salary: float
    hourly_rate: float


@dataclass
class WorkItemBreakdown:
    """업무별 내역"""
    work_item_name: str
    frequency_label: str
    hours_per_execution: float
    annual_executions: int
    annual_hours: float
    cost_per_execution: float
    annual_cost: float


@dataclass
class CostCalculationResult:
    """팀 인건비 계산 결과

    total_annual_cost는 업무별 비용 합계. 직급별 급여 합계와는 별개.
    """
    total_annual_cost: float
    total_annual_hours: float
    total_monthly_hours: float
    average_hourly_rate: float
    position_breakdown: List[PositionBreakdown] = field(default_factory=list)
    work_item_breakdown: List[WorkItemBreakdown] = field(default_factory=list)

    # 급여 집계 (참고용)
    base_salary_cost: float = 0.0
    welfare_cost: float = 0.0
    overhead_cost: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_annual_cost": self.total_annual_cost,
            "total_annual_hours": self.total_annual_hours,
            "total_monthly_hours": self.total_monthly_hours,
            "average_hourly_rate": self.average_hourly_rate,
            "position_breakdown": [vars(p).copy() for p in self.position_breakdown],
            "work_item_breakdown": [vars(w).copy() for w in self.work_item_breakdown],
            "base_salary_cost": self.base_salary_cost,
            "welfare_cost": self.welfare_cost,
            "overhead_cost": self.overhead_cost,
        }
