"""
team_cost.py - 팀 인건비 계산

직급별 급여를 연봉으로 환산하고, 반복 업무를 연간 횟수/시간으로 환산해
업무별 비용을 집계한다. 입력 TeamCostData는 변경하지 않는다.

주의: 총 연간 비용은 업무별 비용(팀 평균 시급 기준)의 합계이며,
직급별 급여 합계를 더한 값이 아니다.
"""

import logging
from typing import Iterable, List, Optional, Union

from .models import (
    CostCalculationResult,
    Frequency,
    PayPeriod,
    Position,
    PositionBreakdown,
    SalaryData,
    TeamCostData,
    WorkItem,
    WorkItemBreakdown,
)
from ..core.config import PayrollConfig, DEFAULT_PAYROLL
from ..utils.helpers import safe_divide
from ..utils.validators import ValidationResult

logger = logging.getLogger(__name__)


# 주기별 연간 실행 횟수
ANNUAL_EXECUTIONS = {
    Frequency.DAILY: 365,
    Frequency.WEEKLY: 52,
    Frequency.MONTHLY: 12,
    Frequency.YEARLY: 1,
}

# 검증 메시지
MSG_NO_POSITIONS = "no positions configured"
MSG_NO_WORK_ITEMS = "no work items configured"
MSG_SALARY_MISSING = "salary missing for positions: {names}"


class TeamCostEngine:
    """팀 인건비 계산기"""

    def __init__(self, config: Optional[PayrollConfig] = None):
        self.config = config or DEFAULT_PAYROLL

    # --------------------------------------------------------
    # 급여 환산
    # --------------------------------------------------------

    def to_annual(self, amount: float, period: Union[PayPeriod, str, None]) -> float:
        """급여 → 연봉 (통화 단위)

        - 시급: × 8시간 × 250일
        - 월급: × 10,000 × 12개월 (입력은 만 단위)
        - 연봉: × 10,000
        - 그 외: 0
        """
        cfg = self.config
        kind = PayPeriod.parse(period)

        if kind == PayPeriod.HOURLY:
            return amount * cfg.annual_working_hours
        if kind == PayPeriod.MONTHLY:
            return amount * cfg.currency_unit * cfg.months_per_year
        if kind == PayPeriod.ANNUAL:
            return amount * cfg.currency_unit
        return 0

    def to_hourly_rate(self, annual_amount: float) -> float:
        """연봉 ÷ (8시간 × 250일)"""
        return annual_amount / self.config.annual_working_hours

    def annual_salary_for(self, position: Position, salary_data: SalaryData) -> float:
        """1인당 연봉 (미설정이면 0)"""
        return self.to_annual(
            salary_data.amount_for(position.name),
            salary_data.period_for(position.name),
        )

    # --------------------------------------------------------
    # 업무 환산
    # --------------------------------------------------------

    @staticmethod
    def annual_executions(frequency: Union[Frequency, str, None]) -> int:
        """주기 → 연간 실행 횟수 (알 수 없는 주기는 0)"""
        kind = Frequency.parse(frequency)
        return ANNUAL_EXECUTIONS.get(kind, 0)

    def annual_hours(self, item: WorkItem) -> float:
        return item.hours * self.annual_executions(item.frequency)

    # --------------------------------------------------------
    # 집계
    # --------------------------------------------------------

    def average_hourly_rate(self, positions: Iterable[Position], salary_data: SalaryData) -> float:
        """인원수 가중 평균 시급

        급여 미설정 직급은 시급 0으로 인원수에만 포함. 총 인원 0이면 0.
        """
        total_rate = 0.0
        total_count = 0
        for position in positions:
            rate = self.to_hourly_rate(self.annual_salary_for(position, salary_data))
            total_rate += rate * position.count
            total_count += position.count
        return safe_divide(total_rate, total_count)

    def calculate(self, team: TeamCostData) -> CostCalculationResult:
        """팀 인건비 계산 실행

        Args:
            team: 팀 입력 데이터

        Returns:
            CostCalculationResult: 직급별/업무별 내역 및 합계
        """
        # 1. 직급별 내역
        position_breakdown: List[PositionBreakdown] = []
        for position in team.positions:
            per_person = self.annual_salary_for(position, team.salary_data)
            position_breakdown.append(PositionBreakdown(
                position_name=position.name,
                count=position.count,
                annual_salary_per_person=per_person,
                total_annual_salary=per_person * position.count,
                hourly_rate=self.to_hourly_rate(per_person),
            ))

        # 2. 팀 평균 시급
        average_rate = self.average_hourly_rate(team.positions, team.salary_data)

        # 3. 업무별 내역
        work_item_breakdown: List[WorkItemBreakdown] = []
        for item in team.work_items:
            executions = self.annual_executions(item.frequency)
            cost_per_execution = item.hours * average_rate
            work_item_breakdown.append(WorkItemBreakdown(
                work_item_name=item.name,
                frequency_label=item.frequency.label if item.frequency else "",
                hours_per_execution=item.hours,
                annual_executions=executions,
                annual_hours=item.hours * executions,
                cost_per_execution=cost_per_execution,
                annual_cost=cost_per_execution * executions,
            ))

        # 4. 합계 (업무별 비용 기준)
        total_annual_cost = sum(w.annual_cost for w in work_item_breakdown)
        total_annual_hours = sum(w.annual_hours for w in work_item_breakdown)

        # 5. 급여 집계 (참고용)
        base_salary_cost = sum(p.total_annual_salary for p in position_breakdown)
        welfare_rate = team.welfare_rate if team.welfare_rate is not None else self.config.welfare_rate
        overhead_rate = team.overhead_rate if team.overhead_rate is not None else self.config.overhead_rate
        welfare_cost = base_salary_cost * welfare_rate if team.include_welfare_cost else 0.0
        overhead_cost = base_salary_cost * overhead_rate if team.include_overhead_cost else 0.0

        logger.debug(
            f"팀 인건비 계산: {team.name} - 평균 시급 {average_rate:,.0f}, "
            f"연간 {total_annual_hours:,.1f}h / {total_annual_cost:,.0f}"
        )

        return CostCalculationResult(
            total_annual_cost=total_annual_cost,
            total_annual_hours=total_annual_hours,
            total_monthly_hours=total_annual_hours / 12,
            average_hourly_rate=average_rate,
            position_breakdown=position_breakdown,
            work_item_breakdown=work_item_breakdown,
            base_salary_cost=base_salary_cost,
            welfare_cost=welfare_cost,
            overhead_cost=overhead_cost,
        )

    # --------------------------------------------------------
    # 검증
    # --------------------------------------------------------

    def check(self, team: TeamCostData) -> ValidationResult:
        """필드 정보가 포함된 검증 결과"""
        result = ValidationResult()

        if not team.positions:
            result.add_error("positions", MSG_NO_POSITIONS)

        if not team.work_items:
            result.add_error("work_items", MSG_NO_WORK_ITEMS)

        # 0원 급여는 미설정과 동일하게 취급
        missing = [p.name for p in team.positions if not team.salary_data.has_salary(p.name)]
        if missing:
            result.add_error("salary_data", MSG_SALARY_MISSING.format(names=", ".join(missing)))

        for item in team.work_items:
            if item.hours <= 0:
                result.add_warning("work_items", f"work item '{item.name}' has no hours set")

        return result

    def validate(self, team: TeamCostData) -> List[str]:
        """검증 오류 메시지 목록 (빈 목록 = 유효)"""
        return list(self.check(team).errors)

    def try_calculate(self, team: TeamCostData) -> Optional[CostCalculationResult]:
        """검증 오류가 있으면 None"""
        errors = self.validate(team)
        if errors:
            logger.debug(f"팀 인건비 계산 생략: {errors}")
            return None
        return self.calculate(team)


# 기본 설정 엔진의 함수형 별칭
_default_engine = TeamCostEngine()
to_annual = _default_engine.to_annual
to_hourly_rate = _default_engine.to_hourly_rate
annual_executions = TeamCostEngine.annual_executions
annual_hours = _default_engine.annual_hours
average_hourly_rate = _default_engine.average_hourly_rate
calculate_team_cost = _default_engine.calculate
validate_team_cost_data = _default_engine.validate
