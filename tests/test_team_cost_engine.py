"""
test_team_cost_engine.py - TeamCostEngine 단위 테스트

1. 급여 환산 (시급/월급/연봉)
2. 주기별 연간 횟수
3. 팀 평균 시급 / 업무별 비용 집계
4. 입력 검증
5. 직급명 변경 시 급여 재연결
"""

import pytest
import sys
from pathlib import Path

# 경로 설정
sys.path.insert(0, str(Path(__file__).parent.parent))

from happy_wage.core.config import PayrollConfig
from happy_wage.core.exceptions import ValidationError
from happy_wage.domain.defaults import default_team_cost_data
from happy_wage.domain.models import (
    Frequency,
    PayPeriod,
    Position,
    SalaryData,
    TeamCostData,
    WorkItem,
)
from happy_wage.domain.team_cost import (
    TeamCostEngine,
    annual_executions,
    to_annual,
    to_hourly_rate,
)


def make_team() -> TeamCostData:
    """리더 1 / 미들 2 / 주니어 3, 월급제"""
    return TeamCostData(
        id="team-test",
        name="Test team",
        positions=[
            Position(id="pos-1", name="Leader", count=1),
            Position(id="pos-2", name="Middle", count=2),
            Position(id="pos-3", name="Junior", count=3),
        ],
        work_items=[
            WorkItem(id="work-1", name="Weekly sync", frequency=Frequency.WEEKLY, hours=1),
            WorkItem(id="work-2", name="Monthly report", frequency=Frequency.MONTHLY, hours=4),
            WorkItem(id="work-3", name="Daily check", frequency=Frequency.DAILY, hours=0.5),
        ],
        salary_data=SalaryData(
            pay_period=PayPeriod.MONTHLY,
            positions={"Leader": 50, "Middle": 35, "Junior": 20},
        ),
    )


class TestSalaryNormalizer:
    """급여 환산 테스트"""

    def test_hourly(self):
        """시급 × 8시간 × 250일"""
        assert to_annual(3000, PayPeriod.HOURLY) == 6_000_000

    def test_monthly(self):
        """만 단위 월급 × 12"""
        assert to_annual(30, PayPeriod.MONTHLY) == 3_600_000

    def test_annual(self):
        """만 단위 연봉"""
        assert to_annual(500, PayPeriod.ANNUAL) == 5_000_000

    def test_accepts_raw_strings(self):
        """문자열 기간도 허용"""
        assert to_annual(3000, "hourly") == 6_000_000
        assert to_annual(30, "monthly") == 3_600_000

    def test_unknown_period_is_zero(self):
        """알 수 없는 기간 → 0 (오류 아님)"""
        assert to_annual(100, "weekly") == 0
        assert to_annual(100, None) == 0

    def test_hourly_rate(self):
        """연봉 ÷ 2000시간"""
        assert to_hourly_rate(6_000_000) == 3000
        assert to_hourly_rate(0) == 0

    def test_custom_working_days(self):
        """근무일수 설정 변경"""
        engine = TeamCostEngine(PayrollConfig(working_days_per_year=200))
        assert engine.to_annual(1000, PayPeriod.HOURLY) == 1000 * 8 * 200
        assert engine.to_hourly_rate(1_600_000) == 1000


class TestWorkItemAnnualizer:
    """업무 환산 테스트"""

    def test_fixed_mapping(self):
        """daily 365 / weekly 52 / monthly 12 / yearly 1"""
        assert annual_executions(Frequency.DAILY) == 365
        assert annual_executions(Frequency.WEEKLY) == 52
        assert annual_executions(Frequency.MONTHLY) == 12
        assert annual_executions(Frequency.YEARLY) == 1

    def test_unknown_frequency(self):
        assert annual_executions("hourly") == 0

    def test_annual_hours(self):
        engine = TeamCostEngine()
        item = WorkItem(name="Review", frequency=Frequency.WEEKLY, hours=1.5)
        assert engine.annual_hours(item) == pytest.approx(78)


class TestAverageHourlyRate:
    """팀 평균 시급 테스트"""

    def setup_method(self):
        self.engine = TeamCostEngine()

    def test_headcount_weighted(self):
        """인원수 가중 평균"""
        team = make_team()
        # (3000×1 + 2100×2 + 1200×3) / 6
        assert self.engine.average_hourly_rate(team.positions, team.salary_data) == pytest.approx(1800)

    def test_unset_salary_counts_in_headcount(self):
        """급여 미설정 직급은 시급 0, 인원수에는 포함"""
        positions = [Position(name="Leader", count=1), Position(name="Ghost", count=1)]
        salary = SalaryData(pay_period=PayPeriod.MONTHLY, positions={"Leader": 55})
        assert self.engine.average_hourly_rate(positions, salary) == pytest.approx(1650)

    def test_zero_headcount(self):
        """총 인원 0 → 0"""
        positions = [Position(name="Leader", count=0)]
        salary = SalaryData(positions={"Leader": 55})
        assert self.engine.average_hourly_rate(positions, salary) == 0
        assert self.engine.average_hourly_rate([], salary) == 0


class TestTeamCostCalculate:
    """팀 인건비 계산 테스트"""

    def setup_method(self):
        self.engine = TeamCostEngine()

    def test_position_breakdown(self):
        """직급별 내역"""
        result = self.engine.calculate(make_team())

        assert len(result.position_breakdown) == 3
        leader, middle, junior = result.position_breakdown

        assert (leader.count, middle.count, junior.count) == (1, 2, 3)
        assert leader.annual_salary_per_person > middle.annual_salary_per_person > junior.annual_salary_per_person
        assert middle.annual_salary_per_person == 35 * 10000 * 12
        assert middle.total_annual_salary == 35 * 10000 * 12 * 2
        assert junior.hourly_rate == pytest.approx(1200)

    def test_work_item_breakdown(self):
        """업무별 내역 (팀 평균 시급 기준)"""
        result = self.engine.calculate(make_team())
        weekly, monthly, daily = result.work_item_breakdown

        assert daily.annual_hours > weekly.annual_hours
        assert daily.annual_hours > monthly.annual_hours

        assert weekly.annual_executions == 52
        assert weekly.frequency_label == Frequency.WEEKLY.label
        assert monthly.annual_hours == pytest.approx(48)
        assert daily.annual_hours == pytest.approx(182.5)
        assert daily.cost_per_execution == pytest.approx(0.5 * 1800)
        assert daily.annual_cost == pytest.approx(0.5 * 1800 * 365)

    def test_totals_from_work_items(self):
        """합계는 업무별 비용 기준 (직급 급여 합계 아님)"""
        result = self.engine.calculate(make_team())

        assert result.total_annual_hours == pytest.approx(52 + 48 + 182.5)
        assert result.total_monthly_hours == pytest.approx((52 + 48 + 182.5) / 12)
        assert result.total_annual_cost == pytest.approx(93_600 + 86_400 + 328_500)
        assert result.average_hourly_rate == pytest.approx(1800)
        assert result.total_annual_cost != result.base_salary_cost

    def test_mixed_pay_periods(self):
        """직급별 급여 기간 지정 (정규직 월급 / 위탁 시급)"""
        team = TeamCostData(
            name="Mixed team",
            positions=[Position(name="Regular", count=2), Position(name="Contractor", count=1)],
            work_items=[WorkItem(name="Ops", frequency=Frequency.DAILY, hours=1)],
            salary_data=SalaryData(
                pay_period=PayPeriod.MONTHLY,
                positions={"Regular": 40, "Contractor": 4000},
                period_overrides={"Contractor": PayPeriod.HOURLY},
            ),
        )
        regular, contractor = self.engine.calculate(team).position_breakdown
        assert regular.annual_salary_per_person == 40 * 10000 * 12
        assert contractor.annual_salary_per_person == 4000 * 8 * 250

    def test_default_team(self):
        """기본 팀 데이터 → 비용/시간 모두 양수"""
        team = default_team_cost_data()
        result = self.engine.calculate(team)

        assert self.engine.validate(team) == []
        assert result.total_annual_cost > 0
        assert result.total_annual_hours > 0
        assert len(result.position_breakdown) == 3

    def test_salary_rollup(self):
        """법정복리비/간접비는 급여 합계 기준, 총 비용에는 미반영"""
        team = make_team()
        base = self.engine.calculate(team)
        assert base.welfare_cost == 0
        assert base.overhead_cost == 0

        team.include_welfare_cost = True
        team.include_overhead_cost = True
        result = self.engine.calculate(team)

        salaries = 6_000_000 + 4_200_000 * 2 + 2_400_000 * 3
        assert result.base_salary_cost == pytest.approx(salaries)
        assert result.welfare_cost == pytest.approx(salaries * 0.15)
        assert result.overhead_cost == pytest.approx(salaries * 0.25)
        assert result.total_annual_cost == pytest.approx(base.total_annual_cost)

    def test_rollup_rates_from_config(self):
        """팀에 비율이 없으면 엔진 설정의 비율 사용"""
        team = make_team()
        team.include_welfare_cost = True
        team.include_overhead_cost = True

        engine = TeamCostEngine(PayrollConfig(welfare_rate=0.30, overhead_rate=0.10))
        result = engine.calculate(team)
        assert result.welfare_cost == pytest.approx(result.base_salary_cost * 0.30)
        assert result.overhead_cost == pytest.approx(result.base_salary_cost * 0.10)

    def test_team_rate_overrides_config(self):
        """팀별 비율이 있으면 설정보다 우선"""
        team = make_team()
        team.include_welfare_cost = True
        team.welfare_rate = 0.2

        engine = TeamCostEngine(PayrollConfig(welfare_rate=0.30))
        result = engine.calculate(team)
        assert result.welfare_cost == pytest.approx(result.base_salary_cost * 0.2)

    def test_input_not_mutated(self):
        """입력 데이터는 변경되지 않음"""
        team = make_team()
        before = team.to_dict()
        self.engine.calculate(team)
        self.engine.validate(team)
        assert team.to_dict() == before


class TestValidation:
    """입력 검증 테스트"""

    def setup_method(self):
        self.engine = TeamCostEngine()

    def test_valid(self):
        assert self.engine.validate(make_team()) == []

    def test_empty_positions_and_work_items(self):
        """직급/업무 모두 없음 → 메시지 2개"""
        team = TeamCostData(name="Empty")
        errors = self.engine.validate(team)
        assert len(errors) == 2
        assert set(errors) == {"no positions configured", "no work items configured"}

    def test_missing_salary(self):
        """급여 미설정 직급"""
        team = make_team()
        team.positions.append(Position(name="New role", count=1))
        assert self.engine.validate(team) == ["salary missing for positions: New role"]

    def test_zero_salary_counts_as_missing(self):
        """급여 0 = 미설정"""
        team = make_team()
        team.salary_data.positions["Junior"] = 0
        team.positions.append(Position(name="Intern", count=1))
        assert self.engine.validate(team) == ["salary missing for positions: Junior, Intern"]

    def test_all_errors_reported(self):
        """모든 오류를 함께 반환"""
        team = make_team()
        team.work_items = []
        team.salary_data = SalaryData()
        errors = self.engine.validate(team)
        assert "no work items configured" in errors
        assert "salary missing for positions: Leader, Middle, Junior" in errors

    def test_check_has_fields_and_warnings(self):
        """상세 검증 결과"""
        team = make_team()
        team.work_items.append(WorkItem(name="Empty", frequency=Frequency.DAILY, hours=0))
        result = self.engine.check(team)
        assert result.is_valid
        assert result.warnings == ["work item 'Empty' has no hours set"]

    def test_try_calculate(self):
        """검증 오류가 있으면 None"""
        assert self.engine.try_calculate(TeamCostData(name="Empty")) is None
        assert self.engine.try_calculate(make_team()) is not None


class TestRenamePosition:
    """직급명 변경 테스트"""

    def test_salary_follows_rename(self):
        """이름 변경 시 급여 재연결"""
        team = make_team()
        renamed = team.rename_position("pos-1", "Team lead")

        assert renamed.positions[0].name == "Team lead"
        assert renamed.salary_data.positions["Team lead"] == 50
        assert "Leader" not in renamed.salary_data.positions
        assert TeamCostEngine().validate(renamed) == []

    def test_source_untouched(self):
        """원본은 그대로"""
        team = make_team()
        team.rename_position("pos-1", "Team lead")
        assert team.positions[0].name == "Leader"
        assert team.salary_data.positions["Leader"] == 50

    def test_plain_rename_orphans_salary(self):
        """재연결 없이 이름만 바꾸면 급여 미설정"""
        team = make_team()
        team.positions[0].name = "Team lead"
        assert TeamCostEngine().validate(team) == ["salary missing for positions: Team lead"]

    def test_override_follows_rename(self):
        salary = SalaryData(
            positions={"Contractor": 4000},
            period_overrides={"Contractor": PayPeriod.HOURLY},
        )
        renamed = salary.rename_position("Contractor", "Freelancer")
        assert renamed.period_for("Freelancer") == PayPeriod.HOURLY
        assert renamed.amount_for("Contractor") == 0

    def test_shared_name_keeps_salary_for_others(self):
        """같은 이름의 다른 직급이 남아 있으면 급여를 복사"""
        team = TeamCostData(
            name="Devs",
            positions=[Position(id="a", name="Dev"), Position(id="b", name="Dev")],
            work_items=[WorkItem(name="Sync", frequency=Frequency.WEEKLY, hours=1)],
            salary_data=SalaryData(positions={"Dev": 40}),
        )
        renamed = team.rename_position("a", "Senior")

        assert [p.name for p in renamed.positions] == ["Senior", "Dev"]
        assert renamed.salary_data.positions == {"Dev": 40, "Senior": 40}
        assert TeamCostEngine().validate(renamed) == []

    def test_rename_onto_existing_name_rejected(self):
        """다른 직급이 쓰는 이름으로 변경 불가 (급여 덮어쓰기 방지)"""
        team = make_team()
        with pytest.raises(ValidationError) as exc:
            team.rename_position("pos-1", "Middle")
        assert exc.value.field == "name"
        assert team.salary_data.positions["Middle"] == 35

    def test_salary_copy_keeps_old_entry(self):
        salary = SalaryData(
            positions={"Contractor": 4000},
            period_overrides={"Contractor": PayPeriod.HOURLY},
        )
        copied = salary.rename_position("Contractor", "Freelancer", keep_old=True)
        assert copied.amount_for("Contractor") == 4000
        assert copied.period_for("Freelancer") == PayPeriod.HOURLY
        assert copied.period_for("Contractor") == PayPeriod.HOURLY
