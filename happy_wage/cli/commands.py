"""
CLI 명령어 처리 모듈

계산 엔진을 감싸는 얇은 표시 계층:
- happiness: 행복도 반영 시급 계산
- team-cost: 팀 인건비 계산
- defaults: 기본 입력값(JSON) 출력
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..core.config import get_settings
from ..core.exceptions import (
    ConfigurationError,
    DataLoadError,
    ErrorCodes,
    HappyWageError,
    ValidationError,
)
from ..core.logging import setup_logger
from ..domain.defaults import default_factors, default_team_cost_data, default_weights
from ..domain.happiness import HappinessEngine, improvement_suggestion, score_description
from ..domain.models import (
    CostCalculationResult,
    HappinessFactors,
    HappinessResult,
    HappinessWeights,
    TeamCostData,
)
from ..domain.team_cost import TeamCostEngine
from ..utils.helpers import format_currency, format_hours, format_percent
from ..utils.validators import validate_happiness_input, validate_snapshot_keys

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class CLIConfig:
    """CLI 설정"""
    verbose: bool = False
    no_color: bool = False
    as_json: bool = False


class CLI:
    """happy-wage CLI 출력"""

    def __init__(self, config: CLIConfig = None, console: Console = None):
        self.config = config or CLIConfig()
        self.console = console or Console(no_color=self.config.no_color, highlight=False)

    def print_header(self, title: str):
        """섹션 헤더 출력"""
        self.console.rule(f"[bold cyan]{title}")

    def print_result(self, key: str, value: Any):
        """결과 출력"""
        self.console.print(f"  {key}: [bold]{value}[/bold]")

    def print_error(self, message: str):
        """에러 메시지"""
        self.console.print(f"[red]error:[/red] {escape(message)}")

    def print_warning(self, message: str):
        """경고 메시지"""
        self.console.print(f"[yellow]warning:[/yellow] {escape(message)}")

    def print_json(self, data: Dict[str, Any]):
        self.console.print_json(json.dumps(data, ensure_ascii=False))

    # --------------------------------------------------------
    # 결과 렌더링
    # --------------------------------------------------------

    def show_happiness(self, result: HappinessResult, base_wage: float):
        self.print_header("Happiness-adjusted wage")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Category")
        table.add_column("Score", justify="right")
        table.add_column("Level")
        for category, score in result.category_scores.items():
            table.add_row(category.value, f"{score:.1f}", score_description(score))
        self.console.print(table)

        self.print_result("Total score", f"{result.total_score:.1f} ({score_description(result.total_score)})")
        self.print_result("Balance bonus", format_percent(result.balance_bonus))
        self.print_result("Synergy bonus", format_percent(result.synergy_bonus))
        self.print_result("Multiplier", f"{result.multiplier:.3f}")
        self.print_result("Base wage", format_currency(base_wage))
        self.print_result("Adjusted wage", format_currency(result.adjusted_hourly_wage))
        self.print_result("Happiness bonus", format_percent(result.happiness_bonus))

        self.console.print("\n[bold]Areas to improve[/bold]")
        for category in result.improvement_areas:
            score = result.category_scores[category]
            self.console.print(f"  - {category.value}: {improvement_suggestion(category, score)}")

    def show_team_cost(self, result: CostCalculationResult):
        self.print_header("Team cost")

        positions = Table(title="Positions", show_header=True, header_style="bold")
        for column in ("Position", "Count", "Annual / person", "Annual total", "Hourly"):
            positions.add_column(column, justify="left" if column == "Position" else "right")
        for p in result.position_breakdown:
            positions.add_row(
                p.position_name,
                str(p.count),
                format_currency(p.annual_salary_per_person),
                format_currency(p.total_annual_salary),
                format_currency(p.hourly_rate),
            )
        self.console.print(positions)

        items = Table(title="Work items", show_header=True, header_style="bold")
        for column in ("Work item", "Frequency", "Hours", "Runs / year", "Hours / year", "Cost / run", "Cost / year"):
            items.add_column(column, justify="left" if column in ("Work item", "Frequency") else "right")
        for w in result.work_item_breakdown:
            items.add_row(
                w.work_item_name,
                w.frequency_label,
                format_hours(w.hours_per_execution, 2),
                str(w.annual_executions),
                format_hours(w.annual_hours),
                format_currency(w.cost_per_execution),
                format_currency(w.annual_cost),
            )
        self.console.print(items)

        self.print_result("Average hourly rate", format_currency(result.average_hourly_rate))
        self.print_result("Total annual cost", format_currency(result.total_annual_cost))
        self.print_result("Total annual hours", format_hours(result.total_annual_hours))
        self.print_result("Total monthly hours", format_hours(result.total_monthly_hours))
        self.print_result("Salary total", format_currency(result.base_salary_cost))
        if result.welfare_cost:
            self.print_result("Welfare cost", format_currency(result.welfare_cost))
        if result.overhead_cost:
            self.print_result("Overhead cost", format_currency(result.overhead_cost))


def create_parser() -> argparse.ArgumentParser:
    """CLI 파서 생성"""
    parser = argparse.ArgumentParser(
        prog="happy-wage",
        description="Happiness-adjusted wage and team cost calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s happiness --base-wage 1500 --target 80
  %(prog)s happiness --base-wage 1500 --input happiness.json
  %(prog)s team-cost --input team.json
  %(prog)s defaults --kind team > team.json
"""
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument("--json", dest="as_json", action="store_true", help="print results as JSON")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="available commands")

    happiness_parser = subparsers.add_parser("happiness", help="happiness-adjusted hourly wage")
    happiness_parser.add_argument("--base-wage", type=float, default=None, help="base hourly wage")
    happiness_parser.add_argument("--target", type=float, default=None, help="target total score")
    happiness_parser.add_argument("--input", type=str, help="JSON file with 'factors' and 'weights'")

    team_parser = subparsers.add_parser("team-cost", help="annual team labor cost")
    team_parser.add_argument("--input", type=str, help="team JSON file (defaults when omitted)")
    team_parser.add_argument("--save", type=str, help="write the input snapshot to this file")

    defaults_parser = subparsers.add_parser("defaults", help="print default input JSON")
    defaults_parser.add_argument("--kind", choices=["happiness", "team"], default="happiness")

    return parser


def load_json(path: str) -> Dict[str, Any]:
    """JSON 스냅샷 로드"""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise DataLoadError(f"cannot read {path}", file_path=path, cause=e)
    except json.JSONDecodeError as e:
        raise DataLoadError(
            f"invalid JSON in {path}: {e.msg}",
            file_path=path,
            error_code=ErrorCodes.LOAD_PARSE_ERROR,
            cause=e,
        )

    if not isinstance(data, dict):
        raise ValidationError(
            f"{path} must contain a JSON object",
            field="snapshot",
            value=type(data).__name__,
        )
    return data


def parse_snapshot(path: str, parse: Callable[[], T]) -> T:
    """스냅샷 값 해석 (형식 오류는 HW_LOAD_PARSE)"""
    try:
        return parse()
    except (ValueError, TypeError, AttributeError) as e:
        raise DataLoadError(
            f"malformed snapshot {path}: {e}",
            file_path=path,
            error_code=ErrorCodes.LOAD_PARSE_ERROR,
            cause=e,
        )


def save_json(path: str, data: Dict[str, Any]):
    """스냅샷 저장 (마지막 저장이 우선)"""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def cmd_happiness(args, cli: CLI) -> int:
    """행복도 계산 명령어"""
    if args.input:
        data = load_json(args.input)
        for warning in validate_snapshot_keys(data, ["factors", "weights"]).warnings:
            cli.print_warning(warning)
        factors = parse_snapshot(args.input, lambda: HappinessFactors.from_dict(data.get("factors") or {}))
        weights = (
            parse_snapshot(args.input, lambda: HappinessWeights.from_dict(data["weights"]))
            if data.get("weights") else default_weights()
        )
    else:
        factors = default_factors()
        weights = default_weights()

    base_wage = args.base_wage if args.base_wage is not None else get_settings().default_base_wage

    check = validate_happiness_input(factors.to_dict(), weights.to_dict(), base_wage, args.target)
    for warning in check.warnings:
        cli.print_warning(warning)
    if not check.is_valid:
        for error in check.errors:
            cli.print_error(error)
        return 1

    result = HappinessEngine().calculate(factors, weights, base_wage, args.target)

    if cli.config.as_json:
        cli.print_json(result.to_dict())
    else:
        cli.show_happiness(result, base_wage)
    return 0


def cmd_team_cost(args, cli: CLI) -> int:
    """팀 인건비 계산 명령어"""
    if args.input:
        data = load_json(args.input)
        team = parse_snapshot(args.input, lambda: TeamCostData.from_dict(data))
    else:
        team = default_team_cost_data()

    if args.save:
        save_json(args.save, team.to_dict())
        logger.info(f"snapshot saved: {args.save}")

    engine = TeamCostEngine()
    errors = engine.validate(team)
    if errors:
        for error in errors:
            cli.print_error(error)
        return 1

    result = engine.calculate(team)

    if cli.config.as_json:
        cli.print_json(result.to_dict())
    else:
        cli.show_team_cost(result)
    return 0


def cmd_defaults(args, cli: CLI) -> int:
    """기본 입력값 출력"""
    if args.kind == "team":
        data = default_team_cost_data().to_dict()
    else:
        data = {"factors": default_factors().to_dict(), "weights": default_weights().to_dict()}
    cli.print_json(data)
    return 0


COMMANDS = {
    "happiness": cmd_happiness,
    "team-cost": cmd_team_cost,
    "defaults": cmd_defaults,
}


def main(argv: Optional[List[str]] = None) -> int:
    """CLI 진입점"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    cli = CLI(CLIConfig(verbose=args.verbose, no_color=args.no_color, as_json=args.as_json))

    try:
        settings = get_settings()
        problems = settings.validate()
        if problems:
            raise ConfigurationError("; ".join(problems), config_key="HAPPY_WAGE_*")

        level = "DEBUG" if args.verbose or settings.debug_mode else settings.log_level
        setup_logger("happy_wage", level)

        return COMMANDS[args.command](args, cli)
    except HappyWageError as e:
        logger.debug(f"command failed: {e.to_dict()}")
        cli.print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
