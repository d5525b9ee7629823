"""
config.py - 애플리케이션 설정

행복도 점수 계산과 팀 인건비 계산에 쓰이는 모든 상수를 중앙 관리
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from dotenv import load_dotenv

load_dotenv()


# 하위 항목 평점의 중립값 (1~10 척도의 중앙값)
NEUTRAL_RATING = 5.5


@dataclass(frozen=True)
class SynergyPair:
    """카테고리 쌍 시너지 설정"""
    first: str
    second: str
    weight: float


# 카테고리 쌍 시너지 테이블
SYNERGY_PAIRS: Tuple[SynergyPair, ...] = (
    SynergyPair("job", "health", 0.08),      # 일과 건강
    SynergyPair("family", "hobby", 0.06),    # 가족과 취미
    SynergyPair("health", "sns", 0.04),      # 건강한 SNS 이용
)


@dataclass(frozen=True)
class ScoringConfig:
    """행복도 점수 계산 설정"""
    # 중립점 (평점 5.5 * 10)
    neutral_point: float = 55.0
    score_span: float = 45.0                # 중립점에서 100까지의 폭

    # 배율
    base_multiplier: float = 1.0
    max_variation: float = 0.6
    min_multiplier: float = 0.6
    max_multiplier: float = 1.8

    # 고득점 추가 부스트
    high_score_steps: Tuple[Tuple[float, float], ...] = ((75.0, 0.1), (85.0, 0.1))

    # 밸런스 보너스
    balance_max_std_dev: float = 20.0       # 표준편차 최대 상정값
    balance_max_bonus: float = 0.2

    # 시너지 보너스
    synergy_pairs: Tuple[SynergyPair, ...] = SYNERGY_PAIRS
    all_high_threshold: float = 65.0
    all_high_bonus: float = 0.12
    synergy_cap: float = 0.30

    # 개선 영역 선정
    improvement_gap: float = 10.0           # 목표와의 차이가 이보다 커야 함
    target_top_n: int = 3
    below_average_top_n: int = 2


@dataclass(frozen=True)
class PayrollConfig:
    """인건비 환산 설정"""
    hours_per_day: int = 8
    working_days_per_year: int = 250
    currency_unit: int = 10000              # 월급/연봉 입력 단위 (만 단위)
    months_per_year: int = 12

    # 법정복리비 / 간접비 (선택 적용)
    welfare_rate: float = 0.15
    overhead_rate: float = 0.25

    @property
    def annual_working_hours(self) -> int:
        """연간 소정 근로시간 (8시간 × 250일)"""
        return self.hours_per_day * self.working_days_per_year


# 기본 설정 인스턴스
DEFAULT_SCORING = ScoringConfig()
DEFAULT_PAYROLL = PayrollConfig()


@dataclass
class AppSettings:
    """환경변수 기반 실행 설정"""
    log_level: str = "INFO"
    debug_mode: bool = False
    default_base_wage: float = 1500.0       # CLI 기본 시급
    valid_log_levels: List[str] = field(
        default_factory=lambda: ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    )
    # 해석하지 못한 환경변수 원문 (validate에서 보고)
    invalid_values: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "AppSettings":
        """환경변수에서 설정 로드

        숫자가 아닌 값은 기본값을 쓰고 invalid_values에 기록한다.
        엔진 모듈 import는 환경변수 값과 무관하게 성공해야 한다.
        """
        invalid_values = {}

        raw_wage = os.getenv("HAPPY_WAGE_BASE_WAGE", "1500")
        try:
            default_base_wage = float(raw_wage)
        except ValueError:
            invalid_values["HAPPY_WAGE_BASE_WAGE"] = raw_wage
            default_base_wage = 1500.0

        return cls(
            log_level=os.getenv("HAPPY_WAGE_LOG_LEVEL", "INFO").upper(),
            debug_mode=os.getenv("HAPPY_WAGE_DEBUG", "false").lower() == "true",
            default_base_wage=default_base_wage,
            invalid_values=invalid_values,
        )

    def validate(self) -> list:
        """설정 유효성 검사"""
        errors = []

        for key, raw in self.invalid_values.items():
            errors.append(f"{key} is not a number: {raw!r}")

        if self.log_level not in self.valid_log_levels:
            errors.append(f"unknown log level: {self.log_level}")

        if self.default_base_wage <= 0:
            errors.append("default base wage must be greater than 0")

        return errors


# 전역 설정 인스턴스
settings = AppSettings.from_env()


def get_settings() -> AppSettings:
    """설정 인스턴스 반환"""
    return settings


def reload_settings() -> AppSettings:
    """설정 다시 로드"""
    global settings
    settings = AppSettings.from_env()
    return settings
