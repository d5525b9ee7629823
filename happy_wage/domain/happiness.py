"""
happiness.py - 행복도 기반 시급 계산

순수 파이썬 로직. 입력 객체를 변경하지 않고 HappinessResult를 새로 만든다.

계산 순서:
1. 카테고리 점수 (평점 평균 × 10)
2. 가중 평균 총점 (실제 가중치 합계로 나눔)
3. 밸런스 보너스 / 시너지 보너스 (평균이 중립점 55를 넘을 때만)
4. 시급 배율 → 조정 시급, 행복 보너스(%)
5. 개선 영역 선정
"""

import logging
from typing import Dict, List, Mapping, Optional

from .models import (
    Category,
    HappinessFactors,
    HappinessWeights,
    HappinessResult,
)
from ..core.config import ScoringConfig, DEFAULT_SCORING
from ..core.exceptions import PreconditionError, ErrorCodes
from ..utils.helpers import clamp, mean, population_std_dev

logger = logging.getLogger(__name__)

CategoryScores = Mapping[Category, float]

_DECLARATION_ORDER = {c: i for i, c in enumerate(Category)}


def _in_declaration_order(scores: CategoryScores) -> List:
    return sorted(scores.items(), key=lambda kv: _DECLARATION_ORDER.get(kv[0], len(_DECLARATION_ORDER)))


class HappinessEngine:
    """행복도 → 시급 배율 계산기"""

    def __init__(self, config: Optional[ScoringConfig] = None):
        """
        Args:
            config: 점수 계산 설정. None이면 기본값 사용.
        """
        self.config = config or DEFAULT_SCORING

    # --------------------------------------------------------
    # 카테고리 점수
    # --------------------------------------------------------

    def calculate_category_score(self, ratings: Mapping[str, float]) -> float:
        """평점 평균 × 10 (1~10 → 10~100)"""
        if not ratings:
            raise PreconditionError(
                "category has no ratings",
                parameter="ratings",
                error_code=ErrorCodes.EMPTY_CATEGORY,
            )
        values = list(ratings.values())
        return sum(values) / len(values) * 10

    def score_categories(self, factors: HappinessFactors) -> Dict[Category, float]:
        return {c: self.calculate_category_score(factors.ratings(c)) for c in Category}

    def calculate_total_score(self, scores: CategoryScores, weights: HappinessWeights) -> float:
        """가중 평균 (가중치 합계가 100이 아니어도 실제 합계로 정규화)"""
        total_weight = weights.total
        if total_weight <= 0:
            raise PreconditionError(
                "weights must sum to a positive value",
                parameter="weights",
                value=total_weight,
                error_code=ErrorCodes.ZERO_WEIGHT_SUM,
            )
        weighted_sum = sum(score * weights.weight(c) for c, score in scores.items())
        return weighted_sum / total_weight

    # --------------------------------------------------------
    # 보너스
    # --------------------------------------------------------

    def calculate_balance_bonus(self, scores: CategoryScores) -> float:
        """표준편차가 작을수록 큰 보너스 (최대 0.2)"""
        cfg = self.config
        values = list(scores.values())
        average = mean(values)

        # 중립점 이하에서는 보너스 없음
        if average <= cfg.neutral_point:
            return 0.0

        std_dev = population_std_dev(values)
        balance_score = max(0.0, 1 - std_dev / cfg.balance_max_std_dev)
        return balance_score * cfg.balance_max_bonus

    def calculate_synergy_bonus(self, scores: CategoryScores) -> float:
        """카테고리 쌍 시너지 + 전 카테고리 고득점 보너스 (최대 0.3)"""
        cfg = self.config
        values = list(scores.values())
        if mean(values) <= cfg.neutral_point:
            return 0.0

        bonus = 0.0
        for pair in cfg.synergy_pairs:
            first = scores.get(Category(pair.first), 0.0)
            second = scores.get(Category(pair.second), 0.0)
            # 중립점을 넘는 부분만
            bonus += max(0.0, min(first, second) - cfg.neutral_point) / 100 * pair.weight

        if values and all(v >= cfg.all_high_threshold for v in values):
            bonus += cfg.all_high_bonus

        return min(bonus, cfg.synergy_cap)

    # --------------------------------------------------------
    # 시급 배율
    # --------------------------------------------------------

    def calculate_multiplier(
        self,
        total_score: float,
        balance_bonus: float = 0.0,
        synergy_bonus: float = 0.0,
    ) -> float:
        """총점 → 시급 배율 (중립점 55에서 1.0, 0.6~1.8로 제한)"""
        cfg = self.config
        normalized = (total_score - cfg.neutral_point) / cfg.score_span
        multiplier = cfg.base_multiplier + normalized * cfg.max_variation
        multiplier += balance_bonus + synergy_bonus

        for threshold, boost in cfg.high_score_steps:
            if total_score >= threshold:
                multiplier += boost

        return clamp(multiplier, cfg.min_multiplier, cfg.max_multiplier)

    def calculate_adjusted_wage(
        self,
        base_wage: float,
        total_score: float,
        balance_bonus: float = 0.0,
        synergy_bonus: float = 0.0,
    ) -> float:
        return base_wage * self.calculate_multiplier(total_score, balance_bonus, synergy_bonus)

    # --------------------------------------------------------
    # 개선 영역
    # --------------------------------------------------------

    def identify_improvement_areas(
        self,
        scores: CategoryScores,
        target_score: Optional[float] = None,
    ) -> List[Category]:
        """개선 추천 카테고리

        목표 점수가 있으면 목표와의 차이가 큰 순 (최대 3개),
        없으면 평균 미만 카테고리를 낮은 순 (최대 2개).
        해당 없으면 최저 점수 카테고리 1개. 동점은 선언 순서 유지.
        """
        cfg = self.config
        items = _in_declaration_order(scores)
        if not items:
            return []

        if target_score is not None:
            gaps = [(c, target_score - s) for c, s in items]
            significant = [g for g in gaps if g[1] > cfg.improvement_gap]
            significant.sort(key=lambda g: g[1], reverse=True)
            areas = [c for c, _ in significant[:cfg.target_top_n]]
        else:
            average = mean(s for _, s in items)
            below = [(c, s) for c, s in items if s < average]
            below.sort(key=lambda cs: cs[1])
            areas = [c for c, _ in below[:cfg.below_average_top_n]]

        if not areas:
            lowest = min(items, key=lambda cs: cs[1])
            areas = [lowest[0]]

        return areas

    # --------------------------------------------------------
    # 전체 계산
    # --------------------------------------------------------

    def calculate(
        self,
        factors: HappinessFactors,
        weights: HappinessWeights,
        base_wage: float,
        target_score: Optional[float] = None,
    ) -> HappinessResult:
        """행복도 계산 실행

        Args:
            factors: 카테고리별 평점
            weights: 카테고리별 가중치 (%)
            base_wage: 기본 시급 (> 0)
            target_score: 목표 점수 (선택)

        Returns:
            HappinessResult

        Raises:
            PreconditionError: 기본 시급 0 이하, 가중치 합계 0 이하
        """
        if base_wage <= 0:
            raise PreconditionError(
                "base wage must be greater than 0",
                parameter="base_wage",
                value=base_wage,
                error_code=ErrorCodes.NON_POSITIVE_WAGE,
            )

        # 1. 카테고리 점수
        category_scores = self.score_categories(factors)

        # 2. 총점
        total_score = self.calculate_total_score(category_scores, weights)

        # 3. 보너스 (비율)
        balance_bonus = self.calculate_balance_bonus(category_scores)
        synergy_bonus = self.calculate_synergy_bonus(category_scores)

        # 4. 시급
        multiplier = self.calculate_multiplier(total_score, balance_bonus, synergy_bonus)
        adjusted_wage = base_wage * multiplier
        happiness_bonus = (adjusted_wage - base_wage) / base_wage * 100

        # 5. 개선 영역
        improvement_areas = self.identify_improvement_areas(category_scores, target_score)

        logger.debug(
            f"행복도 계산: 총점 {total_score:.1f}, 배율 {multiplier:.3f}, "
            f"밸런스 {balance_bonus:.3f}, 시너지 {synergy_bonus:.3f}"
        )

        return HappinessResult(
            total_score=total_score,
            category_scores=category_scores,
            adjusted_hourly_wage=adjusted_wage,
            multiplier=multiplier,
            happiness_bonus=happiness_bonus,
            balance_bonus=balance_bonus * 100,  # 퍼센트로 변환
            synergy_bonus=synergy_bonus * 100,
            target_score=target_score,
            improvement_areas=improvement_areas,
        )

    def try_calculate(
        self,
        factors: HappinessFactors,
        weights: HappinessWeights,
        base_wage: float,
        target_score: Optional[float] = None,
    ) -> Optional[HappinessResult]:
        """전제조건 위반 시 None ("아직 계산 불가")"""
        try:
            return self.calculate(factors, weights, base_wage, target_score)
        except PreconditionError as e:
            logger.debug(f"행복도 계산 생략: {e}")
            return None


# ============================================================
# 표시용 문구
# ============================================================

_SCORE_DESCRIPTIONS = (
    (85, "Excellent"),
    (70, "Good"),
    (60, "Fairly good"),
    (50, "Average"),
    (35, "Somewhat lacking"),
)

_SUGGESTIONS: Dict[Category, Dict[str, str]] = {
    Category.JOB: {
        "low": "Look at what would make your work more rewarding or your workplace better. "
               "A talk with your manager or a job change are options too. "
               "Raising it together with health also raises the synergy bonus.",
        "medium": "Build on what you already like about your job and look for the next chance to grow.",
        "high": "Great working environment! Keep it up and pass the good energy on to your colleagues.",
    },
    Category.HEALTH: {
        "low": "Revisit the basics: sleep, exercise and diet. "
               "Health pairs with job and SNS for a large synergy bonus.",
        "medium": "You take care of your health. Try setting a more concrete goal.",
        "high": "Healthy habits are in place. Keep going!",
    },
    Category.FAMILY: {
        "low": "Make deliberate time for family and the people close to you. "
               "It pairs with hobby for a synergy bonus.",
        "medium": "Your relationships are in good shape. Try to deepen them further.",
        "high": "Your bond with family is strong. Keep nurturing it.",
    },
    Category.HOBBY: {
        "low": "Find something you truly enjoy and set aside time for it.",
        "medium": "Your hobbies are going well. How about trying a new field?",
        "high": "You are enjoying your hobbies. Carry that energy into other areas.",
    },
    Category.SNS: {
        "low": "Rethink how you use social media. Adjusting time spent and what you follow helps.",
        "medium": "You use social media well. Focus more on useful information.",
        "high": "You have a healthy relationship with social media. Keep that balance.",
    },
}

DEFAULT_SUGGESTION = "Keep making steady improvements."


def score_description(score: float) -> str:
    """점수 구간별 설명"""
    for threshold, text in _SCORE_DESCRIPTIONS:
        if score >= threshold:
            return text
    return "Needs improvement"


def improvement_suggestion(category: Category, score: float) -> str:
    """카테고리별 개선 제안 (65 이상 high, 45 이상 medium, 그 외 low)"""
    level = "high" if score >= 65 else "medium" if score >= 45 else "low"
    return _SUGGESTIONS.get(category, {}).get(level, DEFAULT_SUGGESTION)


# 기본 설정 엔진의 함수형 별칭
_default_engine = HappinessEngine()
calculate_category_score = _default_engine.calculate_category_score
calculate_total_score = _default_engine.calculate_total_score
calculate_balance_bonus = _default_engine.calculate_balance_bonus
calculate_synergy_bonus = _default_engine.calculate_synergy_bonus
calculate_multiplier = _default_engine.calculate_multiplier
calculate_adjusted_wage = _default_engine.calculate_adjusted_wage
identify_improvement_areas = _default_engine.identify_improvement_areas
