"""
validators.py - 입력 검증 유틸리티

엔진 호출 전에 표시 계층이 사용하는 검증기.
오류(error)는 계산을 막아야 하는 문제, 경고(warning)는 계산은 되지만 사용자에게 알릴 문제.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from enum import Enum


class ValidationSeverity(Enum):
    """검증 심각도"""
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ValidationIssue:
    """검증 이슈"""
    field: str
    message: str
    severity: ValidationSeverity = ValidationSeverity.ERROR


@dataclass
class ValidationResult:
    """검증 결과"""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    issues: List[ValidationIssue] = field(default_factory=list)

    def add_error(self, field_name: str, message: str):
        """에러 추가"""
        self.is_valid = False
        self.errors.append(message)
        self.issues.append(ValidationIssue(field=field_name, message=message, severity=ValidationSeverity.ERROR))

    def add_warning(self, field_name: str, message: str):
        """경고 추가"""
        self.warnings.append(message)
        self.issues.append(ValidationIssue(field=field_name, message=message, severity=ValidationSeverity.WARNING))

    def merge(self, other: "ValidationResult"):
        """다른 결과 병합"""
        if not other.is_valid:
            self.is_valid = False
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        self.issues.extend(other.issues)


class DataValidator:
    """단일 값 검증기"""

    @staticmethod
    def positive_number(value: Optional[float], field_name: str) -> ValidationResult:
        """양수 검증 (0 제외)"""
        result = ValidationResult()
        if value is None:
            return result
        if value <= 0:
            result.add_error(field_name, f"{field_name} must be greater than 0")
        return result

    @staticmethod
    def non_negative(value: Optional[float], field_name: str) -> ValidationResult:
        """0 이상 검증"""
        result = ValidationResult()
        if value is None:
            return result
        if value < 0:
            result.add_error(field_name, f"{field_name} must not be negative")
        return result

    @staticmethod
    def range_check(value: Optional[float], field_name: str, min_val: float, max_val: float) -> ValidationResult:
        """범위 검증"""
        result = ValidationResult()
        if value is None:
            return result
        if value < min_val or value > max_val:
            result.add_error(field_name, f"{field_name} must be between {min_val} and {max_val}")
        return result


def validate_happiness_input(
    factors: Dict[str, Dict[str, float]],
    weights: Dict[str, float],
    base_wage: Optional[float],
    target_score: Optional[float] = None,
) -> ValidationResult:
    """행복도 입력 검증

    Args:
        factors: {카테고리: {하위항목: 평점}} (HappinessFactors.to_dict())
        weights: {카테고리: 가중치} (HappinessWeights.to_dict())
        base_wage: 기본 시급
        target_score: 목표 점수 (선택)

    기본 시급 0 이하, 가중치 합계 0 이하는 오류(계산 불가),
    가중치 합계가 100이 아니면 경고.
    """
    result = ValidationResult()

    if base_wage is None:
        result.add_error("base_wage", "base_wage is required")
    else:
        result.merge(DataValidator.positive_number(base_wage, "base_wage"))

    for category, ratings in (factors or {}).items():
        for name, rating in (ratings or {}).items():
            result.merge(DataValidator.range_check(rating, f"{category}.{name}", 1, 10))
            # 평점은 0.5 단위
            if rating is not None and rating * 2 != round(rating * 2):
                result.add_warning(
                    f"{category}.{name}",
                    f"{category}.{name} should be in steps of 0.5 (got {rating:g})",
                )

    for category, weight in (weights or {}).items():
        result.merge(DataValidator.non_negative(weight, f"weights.{category}"))

    total_weight = sum((weights or {}).values())
    if total_weight <= 0:
        result.add_error("weights", "weights must sum to a positive value")
    elif abs(total_weight - 100) > 1e-9:
        result.add_warning("weights", f"weights should sum to 100 (currently {total_weight:g})")

    if target_score is not None:
        result.merge(DataValidator.range_check(target_score, "target_score", 0, 100))

    return result


def validate_snapshot_keys(data: Dict[str, Any], required: List[str]) -> ValidationResult:
    """스냅샷(JSON) 최상위 키 검증"""
    result = ValidationResult()
    if not isinstance(data, dict):
        result.add_error("snapshot", "snapshot must be a JSON object")
        return result
    for key in required:
        if key not in data:
            result.add_warning(key, f"'{key}' is missing, defaults will be used")
    return result
