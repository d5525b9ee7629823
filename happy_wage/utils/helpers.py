"""
helpers.py - 헬퍼 유틸리티
"""

import math
from typing import Iterable, List


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """안전한 나눗셈"""
    if denominator == 0:
        return default
    return numerator / denominator


def clamp(value: float, min_val: float, max_val: float) -> float:
    """값을 범위 내로 제한"""
    return max(min_val, min(value, max_val))


def mean(values: Iterable[float]) -> float:
    """산술평균 (빈 입력이면 0)"""
    items: List[float] = list(values)
    return safe_divide(sum(items), len(items))


def population_std_dev(values: Iterable[float]) -> float:
    """모표준편차"""
    items = list(values)
    if not items:
        return 0.0
    avg = mean(items)
    variance = sum((v - avg) ** 2 for v in items) / len(items)
    return math.sqrt(variance)


def format_currency(amount: float, symbol: str = "") -> str:
    """통화 포맷 (소수점 버림 없이 반올림)"""
    return f"{round(amount):,}{symbol}"


def format_percent(value: float, decimals: int = 1) -> str:
    """퍼센트 포맷"""
    return f"{value:.{decimals}f}%"


def format_hours(hours: float, decimals: int = 1) -> str:
    """시간 포맷"""
    return f"{hours:,.{decimals}f}h"
