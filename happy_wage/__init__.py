"""happy_wage - 행복도 반영 시급 / 팀 인건비 계산 엔진"""

__version__ = "1.0.0"
