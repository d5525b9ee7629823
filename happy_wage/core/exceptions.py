"""
커스텀 예외 클래스

- PreconditionError: 엔진이 계산할 수 없는 입력 (try_calculate는 None 반환)
- ValidationError: 사용자 입력/스냅샷 값 오류 (직급명 중복, JSON 객체 아님 등)
- ConfigurationError: HAPPY_WAGE_* 환경변수 오류
- DataLoadError: 스냅샷 파일 읽기/해석 실패

CLI는 HappyWageError만 잡아서 "[코드] 메시지"로 출력하고 1로 종료한다.
"""

from typing import Optional, Dict, Any


class HappyWageError(Exception):
    """happy_wage 예외의 공통 부모

    error_code는 ErrorCodes 상수. 지정하지 않으면 하위 클래스의 기본 코드.
    details는 to_dict()로 --json 출력/로그에 그대로 실린다.
    """

    def __init__(
        self,
        message: str,
        error_code: str = None,
        details: Dict[str, Any] = None,
        cause: Exception = None
    ):
        self.message = message
        self.error_code = error_code or self._default_code()
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def _default_code(self) -> str:
        return "HW_UNKNOWN"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__
        }

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class ValidationError(HappyWageError):
    """입력 값 오류

    field는 문제가 된 필드 경로 (예: "name", "snapshot", "job.growth").
    """

    def __init__(
        self,
        message: str,
        field: str = None,
        value: Any = None,
        **kwargs
    ):
        self.field = field
        self.value = value
        details = kwargs.pop("details", {})
        details["field"] = field
        details["value"] = str(value)[:100]
        super().__init__(message, details=details, **kwargs)

    def _default_code(self) -> str:
        return "HW_VALIDATION"


class PreconditionError(HappyWageError):
    """계산 전제조건 위반 (기본 시급 0 이하, 가중치 합계 0 등)

    호출자는 이 예외를 "아직 계산할 수 없음"으로 취급한다.
    """

    def __init__(
        self,
        message: str,
        parameter: str = None,
        value: Any = None,
        **kwargs
    ):
        self.parameter = parameter
        self.value = value
        details = kwargs.pop("details", {})
        details["parameter"] = parameter
        details["value"] = value
        super().__init__(message, details=details, **kwargs)

    def _default_code(self) -> str:
        return "HW_PRECONDITION"


class ConfigurationError(HappyWageError):
    """설정 오류"""

    def __init__(
        self,
        message: str,
        config_key: str = None,
        **kwargs
    ):
        self.config_key = config_key
        details = kwargs.pop("details", {})
        details["config_key"] = config_key
        super().__init__(message, details=details, **kwargs)

    def _default_code(self) -> str:
        return "HW_CONFIG"


class DataLoadError(HappyWageError):
    """스냅샷(JSON) 로드 오류"""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        **kwargs
    ):
        self.file_path = file_path
        details = kwargs.pop("details", {})
        details["file_path"] = file_path
        super().__init__(message, details=details, **kwargs)

    def _default_code(self) -> str:
        return "HW_LOAD"


# 에러 코드 상수
class ErrorCodes:
    """에러 코드 상수"""

    # 일반
    UNKNOWN = "HW_UNKNOWN"
    VALIDATION = "HW_VALIDATION"
    CONFIG = "HW_CONFIG"

    # 계산
    PRECONDITION = "HW_PRECONDITION"
    EMPTY_CATEGORY = "HW_EMPTY_CATEGORY"
    ZERO_WEIGHT_SUM = "HW_ZERO_WEIGHT_SUM"
    NON_POSITIVE_WAGE = "HW_NON_POSITIVE_WAGE"

    # 데이터
    LOAD_FAILED = "HW_LOAD"
    LOAD_PARSE_ERROR = "HW_LOAD_PARSE"
