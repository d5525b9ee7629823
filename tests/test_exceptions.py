"""exceptions.py 테스트"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from happy_wage.core.exceptions import (
    HappyWageError,
    ValidationError,
    PreconditionError,
    ConfigurationError,
    DataLoadError,
    ErrorCodes,
)


class TestHappyWageError:
    """HappyWageError 테스트"""

    def test_basic_error(self):
        """기본 에러"""
        error = HappyWageError("test error")
        assert error.message == "test error"
        assert error.error_code == "HW_UNKNOWN"

    def test_error_with_code(self):
        """에러 코드 포함"""
        error = HappyWageError("test", error_code="CUSTOM_CODE")
        assert error.error_code == "CUSTOM_CODE"

    def test_to_dict(self):
        """딕셔너리 변환"""
        error = HappyWageError("test", error_code="TEST_CODE", details={"field": "x"})
        d = error.to_dict()

        assert d["error_code"] == "TEST_CODE"
        assert d["message"] == "test"
        assert d["details"]["field"] == "x"
        assert d["type"] == "HappyWageError"

    def test_str_representation(self):
        """문자열 표현"""
        error = HappyWageError("test error", error_code="TEST")
        assert str(error) == "[TEST] test error"

    def test_cause(self):
        cause = ValueError("inner")
        error = HappyWageError("outer", cause=cause)
        assert error.cause is cause


class TestSubclasses:
    """하위 예외 테스트"""

    def test_validation_error(self):
        error = ValidationError("required", field="base_wage", value=None)
        assert error.field == "base_wage"
        assert error.error_code == ErrorCodes.VALIDATION
        assert error.details["value"] == "None"

    def test_precondition_error(self):
        error = PreconditionError("bad wage", parameter="base_wage", value=0)
        assert isinstance(error, HappyWageError)
        assert error.error_code == ErrorCodes.PRECONDITION
        assert error.details == {"parameter": "base_wage", "value": 0}

    def test_precondition_error_custom_code(self):
        error = PreconditionError("zero", error_code=ErrorCodes.ZERO_WEIGHT_SUM)
        assert error.error_code == "HW_ZERO_WEIGHT_SUM"

    def test_configuration_error(self):
        error = ConfigurationError("bad", config_key="log_level")
        assert error.details["config_key"] == "log_level"
        assert error.error_code == ErrorCodes.CONFIG

    def test_data_load_error(self):
        error = DataLoadError("missing", file_path="team.json")
        assert error.file_path == "team.json"
        assert error.error_code == ErrorCodes.LOAD_FAILED
