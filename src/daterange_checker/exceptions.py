"""daterange-checker 예외 계층.

계층 구조:
    DateRangeCheckerError   (입력 DateRange 검증 실패)
        cause: DateRangeErrorCause
        ├── UNDEFINED        (range 또는 start/end 필드 누락)
        ├── NULL             (start/end 필드가 None)
        ├── INVALID_TYPE     (date/datetime 이 아닌 값)
        ├── START_AFTER_END  (start > end)
        ├── SPAN_TOO_LARGE   (열거 한도 초과)
        └── INVALID_CONFIG   (DATERANGE_* 설정값 오류)
"""

from enum import Enum


class DateRangeErrorCause(str, Enum):
    UNDEFINED = "undefined"
    NULL = "null"
    INVALID_TYPE = "invalid_type"
    START_AFTER_END = "start_after_end"
    SPAN_TOO_LARGE = "span_too_large"
    INVALID_CONFIG = "invalid_config"


_DEFAULT_MESSAGES = {
    DateRangeErrorCause.UNDEFINED: (
        "dateRange must be defined and contain both startDate and endDate."
    ),
    DateRangeErrorCause.NULL: "Both startDate and endDate cannot be null.",
    DateRangeErrorCause.INVALID_TYPE: (
        "Both startDate and endDate must be instances of date or datetime."
    ),
    DateRangeErrorCause.START_AFTER_END: "startDate cannot be after endDate.",
    DateRangeErrorCause.SPAN_TOO_LARGE: "Date range spans too many days.",
    DateRangeErrorCause.INVALID_CONFIG: "Invalid daterange-checker settings.",
}


class DateRangeCheckerError(Exception):
    """잘못된 DateRange 입력. 라이브러리 내부에서 잡지 않고 호출자에게 전달된다."""

    def __init__(self, cause: DateRangeErrorCause, message: str | None = None):
        self.cause = cause
        super().__init__(message or _DEFAULT_MESSAGES[cause])
