"""DateRange 입력 검증. 모든 predicate/extraction 의 단일 관문."""

from datetime import date
from typing import Any

from daterange_checker.exceptions import DateRangeCheckerError, DateRangeErrorCause
from daterange_checker.models import MISSING, DateRange, get_field
from daterange_checker.services.date_utils import to_instant


def check_date_range_format(candidate: Any) -> None:
    """candidate 가 올바른 DateRange 인지 검사. 실패 시 DateRangeCheckerError.

    검사 순서:
      1. candidate 또는 start/end 필드 누락      → UNDEFINED
      2. start/end 가 None                     → NULL
      3. start/end 가 date/datetime 이 아님      → INVALID_TYPE
      4. start 가 end 보다 뒤                   → START_AFTER_END
    """
    if candidate is None:
        raise DateRangeCheckerError(DateRangeErrorCause.UNDEFINED)

    start = get_field(candidate, "start_date")
    end = get_field(candidate, "end_date")

    if start is MISSING or end is MISSING:
        raise DateRangeCheckerError(DateRangeErrorCause.UNDEFINED)

    if start is None or end is None:
        raise DateRangeCheckerError(DateRangeErrorCause.NULL)

    if not isinstance(start, date) or not isinstance(end, date):
        raise DateRangeCheckerError(DateRangeErrorCause.INVALID_TYPE)

    if to_instant(start) > to_instant(end):
        raise DateRangeCheckerError(DateRangeErrorCause.START_AFTER_END)


def coerce_date_range(candidate: Any) -> DateRange:
    """검증 후 DateRange 로 반환. 이미 DateRange 면 그대로."""
    check_date_range_format(candidate)
    if isinstance(candidate, DateRange):
        return candidate
    return DateRange(
        start_date=get_field(candidate, "start_date"),
        end_date=get_field(candidate, "end_date"),
    )
