"""DateRange 값 타입 및 생성 헬퍼."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from daterange_checker.exceptions import DateRangeCheckerError, DateRangeErrorCause

DateLike = date | datetime

# dict 입력에서 허용하는 키. 객체는 snake_case 속성만 본다.
FIELD_KEYS = {
    "start_date": ("start_date", "startDate"),
    "end_date": ("end_date", "endDate"),
}

MISSING = object()


def get_field(candidate: Any, name: str) -> Any:
    """candidate 의 start_date/end_date 값. 없으면 MISSING."""
    if isinstance(candidate, Mapping):
        for key in FIELD_KEYS[name]:
            if key in candidate:
                return candidate[key]
        return MISSING
    return getattr(candidate, name, MISSING)


@dataclass(frozen=True)
class DateRange:
    """양 끝을 포함하는 닫힌 날짜 구간 [start_date, end_date].

    생성 시점에는 검증하지 않는다. 검증은 check_date_range_format 이 담당한다.
    """

    start_date: DateLike
    end_date: DateLike

    @classmethod
    def from_iso(cls, since: str, until: str) -> "DateRange":
        """'2022-01-01' → date, '2022-01-01T09:00:00' → datetime."""
        return cls(_parse_iso(since), _parse_iso(until))


def _parse_iso(value: str) -> DateLike:
    try:
        if "T" in value or " " in value.strip():
            return datetime.fromisoformat(value)
        return date.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise DateRangeCheckerError(
            DateRangeErrorCause.INVALID_TYPE, f"Invalid ISO date: {value!r}"
        ) from e


def date_range_from_dict(data: dict) -> DateRange:
    """dict → DateRange. snake_case/camelCase 키 모두 허용, 문자열은 ISO 로 파싱."""
    start = get_field(data, "start_date")
    end = get_field(data, "end_date")
    if start is MISSING or end is MISSING:
        raise DateRangeCheckerError(DateRangeErrorCause.UNDEFINED)
    if isinstance(start, str):
        start = _parse_iso(start)
    if isinstance(end, str):
        end = _parse_iso(end)
    return DateRange(start_date=start, end_date=end)
