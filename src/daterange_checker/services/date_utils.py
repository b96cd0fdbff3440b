"""날짜 산술 및 일자 열거 유틸리티."""

from datetime import date, datetime, timedelta, timezone

from pydantic import ValidationError

from daterange_checker.exceptions import DateRangeCheckerError, DateRangeErrorCause
from daterange_checker.models import DateLike, DateRange

ONE_DAY = timedelta(days=1)


def to_instant(value: DateLike) -> datetime:
    """비교용 키. date → 자정, aware datetime → UTC 기준 naive."""
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime.combine(value, datetime.min.time())


def shift_days(value: DateLike, days: int) -> DateLike:
    """달력 기준 N일 이동. aware datetime 도 wall-clock 시각이 유지된다."""
    return value + timedelta(days=days)


def _calendar_day(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def span_days(date_range: DateRange) -> int:
    """range 가 걸치는 달력 일수 (wall-clock 기준). 열거 한도 검사에 쓴다."""
    return (_calendar_day(date_range.end_date) - _calendar_day(date_range.start_date)).days + 1


def _configured_max_days() -> int | None:
    from daterange_checker.config import get_config

    try:
        return get_config().max_enumeration_days
    except ValidationError as e:
        raise DateRangeCheckerError(
            DateRangeErrorCause.INVALID_CONFIG,
            f"Invalid daterange-checker settings: {e.error_count()} error(s)",
        ) from e


def check_enumeration_limit(total_days: int, max_days: int | None = None) -> None:
    """열거할 총 일수가 한도를 넘으면 SPAN_TOO_LARGE. max_days 미지정 시 설정값."""
    if max_days is None:
        max_days = _configured_max_days()
    if max_days is not None and total_days > max_days:
        raise DateRangeCheckerError(
            DateRangeErrorCause.SPAN_TOO_LARGE,
            f"Date range spans {total_days} days, exceeding the limit of {max_days}.",
        )


def _walk(date_range: DateRange) -> list[DateLike]:
    end = to_instant(date_range.end_date)
    result: list[DateLike] = []
    current = date_range.start_date
    while to_instant(current) <= end:
        result.append(current)
        current = current + ONE_DAY
    return result


def each_dates(date_range: DateRange, max_days: int | None = None) -> list[DateLike]:
    """start_date ~ end_date 사이 모든 날짜 (inclusive, 오름차순).

    각 원소는 start_date 의 타입과 시각을 그대로 따른다.
    max_days 미지정 시 CheckerConfig.max_enumeration_days 를 사용한다.
    """
    check_enumeration_limit(span_days(date_range), max_days)
    return _walk(date_range)


def each_dates_of(ranges: list[DateRange], max_days: int | None = None) -> list[DateLike]:
    """여러 range 를 순서대로 이어 열거. 한도는 합계 기준으로 한 번만 검사한다."""
    check_enumeration_limit(sum(span_days(r) for r in ranges), max_days)
    result: list[DateLike] = []
    for r in ranges:
        result.extend(_walk(r))
    return result
