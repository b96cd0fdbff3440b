"""두 DateRange 간 관계 판정 및 겹치는/겹치지 않는 날짜 추출.

모든 함수는 (reference, comparison) 순서의 위치 인자를 받고,
"reference 가 comparison 에 대해" 어떤 관계인지를 판정한다.
비교 전에 항상 두 인자를 check_date_range_format 으로 검증한다.
"""

import logging
from typing import Any

from daterange_checker.models import DateLike, DateRange
from daterange_checker.services.date_utils import (
    each_dates,
    each_dates_of,
    shift_days,
    to_instant,
)
from daterange_checker.services.validation import coerce_date_range

logger = logging.getLogger(__name__)


def _validate(reference: Any, comparison: Any) -> tuple[DateRange, DateRange]:
    return coerce_date_range(reference), coerce_date_range(comparison)


def _between(value: DateLike, date_range: DateRange) -> bool:
    instant = to_instant(value)
    return to_instant(date_range.start_date) <= instant <= to_instant(date_range.end_date)


def is_start_date_in_range(reference: Any, comparison: Any) -> bool:
    """reference.start_date 가 comparison 구간 안에 있는지 (양 끝 포함)."""
    ref, cmp = _validate(reference, comparison)
    return _between(ref.start_date, cmp)


def is_end_date_in_range(reference: Any, comparison: Any) -> bool:
    """reference.end_date 가 comparison 구간 안에 있는지 (양 끝 포함)."""
    ref, cmp = _validate(reference, comparison)
    return _between(ref.end_date, cmp)


def is_start_date_and_end_date_in_range(reference: Any, comparison: Any) -> bool:
    """reference 전체가 comparison 안에 포함되는지."""
    _validate(reference, comparison)
    return is_start_date_in_range(reference, comparison) and is_end_date_in_range(
        reference, comparison
    )


def is_start_date_and_end_date_include_range(reference: Any, comparison: Any) -> bool:
    """reference 가 comparison 전체를 감싸는지 (같은 구간 포함)."""
    ref, cmp = _validate(reference, comparison)
    return to_instant(ref.start_date) <= to_instant(cmp.start_date) and to_instant(
        ref.end_date
    ) >= to_instant(cmp.end_date)


def is_in_range(reference: Any, comparison: Any) -> bool:
    """두 구간이 하루 이상 겹치는지.

    start 포함, end 포함, reference 가 comparison 을 감쌈, 세 조건의 OR.
    """
    _validate(reference, comparison)
    return (
        is_start_date_in_range(reference, comparison)
        or is_end_date_in_range(reference, comparison)
        or is_start_date_and_end_date_include_range(reference, comparison)
    )


def _earlier(a: DateLike, b: DateLike) -> DateLike:
    return a if to_instant(a) <= to_instant(b) else b


def _later(a: DateLike, b: DateLike) -> DateLike:
    return a if to_instant(a) >= to_instant(b) else b


def _block(start: DateLike, end: DateLike) -> list[DateRange]:
    if to_instant(start) > to_instant(end):
        return []
    return [DateRange(start, end)]


def find_overlapping_dates(reference: Any, comparison: Any) -> list[DateLike]:
    """두 구간의 교집합에 속하는 모든 날짜 (오름차순). 겹치지 않으면 빈 리스트."""
    ref, cmp = _validate(reference, comparison)
    if not is_in_range(ref, cmp):
        return []

    overlap_start = _later(ref.start_date, cmp.start_date)
    overlap_end = _earlier(ref.end_date, cmp.end_date)
    result = each_dates(DateRange(overlap_start, overlap_end))
    logger.debug("Overlap %s ~ %s: %d days", overlap_start, overlap_end, len(result))
    return result


def find_non_overlapping_dates(reference: Any, comparison: Any) -> list[DateLike]:
    """두 구간 중 한쪽에만 속하는 날짜 (대칭차).

    겹치지 않는 경우: reference 전체 뒤에 comparison 전체 (재정렬하지 않음).
    겹치는 경우: 앞쪽 블록(늦은 start 전날까지) + 뒤쪽 블록(이른 end 다음날부터).
    열거 한도는 두 블록의 합계에 적용된다.
    """
    ref, cmp = _validate(reference, comparison)
    if not is_in_range(ref, cmp):
        logger.debug("Ranges are disjoint, returning both ranges in full")
        return each_dates_of([ref, cmp])

    blocks = _block(
        _earlier(ref.start_date, cmp.start_date),
        shift_days(_later(ref.start_date, cmp.start_date), -1),
    ) + _block(
        shift_days(_earlier(ref.end_date, cmp.end_date), 1),
        _later(ref.end_date, cmp.end_date),
    )
    result = each_dates_of(blocks)
    logger.debug("Non-overlap: %d blocks, %d days", len(blocks), len(result))
    return result
