"""Closed date range comparison helpers."""

from daterange_checker.exceptions import DateRangeCheckerError, DateRangeErrorCause
from daterange_checker.models import DateRange
from daterange_checker.services.date_utils import each_dates
from daterange_checker.services.range_checker import (
    find_non_overlapping_dates,
    find_overlapping_dates,
    is_end_date_in_range,
    is_in_range,
    is_start_date_and_end_date_in_range,
    is_start_date_and_end_date_include_range,
    is_start_date_in_range,
)
from daterange_checker.services.validation import check_date_range_format

__all__ = [
    "DateRange",
    "DateRangeCheckerError",
    "DateRangeErrorCause",
    "check_date_range_format",
    "each_dates",
    "find_non_overlapping_dates",
    "find_overlapping_dates",
    "is_end_date_in_range",
    "is_in_range",
    "is_start_date_and_end_date_in_range",
    "is_start_date_and_end_date_include_range",
    "is_start_date_in_range",
]
