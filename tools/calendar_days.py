"""
Calendar Days Tool

Date enumeration and formatting for the days workflow:
- Month token parsing ("YYYY年MM月") into a structured result
- Formatted date lines for every day of a month, with Japanese weekday
  label and week-of-month index
- Selectable month options starting at the current month
"""

import re
import calendar
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Union

# Index 0 is Sunday
WEEKDAY_LABELS_JP = ["日", "月", "火", "水", "木", "金", "土"]

MONTH_TOKEN_PATTERN = re.compile(r"(\d{4})年(\d{2})月")

DEFAULT_OPTION_COUNT = 14


@dataclass(frozen=True)
class MonthSelection:
    """A successfully parsed month token"""
    year: int
    month: int


@dataclass(frozen=True)
class InvalidMonthFormat:
    """Parse failure for a month token"""
    raw: str
    reason: str


MonthParseResult = Union[MonthSelection, InvalidMonthFormat]


def format_month_token(year: int, month: int) -> str:
    return f"{year}年{month:02d}月"


def parse_month_selector(raw: str) -> MonthParseResult:
    """
    Parse a "YYYY年MM月" token.

    Returns MonthSelection on success and InvalidMonthFormat otherwise;
    never raises.
    """
    if not isinstance(raw, str):
        return InvalidMonthFormat(raw=str(raw), reason="month token must be a string")

    match = MONTH_TOKEN_PATTERN.search(raw)
    if not match:
        return InvalidMonthFormat(raw=raw, reason="expected YYYY年MM月")

    year = int(match.group(1))
    month = int(match.group(2))
    if not 1 <= month <= 12:
        return InvalidMonthFormat(raw=raw, reason=f"month out of range: {month:02d}")

    return MonthSelection(year=year, month=month)


def days_in_month(year: int, month: int) -> int:
    _check_month(month)
    return calendar.monthrange(year, month)[1]


def first_weekday(year: int, month: int) -> int:
    """Weekday of day 1 of the month, 0=Sunday..6=Saturday"""
    _check_month(month)
    # calendar.weekday is 0=Monday and maps years outside 1..9999 onto the 400-year cycle
    return (calendar.weekday(year, month, 1) + 1) % 7


def format_date_line(year: int, month: int, day: int, first_day_weekday: int) -> str:
    """Format one day as "YYYY年MM月DD日(<weekday><week of month>)" """
    weekday = (first_day_weekday + day - 1) % 7
    week_of_month = (day - 1 + first_day_weekday) // 7 + 1
    return f"{year}年{month:02d}月{day:02d}日({WEEKDAY_LABELS_JP[weekday]}{week_of_month})"


def generate(year: int, month: int) -> List[str]:
    """
    Formatted date lines for every day of the given month, day 1 first.

    Args:
        year: Calendar year
        month: Month number, 1..12

    Raises:
        ValueError: month outside 1..12
    """
    total_days = days_in_month(year, month)
    offset = first_weekday(year, month)
    return [format_date_line(year, month, day, offset) for day in range(1, total_days + 1)]


def month_options(today: date, count: int = DEFAULT_OPTION_COUNT) -> List[Dict[str, str]]:
    """Selectable month tokens starting at today's month, each as value and title"""
    current_month = today.month - 1  # 0-indexed
    options = []
    for i in range(count):
        month_index = (current_month + i) % 12
        year = today.year + (current_month + i) // 12
        token = format_month_token(year, month_index + 1)
        options.append({"value": token, "title": token})
    return options


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
