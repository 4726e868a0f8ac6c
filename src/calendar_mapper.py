"""
Synthetic calendar arithmetic and proportional geometry.

Every date is mapped to an ordinal ("day number") on a simplified calendar:
twelve 30-day months and one leap day inserted after the second month.
Ordinal 0 is year 1, month 1, day 1. Non-positive years are BCE, offset by
one: stored year 0 displays as 1 BCE, stored year -1 as 2 BCE. Year 0 is also
the parse sentinel and shares its base with year 1.

None of this is meant to match a real calendar; ordering and layout only
depend on the arithmetic being applied consistently.
"""

from models import CalendarDate
from parsing import parse_year_month_day


DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12

MONTH_ABBREVIATIONS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]

# (span threshold, step), first match wins
TICK_STEPS = [
    (100, 10),
    (50, 5),
    (20, 2),
]


def _as_date(value: CalendarDate | str) -> CalendarDate:
    if isinstance(value, CalendarDate):
        return value
    return parse_year_month_day(value)


def is_leap_year(year: int) -> bool:
    """
    Leap rule: Gregorian for CE years, plain "divisible by 4" on |year - 1| for
    BCE years. The BCE side has no century exception.
    """
    if year <= 0:
        return abs(year - 1) % 4 == 0
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def to_ordinal(date: CalendarDate) -> int:
    """Convert a CalendarDate to its signed day number."""
    year, month, day = date.year, date.month, date.day

    if year > 0:
        total = (year - 1) * 365 + (year - 1) // 4
    else:
        abs_year = abs(year)
        total = -(abs_year * 365 + abs_year // 4)

    total += DAYS_PER_MONTH * (month - 1)

    if month > 2 and is_leap_year(year):
        total += 1

    total += day - 1
    return total


def day_number(value: CalendarDate | str) -> int:
    """Ordinal of a date string or CalendarDate."""
    return to_ordinal(_as_date(value))


def position(value: CalendarDate | str, range_start: int, range_end: int) -> float:
    """
    Percentage offset of a date within [range_start, range_end].
    Not clipped: dates outside the range give values below 0 or above 100.
    """
    return (day_number(value) - range_start) / (range_end - range_start) * 100


def width(
    start: CalendarDate | str,
    end: CalendarDate | str,
    range_start: int,
    range_end: int,
) -> float:
    """
    Percentage width of an interval after clamping both ends into the range.
    Negative if the interval lies entirely outside the range, so filter with
    overlaps() first.
    """
    clamped_start = max(day_number(start), range_start)
    clamped_end = min(day_number(end), range_end)
    return (clamped_end - clamped_start) / (range_end - range_start) * 100


def overlaps(
    start: CalendarDate | str,
    end: CalendarDate | str,
    range_start: int,
    range_end: int,
) -> bool:
    """Inclusive interval/range overlap test."""
    return day_number(end) >= range_start and day_number(start) <= range_end


def in_range(value: CalendarDate | str, range_start: int, range_end: int) -> bool:
    """Inclusive point-in-range test."""
    return range_start <= day_number(value) <= range_end


def tick_step(span: int) -> int:
    for threshold, step in TICK_STEPS:
        if span > threshold:
            return step
    return 1


def year_ticks(start_year: int, end_year: int) -> list[int]:
    """
    Candidate tick years between start_year and end_year (inclusive), aligned
    to a step chosen from the span. Callers still check each tick's position.
    """
    step = tick_step(end_year - start_year)
    first = -(-start_year // step) * step  # ceil for negative years too
    return list(range(first, end_year + 1, step))


def format_year(year: int) -> str:
    """
    Display label for a stored year. This is the only place the BCE offset is
    undone: stored 0 -> "1 BCE", stored -232 -> "233 BCE", stored 649 -> "649".
    """
    if year <= 0:
        return f"{abs(year - 1)} BCE"
    return str(year)


def format_date_display(value: CalendarDate | str) -> str:
    """Full date label, e.g. "10 Jul 649" or "1 Jan 233 BCE"."""
    date = _as_date(value)
    if 1 <= date.month <= MONTHS_PER_YEAR:
        month_label = MONTH_ABBREVIATIONS[date.month - 1]
    else:
        month_label = f"M{date.month}"
    return f"{date.day} {month_label} {format_year(date.year)}"
