"""Validation for date input and timeline datasets."""

from calendar_mapper import day_number
from models import Person
from parsing import parse_year_month_day


def validate_date(date_str: str) -> bool:
    """Check that a date string parses to a plausible month and day."""
    date = parse_year_month_day(date_str)
    return 1 <= date.month <= 12 and 1 <= date.day <= 31


def validate_range(start: str, end: str) -> list[str]:
    """
    Validate a user-entered range before it reaches the layout code.

    The calendar mapper divides by the range length, so an empty or reversed
    range must be rejected here. Returns a list of warning messages; an empty
    list means the range is safe to lay out.
    """
    warnings: list[str] = []

    if not validate_date(start):
        warnings.append(f"Invalid start date: {start!r}")
    if not validate_date(end):
        warnings.append(f"Invalid end date: {end!r}")

    start_day = day_number(start)
    end_day = day_number(end)
    if end_day == start_day:
        warnings.append(f"Empty range: {start!r} and {end!r} are the same day")
    elif end_day < start_day:
        warnings.append(f"Reversed range: {end!r} is before {start!r}")

    return warnings


def _is_sentinel(date_str: str) -> bool:
    # Year 0 only comes out of the parser for empty or unparseable input
    return parse_year_month_day(date_str).year == 0


def validate_people(people: list[Person]) -> list[str]:
    """
    Validate a dataset for:
    - Duplicate person names
    - Dates that could not be parsed (they silently sort near the epoch)
    - Months outside 1-12
    - Periods that end before they start

    Returns a list of warning messages.
    """
    warnings: list[str] = []

    seen: set[str] = set()
    for person in people:
        if person.name in seen:
            warnings.append(f"Duplicate person name: {person.name}")
        seen.add(person.name)

        for period in person.periods:
            for date_str in (period.start, period.end):
                if _is_sentinel(date_str):
                    warnings.append(
                        f"Unparseable date {date_str!r} in period '{period.status}' "
                        f"of {person.name}"
                    )
                elif not validate_date(date_str):
                    warnings.append(
                        f"Out-of-range month/day {date_str!r} in period '{period.status}' "
                        f"of {person.name}"
                    )

            if day_number(period.end) < day_number(period.start):
                warnings.append(
                    f"Impossible: period '{period.status}' of {person.name} ends before it starts"
                )

        for event in person.events:
            if _is_sentinel(event.date):
                warnings.append(
                    f"Unparseable date {event.date!r} in event '{event.status}' of {person.name}"
                )
            elif not validate_date(event.date):
                warnings.append(
                    f"Out-of-range month/day {event.date!r} in event '{event.status}' "
                    f"of {person.name}"
                )

    return warnings
