"""Lay out people, periods and events against a visible date range."""

from calendar_mapper import (
    day_number,
    format_date_display,
    format_year,
    in_range,
    overlaps,
    position,
    width,
    year_ticks,
)
from models import (
    DateRange,
    Event,
    EventPoint,
    HoverInfo,
    Period,
    PeriodBlock,
    Person,
    PersonLane,
    TimelineView,
    YearTick,
)
from parsing import parse_year_month_day


def make_range(start: str, end: str) -> DateRange:
    """Resolve the user's start/end strings once per render."""
    return DateRange(
        start=start,
        end=end,
        start_ordinal=day_number(start),
        end_ordinal=day_number(end),
    )


def build_year_ticks(date_range: DateRange) -> list[YearTick]:
    """
    Visible year ticks for the range. Each candidate year is placed at its
    first day; ticks that land outside 0-100% are dropped, not clamped.
    """
    start_year = parse_year_month_day(date_range.start).year
    end_year = parse_year_month_day(date_range.end).year

    ticks: list[YearTick] = []
    for year in year_ticks(start_year, end_year):
        pos = position(f"{year}-01-01", date_range.start_ordinal, date_range.end_ordinal)
        if 0 <= pos <= 100:
            ticks.append(YearTick(year=year, label=format_year(year), position=pos))
    return ticks


def layout_period(period: Period, date_range: DateRange) -> PeriodBlock:
    """Position a single period that is known to overlap the range."""
    lo, hi = date_range.start_ordinal, date_range.end_ordinal

    # Blocks that start before the window are drawn from its literal start
    display_start = date_range.start if day_number(period.start) < lo else period.start

    return PeriodBlock(
        period=period,
        display_start=display_start,
        left=position(display_start, lo, hi),
        width=width(period.start, period.end, lo, hi),
    )


def layout_periods(person: Person, date_range: DateRange) -> list[PeriodBlock]:
    lo, hi = date_range.start_ordinal, date_range.end_ordinal
    return [
        layout_period(p, date_range) for p in person.periods if overlaps(p.start, p.end, lo, hi)
    ]


def layout_events(person: Person, date_range: DateRange) -> list[EventPoint]:
    """Events inside the range, boundaries included."""
    lo, hi = date_range.start_ordinal, date_range.end_ordinal
    return [
        EventPoint(event=e, left=position(e.date, lo, hi))
        for e in person.events
        if in_range(e.date, lo, hi)
    ]


def build_timeline(people: list[Person], start: str, end: str) -> TimelineView:
    """
    Compute everything a renderer needs for one pass.

    The range must not be degenerate (start and end on the same day); check it
    with validation.validate_range() before calling.
    """
    date_range = make_range(start, end)

    lanes = tuple(
        PersonLane(
            name=person.name,
            blocks=tuple(layout_periods(person, date_range)),
            points=tuple(layout_events(person, date_range)),
        )
        for person in people
    )

    return TimelineView(
        range=date_range,
        ticks=tuple(build_year_ticks(date_range)),
        lanes=lanes,
    )


# ============================================================================
# Hover / tooltip helpers
# ============================================================================


def hover_for_period(person_name: str, period: Period) -> HoverInfo:
    return HoverInfo(name=person_name, status=period.status, start=period.start, end=period.end)


def hover_for_event(person_name: str, event: Event) -> HoverInfo:
    return HoverInfo(name=person_name, status=event.status, date=event.date, note=event.note)


def describe_hover(info: HoverInfo) -> list[str]:
    """Tooltip lines: name, the formatted date or period with its status, then the note."""
    if info.date is not None:
        detail = f"{format_date_display(info.date)} - {info.status}"
    else:
        detail = (
            f"{format_date_display(info.start or '')} ~ "
            f"{format_date_display(info.end or '')} - {info.status}"
        )

    lines = [info.name, detail]
    if info.note:
        lines.append(info.note)
    return lines


def tooltip_side(pointer_x: float, viewport_width: float) -> str:
    """Tooltips flip to the left when the pointer is in the right half of the view."""
    return "left" if pointer_x > viewport_width / 2 else "right"
