"""Data classes for timeline entities."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CalendarDate:
    year: int  # <= 0 means BCE, offset by one; 0 is the unparseable sentinel
    month: int
    day: int


@dataclass(frozen=True)
class DateRange:
    """The visible window, kept as the literal strings the user typed plus their ordinals."""

    start: str
    end: str
    start_ordinal: int
    end_ordinal: int


@dataclass(frozen=True)
class Period:
    start: str
    end: str
    status: str


@dataclass(frozen=True)
class Event:
    date: str
    status: str
    note: str | None = None


@dataclass(frozen=True)
class Person:
    name: str
    periods: tuple[Period, ...] = ()
    events: tuple[Event, ...] = ()


# ============================================================================
# Render output
# ============================================================================


@dataclass(frozen=True)
class YearTick:
    year: int
    label: str
    position: float  # percent of the range width


@dataclass(frozen=True)
class PeriodBlock:
    period: Period
    display_start: str  # range start when the period begins before it
    left: float
    width: float


@dataclass(frozen=True)
class EventPoint:
    event: Event
    left: float


@dataclass(frozen=True)
class PersonLane:
    name: str
    blocks: tuple[PeriodBlock, ...]
    points: tuple[EventPoint, ...]


@dataclass(frozen=True)
class TimelineView:
    range: DateRange
    ticks: tuple[YearTick, ...]
    lanes: tuple[PersonLane, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class HoverInfo:
    name: str
    status: str
    date: str | None = None  # set for events
    note: str | None = None
    start: str | None = None  # set for periods
    end: str | None = None
