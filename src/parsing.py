"""Date string parsing and person record loading."""

from pathlib import Path
import json
import re

from models import CalendarDate, Event, Period, Person


# Leading optional sign and digits, the rest of the segment is ignored ("07th" -> 7)
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

SENTINEL_DATE = CalendarDate(year=0, month=1, day=1)


def _parse_int(text: str | None) -> int | None:
    """Parse the leading integer of a segment, or None if there isn't one."""
    if not text:
        return None
    match = _LEADING_INT.match(text)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Digit runs past the interpreter's int conversion limit
        return None


def _or_one(text: str | None) -> int:
    """Month/day parsing: missing, unparseable and zero all become 1."""
    value = _parse_int(text)
    return value if value else 1


def parse_year_month_day(date_str) -> CalendarDate:
    """
    Parse a "[-]YYYY-MM-DD" string into a CalendarDate.
    Never raises; malformed input degrades to defaults.

    Handles formats like:
    - "649-07-10"   -> (649, 7, 10)
    - "649"         -> (649, 1, 1)
    - "-232-01-01"  -> (-232, 1, 1)
    - "-232"        -> (-232, 1, 1)
    - "-232-05"     -> (-232, 1, 1)  month is only read from the full form
    - "" / None     -> (0, 1, 1)
    """
    if not date_str or not isinstance(date_str, str):
        return SENTINEL_DATE

    parts = date_str.split("-")

    if parts[0] == "" and len(parts) > 3:
        # "-232-01-01" splits into ["", "232", "01", "01"]
        year = -(_parse_int(parts[1]) or 0)
        month = _or_one(parts[2])
        day = _or_one(parts[3])
    elif parts[0] == "" and len(parts) > 1:
        # "-232" or "-232-05"
        year = -(_parse_int(parts[1]) or 0)
        month = 1
        day = 1
    else:
        year = _parse_int(parts[0]) or 0
        month = _or_one(parts[1] if len(parts) > 1 else None)
        day = _or_one(parts[2] if len(parts) > 2 else None)

    return CalendarDate(year=year, month=month, day=day)


def _date_field(record: dict, key: str) -> str:
    # Non-string dates (null, numbers) fall back to the parser's sentinel
    value = record.get(key)
    return value if isinstance(value, str) else ""


def _record_list(record: dict, key: str) -> list[dict]:
    items = record.get(key) or []
    if not isinstance(items, list):
        raise ValueError(f"'{key}' must be a list, got {type(items).__name__}")
    for item in items:
        if not isinstance(item, dict):
            raise ValueError(f"'{key}' entries must be objects, got {type(item).__name__}")
    return items


def parse_period(record: dict) -> Period:
    return Period(
        start=_date_field(record, "start"),
        end=_date_field(record, "end"),
        status=str(record.get("status", "")),
    )


def parse_event(record: dict) -> Event:
    note = record.get("note")
    return Event(
        date=_date_field(record, "date"),
        status=str(record.get("status", "")),
        note=str(note) if note else None,
    )


def parse_person(record: dict) -> Person:
    """
    Build a Person from a loaded record:
    {"name": ..., "periods": [{start, end, status}], "events": [{date, status, note?}]}

    Missing lists are treated as empty; lists that are not lists of objects raise
    ValueError. Date strings are kept verbatim and parsed lazily by the calendar
    mapper.
    """
    if not isinstance(record, dict):
        raise ValueError(f"Person record must be an object, got {type(record).__name__}")

    name = record.get("name")
    if not name:
        raise ValueError("Person record has no name")

    periods = tuple(parse_period(p) for p in _record_list(record, "periods"))
    events = tuple(parse_event(e) for e in _record_list(record, "events"))

    return Person(name=str(name), periods=periods, events=events)


def parse_people(records: list) -> list[Person]:
    """Parse a list of person records, preserving their order."""
    return [parse_person(r) for r in records]


def load_people(filepath: Path) -> list[Person]:
    """Read a JSON dataset file containing a list of person records."""
    try:
        data = json.loads(Path(filepath).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {filepath}: {e}") from e

    # Some exports wrap the list as {"people": [...]}
    if isinstance(data, dict) and "people" in data:
        data = data["people"]

    if not isinstance(data, list):
        raise ValueError(f"Expected a list of people in {filepath}")

    return parse_people(data)
