"""Tests for date string parsing and person record loading."""

import json

import pytest

from models import CalendarDate, Event, Period
from parsing import load_people, parse_person, parse_year_month_day


class TestParseYearMonthDay:
    """Tests for parse_year_month_day."""

    def test_full_ce_date(self) -> None:
        assert parse_year_month_day("649-07-10") == CalendarDate(649, 7, 10)

    def test_full_bce_date(self) -> None:
        assert parse_year_month_day("-232-01-01") == CalendarDate(-232, 1, 1)

    def test_bce_year_only(self) -> None:
        assert parse_year_month_day("-232") == CalendarDate(-232, 1, 1)

    def test_bce_year_and_month_ignores_month(self) -> None:
        assert parse_year_month_day("-232-05") == CalendarDate(-232, 1, 1)

    def test_ce_year_only(self) -> None:
        assert parse_year_month_day("649") == CalendarDate(649, 1, 1)

    def test_ce_year_and_month(self) -> None:
        assert parse_year_month_day("649-07") == CalendarDate(649, 7, 1)

    def test_zero_month_and_day_default_to_one(self) -> None:
        assert parse_year_month_day("1746-00-00") == CalendarDate(1746, 1, 1)

    def test_leading_digits_are_used(self) -> None:
        assert parse_year_month_day("649-ab-3x") == CalendarDate(649, 1, 3)

    def test_leading_whitespace(self) -> None:
        assert parse_year_month_day(" 649-07-10") == CalendarDate(649, 7, 10)

    def test_month_is_not_clamped(self) -> None:
        assert parse_year_month_day("2000-13-01") == CalendarDate(2000, 13, 1)

    @pytest.mark.parametrize("value", ["", None, 649, ["649"]])
    def test_empty_or_non_string_is_sentinel(self, value) -> None:
        assert parse_year_month_day(value) == CalendarDate(0, 1, 1)

    def test_unparseable_year_is_zero(self) -> None:
        assert parse_year_month_day("abc-07-10") == CalendarDate(0, 7, 10)

    def test_unparseable_bce_year_is_zero(self) -> None:
        assert parse_year_month_day("-abc-01-01").year == 0

    def test_never_raises(self) -> None:
        for value in ["-", "--", "---", "----", "-1-", "1--", "x"]:
            parse_year_month_day(value)

    def test_overlong_digit_runs_degrade_to_defaults(self) -> None:
        assert parse_year_month_day("9" * 5000 + "-01-01") == CalendarDate(0, 1, 1)
        assert parse_year_month_day("-" + "9" * 5000) == CalendarDate(0, 1, 1)
        assert parse_year_month_day("649-" + "9" * 5000 + "-10") == CalendarDate(649, 1, 10)


class TestParsePerson:
    """Tests for parse_person."""

    def test_full_record(self) -> None:
        person = parse_person(
            {
                "name": "Xiang Yu",
                "periods": [{"start": "-232-01-01", "end": "-202-12-01", "status": "General"}],
                "events": [{"date": "-202-12-01", "status": "Dies", "note": "Wu River"}],
            }
        )
        assert person.name == "Xiang Yu"
        assert person.periods == (Period("-232-01-01", "-202-12-01", "General"),)
        assert person.events == (Event("-202-12-01", "Dies", "Wu River"),)

    def test_missing_lists_are_empty(self) -> None:
        person = parse_person({"name": "Han Xin"})
        assert person.periods == ()
        assert person.events == ()

    def test_empty_note_becomes_none(self) -> None:
        person = parse_person({"name": "A", "events": [{"date": "1", "status": "x", "note": ""}]})
        assert person.events[0].note is None

    def test_non_string_dates_become_empty(self) -> None:
        person = parse_person(
            {
                "name": "A",
                "periods": [{"start": None, "end": -232, "status": "Reign"}],
                "events": [{"date": 649, "status": "Dies"}],
            }
        )
        assert person.periods[0].start == ""
        assert person.periods[0].end == ""
        assert person.events[0].date == ""
        assert parse_year_month_day(person.events[0].date) == CalendarDate(0, 1, 1)

    def test_period_entries_must_be_objects(self) -> None:
        with pytest.raises(ValueError, match="'periods' entries must be objects"):
            parse_person({"name": "A", "periods": ["x"]})

    def test_events_must_be_a_list(self) -> None:
        with pytest.raises(ValueError, match="'events' must be a list"):
            parse_person({"name": "A", "events": 5})

    def test_missing_name(self) -> None:
        with pytest.raises(ValueError, match="no name"):
            parse_person({"periods": []})

    def test_not_an_object(self) -> None:
        with pytest.raises(ValueError, match="must be an object"):
            parse_person(["Han Xin"])


class TestLoadPeople:
    """Tests for load_people."""

    def test_list_file(self, tmp_path) -> None:
        path = tmp_path / "people.json"
        path.write_text(json.dumps([{"name": "A"}, {"name": "B"}]), encoding="utf-8")
        assert [p.name for p in load_people(path)] == ["A", "B"]

    def test_wrapped_file(self, tmp_path) -> None:
        path = tmp_path / "people.json"
        path.write_text(json.dumps({"people": [{"name": "A"}]}), encoding="utf-8")
        assert [p.name for p in load_people(path)] == ["A"]

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_people(path)

    def test_not_a_list(self, tmp_path) -> None:
        path = tmp_path / "scalar.json"
        path.write_text("42", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected a list"):
            load_people(path)

    def test_bundled_dataset(self, data_dir) -> None:
        people = load_people(data_dir / "tang.json")
        assert "Li Shimin" in [p.name for p in people]
