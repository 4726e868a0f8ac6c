"""Shared fixtures for timeline tests."""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from models import Event, Period, Person  # noqa: E402

DATA_DIR = Path(__file__).parent.parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def li_shimin() -> Person:
    return Person(
        name="Li Shimin",
        periods=(
            Period(start="598-01-23", end="626-09-04", status="Prince"),
            Period(start="626-09-04", end="649-07-10", status="Emperor"),
        ),
        events=(
            Event(date="598-01-23", status="Born"),
            Event(date="626-07-02", status="Xuanwu Gate incident", note="Palace coup"),
            Event(date="649-07-10", status="Dies"),
        ),
    )
