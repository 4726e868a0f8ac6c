"""SQLite storage for timeline datasets."""

from pathlib import Path
import sqlite3

from models import Event, Period, Person
from registry import DatasetRegistry


def create_database(db_path: Path | str) -> sqlite3.Connection:
    """Create SQLite database with dataset, person, period and event tables."""
    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS dataset (
            name TEXT PRIMARY KEY,
            range_start TEXT NOT NULL,
            range_end TEXT NOT NULL
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS person (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            dataset TEXT NOT NULL,
            seq INTEGER NOT NULL,
            name TEXT NOT NULL,
            FOREIGN KEY (dataset) REFERENCES dataset(name)
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS period (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            person_id INTEGER NOT NULL,
            start_date TEXT NOT NULL,
            end_date TEXT NOT NULL,
            status TEXT NOT NULL,
            FOREIGN KEY (person_id) REFERENCES person(id)
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS event (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            person_id INTEGER NOT NULL,
            event_date TEXT NOT NULL,
            status TEXT NOT NULL,
            note TEXT,
            FOREIGN KEY (person_id) REFERENCES person(id)
        )
    """)

    conn.commit()
    return conn


def _delete_dataset(cursor: sqlite3.Cursor, name: str):
    person_ids = "SELECT id FROM person WHERE dataset = ?"
    cursor.execute(f"DELETE FROM period WHERE person_id IN ({person_ids})", (name,))
    cursor.execute(f"DELETE FROM event WHERE person_id IN ({person_ids})", (name,))
    cursor.execute("DELETE FROM person WHERE dataset = ?", (name,))
    cursor.execute("DELETE FROM dataset WHERE name = ?", (name,))


def store_dataset(
    conn: sqlite3.Connection, name: str, people: list[Person], range_start: str, range_end: str
):
    """Insert a dataset, replacing any previous copy stored under the same name."""
    cursor = conn.cursor()
    _delete_dataset(cursor, name)

    cursor.execute(
        "INSERT INTO dataset (name, range_start, range_end) VALUES (?, ?, ?)",
        (name, range_start, range_end),
    )

    for seq, person in enumerate(people):
        cursor.execute(
            "INSERT INTO person (dataset, seq, name) VALUES (?, ?, ?)",
            (name, seq, person.name),
        )
        person_id = cursor.lastrowid

        cursor.executemany(
            "INSERT INTO period (person_id, start_date, end_date, status) VALUES (?, ?, ?, ?)",
            [(person_id, p.start, p.end, p.status) for p in person.periods],
        )
        cursor.executemany(
            "INSERT INTO event (person_id, event_date, status, note) VALUES (?, ?, ?, ?)",
            [(person_id, e.date, e.status, e.note) for e in person.events],
        )

    conn.commit()


def dataset_names(conn: sqlite3.Connection) -> list[str]:
    cursor = conn.cursor()
    cursor.execute("SELECT name FROM dataset ORDER BY name")
    return [row[0] for row in cursor.fetchall()]


def load_dataset(conn: sqlite3.Connection, name: str) -> list[Person]:
    """Read a dataset's people back in their original order."""
    cursor = conn.cursor()
    cursor.execute("SELECT id, name FROM person WHERE dataset = ? ORDER BY seq", (name,))
    person_rows = cursor.fetchall()

    people: list[Person] = []
    for person_id, person_name in person_rows:
        cursor.execute(
            "SELECT start_date, end_date, status FROM period WHERE person_id = ? ORDER BY id", (person_id,)
        )
        periods = tuple(Period(start=r[0], end=r[1], status=r[2]) for r in cursor.fetchall())

        cursor.execute(
            "SELECT event_date, status, note FROM event WHERE person_id = ? ORDER BY id", (person_id,)
        )
        events = tuple(Event(date=r[0], status=r[1], note=r[2]) for r in cursor.fetchall())

        people.append(Person(name=person_name, periods=periods, events=events))

    return people


def build_registry(conn: sqlite3.Connection) -> DatasetRegistry:
    """Populate a registry from every dataset stored in the database."""
    registry = DatasetRegistry()
    cursor = conn.cursor()
    cursor.execute("SELECT name, range_start, range_end FROM dataset ORDER BY name")
    for name, range_start, range_end in cursor.fetchall():
        registry.register(name, load_dataset(conn, name), range_start, range_end)
    return registry
