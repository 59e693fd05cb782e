"""Storage of bucket-list locations in a SQLite database."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from os import PathLike
from typing import Any

DEFAULT_PATH = "./bucketlist.db"

_CREATE_TABLE = (
    "Create Table IF NOT EXISTS Buckets ("
    "ID INTEGER PRIMARY KEY AUTOINCREMENT, "
    "Placename TEXT(255), "
    "Latitude TEXT(255),"
    "Longitude TEXT(255), "
    "Visited int(1));"
)
_SELECT_ALL = "SELECT * FROM Buckets"
_INSERT = (
    "Insert into Buckets (Placename, Latitude, Longitude, Visited ) "
    "Values (?, ?, ?, ?)"
)


@dataclass(frozen=True)
class Bucket:
    """One place on the bucket list."""

    number: int
    placename: str
    latitude: float
    longitude: float
    visited: bool

    def to_dict(self) -> dict[str, Any]:
        """Return the place with the keys used in its JSON form."""
        return {
            "id": self.number,
            "Placename": self.placename,
            "Lat": self.latitude,
            "Long": self.longitude,
            "Visited": self.visited,
        }

    @classmethod
    def _from_row(cls, row: dict[str, Any]) -> "Bucket":
        return cls(
            number=int(row["ID"]),
            placename=str(row["Placename"]),
            latitude=float(row["Latitude"]),
            longitude=float(row["Longitude"]),
            visited=bool(int(row["Visited"])),
        )


_DEMO_DATA = (
    ("Kyoto", 35.02509, 135.76193, False),
    ("Osaka train-station", 34.7332, 135.49928, True),
)


def open_database(path: str | PathLike[str] = DEFAULT_PATH) -> sqlite3.Connection:
    """Open the database at ``path`` and check that it answers."""
    conn = sqlite3.connect(path)
    try:
        conn.execute("SELECT 1").fetchone()
    except sqlite3.Error:
        conn.close()
        raise
    return conn


def close_database(conn: sqlite3.Connection) -> None:
    """Close the database connection."""
    conn.close()


def initialize(conn: sqlite3.Connection) -> None:
    """Create the Buckets table if it does not exist yet."""
    with conn:
        conn.execute(_CREATE_TABLE)


def get_locations(conn: sqlite3.Connection) -> list[Bucket]:
    """Return every stored place, in table order."""
    cursor = conn.execute(_SELECT_ALL)
    columns = [description[0] for description in cursor.description]
    return [Bucket._from_row(dict(zip(columns, row))) for row in cursor]


def insert_demo_data(conn: sqlite3.Connection) -> None:
    """Insert the two sample places."""
    with conn:
        conn.executemany(_INSERT, _DEMO_DATA)