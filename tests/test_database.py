import sqlite3

import pytest

from bucketlist.database import (
    Bucket,
    close_database,
    get_locations,
    initialize,
    insert_demo_data,
    open_database,
)


@pytest.fixture
def conn():
    connection = open_database(":memory:")
    initialize(connection)
    yield connection
    close_database(connection)


def test_empty_table_has_no_locations(conn):
    assert get_locations(conn) == []


def test_initialize_is_idempotent(conn):
    initialize(conn)
    insert_demo_data(conn)
    initialize(conn)
    assert len(get_locations(conn)) == 2


def test_demo_data_round_trip(conn):
    insert_demo_data(conn)
    locations = get_locations(conn)
    assert [loc.placename for loc in locations] == ["Kyoto", "Osaka train-station"]
    assert locations[0].latitude == 35.02509
    assert locations[0].longitude == 135.76193
    assert locations[0].visited is False
    assert locations[1].latitude == 34.7332
    assert locations[1].longitude == 135.49928
    assert locations[1].visited is True


def test_ids_are_increasing(conn):
    insert_demo_data(conn)
    insert_demo_data(conn)
    numbers = [loc.number for loc in get_locations(conn)]
    assert numbers == sorted(numbers)
    assert len(set(numbers)) == 4


def test_to_dict_uses_json_keys(conn):
    insert_demo_data(conn)
    first = get_locations(conn)[0]
    data = first.to_dict()
    assert set(data) == {"id", "Placename", "Lat", "Long", "Visited"}
    assert data["Placename"] == first.placename
    assert data["Lat"] == first.latitude
    assert data["Long"] == first.longitude
    assert data["Visited"] == first.visited
    assert data["id"] == first.number


def test_to_dict_of_constructed_bucket():
    bucket = Bucket(7, "Kyoto", 35.02509, 135.76193, True)
    assert bucket.to_dict() == {
        "id": 7,
        "Placename": "Kyoto",
        "Lat": 35.02509,
        "Long": 135.76193,
        "Visited": True,
    }


def test_missing_table_raises():
    connection = open_database(":memory:")
    try:
        with pytest.raises(sqlite3.OperationalError):
            get_locations(connection)
    finally:
        close_database(connection)


def test_closed_connection_raises(conn):
    close_database(conn)
    with pytest.raises(sqlite3.ProgrammingError):
        get_locations(conn)


def test_data_persists_in_file(tmp_path):
    path = tmp_path / "bucketlist.db"
    first = open_database(path)
    initialize(first)
    insert_demo_data(first)
    close_database(first)
    assert path.exists()

    second = open_database(path)
    try:
        names = [loc.placename for loc in get_locations(second)]
    finally:
        close_database(second)
    assert names == ["Kyoto", "Osaka train-station"]