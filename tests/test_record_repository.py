import pytest
from yaml import safe_load

from timesheettool import configuration
from timesheettool.repository.project import PROJECT_REPO
from timesheettool.repository.record import (
    RECORD_REPO,
    RecordConstraintError,
    RecordNotFoundError,
    RecordRepository,
)

from conftest import utc


def test_insert_assigns_increasing_ids(data_dir):
    first = RECORD_REPO.insert_record("a", "acme", utc(2024, 4, 5, 9), None)
    second = RECORD_REPO.insert_record("b", None, utc(2024, 4, 5, 10), None)

    assert first["id"] == 1
    assert second["id"] == 2
    assert second["project"] is None


def test_insert_rejects_end_before_start(data_dir):
    with pytest.raises(RecordConstraintError):
        RECORD_REPO.insert_record(
            "a", "acme", utc(2024, 4, 5, 10), utc(2024, 4, 5, 9)
        )


def test_flush_writes_yaml_that_reloads(data_dir):
    RECORD_REPO.insert_record("a", "acme", utc(2024, 4, 5, 9), utc(2024, 4, 5, 10))
    RECORD_REPO.insert_record("b", "acme", utc(2024, 4, 5, 10), None)

    assert RECORD_REPO.flush() is True
    assert RECORD_REPO.flush() is False

    raw = safe_load(configuration.DATA_RECORDS_PATH.read_text())
    assert raw["next_id"] == 3
    assert raw["records"][0]["started_at"] == "2024-04-05T09:00:00+00:00"

    reloaded = RecordRepository()
    records = reloaded.query_records_all()
    assert [record["task"] for record in records] == ["a", "b"]
    assert records[0]["ended_at"] == utc(2024, 4, 5, 10)
    assert records[1]["ended_at"] is None
    assert reloaded.insert_record("c", None, utc(2024, 4, 5, 11), None)["id"] == 3


def test_insert_remembers_project(data_dir):
    RECORD_REPO.insert_record("a", "acme", utc(2024, 4, 5, 9), None)

    assert PROJECT_REPO.get_all_projects() == ["acme"]


def test_most_recent_record_before_is_strict(data_dir):
    RECORD_REPO.insert_record("a", "acme", utc(2024, 4, 5, 9), None)
    RECORD_REPO.insert_record("b", "acme", utc(2024, 4, 5, 11), None)

    assert RECORD_REPO.get_most_recent_record(utc(2024, 4, 5, 9)) is None
    assert RECORD_REPO.get_most_recent_record(utc(2024, 4, 5, 11))["task"] == "a"
    assert RECORD_REPO.get_most_recent_record(utc(2024, 4, 5, 12))["task"] == "b"


def test_set_end_timestamp(data_dir):
    record = RECORD_REPO.insert_record("a", "acme", utc(2024, 4, 5, 9), None)

    RECORD_REPO.set_record_end_timestamp(record["id"], utc(2024, 4, 5, 10))

    assert RECORD_REPO.get_record(record["id"])["ended_at"] == utc(2024, 4, 5, 10)


def test_set_end_timestamp_for_unknown_record(data_dir):
    with pytest.raises(RecordNotFoundError, match="No record found with id 5"):
        RECORD_REPO.set_record_end_timestamp(5, utc(2024, 4, 5, 10))


def test_query_records_returns_overlapping_records_in_order(data_dir):
    RECORD_REPO.insert_record("late", "acme", utc(2024, 4, 6, 9), None)
    RECORD_REPO.insert_record(
        "before", "acme", utc(2024, 4, 3, 9), utc(2024, 4, 3, 10)
    )
    RECORD_REPO.insert_record(
        "spanning", "acme", utc(2024, 4, 4, 22), utc(2024, 4, 5, 2)
    )
    RECORD_REPO.insert_record("inside", "acme", utc(2024, 4, 5, 9), utc(2024, 4, 5, 10))
    RECORD_REPO.insert_record("after", "acme", utc(2024, 4, 7, 9), utc(2024, 4, 7, 10))

    records = RECORD_REPO.query_records(utc(2024, 4, 5), utc(2024, 4, 7))

    assert [record["task"] for record in records] == ["spanning", "inside", "late"]


def test_update_record(data_dir):
    record = RECORD_REPO.insert_record("a", "acme", utc(2024, 4, 5, 9), None)

    updated = RECORD_REPO.update_record(
        record["id"], None, utc(2024, 4, 5, 10), "b", "globex"
    )

    assert updated["task"] == "b"
    assert updated["project"] == "globex"
    assert updated["started_at"] == utc(2024, 4, 5, 9)
    assert updated["ended_at"] == utc(2024, 4, 5, 10)


def test_update_record_keeps_bounds_consistent(data_dir):
    record = RECORD_REPO.insert_record(
        "a", "acme", utc(2024, 4, 5, 9), utc(2024, 4, 5, 10)
    )

    with pytest.raises(RecordConstraintError):
        RECORD_REPO.update_record(record["id"], utc(2024, 4, 5, 11), None, None, None)
    assert RECORD_REPO.get_record(record["id"])["started_at"] == utc(2024, 4, 5, 9)


def test_returned_records_are_copies(data_dir):
    record = RECORD_REPO.insert_record("a", "acme", utc(2024, 4, 5, 9), None)
    record["task"] = "changed"

    assert RECORD_REPO.get_record(record["id"])["task"] == "a"
