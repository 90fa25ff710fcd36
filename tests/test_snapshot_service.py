"""Tests for snapshot persistence."""

import json
from uuid import uuid4

import pytest
from pydantic import ValidationError

from grow_your_tree.domain.checklist import ChecklistItem
from grow_your_tree.domain.daily import DailyState, FoodEntry
from grow_your_tree.domain.errors import UnsupportedSnapshotVersionError
from grow_your_tree.services.snapshots import (
    SCHEMA_VERSION,
    SnapshotService,
    decode_snapshot,
    encode_snapshot,
)
from grow_your_tree.services.tracker import TrackerService
from tests.conftest import (
    FailingSnapshotRepository,
    InMemorySnapshotRepository,
    complete_day,
)


def _busy_state() -> DailyState:
    tracker = TrackerService()
    tracker.login("Kishore")
    complete_day(tracker)
    tracker.next_day()
    tracker.toggle_check(ChecklistItem.LUNCH)
    tracker.add_water(1250)
    tracker.set_steps(4321)
    tracker.add_food("chana_boiled", 180)
    tracker.set_journal("Learned about IAM policies")
    tracker.set_photo("data:image/jpeg;base64,/9j/AA==")
    return tracker.state


def test_round_trip_reproduces_state() -> None:
    state = _busy_state()

    assert decode_snapshot(encode_snapshot(state)) == state


def test_round_trip_of_defaults() -> None:
    assert decode_snapshot(encode_snapshot(DailyState())) == DailyState()


def test_encoded_snapshot_shape() -> None:
    payload = json.loads(encode_snapshot(_busy_state()))

    assert payload["schema_version"] == SCHEMA_VERSION
    assert payload["checklist"]["meals"]["lunch"] is True
    assert payload["checklist"]["meals"]["breakfast"] is False
    assert payload["checklist"]["study"] == {
        "ai1": False,
        "ai2": False,
        "aws1": False,
        "aws2": False,
    }
    assert payload["day_index"] == 2
    assert payload["plant_stage"] == 1
    assert payload["user"] == {"id": "local", "display_name": "Kishore"}


def test_decode_rejects_unknown_version() -> None:
    payload = json.loads(encode_snapshot(DailyState()))
    payload["schema_version"] = 99

    with pytest.raises(UnsupportedSnapshotVersionError):
        decode_snapshot(json.dumps(payload))


def test_decode_rejects_unversioned_record() -> None:
    with pytest.raises(UnsupportedSnapshotVersionError):
        decode_snapshot(json.dumps({"dayIndex": 3, "plantStage": 2}))


def test_decode_rejects_out_of_range_stage() -> None:
    payload = json.loads(encode_snapshot(DailyState()))
    payload["plant_stage"] = 9

    with pytest.raises(ValidationError):
        decode_snapshot(json.dumps(payload))


def test_load_returns_defaults_when_empty() -> None:
    service = SnapshotService(InMemorySnapshotRepository())

    assert service.load() == DailyState()


@pytest.mark.parametrize(
    "raw", ["not json", "[]", '{"schema_version": 1, "streak": -2}']
)
def test_load_fails_open_on_malformed_payload(raw: str) -> None:
    service = SnapshotService(InMemorySnapshotRepository(payload=raw))

    assert service.load() == DailyState()
    assert service.last_error is None


def test_load_fails_open_when_read_fails() -> None:
    service = SnapshotService(FailingSnapshotRepository())

    assert service.load() == DailyState()


def test_load_keeps_unknown_food_entries() -> None:
    entry = FoodEntry(id=uuid4(), food_key="retired_food", grams=50)
    raw = encode_snapshot(DailyState(foods=(entry,)))
    service = SnapshotService(InMemorySnapshotRepository(payload=raw))

    assert service.load().foods == (entry,)


def test_save_writes_and_clears_warning() -> None:
    repository = InMemorySnapshotRepository()
    service = SnapshotService(repository, last_error="stale warning")
    state = _busy_state()

    service.save(state)

    assert service.last_error is None
    assert repository.payload is not None
    assert decode_snapshot(repository.payload) == state


def test_save_failure_is_reported_not_raised() -> None:
    service = SnapshotService(FailingSnapshotRepository(fail_reads=False))

    service.save(DailyState())

    assert service.last_error is not None
    assert "quota exceeded" in service.last_error
