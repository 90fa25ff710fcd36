"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from grow_your_tree.config import Settings
from grow_your_tree.containers import AppContainer, wire_container
from grow_your_tree.domain.checklist import ChecklistItem
from grow_your_tree.services.snapshots import SnapshotRepository, SnapshotService
from grow_your_tree.services.tracker import TrackerService


@dataclass
class InMemorySnapshotRepository(SnapshotRepository):
    """In-memory snapshot slot for tests."""

    payload: str | None = None
    writes: list[str] = field(default_factory=list)

    def read(self) -> str | None:
        return self.payload

    def write(self, payload: str) -> None:
        self.payload = payload
        self.writes.append(payload)


@dataclass
class FailingSnapshotRepository(SnapshotRepository):
    """Snapshot slot whose reads and writes always fail."""

    fail_reads: bool = True
    fail_writes: bool = True

    def read(self) -> str | None:
        if self.fail_reads:
            raise OSError("disk unavailable")
        return None

    def write(self, payload: str) -> None:
        if self.fail_writes:
            raise OSError("quota exceeded")


def complete_day(tracker: TrackerService) -> None:
    """Satisfy every daily goal on the tracker."""
    for item in ChecklistItem:
        if not tracker.state.checklist.is_checked(item):
            tracker.toggle_check(item)
    tracker.add_water(tracker.state.targets.water_ml)
    tracker.set_steps(tracker.state.targets.steps)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(state_dir=tmp_path / "state", photo_max_bytes=1024)


@pytest.fixture
def snapshot_repository() -> InMemorySnapshotRepository:
    return InMemorySnapshotRepository()


@pytest.fixture
def snapshot_service(
    snapshot_repository: InMemorySnapshotRepository,
) -> SnapshotService:
    return SnapshotService(snapshot_repository)


@pytest.fixture
def tracker() -> TrackerService:
    return TrackerService()


@pytest.fixture
def container(
    settings: Settings, snapshot_service: SnapshotService
) -> AppContainer:
    return wire_container(settings, snapshot_service)
