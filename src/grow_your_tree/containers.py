"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from grow_your_tree.adapters.file_snapshot_repository import FileSnapshotRepository
from grow_your_tree.adapters.supabase_snapshot_repository import (
    SupabaseSnapshotRepository,
)
from grow_your_tree.config import Settings
from grow_your_tree.services.dashboard import DashboardService
from grow_your_tree.services.photos import PhotoService
from grow_your_tree.services.snapshots import SnapshotRepository, SnapshotService
from grow_your_tree.services.tracker import TrackerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    tracker_service: TrackerService
    snapshot_service: SnapshotService
    dashboard_service: DashboardService
    photo_service: PhotoService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container with the saved state loaded."""
    resolved_settings = settings or Settings()
    snapshot_service = SnapshotService(build_snapshot_repository(resolved_settings))
    return wire_container(resolved_settings, snapshot_service)


def wire_container(
    settings: Settings, snapshot_service: SnapshotService
) -> AppContainer:
    """Restore state through the snapshot service and connect the services."""
    tracker_service = TrackerService(state=snapshot_service.load())
    tracker_service.subscribe(snapshot_service.save)
    return AppContainer(
        settings=settings,
        tracker_service=tracker_service,
        snapshot_service=snapshot_service,
        dashboard_service=DashboardService(tracker_service, snapshot_service),
        photo_service=PhotoService(tracker_service, settings.photo_max_bytes),
    )


def build_snapshot_repository(settings: Settings) -> SnapshotRepository:
    """Return the repository for the configured storage backend."""
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise RuntimeError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required "
                "for the supabase storage backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseSnapshotRepository(
            client=client, key=settings.storage_key, table=settings.supabase_table
        )
    return FileSnapshotRepository(
        directory=settings.state_dir, key=settings.storage_key
    )
