"""Supabase-backed snapshot repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from grow_your_tree.services.snapshots import SnapshotRepository


@dataclass
class SupabaseSnapshotRepository(SnapshotRepository):
    """Stores the snapshot in a single row keyed by the storage key."""

    client: Client
    key: str
    table: str = "app_state"

    def read(self) -> str | None:
        """Return the stored payload for the key, if present."""
        response = (
            self.client.table(self.table)
            .select("payload")
            .eq("key", self.key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("payload")

    def write(self, payload: str) -> None:
        """Insert or replace the payload row."""
        self.client.table(self.table).upsert(
            {
                "key": self.key,
                "payload": payload,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()
