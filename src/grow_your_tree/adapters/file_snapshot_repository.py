"""File-backed snapshot repository."""

from dataclasses import dataclass
from pathlib import Path

from grow_your_tree.services.snapshots import SnapshotRepository


@dataclass
class FileSnapshotRepository(SnapshotRepository):
    """Stores the snapshot as one JSON file named after the storage key."""

    directory: Path
    key: str

    @property
    def path(self) -> Path:
        """Return the file holding the snapshot."""
        return self.directory / f"{self.key}.json"

    def read(self) -> str | None:
        """Return the stored payload, if the file exists."""
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write(self, payload: str) -> None:
        """Replace the stored payload atomically."""
        self.directory.mkdir(parents=True, exist_ok=True)
        staging = self.path.with_name(f"{self.path.name}.tmp")
        staging.write_text(payload, encoding="utf-8")
        staging.replace(self.path)
