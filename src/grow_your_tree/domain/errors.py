"""Domain errors for the habit tracker."""


class TrackerError(Exception):
    """Base class for errors raised by tracker operations."""

    code = "tracker_error"


class UnknownFoodError(TrackerError):
    """Raised when a food key is not in the nutrition table."""

    code = "unknown_food"

    def __init__(self, food_key: str) -> None:
        super().__init__(f"Unknown food: {food_key!r}")
        self.food_key = food_key


class InvalidQuantityError(TrackerError):
    """Raised when a numeric input cannot be used as a quantity."""

    code = "invalid_quantity"


class InvalidPhotoError(TrackerError):
    """Raised when an uploaded photo cannot be attached."""

    code = "invalid_photo"

    def __init__(self, message: str, *, too_large: bool = False) -> None:
        super().__init__(message)
        self.too_large = too_large


class SnapshotError(TrackerError):
    """Raised when a persisted snapshot cannot be decoded."""

    code = "invalid_snapshot"


class UnsupportedSnapshotVersionError(SnapshotError):
    """Raised when a snapshot has a missing or unknown schema version."""

    code = "unsupported_snapshot_version"

    def __init__(self, version: object) -> None:
        super().__init__(f"Unsupported snapshot schema version: {version!r}")
        self.version = version
