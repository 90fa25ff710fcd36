"""Photo-of-the-day loading."""

import asyncio
import base64
from dataclasses import dataclass

from grow_your_tree.domain.daily import DailyState
from grow_your_tree.domain.errors import InvalidPhotoError
from grow_your_tree.services.tracker import TrackerService


@dataclass
class PhotoService:
    """Encodes uploaded images and attaches them to today's journal."""

    tracker: TrackerService
    max_bytes: int = 5_000_000

    async def attach(
        self, image_bytes: bytes, content_type: str | None = None
    ) -> DailyState:
        """Encode the image off the event loop, then store it."""
        if not image_bytes:
            raise InvalidPhotoError("Photo upload was empty")
        self.check_size(len(image_bytes))
        data_url = await asyncio.to_thread(to_data_url, image_bytes, content_type)
        return self.tracker.set_photo(data_url)

    def check_size(self, size: int) -> None:
        """Reject uploads over the size limit."""
        if size > self.max_bytes:
            raise InvalidPhotoError(
                f"Photo is larger than {self.max_bytes} bytes", too_large=True
            )

    def check_declared_size(self, content_length: str | None) -> None:
        """Reject an upload early when its Content-Length is over the limit."""
        if content_length and content_length.strip().isdigit():
            self.check_size(int(content_length))

    def clear(self) -> DailyState:
        """Remove the photo of the day."""
        return self.tracker.set_photo(None)


def to_data_url(image_bytes: bytes, content_type: str | None = None) -> str:
    """Convert image bytes to a base64 data URL."""
    mime_type = _resolve_mime_type(image_bytes, content_type)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _resolve_mime_type(image_bytes: bytes, content_type: str | None) -> str:
    declared = (content_type or "").split(";", 1)[0].strip().lower()
    if declared.startswith("image/"):
        return declared
    detected = _detect_mime_type(image_bytes)
    if detected is None:
        raise InvalidPhotoError("Upload is not a recognised image")
    return detected


def _detect_mime_type(image_bytes: bytes) -> str | None:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes.startswith((b"GIF87a", b"GIF89a")):
        return "image/gif"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return None
