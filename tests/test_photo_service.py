"""Tests for photo loading."""

import asyncio
import base64

import pytest

from grow_your_tree.domain.errors import InvalidPhotoError
from grow_your_tree.services.photos import PhotoService, to_data_url
from grow_your_tree.services.tracker import TrackerService

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


def test_attach_stores_data_url(tracker: TrackerService) -> None:
    service = PhotoService(tracker, max_bytes=1024)

    state = asyncio.run(service.attach(PNG_BYTES))

    expected = base64.b64encode(PNG_BYTES).decode("utf-8")
    assert state.journal.photo == f"data:image/png;base64,{expected}"
    assert tracker.state.journal.photo == state.journal.photo


def test_declared_content_type_wins() -> None:
    data_url = to_data_url(b"raw-bytes", "image/heic; charset=binary")

    assert data_url.startswith("data:image/heic;base64,")


def test_attach_rejects_unrecognised_payload(tracker: TrackerService) -> None:
    service = PhotoService(tracker)

    with pytest.raises(InvalidPhotoError):
        asyncio.run(service.attach(b"plain text", "text/plain"))

    assert tracker.state.journal.photo is None


def test_attach_rejects_empty_and_oversized(tracker: TrackerService) -> None:
    service = PhotoService(tracker, max_bytes=8)

    with pytest.raises(InvalidPhotoError):
        asyncio.run(service.attach(b""))
    with pytest.raises(InvalidPhotoError) as excinfo:
        asyncio.run(service.attach(PNG_BYTES))

    assert excinfo.value.too_large


def test_clear_removes_photo(tracker: TrackerService) -> None:
    service = PhotoService(tracker)
    asyncio.run(service.attach(PNG_BYTES))

    service.clear()

    assert tracker.state.journal.photo is None


def test_declared_size_over_limit_is_rejected(tracker: TrackerService) -> None:
    service = PhotoService(tracker, max_bytes=1024)

    with pytest.raises(InvalidPhotoError) as excinfo:
        service.check_declared_size("4096")

    assert excinfo.value.too_large


def test_declared_size_within_limit_or_missing_passes(
    tracker: TrackerService,
) -> None:
    service = PhotoService(tracker, max_bytes=1024)

    service.check_declared_size("512")
    service.check_declared_size(None)
    service.check_declared_size("not-a-number")
