"""Unit tests for receipt photo storage"""

import pytest
from bizbooks.domain.exceptions import InvalidPhotoError, PhotoTooLargeError
from bizbooks.infrastructure.storage.photos import PhotoStore

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


def test_save_writes_file_and_returns_url(photo_store: PhotoStore):
    url = photo_store.save("receipt.PNG", "image/png", PNG_BYTES)

    assert url.startswith("/uploads/")
    assert url.endswith(".png")
    stored = photo_store.upload_dir / url.rsplit("/", 1)[1]
    assert stored.read_bytes() == PNG_BYTES


def test_save_uses_unique_names(photo_store: PhotoStore):
    first = photo_store.save("r.jpg", "image/jpeg", PNG_BYTES)
    second = photo_store.save("r.jpg", "image/jpeg", PNG_BYTES)
    assert first != second


@pytest.mark.parametrize(
    "filename, content_type",
    [
        ("receipt.pdf", "application/pdf"),
        ("receipt.png", "application/octet-stream"),  # extension ok, mime not
        ("receipt.txt", "image/png"),  # mime ok, extension not
        ("receipt", "image/png"),
        ("receipt.png", None),
    ],
)
def test_rejects_non_images(photo_store: PhotoStore, filename, content_type):
    with pytest.raises(InvalidPhotoError):
        photo_store.save(filename, content_type, PNG_BYTES)


def test_rejects_oversized_upload(photo_store: PhotoStore):
    with pytest.raises(PhotoTooLargeError):
        photo_store.save("big.gif", "image/gif", b"0" * (photo_store.max_bytes + 1))


def test_accepts_upload_at_size_limit(photo_store: PhotoStore):
    url = photo_store.save("edge.gif", "image/gif", b"0" * photo_store.max_bytes)
    assert url.endswith(".gif")


def test_rejected_upload_writes_nothing(photo_store: PhotoStore):
    with pytest.raises(InvalidPhotoError):
        photo_store.save("notes.txt", "text/plain", b"hello")
    assert not photo_store.upload_dir.exists() or not any(photo_store.upload_dir.iterdir())


def test_delete_removes_stored_file(photo_store: PhotoStore):
    url = photo_store.save("receipt.png", "image/png", PNG_BYTES)

    photo_store.delete(url)

    assert not any(photo_store.upload_dir.iterdir())


def test_delete_unknown_photo_is_ignored(photo_store: PhotoStore):
    photo_store.delete("/uploads/missing.png")
    assert not photo_store.upload_dir.exists() or not any(photo_store.upload_dir.iterdir())
