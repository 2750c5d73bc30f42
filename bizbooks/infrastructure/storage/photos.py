"""Local disk storage for receipt photos"""

import logging
import uuid
from pathlib import Path
from bizbooks.config import settings
from bizbooks.domain.exceptions import InvalidPhotoError, PhotoTooLargeError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif"}
ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif"}


class PhotoStore:
    """Stores uploaded receipt images and hands back a servable URL"""

    def __init__(
        self,
        upload_dir: str | Path | None = None,
        url_prefix: str | None = None,
        max_bytes: int | None = None,
    ):
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.url_prefix = (url_prefix or settings.upload_url_prefix).rstrip("/")
        self.max_bytes = max_bytes or settings.max_upload_bytes

    def validate(self, filename: str, content_type: str | None, size: int) -> str:
        """
        Check an upload against the image allow-list and size limit.

        Both the file extension and the declared content type must be images.

        Returns:
            The normalised file extension

        Raises:
            InvalidPhotoError: Not a jpeg/png/gif upload
            PhotoTooLargeError: Larger than max_bytes
        """
        extension = Path(filename or "").suffix.lower()
        if extension not in ALLOWED_EXTENSIONS or (content_type or "").lower() not in ALLOWED_CONTENT_TYPES:
            raise InvalidPhotoError("Only image files are allowed")
        if size > self.max_bytes:
            raise PhotoTooLargeError(f"Photo exceeds {self.max_bytes} bytes")
        return extension

    def save(self, filename: str, content_type: str | None, data: bytes) -> str:
        """Validate and write the image, returning its URL path"""
        extension = self.validate(filename, content_type, len(data))

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        stored_name = f"{uuid.uuid4().hex}{extension}"
        (self.upload_dir / stored_name).write_bytes(data)

        logger.info("Stored receipt photo", extra={"stored_name": stored_name, "size_bytes": len(data)})
        return f"{self.url_prefix}/{stored_name}"

    def delete(self, url: str) -> None:
        """Remove a stored photo by the URL save() returned; unknown names are ignored"""
        stored_name = Path(url).name
        if not stored_name:
            return
        (self.upload_dir / stored_name).unlink(missing_ok=True)
        logger.info("Removed receipt photo", extra={"stored_name": stored_name})
