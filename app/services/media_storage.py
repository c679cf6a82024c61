# app/services/media_storage.py
import uuid
from pathlib import Path

from app.domain.errors import ValidationError
from app.utils.settings import MEDIA_DIR, MEDIA_URL_PREFIX, MAX_IMAGE_BYTES
from app.utils.logging import get_logger

logger = get_logger(__name__)

_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


class MediaStorage:
    """
    Local storage for book cover images.

    Files get a random name under ``media_dir`` and are served from
    ``url_prefix`` by the static mount in ``app.main``.
    """

    def __init__(
        self,
        media_dir: str | None = None,
        url_prefix: str | None = None,
        max_bytes: int = MAX_IMAGE_BYTES,
    ):
        self.media_dir = Path(media_dir or MEDIA_DIR)
        self.url_prefix = (url_prefix or MEDIA_URL_PREFIX).rstrip("/")
        self.max_bytes = max_bytes

    def save_image(self, content: bytes, content_type: str | None, filename: str | None = None) -> str:
        if not content_type or not content_type.startswith("image/"):
            raise ValidationError("Only image files are allowed")
        if not content:
            raise ValidationError("Cover image is empty")
        if len(content) > self.max_bytes:
            raise ValidationError(
                f"Cover image exceeds {self.max_bytes} bytes",
                details={"size": len(content)},
            )

        suffix = _EXTENSIONS.get(content_type) or Path(filename or "").suffix.lower() or ".img"
        name = f"cover-{uuid.uuid4().hex}{suffix}"

        self.media_dir.mkdir(parents=True, exist_ok=True)
        (self.media_dir / name).write_bytes(content)

        logger.info(f"Stored cover image {name} ({len(content)} bytes)")
        return f"{self.url_prefix}/{name}"

    def discard(self, url: str) -> None:
        """Usuwa plik zapisany przez save_image (np. gdy ksiazka nie powstala)."""
        name = url.rsplit("/", 1)[-1]
        (self.media_dir / name).unlink(missing_ok=True)
        logger.info(f"Discarded cover image {name}")
