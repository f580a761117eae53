"""
Upload Service

Stores profile pictures on local disk under UPLOAD_DIR. Files are served
back by the /uploads static mount.

Naming:
=======
    profilePicture-<epoch ms>-<random 9 digits><ext>
    e.g. profilePicture-1736937000000-482913054.png
"""

import secrets
import time
from pathlib import Path
from typing import Optional

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from chirp.config.settings import settings
from chirp.shared.core.exceptions import BadRequestError
from chirp.shared.core.logging import get_logger

logger = get_logger(__name__)

FIELD_NAME = "profilePicture"

EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
}


class UploadService:
    """Validates and persists uploaded images."""

    def __init__(
        self,
        upload_dir: Optional[str] = None,
        max_size: Optional[int] = None,
        allowed_types: Optional[list[str]] = None,
    ) -> None:
        self.upload_dir = Path(upload_dir or settings.UPLOAD_DIR)
        self.max_size = max_size or settings.MAX_UPLOAD_SIZE_BYTES
        self.allowed_types = allowed_types or settings.ALLOWED_IMAGE_TYPES

    def build_filename(self, original_name: str, content_type: str) -> str:
        suffix = Path(original_name or "").suffix.lower()
        if suffix not in (".jpg", ".jpeg", ".png"):
            suffix = EXTENSIONS.get(content_type, "")
        stamp = int(time.time() * 1000)
        nonce = secrets.randbelow(10**9)
        return f"{FIELD_NAME}-{stamp}-{nonce}{suffix}"

    async def save_profile_picture(self, file: Optional[UploadFile]) -> str:
        """
        Validate and store an uploaded profile picture.

        Returns:
            Public path of the stored file, e.g. "/uploads/profilePicture-...png"

        Raises:
            BadRequestError: Missing file, unsupported type, or file too large
        """
        if file is None or not file.filename:
            raise BadRequestError("No file uploaded")

        if file.content_type not in self.allowed_types:
            raise BadRequestError(
                "Only JPEG and PNG images are allowed",
                details={"content_type": file.content_type},
            )

        # Read one byte past the limit to detect oversize files
        data = await file.read(self.max_size + 1)
        if len(data) > self.max_size:
            raise BadRequestError(
                "File is too large",
                details={"max_bytes": self.max_size},
            )

        filename = self.build_filename(file.filename, file.content_type)
        destination = self.upload_dir / filename
        await run_in_threadpool(self._write, destination, data)

        logger.info("Profile picture stored", filename=filename, size=len(data))
        return f"/uploads/{filename}"

    @staticmethod
    def _write(destination: Path, data: bytes) -> None:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(data)
