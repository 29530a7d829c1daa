"""
Zero Waste Chef Image Storage
Filesystem-backed store for recipe image uploads
"""

import os
import uuid
from io import BytesIO
from pathlib import Path
from typing import List, Optional

import structlog
from fastapi import UploadFile
from PIL import Image

from core.config import Settings
from services.exceptions import ValidationError

logger = structlog.get_logger()

UPLOADS_URL_PREFIX = "/uploads"

# Pillow format name -> stored file extension
ALLOWED_FORMATS = {
    "JPEG": ".jpg",
    "PNG": ".png",
    "WEBP": ".webp",
    "GIF": ".gif",
}


class ImageStorage:
    """Validates uploads and writes them under UPLOAD_DIR with random names"""

    def __init__(self, settings: Settings):
        self.upload_dir = Path(settings.UPLOAD_DIR).resolve()
        self.max_file_size = settings.MAX_FILE_SIZE
        self.allowed_types = set(settings.allowed_file_types)
        self.max_files = settings.MAX_IMAGES_PER_RECIPE

    def ensure_directory(self) -> Path:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    @staticmethod
    def public_url(path: str) -> str:
        """Relative URL under which a stored file is served"""
        return f"{UPLOADS_URL_PREFIX}/{os.path.basename(path)}"

    def _decode_format(self, upload: UploadFile, data: bytes) -> str:
        """Open the bytes with Pillow; returns the detected format name"""
        try:
            img = Image.open(BytesIO(data))
            img.verify()

            # verify() leaves the image unusable, so re-open to read the format
            img = Image.open(BytesIO(data))
        except Exception as e:
            logger.info("Rejected upload that is not an image", filename=upload.filename, error=str(e))
            raise ValidationError(f"Image {upload.filename} is not a valid image")

        if img.format not in ALLOWED_FORMATS:
            raise ValidationError(f"Unsupported image format: {img.format}")
        return img.format

    async def save_all(self, uploads: Optional[List[UploadFile]]) -> List[str]:
        """
        Validate every upload before writing any of them

        The declared content type must be allowed and the bytes must decode
        as an image in an allowed format; the stored extension follows the
        decoded format.

        Returns:
            Stored file paths, in upload order
        """
        files = [upload for upload in (uploads or []) if upload is not None and upload.filename]
        if len(files) > self.max_files:
            raise ValidationError(f"At most {self.max_files} images are allowed per recipe")

        contents = []
        for upload in files:
            if upload.content_type not in self.allowed_types:
                raise ValidationError(f"Unsupported image type: {upload.content_type}")
            data = await upload.read()
            if len(data) > self.max_file_size:
                raise ValidationError(f"Image {upload.filename} exceeds the maximum file size")
            contents.append((data, self._decode_format(upload, data)))

        self.ensure_directory()
        stored = []
        for data, image_format in contents:
            destination = self.upload_dir / f"{uuid.uuid4().hex}{ALLOWED_FORMATS[image_format]}"
            destination.write_bytes(data)
            stored.append(str(destination))

        if stored:
            logger.info("Stored recipe images", count=len(stored))
        return stored

    def delete_all(self, paths: List[str]) -> None:
        """Remove stored files; files already gone are ignored"""
        for path in paths:
            try:
                Path(path).unlink(missing_ok=True)
            except OSError as e:
                logger.warning("Failed to remove image", path=path, error=str(e))
