"""Stores booking photos on local disk and hands back the generated filename."""
import os
import secrets
import time
from fastapi import UploadFile
from app.config import UPLOAD_DIR, MAX_UPLOAD_SIZE
from app.exceptions import ValidationError
from app.logger import get_logger

logger = get_logger(__name__)

CHUNK_SIZE = 64 * 1024
# The stored extension decides how /uploads serves the file
ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}


class PhotoStore:
    def __init__(self, directory: str = UPLOAD_DIR, max_size: int = MAX_UPLOAD_SIZE):
        self.directory = directory
        self.max_size = max_size

    @staticmethod
    def _generate_filename(original_name: str) -> str:
        _, ext = os.path.splitext(original_name or "")
        unique_suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
        return f"waste-{unique_suffix}{ext.lower()}"

    def save(self, photo: UploadFile) -> str:
        _, ext = os.path.splitext(photo.filename or "")
        if not photo.content_type or not photo.content_type.startswith("image/"):
            raise ValidationError("Only image files are allowed")
        if ext.lower() not in ALLOWED_EXTENSIONS:
            raise ValidationError("Only image files are allowed")

        os.makedirs(self.directory, exist_ok=True)
        filename = self._generate_filename(photo.filename)
        path = os.path.join(self.directory, filename)

        written = 0
        with open(path, "wb") as out:
            while True:
                chunk = photo.file.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > self.max_size:
                    break
                out.write(chunk)

        if written > self.max_size:
            os.remove(path)
            raise ValidationError("File too large. Maximum size is 5MB.")
        if written == 0:
            os.remove(path)
            raise ValidationError("Photo is required")

        logger.info(f"Photo stored: {filename} ({written} bytes)")
        return filename

    def delete(self, filename: str) -> None:
        path = os.path.join(self.directory, filename)
        if os.path.exists(path):
            os.remove(path)
            logger.info(f"Photo removed: {filename}")


photo_store = PhotoStore()
