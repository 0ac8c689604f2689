import logging
import os
from datetime import date
from typing import List

from fastapi import UploadFile

from src.config import Config
from .schemas import FileElementResponse

logger = logging.getLogger(__name__)


class FilesService:
    def __init__(self, upload_dir: str = None, static_url: str = None):
        self.upload_dir = upload_dir or Config.UPLOAD_DIR
        self.static_url = (static_url or Config.STATIC_URL).rstrip("/")

    def folder_for(self, day: date) -> str:
        folder = os.path.join(self.upload_dir, day.isoformat())
        os.makedirs(folder, exist_ok=True)
        return folder

    async def save_files(self, files: List[UploadFile]) -> List[FileElementResponse]:
        """Write each upload into today's folder and return the public urls."""
        day = date.today()
        folder = self.folder_for(day)

        saved = []
        for file in files:
            # drop any client supplied directories
            name = os.path.basename(file.filename or "")
            if not name:
                continue

            content = await file.read()
            file_path = os.path.join(folder, name)
            with open(file_path, "wb") as f:
                f.write(content)

            logger.info(f"Stored {len(content)} bytes at {file_path}")
            saved.append(FileElementResponse(
                url=f"{self.static_url}/{day.isoformat()}/{name}",
                name=name
            ))

        return saved
