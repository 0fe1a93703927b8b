"""
Local storage for generated videos, served from the public videos directory
"""
import os
import time
import logging

from config.settings import APP_URL, PUBLIC_VIDEO_DIR, VIDEO_URL_PATH

logger = logging.getLogger(__name__)


class VideoStorage:
    def __init__(self, directory: str = PUBLIC_VIDEO_DIR, base_url: str = APP_URL):
        self.directory = directory
        self.base_url = base_url.rstrip("/")

    def _unique_filename(self) -> str:
        timestamp = int(time.time() * 1000)
        filename = f"generated_video_{timestamp}.mp4"
        while os.path.exists(os.path.join(self.directory, filename)):
            timestamp += 1
            filename = f"generated_video_{timestamp}.mp4"
        return filename

    def save(self, data: bytes) -> str:
        """Write a video payload and return its filename."""
        os.makedirs(self.directory, exist_ok=True)
        filename = self._unique_filename()
        path = os.path.join(self.directory, filename)
        with open(path, "wb") as f:
            f.write(data)
        logger.info(f"Generated video saved to {path} ({len(data)} bytes)")
        return filename

    def public_url(self, filename: str) -> str:
        return f"{self.base_url}{VIDEO_URL_PATH}/{filename}"
