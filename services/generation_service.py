"""
Content generation service for Easy Video.

Both generators always return a {url, description} pair: upstream failures are
replaced by placeholder media so the canvas always has something to show.
"""
import base64
import random
import time
import logging
from typing import Dict, List, Optional

from config.settings import PLACEHOLDER_IMAGE_IDS, PLACEHOLDER_IMAGE_URL, SAMPLE_VIDEO_URLS
from models.chat import CanvasContent
from services.gemini_service import GeminiService, MediaArtifact
from services.storage_service import VideoStorage

logger = logging.getLogger(__name__)


def to_data_url(artifact: MediaArtifact) -> str:
    encoded = base64.b64encode(artifact.data).decode("utf-8")
    return f"data:{artifact.mime_type};base64,{encoded}"


def placeholder_image() -> Dict[str, str]:
    image_id = random.choice(PLACEHOLDER_IMAGE_IDS)
    url = PLACEHOLDER_IMAGE_URL.format(image_id=image_id, timestamp=int(time.time() * 1000))
    return {
        "url": url,
        "description": "Error generating image. Showing placeholder."
    }


class GenerationService:
    def __init__(self, gemini: GeminiService, storage: VideoStorage):
        self.gemini = gemini
        self.storage = storage

    async def generate_image(self, prompt: str) -> Dict[str, str]:
        logger.info(f"Generating image for prompt: {prompt[:100]}")
        result = await self.gemini.generate_image(prompt)

        if not isinstance(result, MediaArtifact):
            logger.error(f"Image generation failed ({result.reason}), showing placeholder")
            return placeholder_image()

        return {
            "url": to_data_url(result),
            "description": prompt
        }

    async def generate_video(self, prompt: str, references: Optional[List[CanvasContent]] = None) -> Dict[str, str]:
        references = references or []
        logger.info(f"Generating video for prompt: {prompt[:100]} (reference images: {len(references)})")
        result = await self.gemini.generate_video(prompt)

        if isinstance(result, MediaArtifact):
            try:
                filename = self.storage.save(result.data)
                return {
                    "url": self.storage.public_url(filename),
                    "description": prompt
                }
            except OSError as e:
                logger.error(f"Failed to persist generated video: {str(e)}")
        else:
            logger.error(f"Video generation failed: {result.reason}")

        return self.sample_video(prompt, len(references))

    def sample_video(self, prompt: str, reference_count: int) -> Dict[str, str]:
        sample = random.choice(SAMPLE_VIDEO_URLS)
        url = sample if sample.startswith(("http://", "https://")) else self.storage.public_url(sample)
        logger.info(f"Using fallback video: {url}")
        return {
            "url": url,
            "description": f"Generated fallback video for: {prompt} (using {reference_count} reference images)"
        }
