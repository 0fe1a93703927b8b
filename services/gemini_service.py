"""
Gemini gateway for Easy Video.

This is the only module that talks to the google-genai SDK. Text calls raise
on failure so callers can choose their own fallback; image and video calls
return a tagged result (MediaArtifact or GenerationFailure) and never raise.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Union

from google import genai

from config.settings import (
    GEMINI_API_KEY,
    GEMINI_TEXT_MODEL,
    GEMINI_IMAGE_MODEL,
    GEMINI_VIDEO_MODEL,
    GENERATION_TIMEOUT,
    VIDEO_POLL_INTERVAL,
    VIDEO_POLL_MAX_ATTEMPTS,
)

logger = logging.getLogger(__name__)


class GeminiError(Exception):
    """Base error for failed Gemini calls."""


class GeminiUnavailableError(GeminiError):
    """No client is configured (missing API key)."""


class GeminiResponseError(GeminiError):
    """The call succeeded but returned nothing usable."""


@dataclass
class MediaArtifact:
    data: bytes
    mime_type: str

    @property
    def ok(self) -> bool:
        return True


@dataclass
class GenerationFailure:
    reason: str

    @property
    def ok(self) -> bool:
        return False


GenerationResult = Union[MediaArtifact, GenerationFailure]


def get_gemini_client() -> Optional[genai.Client]:
    """Build a Gemini client, or None when no API key is configured."""
    if not GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY not set, running in mock mode with placeholder results")
        return None
    return genai.Client(api_key=GEMINI_API_KEY)


class GeminiService:
    def __init__(self, client: Optional[genai.Client],
                 poll_interval: float = VIDEO_POLL_INTERVAL,
                 max_poll_attempts: int = VIDEO_POLL_MAX_ATTEMPTS,
                 timeout: float = GENERATION_TIMEOUT):
        self.client = client
        self.poll_interval = poll_interval
        self.max_poll_attempts = max_poll_attempts
        self.timeout = timeout

    @property
    def is_mock(self) -> bool:
        return self.client is None

    def _require_client(self) -> genai.Client:
        if self.client is None:
            raise GeminiUnavailableError("Gemini client is not configured")
        return self.client

    async def _call(self, func, **kwargs):
        """Run a blocking SDK call off the event loop with the configured timeout."""
        return await asyncio.wait_for(asyncio.to_thread(func, **kwargs), timeout=self.timeout)

    async def generate_text(self, prompt: str, model: str = GEMINI_TEXT_MODEL) -> str:
        client = self._require_client()
        response = await self._call(client.models.generate_content, model=model, contents=prompt)
        text = (response.text or "").strip() if response else ""
        if not text:
            raise GeminiResponseError("Empty response from text model")
        return text

    async def generate_image(self, prompt: str, model: str = GEMINI_IMAGE_MODEL) -> GenerationResult:
        try:
            client = self._require_client()
            response = await self._call(client.models.generate_images, model=model, prompt=prompt)
        except Exception as e:
            logger.error(f"Error calling Gemini image API: {str(e)}")
            return GenerationFailure(reason=str(e) or type(e).__name__)

        if not response or not response.generated_images:
            logger.error("No images generated")
            return GenerationFailure(reason="No images generated")

        image = response.generated_images[0].image
        if image is None or not image.image_bytes:
            logger.error("Generated image data is invalid")
            return GenerationFailure(reason="Generated image data is invalid")

        return MediaArtifact(data=image.image_bytes, mime_type=image.mime_type or "image/png")

    async def generate_video(self, prompt: str, model: str = GEMINI_VIDEO_MODEL) -> GenerationResult:
        try:
            client = self._require_client()
            operation = await self._call(client.models.generate_videos, model=model, prompt=prompt)

            attempts = 0
            while not operation.done:
                if self.max_poll_attempts and attempts >= self.max_poll_attempts:
                    logger.error(f"Video operation not done after {attempts} polls, giving up")
                    return GenerationFailure(reason="Video generation timed out")
                logger.info("Waiting for video generation to complete...")
                await asyncio.sleep(self.poll_interval)
                operation = await self._call(client.operations.get, operation=operation)
                attempts += 1

            if operation.error:
                logger.error(f"Video operation failed: {operation.error}")
                return GenerationFailure(reason=f"Video operation failed: {operation.error}")

            if not operation.response or not operation.response.generated_videos:
                logger.error("No videos were generated in the operation response")
                return GenerationFailure(reason="No videos were generated")

            video = operation.response.generated_videos[0].video
            if video is None:
                logger.error("Generated video data is missing")
                return GenerationFailure(reason="Generated video data is missing")

            data = video.video_bytes
            if not data:
                data = await self._call(client.files.download, file=video)
            if not data:
                return GenerationFailure(reason="Generated video payload is empty")

            return MediaArtifact(data=data, mime_type=video.mime_type or "video/mp4")

        except Exception as e:
            logger.error(f"Error calling Gemini video API: {str(e)}")
            return GenerationFailure(reason=str(e) or type(e).__name__)


# Global gateway instance - created on first use
gemini_service = None

def get_gemini_service() -> GeminiService:
    """Get or create the Gemini gateway"""
    global gemini_service
    if gemini_service is None:
        gemini_service = GeminiService(get_gemini_client())
    return gemini_service
