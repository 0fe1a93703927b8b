"""
Intent classification: does a prompt ask for an image or a video?
"""
import logging

from models.chat import ContentType
from prompts.generation_prompts import INTENT_ANALYSIS_PROMPT
from services.gemini_service import GeminiService

logger = logging.getLogger(__name__)

VIDEO_KEYWORDS = [
    "video", "animation", "movie", "film", "animate", "motion", "moving",
    "sequence", "clip", "footage", "cinematic", "dynamic", "flowing",
    "视频", "动画", "电影",
]


def keyword_intent(prompt: str) -> ContentType:
    """Keyword heuristic used whenever the text model cannot be asked."""
    lower_prompt = (prompt or "").lower()
    if any(keyword in lower_prompt for keyword in VIDEO_KEYWORDS):
        return ContentType.VIDEO
    return ContentType.IMAGE


def parse_intent_response(result: str) -> ContentType:
    clean_result = result.lower().strip()
    if "video" in clean_result:
        return ContentType.VIDEO
    if "image" in clean_result:
        return ContentType.IMAGE
    logger.warning(f"Unclear intent analysis result: '{result}', defaulting to image")
    return ContentType.IMAGE


class IntentService:
    def __init__(self, gemini: GeminiService):
        self.gemini = gemini

    async def classify(self, prompt: str) -> ContentType:
        """Classify a (non-empty) prompt. Never raises."""
        try:
            result = await self.gemini.generate_text(INTENT_ANALYSIS_PROMPT.format(user_prompt=prompt))
        except Exception as e:
            intent = keyword_intent(prompt)
            logger.error(f"Error analyzing prompt intent: {str(e)}. Keyword fallback: {intent.value}")
            return intent

        intent = parse_intent_response(result)
        logger.info(f"Analyzed prompt intent: {intent.value}")
        return intent
