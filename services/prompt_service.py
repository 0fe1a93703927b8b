"""
Prompt enhancement for image and video generation
"""
import logging
from typing import List, Optional

from models.chat import CanvasContent, ContentType, reference_images
from prompts.generation_prompts import (
    IMAGE_ENHANCE_PROMPT,
    VIDEO_ENHANCE_PROMPT,
    VIDEO_WITH_REFERENCES_PROMPT,
    REFERENCE_IMAGE_LINE,
    DEFAULT_REFERENCE_DESCRIPTION,
)
from services.gemini_service import GeminiService

logger = logging.getLogger(__name__)


def describe_references(references: List[CanvasContent]) -> str:
    return "\n".join(
        REFERENCE_IMAGE_LINE.format(index=index, description=image.description or DEFAULT_REFERENCE_DESCRIPTION)
        for index, image in enumerate(references, start=1)
    )


def build_enhancement_prompt(prompt: str, intent: ContentType, references: Optional[List[CanvasContent]] = None) -> str:
    if intent == ContentType.IMAGE:
        return IMAGE_ENHANCE_PROMPT.format(user_prompt=prompt)

    images = reference_images(references or [])
    if not images:
        return VIDEO_ENHANCE_PROMPT.format(user_prompt=prompt)

    return VIDEO_WITH_REFERENCES_PROMPT.format(
        user_prompt=prompt,
        image_descriptions=describe_references(images)
    )


class PromptService:
    def __init__(self, gemini: GeminiService):
        self.gemini = gemini

    async def enhance(self, prompt: str, intent: ContentType, references: Optional[List[CanvasContent]] = None) -> str:
        """
        Rewrite a terse prompt into a detailed generation prompt.
        Falls back to the original prompt on any failure.
        """
        instruction = build_enhancement_prompt(prompt, intent, references)
        try:
            enhanced = await self.gemini.generate_text(instruction)
        except Exception as e:
            logger.error(f"Error enhancing {intent.value} prompt, using original: {str(e)}")
            return prompt

        logger.info(f"Enhanced {intent.value} prompt: {enhanced[:100]}")
        return enhanced
