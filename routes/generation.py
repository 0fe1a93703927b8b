"""
Intent analysis and content generation routes for Easy Video
"""
from fastapi import APIRouter, HTTPException, status, Depends
from typing import Optional
import logging

from models.chat import ContentType, reference_images
from models.generation import (
    PromptRequest,
    ImageGenerationRequest,
    VideoGenerationRequest,
    IntentResponse,
    ImageGenerationResponse,
    VideoGenerationResponse,
)
from services.dependencies import get_intent_service, get_prompt_service, get_generation_service
from services.generation_service import GenerationService
from services.intent_service import IntentService, keyword_intent
from services.prompt_service import PromptService

router = APIRouter(prefix="/api", tags=["Generation"])
logger = logging.getLogger(__name__)


def require_prompt(prompt: Optional[str]) -> str:
    if not prompt or not prompt.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Prompt is required"
        )
    return prompt


@router.post("/analyze-intent", response_model=IntentResponse, response_model_exclude_none=True)
async def analyze_intent(
    request: PromptRequest,
    intent_service: IntentService = Depends(get_intent_service)
):
    """
    Decide whether a prompt asks for an image or a video
    """
    prompt = require_prompt(request.prompt)
    try:
        logger.info(f"Analyzing intent for prompt: {prompt[:100]}")
        intent = await intent_service.classify(prompt)
        logger.info(f"Intent determined: {intent.value}")
        return IntentResponse(intent=intent, prompt=prompt)

    except Exception as e:
        logger.error(f"Error in analyze-intent: {str(e)}", exc_info=True)
        fallback_intent = keyword_intent(prompt)
        logger.info(f"Fallback intent: {fallback_intent.value}")
        return IntentResponse(intent=fallback_intent, prompt=prompt, fallback=True)


@router.post("/generate-image", response_model=ImageGenerationResponse)
async def generate_image(
    request: ImageGenerationRequest,
    prompt_service: PromptService = Depends(get_prompt_service),
    generation_service: GenerationService = Depends(get_generation_service)
):
    """
    Enhance the prompt and generate an image
    """
    prompt = require_prompt(request.prompt)
    try:
        enhanced_prompt = await prompt_service.enhance(prompt, ContentType.IMAGE)
        result = await generation_service.generate_image(enhanced_prompt)

        return ImageGenerationResponse(
            url=result["url"],
            description=result["description"],
            enhanced_prompt=enhanced_prompt,
            original_prompt=prompt
        )

    except Exception as e:
        logger.error(f"Error in generate-image: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate image"
        )


@router.post("/generate-video", response_model=VideoGenerationResponse)
async def generate_video(
    request: VideoGenerationRequest,
    prompt_service: PromptService = Depends(get_prompt_service),
    generation_service: GenerationService = Depends(get_generation_service)
):
    """
    Enhance the prompt with any reference images and generate a video
    """
    prompt = require_prompt(request.prompt)
    try:
        canvas_items = request.images or []
        references = reference_images(canvas_items)
        logger.info(f"Video request with {len(references)} reference images ({len(canvas_items)} canvas items)")

        enhanced_prompt = await prompt_service.enhance(prompt, ContentType.VIDEO, references)
        result = await generation_service.generate_video(enhanced_prompt, references)

        return VideoGenerationResponse(
            url=result["url"],
            description=result["description"],
            enhanced_prompt=enhanced_prompt,
            original_prompt=prompt,
            used_images=len(references)
        )

    except Exception as e:
        logger.error(f"Error in generate-video: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate video"
        )
