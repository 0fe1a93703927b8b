"""
FastAPI dependencies wiring the generation services together
"""
from fastapi import Depends

from services.gemini_service import GeminiService, get_gemini_service
from services.generation_service import GenerationService
from services.intent_service import IntentService
from services.orchestrator import ContentOrchestrator
from services.prompt_service import PromptService
from services.session_service import SessionStore, get_session_store
from services.storage_service import VideoStorage

video_storage = None

def get_video_storage() -> VideoStorage:
    global video_storage
    if video_storage is None:
        video_storage = VideoStorage()
    return video_storage


def get_gemini() -> GeminiService:
    return get_gemini_service()


def get_intent_service(gemini: GeminiService = Depends(get_gemini)) -> IntentService:
    return IntentService(gemini)


def get_prompt_service(gemini: GeminiService = Depends(get_gemini)) -> PromptService:
    return PromptService(gemini)


def get_generation_service(
    gemini: GeminiService = Depends(get_gemini),
    storage: VideoStorage = Depends(get_video_storage)
) -> GenerationService:
    return GenerationService(gemini, storage)


def get_orchestrator(
    intent_service: IntentService = Depends(get_intent_service),
    prompt_service: PromptService = Depends(get_prompt_service),
    generation_service: GenerationService = Depends(get_generation_service)
) -> ContentOrchestrator:
    return ContentOrchestrator(intent_service, prompt_service, generation_service)


def get_sessions() -> SessionStore:
    return get_session_store()
