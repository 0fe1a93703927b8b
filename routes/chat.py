"""
Chat route: canned assistant replies, not wired to generation
"""
from fastapi import APIRouter, HTTPException, status
from datetime import datetime
import logging

from models.generation import ChatRequest, ChatResponse
from services import chat_service

router = APIRouter(prefix="/api", tags=["Chat"])
logger = logging.getLogger(__name__)


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest):
    if not request.prompt and request.messages is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Prompt or messages are required"
        )

    try:
        message = await chat_service.reply(request.prompt, request.messages)
        return ChatResponse(message=message, timestamp=datetime.now())

    except Exception as e:
        logger.error(f"Error in chat API: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process chat message"
        )
