"""
Request and response models for the generation endpoints
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime

from models.chat import CanvasContent, ContentType, Message


class PromptRequest(BaseModel):
    # Optional so a missing prompt is answered with 400 rather than 422
    prompt: Optional[str] = Field(default=None, description="User's natural-language prompt")


class ImageGenerationRequest(PromptRequest):
    pass


class VideoGenerationRequest(PromptRequest):
    images: Optional[List[CanvasContent]] = Field(default=None, description="Canvas items offered as reference images")


class ChatMessageIn(BaseModel):
    content: str = ""
    role: Optional[str] = None


class ChatRequest(BaseModel):
    prompt: Optional[str] = None
    messages: Optional[List[ChatMessageIn]] = None


class IntentResponse(BaseModel):
    intent: ContentType
    prompt: Optional[str] = None
    fallback: Optional[bool] = None


class ImageGenerationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    description: str
    enhanced_prompt: str = Field(alias="enhancedPrompt")
    original_prompt: str = Field(alias="originalPrompt")


class VideoGenerationResponse(ImageGenerationResponse):
    used_images: int = Field(alias="usedImages")


class ChatResponse(BaseModel):
    message: str
    timestamp: datetime


class SessionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    messages: List[Message]
    canvas: List[CanvasContent]
    is_loading: bool = Field(alias="isLoading")
    created_at: datetime = Field(alias="createdAt")


class SessionTurnResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: Message
    canvas_item: Optional[CanvasContent] = Field(default=None, alias="canvasItem")
    session: SessionResponse
