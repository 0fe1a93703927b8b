"""
Conversation and canvas models for Easy Video
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
from enum import Enum
import uuid


def generate_unique_id() -> str:
    return uuid.uuid4().hex


class ContentType(str, Enum):
    """The kind of media a prompt asks for."""
    IMAGE = "image"
    VIDEO = "video"


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class GeneratedContent(BaseModel):
    type: ContentType
    url: str
    description: str


class CanvasContent(BaseModel):
    """
    A generated item shown on the canvas. Image items double as reference
    images for later video requests.
    """
    id: str = Field(default_factory=generate_unique_id)
    type: ContentType
    url: str
    description: str = ""
    timestamp: datetime = Field(default_factory=datetime.now)


class Message(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=generate_unique_id)
    content: str
    role: MessageRole
    timestamp: datetime = Field(default_factory=datetime.now)
    generated_content: Optional[GeneratedContent] = Field(default=None, alias="generatedContent")


def reference_images(items: List[CanvasContent]) -> List[CanvasContent]:
    """Keep only the image items; videos are never used as references."""
    return [item for item in items if item.type == ContentType.IMAGE]
