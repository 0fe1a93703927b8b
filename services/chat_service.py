"""
Canned assistant replies for the chat endpoint
"""
import asyncio
import random
import logging
from typing import List, Optional

from config.settings import CHAT_MIN_DELAY, CHAT_MAX_DELAY
from models.generation import ChatMessageIn

logger = logging.getLogger(__name__)

CANNED_RESPONSES = [
    "I'd be happy to help you create that! Let me generate it for you.",
    "Great idea! I'll work on creating that content now.",
    "That sounds amazing! I'll generate that for you right away.",
    "Excellent request! Let me create that content for you.",
    "I love that concept! I'll get started on generating it now.",
]


def latest_user_text(prompt: Optional[str], messages: Optional[List[ChatMessageIn]]) -> str:
    if prompt:
        return prompt
    if messages:
        return messages[-1].content
    return ""


async def reply(prompt: Optional[str], messages: Optional[List[ChatMessageIn]]) -> str:
    """Pick a canned reply after a short simulated delay."""
    user_message = latest_user_text(prompt, messages)
    logger.info(f"Chat message received: {user_message[:100]}")
    await asyncio.sleep(random.uniform(CHAT_MIN_DELAY, CHAT_MAX_DELAY))
    return random.choice(CANNED_RESPONSES)
