"""
Per-message flow: classify the prompt, enhance it, generate the media and
record the outcome on the session's chat history and canvas.
"""
import logging
from typing import Optional, Tuple

from models.chat import (
    CanvasContent,
    ContentType,
    GeneratedContent,
    Message,
    MessageRole,
    reference_images,
)
from services.generation_service import GenerationService
from services.intent_service import IntentService
from services.prompt_service import PromptService
from services.session_service import ChatSession, SessionBusyError

logger = logging.getLogger(__name__)

APOLOGY_MESSAGE = "Sorry, I encountered an error while generating your content. Please try again."


def completion_message(content_type: ContentType, prompt: str) -> str:
    return f"I've generated a {content_type.value} for you: \"{prompt}\". You can see it on the canvas!"


class ContentOrchestrator:
    def __init__(self, intent_service: IntentService, prompt_service: PromptService,
                 generation_service: GenerationService):
        self.intent_service = intent_service
        self.prompt_service = prompt_service
        self.generation_service = generation_service

    async def handle_prompt(self, session: ChatSession, prompt: str) -> Tuple[Message, Optional[CanvasContent]]:
        """
        Run one submission to completion. Returns the assistant message and,
        on success, the new canvas item. Raises SessionBusyError when another
        submission on the same session is still in flight.
        """
        if session.is_loading:
            raise SessionBusyError(session.id)

        session.messages.append(Message(content=prompt, role=MessageRole.USER))
        session.is_loading = True
        try:
            content_type = await self.intent_service.classify(prompt)
            logger.info(f"[{session.id}] Intent: {content_type.value}")

            if content_type == ContentType.VIDEO:
                references = reference_images(session.canvas)
                enhanced_prompt = await self.prompt_service.enhance(prompt, content_type, references)
                result = await self.generation_service.generate_video(enhanced_prompt, references)
            else:
                enhanced_prompt = await self.prompt_service.enhance(prompt, content_type)
                result = await self.generation_service.generate_image(enhanced_prompt)

            generated = GeneratedContent(type=content_type, url=result["url"], description=prompt)
            canvas_item = CanvasContent(type=content_type, url=generated.url, description=prompt)
            message = Message(
                content=completion_message(content_type, prompt),
                role=MessageRole.ASSISTANT,
                generated_content=generated
            )
            session.canvas.append(canvas_item)
            session.messages.append(message)
            return message, canvas_item

        except Exception as e:
            logger.error(f"[{session.id}] Error generating content: {str(e)}", exc_info=True)
            message = Message(content=APOLOGY_MESSAGE, role=MessageRole.ASSISTANT)
            session.messages.append(message)
            return message, None

        finally:
            session.is_loading = False
