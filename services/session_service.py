"""
In-memory chat sessions: message history, canvas and the loading gate
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List

from config.settings import WELCOME_MESSAGE
from models.chat import CanvasContent, Message, MessageRole, generate_unique_id

logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    pass


class SessionBusyError(RuntimeError):
    pass


@dataclass
class ChatSession:
    id: str = field(default_factory=generate_unique_id)
    messages: List[Message] = field(default_factory=list)
    canvas: List[CanvasContent] = field(default_factory=list)
    is_loading: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def start(cls) -> "ChatSession":
        session = cls()
        session.messages.append(Message(content=WELCOME_MESSAGE, role=MessageRole.ASSISTANT))
        return session


class SessionStore:
    def __init__(self):
        self._sessions: Dict[str, ChatSession] = {}

    def create(self) -> ChatSession:
        session = ChatSession.start()
        self._sessions[session.id] = session
        logger.info(f"Created session {session.id}")
        return session

    def get(self, session_id: str) -> ChatSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id)

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info(f"Deleted session {session_id}")

    def __len__(self) -> int:
        return len(self._sessions)


# Global session store - created on first use
session_store = None

def get_session_store() -> SessionStore:
    global session_store
    if session_store is None:
        session_store = SessionStore()
    return session_store
