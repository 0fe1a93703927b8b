"""
Session routes: run the full classify -> enhance -> generate flow server side
and keep the conversation and canvas for the lifetime of the session
"""
from fastapi import APIRouter, HTTPException, Response, status, Depends
import logging

from models.generation import PromptRequest, SessionResponse, SessionTurnResponse
from routes.generation import require_prompt
from services.dependencies import get_orchestrator, get_sessions
from services.orchestrator import ContentOrchestrator
from services.session_service import ChatSession, SessionBusyError, SessionNotFoundError, SessionStore

router = APIRouter(prefix="/api/sessions", tags=["Sessions"])
logger = logging.getLogger(__name__)


def to_response(session: ChatSession) -> SessionResponse:
    return SessionResponse(
        id=session.id,
        messages=session.messages,
        canvas=session.canvas,
        is_loading=session.is_loading,
        created_at=session.created_at
    )


def lookup(store: SessionStore, session_id: str) -> ChatSession:
    try:
        return store.get(session_id)
    except SessionNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found"
        )


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(store: SessionStore = Depends(get_sessions)):
    """
    Start a session with an empty canvas and a welcome message
    """
    return to_response(store.create())


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str, store: SessionStore = Depends(get_sessions)):
    return to_response(lookup(store, session_id))


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str, store: SessionStore = Depends(get_sessions)):
    try:
        store.delete(session_id)
    except SessionNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{session_id}/messages", response_model=SessionTurnResponse)
async def send_message(
    session_id: str,
    request: PromptRequest,
    store: SessionStore = Depends(get_sessions),
    orchestrator: ContentOrchestrator = Depends(get_orchestrator)
):
    """
    Submit a prompt. Only one submission per session may be in flight.
    """
    session = lookup(store, session_id)
    prompt = require_prompt(request.prompt)

    try:
        message, canvas_item = await orchestrator.handle_prompt(session, prompt)
    except SessionBusyError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A generation is already in progress for this session"
        )

    return SessionTurnResponse(message=message, canvas_item=canvas_item, session=to_response(session))
