"""
Tests for the session flow: classify -> enhance -> generate -> record.
"""

import pytest

from models.chat import MessageRole
from services.dependencies import get_generation_service
from services.orchestrator import APOLOGY_MESSAGE, ContentOrchestrator
from services.session_service import ChatSession, SessionBusyError, SessionStore
from config.settings import WELCOME_MESSAGE


def new_session(client):
    response = client.post("/api/sessions")
    assert response.status_code == 201
    return response.json()


def send(client, session_id, prompt):
    return client.post(f"/api/sessions/{session_id}/messages", json={"prompt": prompt})


class TestSessionLifecycle:

    def test_starts_with_welcome_message(self, client):
        session = new_session(client)
        assert session["canvas"] == []
        assert session["isLoading"] is False
        assert [m["content"] for m in session["messages"]] == [WELCOME_MESSAGE]
        assert session["messages"][0]["role"] == "assistant"

    def test_get_and_delete(self, client):
        session_id = new_session(client)["id"]
        assert client.get(f"/api/sessions/{session_id}").status_code == 200
        assert client.delete(f"/api/sessions/{session_id}").status_code == 204
        assert client.get(f"/api/sessions/{session_id}").status_code == 404
        assert client.delete(f"/api/sessions/{session_id}").status_code == 404

    def test_unknown_session(self, client):
        response = send(client, "missing", "a red balloon")
        assert response.status_code == 404
        assert response.json() == {"error": "Session not found"}

    def test_missing_prompt(self, client, fake_gemini):
        session_id = new_session(client)["id"]
        response = client.post(f"/api/sessions/{session_id}/messages", json={})
        assert response.status_code == 400
        assert fake_gemini.remote_calls == 0


class TestRoundTrips:

    def test_image_prompt(self, client, fake_gemini):
        session_id = new_session(client)["id"]
        response = send(client, session_id, "a red balloon in the sky")

        assert response.status_code == 200
        data = response.json()
        assert data["message"]["generatedContent"]["type"] == "image"
        assert data["canvasItem"]["type"] == "image"

        enhancement_request = fake_gemini.text_calls[1]
        assert "a red balloon in the sky" in enhancement_request
        assert fake_gemini.image_calls == [fake_gemini.text_response("enhance")]

        session = data["session"]
        assert len(session["canvas"]) == 1
        assert [m["role"] for m in session["messages"]] == ["assistant", "user", "assistant"]
        attachments = [m for m in session["messages"] if m.get("generatedContent")]
        assert len(attachments) == 1
        assert attachments[0]["generatedContent"]["url"] == session["canvas"][0]["url"]

    def test_video_prompt_without_images(self, client, fake_gemini):
        session_id = new_session(client)["id"]
        data = send(client, session_id, "a video of a cat playing with a ball").json()

        assert data["canvasItem"]["type"] == "video"
        assert len(fake_gemini.video_calls) == 1
        assert "Image 1:" not in fake_gemini.text_calls[-1]

    def test_video_after_two_images_uses_them(self, client, fake_gemini):
        session_id = new_session(client)["id"]
        send(client, session_id, "a red balloon in the sky")
        send(client, session_id, "a green forest at dawn")

        data = send(client, session_id, "a video of a cat").json()

        enhancement_request = fake_gemini.text_calls[-1]
        assert "Image 1: a red balloon in the sky" in enhancement_request
        assert "Image 2: a green forest at dawn" in enhancement_request
        assert "Image 3:" not in enhancement_request
        assert [item["type"] for item in data["session"]["canvas"]] == ["image", "image", "video"]

    def test_busy_session_is_rejected(self, client):
        from services.session_service import get_session_store

        session_id = new_session(client)["id"]
        get_session_store().get(session_id).is_loading = True

        response = send(client, session_id, "a red balloon")
        assert response.status_code == 409

    def test_unexpected_failure_leaves_canvas_untouched(self, app, client):
        class BrokenGenerationService:
            async def generate_image(self, prompt):
                raise RuntimeError("unexpected")

            async def generate_video(self, prompt, references=None):
                raise RuntimeError("unexpected")

        app.dependency_overrides[get_generation_service] = lambda: BrokenGenerationService()
        session_id = new_session(client)["id"]
        data = send(client, session_id, "a red balloon").json()

        assert data["message"]["content"] == APOLOGY_MESSAGE
        assert data["message"].get("generatedContent") is None
        assert data["canvasItem"] is None
        assert data["session"]["canvas"] == []
        assert data["session"]["isLoading"] is False


class TestOrchestrator:

    @pytest.mark.asyncio
    async def test_in_flight_submission_raises(self):
        orchestrator = ContentOrchestrator(None, None, None)
        session = ChatSession.start()
        session.is_loading = True

        with pytest.raises(SessionBusyError):
            await orchestrator.handle_prompt(session, "a red balloon")
        assert len(session.messages) == 1

    def test_store_counts_sessions(self):
        store = SessionStore()
        session = store.create()
        assert len(store) == 1
        assert store.get(session.id).messages[0].role == MessageRole.ASSISTANT
