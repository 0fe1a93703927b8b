# tests/conftest.py
import os
import sys
import tempfile
import pytest
from fastapi.testclient import TestClient

# Settings are read at import time, so the environment has to be in place
# before anything from the project is imported.
_TMP_ROOT = tempfile.mkdtemp(prefix="easyvideo-tests-")
os.environ["GEMINI_API_KEY"] = ""
os.environ["GOOGLE_API_KEY"] = ""
os.environ["PUBLIC_VIDEO_DIR"] = os.path.join(_TMP_ROOT, "videos")
os.environ["LOG_FILE"] = os.path.join(_TMP_ROOT, "easyvideo.log")
os.environ["APP_URL"] = "http://testserver"
os.environ["VIDEO_POLL_INTERVAL"] = "0"
os.environ["CHAT_MIN_DELAY"] = "0"
os.environ["CHAT_MAX_DELAY"] = "0"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from services.gemini_service import GenerationFailure, MediaArtifact  # noqa: E402


class FakeGemini:
    """
    Stand-in for GeminiService. Every call is recorded; set the attributes to
    an Exception to make the matching call fail.
    """

    def __init__(self):
        self.text_response = "A richly detailed, cinematic rendering with soft golden light"
        self.image_result = MediaArtifact(data=b"\x89PNG fake", mime_type="image/png")
        self.video_result = MediaArtifact(data=b"fake mp4 bytes", mime_type="video/mp4")
        self.text_calls = []
        self.image_calls = []
        self.video_calls = []
        self.is_mock = False

    async def generate_text(self, prompt, model=None):
        self.text_calls.append(prompt)
        if isinstance(self.text_response, Exception):
            raise self.text_response
        if callable(self.text_response):
            return self.text_response(prompt)
        return self.text_response

    async def generate_image(self, prompt, model=None):
        self.image_calls.append(prompt)
        return self.image_result

    async def generate_video(self, prompt, model=None):
        self.video_calls.append(prompt)
        return self.video_result

    @property
    def remote_calls(self):
        return len(self.text_calls) + len(self.image_calls) + len(self.video_calls)


def intent_aware_text(prompt):
    """Answer intent questions like a well-behaved model, echo detail otherwise."""
    if prompt.startswith("You are an AI assistant that analyzes user prompts"):
        return "video" if "video" in prompt.split("User prompt:")[1].split("\n")[0].lower() else "image"
    return "Highly detailed artwork, dramatic lighting, vivid colors, 8k quality"


@pytest.fixture()
def fake_gemini():
    return FakeGemini()


@pytest.fixture()
def failing_gemini():
    fake = FakeGemini()
    fake.text_response = RuntimeError("quota exceeded")
    fake.image_result = GenerationFailure(reason="quota exceeded")
    fake.video_result = GenerationFailure(reason="quota exceeded")
    return fake


@pytest.fixture(scope="session")
def app():
    import index
    return index.app


@pytest.fixture()
def video_dir():
    return os.environ["PUBLIC_VIDEO_DIR"]


@pytest.fixture()
def client(app, fake_gemini):
    from services.dependencies import get_gemini
    import services.session_service as session_service

    fake_gemini.text_response = intent_aware_text
    app.dependency_overrides[get_gemini] = lambda: fake_gemini
    session_service.session_store = None
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
