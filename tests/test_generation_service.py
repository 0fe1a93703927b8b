"""
Tests for the content generators and video storage.
"""

import os
import re
import base64
import pytest
from unittest.mock import patch

from models.chat import CanvasContent, ContentType
from services.gemini_service import GenerationFailure
from config.settings import SAMPLE_VIDEO_URLS
from services.generation_service import GenerationService
from services.storage_service import VideoStorage


@pytest.fixture()
def storage(tmp_path):
    return VideoStorage(directory=str(tmp_path / "videos"), base_url="http://testserver")


def image_reference(description):
    return CanvasContent(type=ContentType.IMAGE, url="data:image/png;base64,AA==", description=description)


class TestImageGeneration:

    @pytest.mark.asyncio
    async def test_success_returns_inline_data_url(self, fake_gemini, storage):
        result = await GenerationService(fake_gemini, storage).generate_image("a red balloon")

        assert result["url"] == "data:image/png;base64," + base64.b64encode(b"\x89PNG fake").decode()
        assert result["description"] == "a red balloon"

    @pytest.mark.asyncio
    async def test_failure_returns_placeholder(self, failing_gemini, storage):
        result = await GenerationService(failing_gemini, storage).generate_image("a red balloon")

        assert result["url"].startswith("https://picsum.photos/1024/768?random=")
        assert "placeholder" in result["description"]


class TestVideoGeneration:

    @pytest.mark.asyncio
    async def test_success_persists_file(self, fake_gemini, storage):
        result = await GenerationService(fake_gemini, storage).generate_video("a cat playing")

        match = re.fullmatch(r"http://testserver/videos/(generated_video_\d+\.mp4)", result["url"])
        assert match
        with open(os.path.join(storage.directory, match.group(1)), "rb") as f:
            assert f.read() == b"fake mp4 bytes"
        assert result["description"] == "a cat playing"

    @pytest.mark.asyncio
    async def test_failure_uses_sample_video(self, failing_gemini, storage):
        references = [image_reference("a red balloon"), image_reference("a blue sky")]
        result = await GenerationService(failing_gemini, storage).generate_video("a cat", references)

        assert result["url"] in SAMPLE_VIDEO_URLS
        assert result["url"].startswith("https://")
        assert result["description"] == "Generated fallback video for: a cat (using 2 reference images)"

    @pytest.mark.asyncio
    async def test_local_sample_is_served_from_video_dir(self, failing_gemini, storage):
        with patch("services.generation_service.SAMPLE_VIDEO_URLS", ["sample_clip.mp4"]):
            result = await GenerationService(failing_gemini, storage).generate_video("a cat")

        assert result["url"] == "http://testserver/videos/sample_clip.mp4"

    @pytest.mark.asyncio
    async def test_storage_error_uses_sample_video(self, fake_gemini, storage):
        with patch.object(VideoStorage, "save", side_effect=OSError("disk full")):
            result = await GenerationService(fake_gemini, storage).generate_video("a cat")

        assert result["url"]
        assert result["description"].startswith("Generated fallback video for: a cat")

    @pytest.mark.asyncio
    async def test_video_prompt_is_forwarded(self, fake_gemini, storage):
        fake_gemini.video_result = GenerationFailure(reason="boom")
        await GenerationService(fake_gemini, storage).generate_video("enhanced prompt")
        assert fake_gemini.video_calls == ["enhanced prompt"]


class TestVideoStorage:

    def test_filenames_are_unique(self, storage):
        with patch("services.storage_service.time.time", return_value=1757842104.5):
            first = storage.save(b"one")
            second = storage.save(b"two")

        assert first == "generated_video_1757842104500.mp4"
        assert second == "generated_video_1757842104501.mp4"

    def test_public_url(self, storage):
        assert storage.public_url("clip.mp4") == "http://testserver/videos/clip.mp4"
