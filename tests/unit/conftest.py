import base64
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

# A small 1x1 PNG base64 image (black pixel)
SAMPLE_IMAGE_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/w8AAn8B9pQn2wAAAABJRU5ErkJggg=="
)


@pytest.fixture
def sample_png_bytes() -> bytes:
    return base64.b64decode(SAMPLE_IMAGE_BASE64)


@pytest.fixture
def fake_generator():
    generator = MagicMock()
    generator.generate_image = AsyncMock(return_value=SAMPLE_IMAGE_BASE64)
    return generator


@pytest.fixture
def fake_saver(tmp_path):
    saver = MagicMock()
    saver.save_base64 = AsyncMock(side_effect=lambda filename, _encoded: str(tmp_path / filename))
    return saver


@pytest.fixture
def openai_client():
    """Stand-in for ``openai.AsyncOpenAI`` returning one base64 image."""
    client = MagicMock()
    client.images.generate = AsyncMock(
        return_value=SimpleNamespace(data=[SimpleNamespace(b64_json=SAMPLE_IMAGE_BASE64, url=None)])
    )
    return client


@pytest.fixture
def sample_image_base64() -> str:
    return SAMPLE_IMAGE_BASE64
