import json
import os
from typing import Callable, List

# carinfo.main builds a module-level app, which needs a key at import time
os.environ.setdefault("GOOGLE_API_KEY", "test-key")

import httpx
import pytest
from fastapi.testclient import TestClient

from carinfo.core.settings import Settings
from carinfo.main import create_app

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00fake-jpeg-body\xff\xd9"

def gemini_payload(text: str) -> dict:
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": "STOP",
            }
        ]
    }

@pytest.fixture
def settings() -> Settings:
    return Settings(google_api_key="test-key", _env_file=None)

@pytest.fixture
def captured() -> List[httpx.Request]:
    return []

@pytest.fixture
def make_client(settings, captured) -> Callable[[Callable[[httpx.Request], httpx.Response]], TestClient]:
    """Build a TestClient whose Gemini calls go to `handler` instead of the network."""
    def _make(handler):
        def _recording(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return handler(request)

        app = create_app(settings, transport=httpx.MockTransport(_recording))
        return TestClient(app)

    return _make

@pytest.fixture
def reply_with(make_client):
    """TestClient where Gemini answers every call with `text`."""
    def _make(text: str) -> TestClient:
        return make_client(lambda request: httpx.Response(200, json=gemini_payload(text)))

    return _make

def request_body(request: httpx.Request) -> dict:
    return json.loads(request.content)
