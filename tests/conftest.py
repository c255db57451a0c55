"""Pytest configuration - load .env and shared fakes."""

import json
from pathlib import Path

import httpx
import pytest
from dotenv import load_dotenv

from config import VoiceConfig
from voice.client import ElevenLabsClient

# Load .env file for local overrides
load_dotenv()


class FakeProcess:
    """Stands in for a player process that has already finished."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.waited = False

    def wait(self) -> int:
        self.waited = True
        return self.returncode


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, content: bytes = b"ID3fake-mp3") -> None:
        self.status_code = status_code
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def key_file(tmp_path: Path) -> Path:
    path = tmp_path / "elevenlabs-key"
    path.write_text("  sk-test-key\n")
    return path


@pytest.fixture
def config(key_file: Path) -> VoiceConfig:
    return VoiceConfig(api_key_path=key_file, voice_id="voice123", model_id="eleven_v3")


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def client(config: VoiceConfig, handler: RecordingHandler) -> ElevenLabsClient:
    return ElevenLabsClient(config, http=httpx.Client(transport=httpx.MockTransport(handler)))
