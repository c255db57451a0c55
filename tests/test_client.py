"""ElevenLabs client tests against a mocked transport."""

import httpx
import pytest
from pydantic import ValidationError

from voice.client import ElevenLabsClient, SpeechRequest
from voice.errors import SynthesisFailed
from tests.conftest import RecordingHandler


class TestSpeechRequest:
    """Test request defaults and bounds."""

    def test_defaults(self):
        request = SpeechRequest(text="hi")
        assert request.stability == 0.5
        assert request.similarity_boost == 0.75
        assert request.speed == 1.0
        assert request.volume == 1.0

    @pytest.mark.parametrize("field,value", [
        ("stability", -0.1),
        ("stability", 1.1),
        ("similarity_boost", 1.5),
        ("speed", 0.4),
        ("speed", 2.1),
        ("volume", -1),
        ("volume", 2.5),
    ])
    def test_out_of_bounds_rejected(self, field, value):
        with pytest.raises(ValidationError):
            SpeechRequest(text="hi", **{field: value})

    def test_empty_text_rejected(self):
        with pytest.raises(ValidationError):
            SpeechRequest(text="")

    def test_immutable(self):
        request = SpeechRequest(text="hi")
        with pytest.raises(ValidationError):
            request.text = "bye"


class TestSynthesize:
    """Test the synthesis HTTP call."""

    def test_request_shape(self, client, handler):
        """Should POST the voice settings with the key header."""
        client.synthesize(SpeechRequest(text="[laughs] hello", speed=1.2), "sk-test-key")

        request = handler.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/v1/text-to-speech/voice123"
        assert request.url.params["output_format"] == "mp3_44100_128"
        assert request.headers["xi-api-key"] == "sk-test-key"
        assert handler.last_json == {
            "text": "[laughs] hello",
            "model_id": "eleven_v3",
            "voice_settings": {
                "stability": 0.5,
                "similarity_boost": 0.75,
                "style": 0,
                "use_speaker_boost": True,
                "speed": 1.2,
            },
        }

    def test_returns_body_bytes(self, client):
        assert client.synthesize(SpeechRequest(text="hi"), "k") == b"ID3fake-mp3"

    def test_error_status(self, config):
        """Non-2xx should raise with status and body, without retrying."""
        handler = RecordingHandler(401, b'{"detail":{"status":"invalid_api_key"}}')
        client = ElevenLabsClient(config, http=httpx.Client(transport=httpx.MockTransport(handler)))

        with pytest.raises(SynthesisFailed) as exc_info:
            client.synthesize(SpeechRequest(text="hi"), "bad")

        assert exc_info.value.status_code == 401
        assert "invalid_api_key" in exc_info.value.body
        assert "(401)" in str(exc_info.value)
        assert len(handler.requests) == 1  # no retry
