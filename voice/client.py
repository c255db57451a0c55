"""ElevenLabs text-to-speech API client."""

import logging
from typing import Annotated

import httpx
from pydantic import BaseModel, ConfigDict, Field

from config import VoiceConfig
from voice.errors import SynthesisFailed

logger = logging.getLogger(__name__)

# Bounded argument types, shared by the request model and the MCP tool signature
Text = Annotated[
    str,
    Field(
        min_length=1,
        description="The text to convert to speech. Can include audio tags like [laughs], [whispers], [excited], etc.",
    ),
]
Stability = Annotated[
    float,
    Field(
        ge=0.0,
        le=1.0,
        description="Voice stability (0-1). Lower = more expressive/emotional range, higher = more consistent. Default: 0.5",
    ),
]
SimilarityBoost = Annotated[
    float,
    Field(ge=0.0, le=1.0, description="How closely to match the original voice (0-1). Default: 0.75"),
]
Speed = Annotated[
    float,
    Field(ge=0.5, le=2.0, description="Speech speed multiplier (0.5-2.0). Default: 1.0"),
]
Volume = Annotated[
    float,
    Field(ge=0.0, le=2.0, description="Playback volume (0-2). Default: 1.0"),
]


class SpeechRequest(BaseModel):
    """Text plus voice parameters for a single utterance."""

    model_config = ConfigDict(frozen=True)

    text: Text
    stability: Stability = 0.5
    similarity_boost: SimilarityBoost = 0.75
    speed: Speed = 1.0
    volume: Volume = 1.0


class ElevenLabsClient:
    """Single-shot synthesis against the ElevenLabs REST API."""

    def __init__(self, config: VoiceConfig, http: httpx.Client | None = None) -> None:
        self.config = config
        self._http = http or httpx.Client(timeout=config.timeout)

    def _payload(self, request: SpeechRequest) -> dict:
        return {
            "text": request.text,
            "model_id": self.config.model_id,
            "voice_settings": {
                "stability": request.stability,
                "similarity_boost": request.similarity_boost,
                "style": 0,
                "use_speaker_boost": True,
                "speed": request.speed,
            },
        }

    def synthesize(self, request: SpeechRequest, api_key: str) -> bytes:
        """Convert text to audio bytes.

        Audio tags in the text are passed through untouched; only the remote
        model interprets them.

        Args:
            request: Text and voice settings
            api_key: ElevenLabs API key

        Returns:
            Complete audio file content in the configured output format

        Raises:
            SynthesisFailed: the API returned a non-2xx status
        """
        url = f"{self.config.api_base}/text-to-speech/{self.config.voice_id}"
        response = self._http.post(
            url,
            params={"output_format": self.config.output_format},
            headers={
                "xi-api-key": api_key,
                "Content-Type": "application/json",
            },
            json=self._payload(request),
        )

        if not response.is_success:
            raise SynthesisFailed(response.status_code, response.text)

        logger.debug("Received %d bytes of audio", len(response.content))
        return response.content

    def close(self) -> None:
        self._http.close()
