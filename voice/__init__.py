"""ElevenLabs integration module."""

from voice.auth import load_api_key
from voice.client import ElevenLabsClient, SpeechRequest
from voice.errors import (
    CredentialMissing,
    PlaybackFailed,
    StorageWriteFailed,
    SynthesisFailed,
    VoiceError,
)

__all__ = [
    "ElevenLabsClient",
    "SpeechRequest",
    "load_api_key",
    "VoiceError",
    "CredentialMissing",
    "SynthesisFailed",
    "StorageWriteFailed",
    "PlaybackFailed",
]
