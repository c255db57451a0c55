"""Errors raised while turning text into played speech."""

from pathlib import Path


class VoiceError(Exception):
    """Base error for the speak pipeline."""

    pass


class CredentialMissing(VoiceError):
    """Raised when the API key file cannot be read."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Failed to read ElevenLabs API key from {path}. "
            "Please create this file with your API key."
        )


class SynthesisFailed(VoiceError):
    """Raised when the TTS endpoint answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"ElevenLabs API error ({status_code}): {body}")


class StorageWriteFailed(VoiceError):
    """Raised when synthesized audio cannot be written to a temp file."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not write audio to {path}: {reason}")


class PlaybackFailed(VoiceError):
    """Raised when the audio player process cannot be started."""

    def __init__(self, player: str, reason: str) -> None:
        self.player = player
        super().__init__(f"Could not start audio player '{player}': {reason}")
