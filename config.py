"""Runtime configuration for the speak tool."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_VOICE_ID = "YOq2y2Up4RgXP2HyXjE5"
DEFAULT_MODEL_ID = "eleven_v3"  # most expressive, supports audio tags
DEFAULT_API_BASE = "https://api.elevenlabs.io/v1"
DEFAULT_OUTPUT_FORMAT = "mp3_44100_128"
DEFAULT_PLAYER = "afplay"
API_KEY_SUBPATH = Path(".config/opencode/secrets/elevenlabs-key")

# Shown next to the model ID in the speak confirmation
MODEL_LABELS = {
    "eleven_v3": "v3 expressive",
    "eleven_multilingual_v2": "multilingual v2",
    "eleven_flash_v2_5": "flash v2.5",
}


@dataclass(frozen=True)
class VoiceConfig:
    """Process-wide settings, built once at startup and passed to speak()."""

    api_key_path: Path
    voice_id: str = DEFAULT_VOICE_ID
    model_id: str = DEFAULT_MODEL_ID
    api_base: str = DEFAULT_API_BASE
    output_format: str = DEFAULT_OUTPUT_FORMAT
    player: str = DEFAULT_PLAYER
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "VoiceConfig":
        """Build config from environment variables, falling back to defaults."""
        key_file = os.getenv("ELEVENLABS_KEY_FILE")
        return cls(
            api_key_path=Path(key_file).expanduser() if key_file else Path.home() / API_KEY_SUBPATH,
            voice_id=os.getenv("ELEVENLABS_VOICE_ID", DEFAULT_VOICE_ID),
            model_id=os.getenv("ELEVENLABS_MODEL_ID", DEFAULT_MODEL_ID),
            api_base=os.getenv("ELEVENLABS_API_BASE", DEFAULT_API_BASE).rstrip("/"),
            output_format=os.getenv("ELEVENLABS_OUTPUT_FORMAT", DEFAULT_OUTPUT_FORMAT),
            player=os.getenv("VOICE_PLAYER", DEFAULT_PLAYER),
            timeout=float(os.getenv("ELEVENLABS_TIMEOUT", "30")),
        )
