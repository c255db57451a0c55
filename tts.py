"""Text-to-speech using the ElevenLabs TTS API."""

import logging
from pathlib import Path
from typing import Callable

from audio import persist_audio, play_audio
from config import MODEL_LABELS, VoiceConfig
from voice.auth import load_api_key
from voice.client import ElevenLabsClient, SpeechRequest

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 80


def preview_text(text: str) -> str:
    """Shorten text for the confirmation message."""
    if len(text) > PREVIEW_LENGTH:
        return text[:PREVIEW_LENGTH] + "..."
    return text


def speak(
    request: SpeechRequest,
    config: VoiceConfig,
    client: ElevenLabsClient | None = None,
    store: Callable[[bytes], Path] = persist_audio,
    launcher: Callable[..., object] = play_audio,
) -> str:
    """Convert text to speech and start playing it through the speakers.

    Returns as soon as the player has been launched; playback continues in
    the background.

    Args:
        request: Text and voice settings
        config: Voice, model, key location and player settings
        client: Synthesis client (a fresh one is created when omitted)
        store: Writes audio bytes to a temp file and returns its path
        launcher: Starts playback of a file at a given volume

    Returns:
        Confirmation block for the calling agent
    """
    api_key = load_api_key(config.api_key_path)

    if client is None:
        client = ElevenLabsClient(config)
        try:
            audio = client.synthesize(request, api_key)
        finally:
            client.close()
    else:
        audio = client.synthesize(request, api_key)

    path = store(audio)
    launcher(path, request.volume, player=config.player)
    logger.info("Speech started (%d chars, voice %s)", len(request.text), config.voice_id)

    model = config.model_id
    if model in MODEL_LABELS:
        model = f"{model} ({MODEL_LABELS[model]})"

    return (
        "<speak_started>\n"
        f'Playing speech (non-blocking): "{preview_text(request.text)}"\n'
        f"Voice: {config.voice_id}\n"
        f"Model: {model}\n"
        "</speak_started>"
    )
