"""Home Voice - MCP server exposing the speak tool to agent hosts."""

import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Callable

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from audio import persist_audio, play_audio
from config import VoiceConfig
from tools.speak import Speak
from tts import speak
from voice.client import ElevenLabsClient, SimilarityBoost, Speed, Stability, Text, Volume

logger = logging.getLogger("home_voice")


def create_server(
    config: VoiceConfig,
    client: ElevenLabsClient | None = None,
    store: Callable[[bytes], Path] = persist_audio,
    launcher: Callable[..., object] = play_audio,
) -> FastMCP:
    """Build the MCP server with the speak tool bound to config.

    Args:
        config: Voice, model, key location and player settings
        client: Shared synthesis client (one per call when omitted)
        store: Writes audio bytes to a temp file
        launcher: Starts playback of a file
    """
    mcp = FastMCP("voice")

    @mcp.tool(name="speak", description=Speak.__doc__)
    async def speak_tool(
        text: Text,
        stability: Stability = 0.5,
        similarity_boost: SimilarityBoost = 0.75,
        speed: Speed = 1.0,
        volume: Volume = 1.0,
    ) -> str:
        request = Speak(
            text=text,
            stability=stability,
            similarity_boost=similarity_boost,
            speed=speed,
            volume=volume,
        )
        # Worker thread so overlapping calls don't block each other
        return await asyncio.to_thread(
            speak, request, config, client=client, store=store, launcher=launcher
        )

    return mcp


def main() -> None:
    """Main entry point."""
    load_dotenv()
    # stdout carries the MCP protocol, so logs go to stderr
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = VoiceConfig.from_env()
    logger.info("Starting voice server (voice %s, model %s)", config.voice_id, config.model_id)
    create_server(config).run(transport="stdio")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
