#!/usr/bin/env python3
"""Speak tool using ElevenLabs v3.

CLI: uv run speak "[excited] Done! The build succeeded."
     uv run speak "[whispers] Heads up" --volume 0.5 --speed 1.2
Tool: Registered as Speak for OpenAI function calling
"""

import sys

from config import VoiceConfig
from tts import speak
from voice.client import SpeechRequest


class Speak(SpeechRequest):
    """Convert text to speech using ElevenLabs v3 and play it on the device speakers (non-blocking).

    Uses the expressive v3 model which supports inline audio tags for emotional control,
    delivery direction, non-verbal reactions, accents, and sound effects.

    Audio Tags (v3 expressive features):
      Emotions: [laughs], [sighs], [whispers], [excited], [sad], [angry], [happily], [sarcastic], [curious]
      Delivery: [whispers], [shouts], [dramatically], [calmly], [nervously]
      Reactions: [laughs], [laughs harder], [giggles], [clears throat], [sighs], [gasps], [gulps]
      Accents: [strong French accent], [British accent], [Southern US accent]
      Sound FX: [applause], [gunshot], [explosion]

    Example: "[whispers] Something's coming... [sighs] I can feel it."
    Example: "[excited] We did it! [laughs] I can't believe it worked!"

    The audio plays in the background and control returns immediately.

    USAGE GUIDANCE:
    - Use in SHORT BURSTS to notify the user of important state changes
    - Good for: task completion, errors requiring attention, questions needing user input
    - Keep messages concise (1-2 sentences) - don't read entire responses aloud
    - Examples of when to use:
      * "[excited] Done! The build succeeded."
      * "[curious] I have a question - should I proceed with the refactor?"
      * "[sighs] I found 3 errors we need to fix."
      * "[whispers] Heads up - I'm about to make a breaking change."
    """


def speak_handler(params: Speak) -> str:
    """Speak using settings from the environment."""
    return speak(params, VoiceConfig.from_env())


# ─── Dual Mode: CLI + Tool ─────────────────────────────────────────────────

def main() -> None:
    """CLI entry point."""
    from dotenv import load_dotenv
    from tools.base import run

    load_dotenv()
    sys.exit(run(Speak, speak_handler))


if __name__ == "__main__":
    main()
else:
    from tools.base import tool
    tool(Speak)(speak_handler)
