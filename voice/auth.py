"""ElevenLabs API key loading."""

from pathlib import Path

from voice.errors import CredentialMissing


def load_api_key(path: Path) -> str:
    """Read the API key from its secrets file.

    The file is re-read on every call so a rotated key is picked up without a
    restart.

    Raises:
        CredentialMissing: the file is missing, unreadable or empty
    """
    try:
        key = Path(path).read_text(encoding="utf-8").strip()
    except OSError as e:
        raise CredentialMissing(path) from e

    if not key:
        raise CredentialMissing(path)
    return key
