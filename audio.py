"""Temporary audio files and detached playback."""

import logging
import subprocess
import tempfile
import threading
import time
import uuid
from pathlib import Path
from typing import Callable, Protocol

from voice.errors import PlaybackFailed, StorageWriteFailed

logger = logging.getLogger(__name__)

FILE_PREFIX = "home-voice-"
FILE_SUFFIX = ".mp3"


class PlayerProcess(Protocol):
    """The part of subprocess.Popen the cleanup watcher relies on."""

    def wait(self) -> int: ...


def _temp_path(directory: Path) -> Path:
    """Build a fresh file name: millisecond timestamp plus a random suffix."""
    millis = int(time.time() * 1000)
    return directory / f"{FILE_PREFIX}{millis}-{uuid.uuid4().hex[:8]}{FILE_SUFFIX}"


def persist_audio(data: bytes, directory: Path | None = None) -> Path:
    """Write audio bytes to a new file in the temp directory.

    Args:
        data: Complete audio file content
        directory: Target directory (defaults to the system temp directory)

    Returns:
        Absolute path of the written file. The caller owns it from here on.

    Raises:
        StorageWriteFailed: the file could not be created or written
    """
    path = _temp_path(Path(directory or tempfile.gettempdir())).absolute()
    try:
        # "x" mode refuses to reuse a name another call already took
        f = open(path, "xb")
    except OSError as e:
        raise StorageWriteFailed(path, str(e)) from e

    try:
        with f:
            f.write(data)
    except OSError as e:
        _discard(path)
        raise StorageWriteFailed(path, str(e)) from e

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path


def _discard(path: Path) -> None:
    """Delete a file, ignoring any error."""
    try:
        path.unlink()
    except OSError:
        pass


def cleanup_when_done(process: PlayerProcess, path: Path) -> None:
    """Wait for the player to exit, then delete its audio file.

    The exit code is ignored and deletion is best-effort: a file left behind
    in the temp directory is harmless.
    """
    try:
        process.wait()
    finally:
        _discard(Path(path))


def play_audio(
    path: Path,
    volume: float = 1.0,
    player: str = "afplay",
    spawn: Callable[..., PlayerProcess] = subprocess.Popen,
) -> threading.Thread:
    """Start playback in a detached player process and return immediately.

    The player runs in its own session so it keeps playing if this process
    exits. A daemon thread removes the file once the player finishes.

    Args:
        path: Audio file to play; deleted after playback
        volume: Player volume (0-2)
        player: Command-line player accepting `-v <volume> <file>`
        spawn: Process factory, subprocess.Popen outside of tests

    Returns:
        The cleanup watcher thread. Callers are not expected to join it.

    Raises:
        PlaybackFailed: the player could not be started
    """
    path = Path(path)
    try:
        process = spawn(
            [player, "-v", str(volume), str(path)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        _discard(path)
        raise PlaybackFailed(player, str(e)) from e

    watcher = threading.Thread(
        target=cleanup_when_done,
        args=(process, path),
        name=f"playback-cleanup-{path.stem}",
        daemon=True,
    )
    watcher.start()
    logger.info("Playing %s at volume %s", path.name, volume)
    return watcher
