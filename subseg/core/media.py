"""Validation of audio and video inputs for transcription."""

from __future__ import annotations

from pathlib import Path

from subseg.exceptions import InputValidationError

AUDIO_EXTENSIONS: set[str] = {".mp3", ".wav", ".flac", ".m4a", ".ogg", ".opus"}
VIDEO_EXTENSIONS: set[str] = {".mp4", ".mov", ".mkv", ".webm", ".avi"}
MEDIA_EXTENSIONS: set[str] = AUDIO_EXTENSIONS | VIDEO_EXTENSIONS
TRANSCRIPT_EXTENSIONS: set[str] = {".json"}


def is_media_file(path: Path) -> bool:
    return path.suffix.lower() in MEDIA_EXTENSIONS


def validate_input_file(path: Path) -> None:
    """Check that ``path`` is a non-empty transcript JSON or media file."""
    if not path.exists():
        raise InputValidationError(f"File not found: {path}")

    supported = MEDIA_EXTENSIONS | TRANSCRIPT_EXTENSIONS
    if path.suffix.lower() not in supported:
        raise InputValidationError(
            f"Unsupported format '{path.suffix}'. "
            f"Supported: {', '.join(sorted(supported))}"
        )

    if path.stat().st_size == 0:
        raise InputValidationError(f"File is empty: {path}")
