"""Media encoding for inline oracle requests."""

import base64
import binascii
import mimetypes
from pathlib import Path
from typing import Optional

from ..models import MediaPart

# Some browsers and tools report MP3 with a non-standard MIME type
_MIME_FIXUPS = {
    "audio/mp3": "audio/mpeg",
    "audio/x-mp3": "audio/mpeg",
    "audio/x-m4a": "audio/mp4",
    "audio/x-wav": "audio/wav",
}

_AUDIO_FORMATS = {
    "audio/mpeg": "mp3",
    "audio/wav": "wav",
    "audio/wave": "wav",
    "audio/mp4": "m4a",
}

DEFAULT_MIME_TYPE = "application/octet-stream"


class MediaError(ValueError):
    """Raised when media cannot be read, decoded or is too large."""

    pass


class MediaTooLargeError(MediaError):
    """Raised when decoded media exceeds the configured size limit."""

    pass


def normalize_mime_type(mime_type: Optional[str], filename: Optional[str] = None) -> str:
    """Return an API-compatible MIME type, guessing from ``filename`` when blank."""
    mime = (mime_type or "").strip().lower()
    if not mime and filename:
        mime = mimetypes.guess_type(filename)[0] or ""
    if not mime:
        return DEFAULT_MIME_TYPE
    return _MIME_FIXUPS.get(mime, mime)


def encode_media(
    data: bytes, mime_type: Optional[str] = None, filename: Optional[str] = None
) -> MediaPart:
    """Encode raw media bytes as an inline base64 part.

    Raises:
        MediaError: If ``data`` is empty
    """
    if not data:
        raise MediaError("Failed to read file data")
    return MediaPart(
        data=base64.b64encode(data).decode("ascii"),
        mime_type=normalize_mime_type(mime_type, filename),
    )


def load_media_file(path: Path, mime_type: Optional[str] = None) -> MediaPart:
    """Read a media file from disk and encode it.

    Raises:
        MediaError: If the file cannot be read or is empty
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise MediaError(f"Failed to read {path}: {e}") from e
    return encode_media(data, mime_type=mime_type, filename=Path(path).name)


def decoded_size(part: MediaPart) -> int:
    """Size in bytes of the decoded payload.

    Raises:
        MediaError: If the payload is not valid base64
    """
    try:
        return len(base64.b64decode(part.data, validate=True))
    except (binascii.Error, ValueError) as e:
        raise MediaError(f"Media data is not valid base64: {e}") from e


def validate_media(part: MediaPart, max_mb: int) -> None:
    """Check a media part decodes and fits within ``max_mb`` megabytes.

    Raises:
        MediaError: If the payload is empty or not valid base64
        MediaTooLargeError: If the payload exceeds the limit
    """
    size = decoded_size(part)
    if size == 0:
        raise MediaError("Media data is empty")
    if size > max_mb * 1024 * 1024:
        raise MediaTooLargeError(
            f"Media is {size / (1024 * 1024):.1f} MB, limit is {max_mb} MB"
        )


def media_content_part(part: MediaPart) -> dict:
    """Build the chat-completion content part carrying the media.

    Audio goes out as ``input_audio``; video and anything else as a
    ``file`` data URL.
    """
    mime = normalize_mime_type(part.mime_type)
    if mime.startswith("audio/"):
        audio_format = _AUDIO_FORMATS.get(mime, mime.split("/", 1)[1])
        return {
            "type": "input_audio",
            "input_audio": {"data": part.data, "format": audio_format},
        }
    return {
        "type": "file",
        "file": {"file_data": f"data:{mime};base64,{part.data}"},
    }
