"""External integrations: media encoding, prompts and the lyric oracle."""

from .media import MediaError, encode_media, load_media_file
from .oracle import LyricsOracle, OracleConfigError, OracleError, OracleResponseError
from .pipeline import analyze_styles, generate_lyrics

__all__ = [
    "LyricsOracle",
    "MediaError",
    "OracleConfigError",
    "OracleError",
    "OracleResponseError",
    "analyze_styles",
    "encode_media",
    "generate_lyrics",
    "load_media_file",
]
