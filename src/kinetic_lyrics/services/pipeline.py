"""Lyric generation and styling pipeline.

1. Encode media and call the oracle (alignment or transcription prompt)
2. Normalize the raw lyric array into a clean timeline
3. Optionally ask the oracle for per-line styles and merge them in
"""

import logging
from typing import Callable, List, Optional

from ..config import settings
from ..core import normalize_lyrics, reconcile_styles
from ..models import LyricSegment, MediaPart
from .oracle import LyricsOracle, OracleError
from .prompts import build_lyrics_prompt, build_style_prompt, has_reference_lyrics

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


def _noop_progress(status: str) -> None:
    pass


def generate_lyrics(
    media: MediaPart,
    reference_lyrics: Optional[str] = None,
    oracle: Optional[LyricsOracle] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> List[LyricSegment]:
    """Transcribe or align lyrics for a media file.

    Args:
        media: Inline media payload
        reference_lyrics: Lyrics to align; blank or None means transcribe
        oracle: Oracle client (default: configured from settings)
        on_progress: Receives human-readable status messages

    Returns:
        Normalized lyric segments

    Raises:
        OracleConfigError: If the oracle API key is not configured
        OracleResponseError: If the oracle fails after retries
    """
    oracle = oracle or LyricsOracle()
    progress = on_progress or _noop_progress

    mode = "alignment" if has_reference_lyrics(reference_lyrics) else "transcription"
    logger.info(f"Generating lyrics ({mode}) for {media.mime_type} media")

    progress("Preparing media...")
    prompt = build_lyrics_prompt(reference_lyrics)

    progress("Listening and synchronizing lyrics...")
    try:
        raw_lyrics = oracle.transcribe(media, prompt)
    except OracleError as e:
        logger.error(f"Error generating lyrics: {e}")
        raise

    progress("Building timeline...")
    segments = normalize_lyrics(raw_lyrics, strict=settings.STRICT_STYLES)
    logger.info(f"Generated {len(segments)} lyric segments from {len(raw_lyrics)} raw lines")
    return segments


def analyze_styles(
    lyrics: List[LyricSegment],
    oracle: Optional[LyricsOracle] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> List[LyricSegment]:
    """Restyle lyrics with oracle-picked animation, font and color.

    Styling is best-effort: any oracle failure is logged and the input
    sequence is returned unchanged.

    Args:
        lyrics: Normalized lyric segments
        oracle: Oracle client (default: configured from settings)
        on_progress: Receives human-readable status messages

    Returns:
        Restyled segments with the same ids and order as ``lyrics``
    """
    if not lyrics:
        return []

    oracle = oracle or LyricsOracle()
    progress = on_progress or _noop_progress

    progress("Analyzing mood and typography...")
    try:
        style_results = oracle.suggest_styles(build_style_prompt(lyrics))
    except OracleError as e:
        logger.warning(f"Style analysis failed, keeping existing styles: {e}")
        return list(lyrics)

    return reconcile_styles(lyrics, style_results, strict=settings.STRICT_STYLES)
