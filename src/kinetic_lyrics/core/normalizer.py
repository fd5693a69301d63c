"""Lyric synthesis normalizer.

Turns the loosely typed ``lyrics`` array returned by the oracle into a
sorted, non-overlapping sequence of LyricSegment objects:

1. Coerce every field (bad times become 0, missing style fields get defaults)
2. Match the animation against AnimationType
3. Assign ids
4. Stable sort by start time
5. Drop empty intervals and clamp overlaps
"""

import logging
import threading
import time
from typing import Any, Iterable, List

from ..models import (
    DEFAULT_ANIMATION,
    DEFAULT_COLOR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_POSITION,
    AnimationType,
    BackgroundEffect,
    LyricSegment,
    LyricStyle,
)
from .sanitize import (
    sanitize_enum,
    sanitize_mapping,
    sanitize_str,
    sanitize_text,
    sanitize_time,
)

logger = logging.getLogger(__name__)

_stamp_lock = threading.Lock()
_last_stamp = 0


def _next_stamp() -> int:
    """Return a nanosecond wall-clock stamp, strictly increasing per process."""
    global _last_stamp
    with _stamp_lock:
        _last_stamp = max(time.time_ns(), _last_stamp + 1)
        return _last_stamp


def make_segment_id(index: int, stamp: int) -> str:
    """Format a segment id as ``generated-<index>-<stamp>``."""
    return f"generated-{index}-{stamp}"


def build_style(raw_style: Any, strict: bool = False) -> LyricStyle:
    """Build a LyricStyle from a raw oracle style object.

    Position, background effect, effects and vertical are not controlled
    by the oracle and always take their pipeline values.
    """
    raw = sanitize_mapping(raw_style)
    return LyricStyle(
        animation=sanitize_enum(
            raw.get("animation"), AnimationType, DEFAULT_ANIMATION, strict=strict
        ),
        color=sanitize_str(raw.get("color"), DEFAULT_COLOR),
        font_size=sanitize_str(raw.get("fontSize"), DEFAULT_FONT_SIZE),
        font_family=sanitize_str(raw.get("fontFamily"), DEFAULT_FONT_FAMILY),
        position=DEFAULT_POSITION,
        background_effect=BackgroundEffect.NONE.value,
        effects=[],
        vertical=False,
    )


def build_segment(raw_item: Any, segment_id: str, strict: bool = False) -> LyricSegment:
    """Coerce one raw lyric line into a candidate segment.

    The candidate may still have a non-positive duration; the overlap
    pass decides whether it is kept.
    """
    raw = sanitize_mapping(raw_item)
    return LyricSegment(
        id=segment_id,
        text=sanitize_text(raw.get("text")),
        start_time=sanitize_time(raw.get("startTime")),
        end_time=sanitize_time(raw.get("endTime")),
        style=build_style(raw.get("style"), strict=strict),
    )


def resolve_overlaps(segments: List[LyricSegment]) -> List[LyricSegment]:
    """Drop empty intervals and clamp overlapping ones.

    Expects ``segments`` sorted by start time. Segments with
    ``end_time <= start_time`` are removed first. Each remaining segment
    that runs past the start of the next one is truncated to that start;
    if truncation leaves it empty it is dropped as well.

    Args:
        segments: Candidate segments sorted ascending by start time

    Returns:
        New list of segments satisfying start-order, no overlap and
        positive duration
    """
    candidates = [s for s in segments if s.end_time > s.start_time]
    dropped = len(segments) - len(candidates)
    clamped = 0

    result: List[LyricSegment] = []
    for i, current in enumerate(candidates):
        if i + 1 < len(candidates):
            next_start = candidates[i + 1].start_time
            if current.end_time > next_start:
                current = current.model_copy(update={"end_time": next_start})
                clamped += 1
        if current.end_time <= current.start_time:
            dropped += 1
            continue
        result.append(current)

    if dropped or clamped:
        logger.debug(f"Overlap pass dropped {dropped} and clamped {clamped} segments")
    return result


def normalize_lyrics(raw_items: Iterable[Any], strict: bool = False) -> List[LyricSegment]:
    """Normalize a raw oracle lyric array into a clean timeline.

    Never raises on malformed items: non-object entries become empty
    candidates which are then dropped for having zero duration.

    Args:
        raw_items: Loosely typed lyric objects, in any order
        strict: Replace unknown animations with the default instead of
            keeping the raw value

    Returns:
        Segments sorted by start time, non-overlapping, each with a
        strictly positive duration
    """
    items = list(raw_items or [])
    stamp = _next_stamp()
    candidates = [
        build_segment(item, make_segment_id(index, stamp), strict=strict)
        for index, item in enumerate(items)
    ]
    # sorted() is stable, so equal start times keep their input order
    candidates = sorted(candidates, key=lambda s: s.start_time)
    segments = resolve_overlaps(candidates)

    logger.debug(f"Normalized {len(items)} raw lines into {len(segments)} segments")
    return segments
