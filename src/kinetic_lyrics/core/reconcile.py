"""Style reconciliation: merge oracle style picks into existing segments."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..models import AnimationType, BackgroundEffect, FontFamily, LyricSegment, StyleResult
from .sanitize import match_enum

logger = logging.getLogger(__name__)


def coerce_style_result(raw: Any) -> Optional[StyleResult]:
    """Turn one raw styling entry into a StyleResult.

    Entries that are not objects or lack a string id are discarded.
    Non-string style fields are treated as missing.
    """
    if isinstance(raw, StyleResult):
        return raw
    if not isinstance(raw, dict):
        return None
    style_id = raw.get("id")
    if not isinstance(style_id, str) or not style_id:
        return None

    def _field(name: str) -> Optional[str]:
        value = raw.get(name)
        return value if isinstance(value, str) and value.strip() else None

    return StyleResult(
        id=style_id,
        animation=_field("animation"),
        font=_field("font"),
        color=_field("color"),
    )


def build_style_map(style_results: Iterable[Any]) -> Dict[str, StyleResult]:
    """Index style results by segment id. Later duplicates win."""
    style_map: Dict[str, StyleResult] = {}
    for raw in style_results or []:
        result = coerce_style_result(raw)
        if result is not None:
            style_map[result.id] = result
    return style_map


def _resolve_animation(proposed: Optional[str], current: str, strict: bool) -> str:
    if proposed is None:
        return current
    member = match_enum(proposed, AnimationType)
    if member is not None:
        return member.value
    return current if strict else proposed


def _resolve_font(proposed: Optional[str], current: str, strict: bool) -> str:
    if proposed is None:
        return current
    member = match_enum(proposed, FontFamily)
    if member is not None:
        return member.value
    return current if strict else proposed


def apply_style(segment: LyricSegment, result: StyleResult, strict: bool = False) -> LyricSegment:
    """Return a copy of ``segment`` restyled by ``result``.

    Only animation, font family and color change; effects are carried
    over and the background effect is reset to none. A field missing
    from ``result`` keeps the segment's current value.
    """
    style = segment.style
    new_style = style.model_copy(
        update={
            "animation": _resolve_animation(result.animation, style.animation, strict),
            "font_family": _resolve_font(result.font, style.font_family, strict),
            "color": result.color if result.color is not None else style.color,
            "effects": list(style.effects),
            "background_effect": BackgroundEffect.NONE.value,
        }
    )
    return segment.model_copy(update={"style": new_style})


def reconcile_styles(
    lyrics: Iterable[LyricSegment],
    style_results: Iterable[Any],
    strict: bool = False,
) -> List[LyricSegment]:
    """Merge style results into a lyric sequence by id.

    The output has the same length, order and ids as ``lyrics``.
    Segments with no matching style result are returned as the very
    same objects.

    Args:
        lyrics: Normalized lyric segments
        style_results: Raw or parsed ``{id, animation, font, color}`` entries
        strict: Keep the current animation/font when the proposed value is
            outside AnimationType/FontFamily

    Returns:
        Restyled lyric segments
    """
    style_map = build_style_map(style_results)
    updated: List[LyricSegment] = []
    matched = 0
    for segment in lyrics or []:
        result = style_map.get(segment.id)
        if result is None:
            updated.append(segment)
            continue
        updated.append(apply_style(segment, result, strict=strict))
        matched += 1

    logger.debug(f"Restyled {matched} of {len(updated)} segments")
    return updated
