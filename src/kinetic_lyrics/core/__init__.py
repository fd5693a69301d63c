"""Lyric post-processing: normalization and style reconciliation."""

from .normalizer import normalize_lyrics
from .reconcile import reconcile_styles

__all__ = [
    "normalize_lyrics",
    "reconcile_styles",
]
