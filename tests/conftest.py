"""Pytest configuration and shared fixtures for Kinetic Lyrics tests."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
_src = Path(__file__).parent.parent / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from kinetic_lyrics.models import LyricSegment, LyricStyle  # noqa: E402


@pytest.fixture
def make_segment():
    """Factory for LyricSegment objects with sensible defaults."""

    def _make(segment_id="seg-1", text="line", start=0.0, end=1.0, **style):
        return LyricSegment(
            id=segment_id,
            text=text,
            start_time=start,
            end_time=end,
            style=LyricStyle(**style),
        )

    return _make


@pytest.fixture
def raw_oracle_lyrics():
    """A typical, slightly messy oracle lyric array."""
    return [
        {
            "text": "second line",
            "startTime": 4.0,
            "endTime": 9.0,
            "style": {"animation": "Zoom_In", "color": "#ff0000"},
        },
        {
            "text": "first line",
            "startTime": 0.5,
            "endTime": 4.5,
            "style": {"animation": "slide-up", "fontFamily": "mincho", "fontSize": "6xl"},
        },
        {"text": "broken", "startTime": "oops", "endTime": None},
        {"text": "third\nline", "startTime": 10.0, "endTime": 12.0},
    ]
