"""Kinetic Lyrics - time-aligned lyric captions with kinetic typography.

This package provides tools for:
- Transcribing or aligning lyrics to an uploaded audio/video file
- Normalizing the model output into a clean, non-overlapping timeline
- Assigning animation, font and color styles to each lyric line
"""

__version__ = "0.1.0"
