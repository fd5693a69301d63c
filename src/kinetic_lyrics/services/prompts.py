"""Prompt builders for the lyric and style oracle calls."""

import json
from typing import List, Optional

from ..models import AnimationType, FontFamily, LyricSegment

_OUTPUT_SCHEMA = """Return ONLY a JSON object of the form:
{
  "lyrics": [
    {
      "text": string,
      "startTime": number (seconds),
      "endTime": number (seconds),
      "style": {
        "animation": string,
        "fontSize": string,
        "fontFamily": string,
        "color": string (hex, e.g. "#ffcc00")
      }
    }
  ]
}"""


def _animation_choices() -> str:
    return ", ".join(f"'{a.value}'" for a in AnimationType)


def _font_choices() -> str:
    return ", ".join(f"'{f.value}'" for f in FontFamily)


def has_reference_lyrics(reference_lyrics: Optional[str]) -> bool:
    """True when reference lyrics are present and not just whitespace."""
    return bool(reference_lyrics and reference_lyrics.strip())


def build_alignment_prompt(reference_lyrics: str) -> str:
    """Prompt for synchronizing user-supplied lyrics to the audio track.

    Args:
        reference_lyrics: Reference text, one lyric line per line

    Returns:
        Prompt string for the oracle
    """
    return f"""You are an expert audio synchronizer.

Task: Synchronize the provided "REFERENCE_TEXT" to the audio track.

Requirements:
1. Use the "REFERENCE_TEXT" exactly line by line. Do not skip lines.
2. Listen to the audio and find the Start Time and End Time for each line.
3. If a line is very long, insert a '\\n' character at a natural pause to split it visually, but keep it as one object.
4. Assign a Visual Style (animation, font, color) based on the mood of that specific part.
   Animation should be one of: {_animation_choices()}.

REFERENCE_TEXT:
\"\"\"
{reference_lyrics}
\"\"\"

{_OUTPUT_SCHEMA}"""


def build_transcription_prompt() -> str:
    """Prompt for transcribing lyrics from scratch."""
    return f"""You are an expert transcriber.

Task: Transcribe the lyrics from the audio.

Requirements:
1. Listen to the vocals and write down the text.
2. Provide Start Time and End Time for each line.
3. Assign a Visual Style (animation, font, color) based on the mood.
   Animation should be one of: {_animation_choices()}.
4. If a line is long, insert '\\n' for readability.

{_OUTPUT_SCHEMA}"""


def build_lyrics_prompt(reference_lyrics: Optional[str] = None) -> str:
    """Pick the alignment prompt when reference lyrics exist, else transcription."""
    if has_reference_lyrics(reference_lyrics):
        return build_alignment_prompt(reference_lyrics)
    return build_transcription_prompt()


def simplify_lyrics(lyrics: List[LyricSegment]) -> List[dict]:
    """Reduce segments to the fields the style oracle needs."""
    return [
        {
            "id": segment.id,
            "text": segment.text,
            "duration": round(segment.duration, 3),
        }
        for segment in lyrics
    ]


def build_style_prompt(lyrics: List[LyricSegment]) -> str:
    """Prompt asking the oracle to pick a style for every lyric line."""
    lyrics_json = json.dumps(simplify_lyrics(lyrics), ensure_ascii=False, indent=2)
    return f"""Role: Professional Music Video Director.
Task: Assign Kinetic Typography styles (Animation, Font, Color) for EACH line based on the mood.

## Lyrics
```json
{lyrics_json}
```

## Instructions
1. Font: MUST select strictly from: [{_font_choices()}].
2. Animation: Choose a dynamic animation based on text meaning/intensity, from: [{_animation_choices()}].
3. Color: Match the emotion (hex color string).
4. Keep every "id" exactly as given.

Return ONLY a JSON object: {{"styles": [{{"id": string, "animation": string, "font": string, "color": string}}]}}"""
