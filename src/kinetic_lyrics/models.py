"""Pydantic models for lyric segments, styles and API payloads."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnimationType(str, Enum):
    """Kinetic typography animation kinds understood by the renderer."""

    SLIDE_UP = "slide-up"
    SLIDE_DOWN = "slide-down"
    SLIDE_LEFT = "slide-left"
    SLIDE_RIGHT = "slide-right"
    FADE = "fade"
    ZOOM_IN = "zoom-in"
    ZOOM_OUT = "zoom-out"
    TYPEWRITER = "typewriter"
    BOUNCE = "bounce"
    GLITCH = "glitch"
    SHAKE = "shake"
    BLUR_IN = "blur-in"
    WAVE = "wave"
    POP = "pop"
    FLIP = "flip"
    NEON = "neon"


class FontFamily(str, Enum):
    """Fonts the style stage is allowed to pick."""

    SANS = "sans"
    SERIF = "serif"
    MINCHO = "mincho"
    DELA_GOTHIC = "dela-gothic"
    YUJI_SYUKU = "yuji-syuku"
    HORROR = "horror"
    PIXEL = "pixel"
    HANDWRITING = "handwriting"
    ZEN_MARU = "zen-maru"
    HACHI_MARU = "hachi-maru"


class BackgroundEffect(str, Enum):
    """Background effects; the lyric pipeline only ever writes NONE."""

    NONE = "none"
    PARTICLES = "particles"
    GRADIENT = "gradient"
    SPOTLIGHT = "spotlight"


DEFAULT_ANIMATION = AnimationType.SLIDE_UP.value
DEFAULT_COLOR = "#ffffff"
DEFAULT_FONT_SIZE = "4xl"
DEFAULT_FONT_FAMILY = "display"
DEFAULT_POSITION = "center"


class CamelModel(BaseModel):
    """Base model serializing to camelCase JSON for the timeline renderer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LyricStyle(CamelModel):
    """Visual style of one lyric segment."""

    # Plain strings: lenient mode may carry values outside the enumerations
    animation: str = DEFAULT_ANIMATION
    color: str = DEFAULT_COLOR
    font_size: str = DEFAULT_FONT_SIZE
    font_family: str = DEFAULT_FONT_FAMILY
    position: str = DEFAULT_POSITION
    background_effect: str = BackgroundEffect.NONE.value
    effects: List[str] = Field(default_factory=list)
    vertical: bool = False


class LyricSegment(CamelModel):
    """A timed lyric line with its style."""

    id: str
    text: str
    start_time: float
    end_time: float
    style: LyricStyle = Field(default_factory=LyricStyle)

    @property
    def duration(self) -> float:
        """Segment duration in seconds (may be <= 0 before normalization)."""
        return self.end_time - self.start_time


class StyleResult(BaseModel):
    """One entry of the styling oracle response."""

    id: str
    animation: Optional[str] = None
    font: Optional[str] = None
    color: Optional[str] = None


class MediaPart(CamelModel):
    """Inline media payload: base64 data plus MIME type."""

    data: str = Field(..., description="Base64-encoded media bytes")
    mime_type: str = Field(..., description="MIME type, e.g. audio/mpeg")


class GenerateLyricsRequest(CamelModel):
    """Request to transcribe or align lyrics for an uploaded file."""

    media: MediaPart
    reference_lyrics: Optional[str] = Field(
        None, description="Reference text; when present lyrics are aligned, not transcribed"
    )


class AnalyzeStyleRequest(CamelModel):
    """Request to restyle an existing lyric sequence."""

    lyrics: List[LyricSegment] = Field(default_factory=list)


class LyricsResponse(CamelModel):
    """Response carrying a lyric sequence."""

    lyrics: List[LyricSegment]
