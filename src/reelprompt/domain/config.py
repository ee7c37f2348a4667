"""Render configuration types shared by the interpreter, resolver and dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from reelprompt.exceptions import ValidationError

FPS = 30
DEFAULT_DURATION = 5


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class TextPosition(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class TextStyle(str, Enum):
    MINIMAL = "minimal"
    BOLD = "bold"
    ELEGANT = "elegant"


class Animation(str, Enum):
    FADE = "fade"
    SLIDE = "slide"
    ZOOM = "zoom"
    NONE = "none"


class VideoFormat(str, Enum):
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    SQUARE = "square"


@dataclass(frozen=True)
class PromptHints:
    """Whatever a free-text prompt implies. `None` means the prompt said nothing."""

    text_position: Optional[TextPosition] = None
    text_style: Optional[TextStyle] = None
    animation: Optional[Animation] = None
    format: Optional[VideoFormat] = None
    duration: Optional[int] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None


@dataclass(frozen=True)
class RenderConfig:
    """Fully resolved parameters for one render."""

    media_path: str
    media_type: MediaType
    title: str = ""
    subtitle: str = ""
    text_position: TextPosition = TextPosition.BOTTOM
    text_style: TextStyle = TextStyle.BOLD
    animation: Animation = Animation.FADE
    format: VideoFormat = VideoFormat.LANDSCAPE
    duration: int = DEFAULT_DURATION
    fps: int = FPS

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValidationError(f"Duration must be positive, got {self.duration}")
        if self.fps <= 0:
            raise ValidationError(f"Frame rate must be positive, got {self.fps}")

    @property
    def duration_in_frames(self) -> int:
        return self.duration * self.fps

    @property
    def frame_range(self) -> str:
        return f"0-{self.duration_in_frames - 1}"

    def input_props(self) -> dict[str, str]:
        """Props handed to the render engine, keyed the way the compositions read them."""
        return {
            "mediaPath": self.media_path,
            "mediaType": self.media_type.value,
            "title": self.title,
            "subtitle": self.subtitle,
            "textPosition": self.text_position.value,
            "textStyle": self.text_style.value,
            "animation": self.animation.value,
        }
