"""
Configuration resolution for reelprompt.

Merges, per field: explicit override > prompt hint > default. Also owns
the media-type, composition and frame-count derivations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, TypeVar

from reelprompt.domain.config import (
    DEFAULT_DURATION,
    FPS,
    Animation,
    MediaType,
    PromptHints,
    RenderConfig,
    TextPosition,
    TextStyle,
    VideoFormat,
)
from reelprompt.exceptions import MissingArgumentError
from reelprompt.renderers import COMPOSITIONS, MEDIA_VIDEO, CompositionSpec
from reelprompt.services.interpreter import parse_prompt
from reelprompt.utils.checks import require_file

T = TypeVar("T")

VIDEO_EXTENSIONS = frozenset({".mp4", ".mov", ".webm", ".avi", ".mkv", ".m4v"})


def media_type_for(path: str | Path) -> MediaType:
    suffix = Path(path).suffix.lower()
    return MediaType.VIDEO if suffix in VIDEO_EXTENSIONS else MediaType.IMAGE


def composition_for(video_format: VideoFormat) -> CompositionSpec:
    return COMPOSITIONS.get(video_format, MEDIA_VIDEO)


def _pick(*candidates: Optional[T], default: T) -> T:
    # Empty strings count as unset, matching how a blank --title behaves.
    for candidate in candidates:
        if candidate is not None and candidate != "":
            return candidate
    return default


def require_inputs(media: Optional[str], prompt: Optional[str]) -> None:
    if not media or not media.strip():
        raise MissingArgumentError("--media")
    if not prompt or not prompt.strip():
        raise MissingArgumentError("--prompt")


def merge_config(
    media_name: str,
    hints: PromptHints,
    *,
    title: Optional[str] = None,
    subtitle: Optional[str] = None,
    default_duration: int = DEFAULT_DURATION,
    fps: int = FPS,
) -> RenderConfig:
    """Accepts partial hints; any field left None falls back to its default."""
    return RenderConfig(
        media_path=media_name,
        media_type=media_type_for(media_name),
        title=_pick(title, hints.title, default=""),
        subtitle=_pick(subtitle, hints.subtitle, default=""),
        text_position=_pick(hints.text_position, default=TextPosition.BOTTOM),
        text_style=_pick(hints.text_style, default=TextStyle.BOLD),
        animation=_pick(hints.animation, default=Animation.FADE),
        format=_pick(hints.format, default=VideoFormat.LANDSCAPE),
        duration=_pick(hints.duration, default=default_duration),
        fps=fps,
    )


def resolve_config(
    media: Optional[str],
    prompt: Optional[str],
    *,
    title: Optional[str] = None,
    subtitle: Optional[str] = None,
    default_duration: int = DEFAULT_DURATION,
    fps: int = FPS,
) -> RenderConfig:
    """
    Build the RenderConfig for one run.

    Raises MissingArgumentError for an absent media path or prompt and
    MediaNotFoundError when the media file is not on disk. The config
    records the media's base name, which is what the render engine reads
    after staging.
    """
    require_inputs(media, prompt)
    media_file = require_file(Path(str(media)).expanduser().resolve())

    return merge_config(
        media_file.name,
        parse_prompt(str(prompt)),
        title=title,
        subtitle=subtitle,
        default_duration=default_duration,
        fps=fps,
    )
