from reelprompt.domain.config import VideoFormat

from .base import CompositionSpec
from .landscape import MEDIA_VIDEO
from .short import MEDIA_VIDEO_SHORT
from .square import MEDIA_VIDEO_SQUARE

COMPOSITIONS: dict[VideoFormat, CompositionSpec] = {
    VideoFormat.LANDSCAPE: MEDIA_VIDEO,
    VideoFormat.PORTRAIT: MEDIA_VIDEO_SHORT,
    VideoFormat.SQUARE: MEDIA_VIDEO_SQUARE,
}


def list_compositions() -> list[CompositionSpec]:
    return list(COMPOSITIONS.values())


__all__ = [
    "COMPOSITIONS",
    "CompositionSpec",
    "MEDIA_VIDEO",
    "MEDIA_VIDEO_SHORT",
    "MEDIA_VIDEO_SQUARE",
    "list_compositions",
]
