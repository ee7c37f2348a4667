from reelprompt.domain.config import VideoFormat

from .base import CompositionSpec

MEDIA_VIDEO_SQUARE = CompositionSpec(
    "MediaVideoSquare",
    VideoFormat.SQUARE,
    1080,
    1080,
)
