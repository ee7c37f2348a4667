from reelprompt.domain.config import VideoFormat

from .base import CompositionSpec

MEDIA_VIDEO = CompositionSpec(
    "MediaVideo",
    VideoFormat.LANDSCAPE,
    1920,
    1080,
)
