from reelprompt.domain.config import VideoFormat

from .base import CompositionSpec

# Stories, reels and shorts share the 9:16 frame.
MEDIA_VIDEO_SHORT = CompositionSpec(
    "MediaVideoShort",
    VideoFormat.PORTRAIT,
    1080,
    1920,
)
