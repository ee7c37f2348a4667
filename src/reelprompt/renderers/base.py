from __future__ import annotations

from dataclasses import dataclass

from reelprompt.domain.config import FPS, VideoFormat


@dataclass(frozen=True)
class CompositionSpec:
    id: str
    format: VideoFormat
    width: int
    height: int
    fps: int = FPS

    @property
    def size(self) -> str:
        return f"{self.width}x{self.height}"
