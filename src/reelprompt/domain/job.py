from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from reelprompt.domain.config import RenderConfig
from reelprompt.renderers.base import CompositionSpec


@dataclass(frozen=True)
class RenderJob:
    config: RenderConfig
    composition: CompositionSpec
    output: Path

    @property
    def frame_range(self) -> str:
        return self.config.frame_range

    @property
    def props(self) -> dict[str, str]:
        return self.config.input_props()
