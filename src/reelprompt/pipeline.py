"""
Pipeline orchestration for reelprompt.

The pipeline executes a single render:

1) Resolve the RenderConfig (prompt + overrides + defaults)
2) Stage the media file for the render engine
3) Render via the dispatcher

Responsibilities:
- Coordinate step order so nothing is copied or rendered for invalid input
- Time each step for the log

Does NOT:
- Parse prompts itself (services/interpreter.py)
- Know how the engine is launched (services/engine.py)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from reelprompt.config.settings import Settings
from reelprompt.domain.config import DEFAULT_DURATION, FPS
from reelprompt.domain.job import RenderJob
from reelprompt.services.dispatcher import RenderDispatcher
from reelprompt.services.engine import ExitStatus, RemotionEngine, RenderEngine
from reelprompt.services.resolver import composition_for, resolve_config
from reelprompt.utils.logging import get_logger
from reelprompt.utils.timing import StepTimer, StepTiming, format_steps

log = get_logger(__name__)


@dataclass(frozen=True)
class RunResult:
    job: RenderJob
    status: ExitStatus
    steps: List[StepTiming] = field(default_factory=list)


class Pipeline:
    """
    Builds and runs one render job.

    The dispatcher is injected so tests can point staging at a temp dir
    and replace the engine with a fake.
    """

    def __init__(
        self,
        *,
        dispatcher: RenderDispatcher,
        default_duration: int = DEFAULT_DURATION,
        fps: int = FPS,
    ) -> None:
        self.dispatcher = dispatcher
        self.default_duration = default_duration
        self.fps = fps

    @classmethod
    def from_settings(cls, settings: Settings, engine: RenderEngine | None = None) -> "Pipeline":
        engine = engine or RemotionEngine.from_command_line(
            settings.resolved_project_dir(),
            settings.render_command,
        )
        dispatcher = RenderDispatcher(
            engine=engine,
            staging_dir=settings.resolved_staging_dir(),
        )
        return cls(
            dispatcher=dispatcher,
            default_duration=settings.default_duration,
            fps=settings.fps,
        )

    def build(
        self,
        media: Optional[str],
        prompt: Optional[str],
        *,
        output: str,
        title: Optional[str] = None,
        subtitle: Optional[str] = None,
    ) -> RenderJob:
        """Resolve a RenderJob without touching the staging dir or the engine."""
        config = resolve_config(
            media,
            prompt,
            title=title,
            subtitle=subtitle,
            default_duration=self.default_duration,
            fps=self.fps,
        )
        return RenderJob(
            config=config,
            composition=composition_for(config.format),
            output=Path(output).expanduser().resolve(),
        )

    def execute(self, job: RenderJob, media: str | Path, *, timer: StepTimer | None = None) -> RunResult:
        """Stage `media` and render an already resolved job."""
        timer = timer or StepTimer()
        try:
            with timer.step("stage"):
                self.dispatcher.stage(Path(media).expanduser().resolve())

            with timer.step("render"):
                status = self.dispatcher.dispatch(job)
        finally:
            log.info("Steps: %s", format_steps(timer.steps))

        return RunResult(job=job, status=status, steps=list(timer.steps))

    def run(
        self,
        media: Optional[str],
        prompt: Optional[str],
        *,
        output: str,
        title: Optional[str] = None,
        subtitle: Optional[str] = None,
    ) -> RunResult:
        timer = StepTimer()
        with timer.step("resolve"):
            job = self.build(media, prompt, output=output, title=title, subtitle=subtitle)
        return self.execute(job, str(media), timer=timer)
