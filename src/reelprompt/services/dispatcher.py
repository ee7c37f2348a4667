"""
Render job dispatch for reelprompt.

Responsibilities:
- Stage the media file where the render engine reads it
- Ensure the output directory exists
- Invoke the render engine once and trust its exit code

Does NOT:
- Parse prompts or resolve defaults
- Retry failed renders
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from reelprompt.domain.job import RenderJob
from reelprompt.exceptions import RenderFailureError, StagingError
from reelprompt.services.engine import ExitStatus, RenderEngine
from reelprompt.utils.checks import require_file
from reelprompt.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class RenderDispatcher:
    """Stages media into `staging_dir` and hands the job to `engine`."""

    engine: RenderEngine
    staging_dir: Path

    def stage(self, media: Path) -> Path:
        source = require_file(Path(media))
        staging = Path(self.staging_dir)
        target = staging / source.name
        try:
            staging.mkdir(parents=True, exist_ok=True)
            if source.resolve() != target.resolve():
                shutil.copyfile(source, target)
        except OSError as exc:
            raise StagingError(f"Cannot stage media into {staging}: {exc}") from exc
        log.info("Copied media to: %s", target)
        return target

    def dispatch(self, job: RenderJob) -> ExitStatus:
        try:
            job.output.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RenderFailureError(f"Cannot create output directory {job.output.parent}: {exc}") from exc

        log.info(
            "Rendering %s (%s frames) -> %s",
            job.composition.id,
            job.config.duration_in_frames,
            job.output,
        )
        status = self.engine.execute(
            job.composition.id,
            job.output,
            job.props,
            job.frame_range,
        )
        if not status.ok:
            raise RenderFailureError(
                f"Render engine exited with code {status.returncode}",
                returncode=status.returncode,
            )
        log.info("Render finished: %s", job.output)
        return status
