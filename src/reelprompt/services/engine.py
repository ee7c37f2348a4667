"""
Render engine adapters for reelprompt.

The dispatcher only ever talks to a RenderEngine. RemotionEngine is the
production implementation and shells out to the Remotion CLI; tests swap in
a fake that records calls.
"""

from __future__ import annotations

import json
import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Protocol

from reelprompt.exceptions import RenderFailureError
from reelprompt.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_RENDER_COMMAND = "npx remotion render"


@dataclass(frozen=True)
class ExitStatus:
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class RenderEngine(Protocol):
    def execute(
        self,
        composition: str,
        output: Path,
        props: Mapping[str, str],
        frame_range: str,
    ) -> ExitStatus: ...


def encode_props(props: Mapping[str, str]) -> str:
    return json.dumps(dict(props), ensure_ascii=False)


@dataclass
class RemotionEngine:
    """
    Runs `remotion render` from the project directory.

    Notes:
    - stdio is inherited so Remotion's progress bar reaches the terminal.
    - No timeout; the call blocks until the render finishes.
    """

    project_dir: Path
    command: list[str] = field(default_factory=lambda: shlex.split(DEFAULT_RENDER_COMMAND))

    @classmethod
    def from_command_line(cls, project_dir: Path, command_line: str) -> "RemotionEngine":
        return cls(project_dir=project_dir, command=shlex.split(command_line))

    def build_command(
        self,
        composition: str,
        output: Path,
        props: Mapping[str, str],
        frame_range: str,
    ) -> list[str]:
        return [
            *self.command,
            composition,
            str(output),
            f"--props={encode_props(props)}",
            f"--frames={frame_range}",
        ]

    def format_command(
        self,
        composition: str,
        output: Path,
        props: Mapping[str, str],
        frame_range: str,
    ) -> str:
        """Shell-quoted form of the command, safe to paste into a terminal."""
        return shlex.join(self.build_command(composition, output, props, frame_range))

    def execute(
        self,
        composition: str,
        output: Path,
        props: Mapping[str, str],
        frame_range: str,
    ) -> ExitStatus:
        if not Path(self.project_dir).is_dir():
            raise RenderFailureError(f"Remotion project directory not found: {self.project_dir}")

        cmd = self.build_command(composition, output, props, frame_range)
        log.debug("render cmd: %s", shlex.join(cmd))
        try:
            proc = subprocess.run(cmd, cwd=self.project_dir, check=False)
        except FileNotFoundError as exc:
            raise RenderFailureError(
                f"Render engine not found: '{cmd[0]}'. Install Node.js and try again."
            ) from exc
        except OSError as exc:
            raise RenderFailureError(f"Cannot start render engine '{cmd[0]}': {exc}") from exc
        return ExitStatus(returncode=proc.returncode)
