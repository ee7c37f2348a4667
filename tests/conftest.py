from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

import pytest
import typer.testing

from reelprompt.services.engine import ExitStatus


def _patch_clirunner() -> None:
    if "mix_stderr" in inspect.signature(typer.testing.CliRunner).parameters:
        return

    class PatchedCliRunner(typer.testing.CliRunner):
        def __init__(self, *args, **kwargs):  # noqa: ANN002, ANN003
            kwargs.pop("mix_stderr", None)
            super().__init__(*args, **kwargs)

    typer.testing.CliRunner = PatchedCliRunner


_patch_clirunner()


@dataclass
class RecordingEngine:
    """Render engine stand-in that records every call instead of shelling out."""

    returncode: int = 0
    calls: list[dict] = field(default_factory=list)

    def execute(
        self,
        composition: str,
        output: Path,
        props: Mapping[str, str],
        frame_range: str,
    ) -> ExitStatus:
        self.calls.append(
            {
                "composition": composition,
                "output": output,
                "props": dict(props),
                "frame_range": frame_range,
            }
        )
        return ExitStatus(returncode=self.returncode)


@pytest.fixture
def engine() -> RecordingEngine:
    return RecordingEngine()


@pytest.fixture
def photo(tmp_path: Path) -> Path:
    path = tmp_path / "media" / "photo.jpg"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"\xff\xd8\xff\xe0FAKEJPEG")
    return path
