from __future__ import annotations

from pathlib import Path

import pytest

from reelprompt.config.settings import Settings
from reelprompt.exceptions import MediaNotFoundError, MissingArgumentError, RenderFailureError
from reelprompt.pipeline import Pipeline
from reelprompt.services.dispatcher import RenderDispatcher
from reelprompt.services.engine import RemotionEngine


def _pipeline(engine, staging: Path) -> Pipeline:  # noqa: ANN001
    return Pipeline(dispatcher=RenderDispatcher(engine=engine, staging_dir=staging))


def test_pipeline_end_to_end(tmp_path: Path, engine, photo: Path) -> None:  # noqa: ANN001
    staging = tmp_path / "public"
    pipeline = _pipeline(engine, staging)

    result = pipeline.run(
        str(photo),
        "square slide 'Grand Opening' 3 seconds",
        output=str(tmp_path / "out" / "video.mp4"),
    )

    assert (staging / "photo.jpg").exists()
    assert result.status.ok
    assert [s.name for s in result.steps] == ["resolve", "stage", "render"]
    assert len(engine.calls) == 1
    call = engine.calls[0]
    assert call["composition"] == "MediaVideoSquare"
    assert call["frame_range"] == "0-89"
    assert call["output"] == (tmp_path / "out" / "video.mp4").resolve()
    assert call["props"]["title"] == "Grand Opening"
    assert call["props"]["animation"] == "slide"


def test_build_does_not_stage_or_render(tmp_path: Path, engine, photo: Path) -> None:  # noqa: ANN001
    staging = tmp_path / "public"
    pipeline = _pipeline(engine, staging)

    job = pipeline.build(str(photo), "zoom", output=str(tmp_path / "o.mp4"))

    assert job.composition.id == "MediaVideo"
    assert not staging.exists()
    assert engine.calls == []


def test_missing_media_stops_before_staging(tmp_path: Path, engine) -> None:  # noqa: ANN001
    staging = tmp_path / "public"
    pipeline = _pipeline(engine, staging)

    with pytest.raises(MediaNotFoundError):
        pipeline.run(str(tmp_path / "ghost.jpg"), "zoom", output=str(tmp_path / "o.mp4"))

    assert not staging.exists()
    assert engine.calls == []


def test_missing_prompt_stops_before_staging(tmp_path: Path, engine, photo: Path) -> None:  # noqa: ANN001
    staging = tmp_path / "public"
    pipeline = _pipeline(engine, staging)

    with pytest.raises(MissingArgumentError):
        pipeline.run(str(photo), None, output=str(tmp_path / "o.mp4"))

    assert not staging.exists()
    assert engine.calls == []


def test_render_failure_propagates(tmp_path: Path, engine, photo: Path) -> None:  # noqa: ANN001
    engine.returncode = 1
    pipeline = _pipeline(engine, tmp_path / "public")

    with pytest.raises(RenderFailureError):
        pipeline.run(str(photo), "zoom", output=str(tmp_path / "o.mp4"))

    assert len(engine.calls) == 1


def test_from_settings_wires_staging_and_engine(tmp_path: Path) -> None:
    settings = Settings(project_dir=str(tmp_path / "vp"), fps=24, default_duration=2)

    pipeline = Pipeline.from_settings(settings)

    assert pipeline.dispatcher.staging_dir == (tmp_path / "vp" / "public").resolve()
    assert isinstance(pipeline.dispatcher.engine, RemotionEngine)
    assert pipeline.dispatcher.engine.project_dir == (tmp_path / "vp").resolve()
    assert pipeline.fps == 24
    assert pipeline.default_duration == 2
