from __future__ import annotations

import json
from typing import NoReturn

import pydantic
import typer

from reelprompt.config.settings import Settings
from reelprompt.domain.job import RenderJob
from reelprompt.exceptions import ConfigurationError, MissingArgumentError, ReelPromptError
from reelprompt.pipeline import Pipeline
from reelprompt.renderers import list_compositions
from reelprompt.services.engine import RemotionEngine
from reelprompt.utils.doctor import run_doctor
from reelprompt.utils.logging import configure_logging, get_logger
from reelprompt.utils.timing import StepTimer

EPILOG = """
Prompt keywords:

  Position:   "top", "center", "bottom" (default)

  Style:      "minimal", "elegant", "bold" (default)

  Animation:  "fade" (default), "slide", "zoom", "static"

  Format:     "landscape" (default), "portrait/story/tiktok", "square/instagram"

  Duration:   "X seconds" (e.g. "5 seconds", "10s")

Examples:

  reelprompt -m photo.jpg -p "title: Welcome to Our Store"

  reelprompt -m promo.mp4 -p "portrait zoom title: 'Summer Sale' subtitle: 'Up to 50% off'"

  reelprompt -m hero.jpg -p "minimal center 'Company Name' 10 seconds"
"""

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Create videos from a media file and a free-text prompt.",
    epilog=EPILOG,
)
log = get_logger(__name__)


def _load_settings() -> Settings:
    try:
        return Settings()
    except pydantic.ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def _build_pipeline(settings: Settings) -> Pipeline:
    return Pipeline.from_settings(settings)


def _fail(ctx: typer.Context, err: ReelPromptError) -> NoReturn:
    typer.echo(f"{err.label()}: {err.message}", err=True)
    if isinstance(err, MissingArgumentError):
        typer.echo(ctx.get_help())
    raise typer.Exit(code=err.exit_code)


def _echo_job(job: RenderJob) -> None:
    config = job.config
    typer.echo("Generating video with config:")
    typer.echo(json.dumps(job.props, indent=2, ensure_ascii=False))
    typer.echo("")
    typer.echo(f"Composition: {job.composition.id}")
    typer.echo(f"Duration: {config.duration} seconds ({config.duration_in_frames} frames)")
    typer.echo(f"Output: {job.output}")


@app.callback()
def generate(
    ctx: typer.Context,
    media: str = typer.Option(None, "--media", "-m", help="Path to image or video file (required)."),
    prompt: str = typer.Option(None, "--prompt", "-p", help="Text prompt describing the video (required)."),
    output: str = typer.Option(None, "--output", "-o", help="Output file (default: out/output.mp4)."),
    title: str = typer.Option(None, "--title", "-t", help="Title text (overrides prompt parsing)."),
    subtitle: str = typer.Option(None, "--subtitle", "-s", help="Subtitle text (overrides prompt parsing)."),
    log_level: str = typer.Option(None, "--log-level", help="Log level (overrides config)."),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Print the resolved config and render command without rendering.",
    ),
) -> None:
    """Render a video from --media and --prompt."""
    if ctx.invoked_subcommand is not None:
        return

    try:
        settings = _load_settings()
        configure_logging(log_level or settings.log_level)
        log.debug("Settings: %s", settings.to_public_dict())

        pipeline = _build_pipeline(settings)
        timer = StepTimer()
        with timer.step("resolve"):
            job = pipeline.build(
                media,
                prompt,
                output=output or settings.output,
                title=title,
                subtitle=subtitle,
            )
        _echo_job(job)

        if dry_run:
            engine = pipeline.dispatcher.engine
            if isinstance(engine, RemotionEngine):
                typer.echo("")
                typer.echo(
                    engine.format_command(
                        job.composition.id, job.output, job.props, job.frame_range
                    )
                )
            return

        typer.echo("\nRunning render...\n")
        pipeline.execute(job, media, timer=timer)
    except ReelPromptError as err:
        _fail(ctx, err)

    typer.echo(f"\n✅ Video generated successfully: {job.output}")


@app.command()
def compositions() -> None:
    """List the compositions the render engine provides."""
    typer.echo("id\tformat\tsize\tfps")
    for comp in list_compositions():
        typer.echo(f"{comp.id}\t{comp.format.value}\t{comp.size}\t{comp.fps}")


@app.command()
def config(ctx: typer.Context) -> None:
    """Print resolved config."""
    try:
        settings = _load_settings()
    except ReelPromptError as err:
        _fail(ctx, err)
    typer.echo(json.dumps(settings.to_public_dict(), indent=2))


@app.command()
def doctor(ctx: typer.Context) -> None:
    """Run environment diagnostics."""
    try:
        code = run_doctor(_load_settings())
    except ReelPromptError as err:
        _fail(ctx, err)
    raise typer.Exit(code=code)


def _main() -> None:
    app()


if __name__ == "__main__":
    _main()
