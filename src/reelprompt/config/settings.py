from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime configuration for reelprompt.

    All settings are loaded from environment variables with the
    `REELPROMPT_` prefix and optional `.env` support.

    Values here are process-level defaults only. Per-run choices
    (title, subtitle, output) come from the CLI and win over these.
    """

    model_config = SettingsConfigDict(
        env_prefix="REELPROMPT_",
        env_file=".env",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Render engine
    # ------------------------------------------------------------------
    project_dir: str = Field(
        default="video-project",
        description="Remotion project directory; the render engine runs from here.",
    )
    staging_dir: str | None = Field(
        default=None,
        description="Directory media is copied into. Defaults to <project_dir>/public.",
    )
    render_command: str = Field(
        default="npx remotion render",
        description="Command used to launch the render engine.",
    )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    output: str = Field(
        default="out/output.mp4",
        description="Default output video path.",
    )
    fps: int = Field(
        default=30,
        description="Frame rate the compositions are authored at.",
    )
    default_duration: int = Field(
        default=5,
        description="Video length in seconds when the prompt names none.",
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("fps", "default_duration")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be greater than zero")
        return value

    def resolved_project_dir(self) -> Path:
        return Path(self.project_dir).expanduser().resolve()

    def resolved_staging_dir(self) -> Path:
        if self.staging_dir:
            return Path(self.staging_dir).expanduser().resolve()
        return self.resolved_project_dir() / "public"

    # ------------------------------------------------------------------
    # Public / safe export
    # ------------------------------------------------------------------
    def to_public_dict(self) -> dict:
        """
        Return a dictionary of settings suitable for logging or CLI display.
        """
        return {
            "project_dir": self.project_dir,
            "staging_dir": str(self.resolved_staging_dir()),
            "render_command": self.render_command,
            "output": self.output,
            "fps": self.fps,
            "default_duration": self.default_duration,
            "log_level": self.log_level,
        }
