from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    RENDER = "render"
    CONFIG = "config"


DEFAULT_EXIT_CODES: dict[ErrorCategory, int] = {
    ErrorCategory.VALIDATION: 1,
    ErrorCategory.RENDER: 1,
    ErrorCategory.CONFIG: 2,
}


@dataclass
class ReelPromptError(Exception):
    """Base exception for reelprompt with standardized categories."""

    message: str
    category: ErrorCategory = ErrorCategory.RENDER
    exit_code: int | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.exit_code is None:
            self.exit_code = DEFAULT_EXIT_CODES.get(self.category, 1)

    def label(self) -> str:
        return {
            ErrorCategory.VALIDATION: "Error",
            ErrorCategory.RENDER: "Render error",
            ErrorCategory.CONFIG: "Configuration error",
        }.get(self.category, "Error")


class ValidationError(ReelPromptError):
    """Raised when user input cannot produce a render configuration."""

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.VALIDATION,
            exit_code=exit_code,
        )


class MissingArgumentError(ValidationError):
    """Raised when a required CLI argument is absent."""

    def __init__(self, option: str) -> None:
        super().__init__(f"{option} is required")
        self.option = option


class MediaNotFoundError(ValidationError):
    """Raised when the media file does not exist on disk."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Media file not found: {path}")
        self.path = path


class ExternalProcessError(ReelPromptError):
    """Raised when a delegated child process fails."""

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.RENDER,
            exit_code=exit_code,
        )


class RenderFailureError(ExternalProcessError):
    """Raised when the render engine exits non-zero or cannot be started."""

    def __init__(self, message: str, *, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class StagingError(ReelPromptError):
    """Raised when media cannot be copied into the staging directory."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=ErrorCategory.RENDER)


class ConfigurationError(ReelPromptError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIG,
            exit_code=exit_code,
        )
