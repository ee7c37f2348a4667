from __future__ import annotations

from pathlib import Path

from reelprompt.exceptions import MediaNotFoundError


def require_file(path: Path) -> Path:
    if not path.is_file():
        raise MediaNotFoundError(str(path))
    return path
