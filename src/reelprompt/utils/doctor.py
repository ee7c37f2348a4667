from __future__ import annotations

import subprocess
import sys
import tempfile
from pathlib import Path

from reelprompt.config.settings import Settings


def _run_cmd(cmd: list[str]) -> tuple[int, str]:
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError:
        return 1, ""
    return proc.returncode, proc.stdout.strip() or proc.stderr.strip()


def _check_writable(path: Path) -> bool:
    try:
        path.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(dir=path, delete=True):
            return True
    except OSError:
        return False


def _get_version() -> str:
    try:
        import importlib.metadata

        return importlib.metadata.version("reelprompt")
    except Exception:
        return "unknown"


def _node_hint() -> str:
    return "Install Node.js (which ships npx), then run `npm install` in the project dir."


def _status_line(ok: bool, label: str, detail: str = "") -> str:
    icon = "✅" if ok else "❌"
    return f"{icon} {label}{detail}"


def run_doctor(settings: Settings) -> int:
    required_ok = True
    lines: list[str] = []

    lines.append("reelprompt doctor")
    lines.append("")

    python_version = sys.version.split()[0]
    lines.append(_status_line(True, "Python", f": {python_version}"))
    lines.append(_status_line(True, "reelprompt version", f": {_get_version()}"))

    for binary in ("node", "npx"):
        code, out = _run_cmd([binary, "--version"])
        if code != 0:
            required_ok = False
            lines.append(_status_line(False, binary, " (not found)"))
        else:
            first_line = out.splitlines()[0] if out else "available"
            lines.append(_status_line(True, binary, f": {first_line}"))
    if not required_ok:
        lines.append(_node_hint())

    project_dir = settings.resolved_project_dir()
    project_ok = (project_dir / "package.json").is_file()
    if not project_ok:
        required_ok = False
    lines.append(_status_line(project_ok, "Remotion project", f": {project_dir}"))

    staging_dir = settings.resolved_staging_dir()
    writable = _check_writable(staging_dir)
    if not writable:
        required_ok = False
    lines.append(_status_line(writable, "Staging dir writable", f": {staging_dir}"))

    print("\n".join(lines))
    return 0 if required_ok else 1
