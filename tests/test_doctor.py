from __future__ import annotations

from pathlib import Path

from reelprompt.config.settings import Settings
from reelprompt.utils import doctor


def _project(tmp_path: Path) -> Settings:
    project = tmp_path / "vp"
    project.mkdir()
    (project / "package.json").write_text("{}", encoding="utf-8")
    return Settings(project_dir=str(project))


def test_doctor_all_ok(monkeypatch, capsys, tmp_path: Path) -> None:
    def fake_run(cmd):  # noqa: ANN001
        if cmd[0] == "node":
            return 0, "v20.11.0"
        return 0, "10.2.4"

    monkeypatch.setattr(doctor, "_run_cmd", fake_run)
    monkeypatch.setattr(doctor, "_get_version", lambda: "0.0.0")

    code = doctor.run_doctor(_project(tmp_path))
    out = capsys.readouterr().out

    assert code == 0
    assert "node: v20.11.0" in out
    assert "npx: 10.2.4" in out
    assert (tmp_path / "vp" / "public").is_dir()


def test_doctor_missing_npx(monkeypatch, capsys, tmp_path: Path) -> None:
    def fake_run(cmd):  # noqa: ANN001
        if cmd[0] == "npx":
            return 1, ""
        return 0, "v20.11.0"

    monkeypatch.setattr(doctor, "_run_cmd", fake_run)
    monkeypatch.setattr(doctor, "_get_version", lambda: "0.0.0")

    code = doctor.run_doctor(_project(tmp_path))

    assert code == 1
    assert doctor._node_hint() in capsys.readouterr().out  # noqa: SLF001


def test_doctor_missing_project(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(doctor, "_run_cmd", lambda _cmd: (0, "ok"))
    monkeypatch.setattr(doctor, "_check_writable", lambda _: True)

    code = doctor.run_doctor(Settings(project_dir=str(tmp_path / "absent")))

    assert code == 1
