import json
import subprocess
from pathlib import Path

import pytest

from exrunner.project import AnalyzerProject, Crate


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("fn main() {}\n")


@pytest.fixture
def tree(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _touch(Path("exercises/b/mod.rs"))
    _touch(Path("exercises/a/x.rs"))
    _touch(Path("exercises/a/notes.txt"))
    _touch(Path("exercises/a/x.rs.bak"))
    _touch(Path("exercises/dir.v2/y.rs"))
    return tmp_path


def test_exercises_to_json_adds_rs_files_in_order(tree):
    project = AnalyzerProject()
    project.exercises_to_json("exercises")
    roots = [crate.root_module for crate in project.crates]
    assert roots == [str(Path("exercises/a/x.rs")), str(Path("exercises/b/mod.rs"))]


def test_crates_carry_edition_and_test_cfg(tree):
    project = AnalyzerProject()
    project.exercises_to_json("exercises")
    assert project.crates
    for crate in project.crates:
        assert crate.edition == "2021"
        assert crate.cfg == ["test"]
        assert crate.deps == []


def test_other_extensions_are_skipped(tree):
    project = AnalyzerProject()
    project.exercises_to_json("exercises")
    roots = [crate.root_module for crate in project.crates]
    assert str(Path("exercises/a/notes.txt")) not in roots
    assert str(Path("exercises/a/x.rs.bak")) not in roots
    assert str(Path("exercises/dir.v2/y.rs")) not in roots


def test_missing_root_gives_no_crates(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    project = AnalyzerProject()
    project.exercises_to_json("exercises")
    assert project.crates == []


def test_to_json_round_trip():
    project = AnalyzerProject(sysroot_src="sys", crates=[Crate(root_module="a.rs")])
    data = json.loads(project.to_json())
    assert data == {
        "sysroot_src": "sys",
        "crates": [{"root_module": "a.rs", "edition": "2021", "deps": [], "cfg": ["test"]}],
    }


def test_to_json_is_compact():
    text = AnalyzerProject().to_json()
    assert " " not in text
    assert json.loads(text) == {"sysroot_src": "", "crates": []}


def test_write_to_disk_writes_json(tmp_path):
    project = AnalyzerProject(sysroot_src="sys", crates=[Crate(root_module="b.rs")])
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert target.read_text(encoding="utf-8") == project.to_json()


def test_get_sysroot_src_uses_first_word(monkeypatch, capsys):
    calls = []

    def fake_run(args, *rest, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, stdout=b"/opt/toolchain extra\n")

    monkeypatch.setattr(subprocess, "run", fake_run)
    project = AnalyzerProject()
    project.get_sysroot_src()
    assert calls == [["rustc", "--print", "sysroot"]]
    expected = Path("/opt/toolchain") / "lib" / "rustlib" / "src" / "rust" / "library"
    assert project.sysroot_src == str(expected)
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_get_sysroot_src_propagates_missing_rustc(monkeypatch):
    def fake_run(args, *rest, **kwargs):
        raise FileNotFoundError("rustc")

    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(FileNotFoundError):
        AnalyzerProject().get_sysroot_src()