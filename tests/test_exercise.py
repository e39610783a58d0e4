import subprocess
from pathlib import Path

import pytest

from exrunner.exercise import (
    CompiledExercise,
    ContextLine,
    Exercise,
    ExerciseFailed,
    Mode,
    State,
    load_exercises,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


class FakeToolchain:
    def __init__(self, compile_code=0, run_code=0, stdout=b"", stderr=b""):
        self.compile_code = compile_code
        self.run_code = run_code
        self.stdout = stdout
        self.stderr = stderr
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        if cmd[0] in ("rustc", "cargo"):
            return subprocess.CompletedProcess(cmd, self.compile_code, b"", self.stderr)
        return subprocess.CompletedProcess(cmd, self.run_code, self.stdout, self.stderr)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def make(directory, name, text, mode=Mode.COMPILE):
    path = directory / f"{name}.rs"
    path.write_text(text)
    return Exercise(name=name, path=path, mode=mode, hint="")


def test_pending_state(workdir):
    exercise = make(workdir, "pending_exercise", PENDING)
    expected = State(
        (
            ContextLine("// fake_exercise", 1, False),
            ContextLine("", 2, False),
            ContextLine("// I AM NOT DONE", 3, True),
            ContextLine("", 4, False),
            ContextLine("fn main() {", 5, False),
        )
    )
    assert exercise.state() == expected
    assert not exercise.looks_done()


def test_finished_exercise(workdir):
    exercise = make(workdir, "finished_exercise", FINISHED)
    assert exercise.state() == State()
    assert exercise.looks_done()


def test_marker_on_first_line_clamps_context(workdir):
    exercise = make(workdir, "first", "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n")
    state = exercise.state()
    assert [line.number for line in state.context] == [1, 2, 3]
    assert state.context[0].important


def test_triple_slash_and_indented_marker(workdir):
    exercise = make(workdir, "doc", "fn x() {}\n   ///  I  AM   NOT DONE\n")
    context = exercise.state().context
    assert [c.number for c in context if c.important] == [2]


def test_str_is_path(workdir):
    exercise = make(workdir, "a", FINISHED)
    assert str(exercise) == str(workdir / "a.rs")


def test_load_exercises():
    text = (
        '[[exercises]]\nname = "intro1"\npath = "exercises/intro/intro1.rs"\n'
        'mode = "compile"\nhint = "No hints this time ;)"\n\n'
        '[[exercises]]\nname = "tests1"\npath = "exercises/tests/tests1.rs"\n'
        'mode = "test"\nhint = "Hello!"\n'
    )
    exercises = load_exercises(text)
    assert [e.name for e in exercises] == ["intro1", "tests1"]
    assert exercises[1].mode is Mode.TEST
    assert exercises[0].path == Path("exercises/intro/intro1.rs")
    assert exercises[1].hint == "Hello!"


def test_load_exercises_rejects_unknown_mode():
    text = '[[exercises]]\nname = "x"\npath = "x.rs"\nmode = "bogus"\nhint = ""\n'
    with pytest.raises(ValueError):
        load_exercises(text)


def test_load_exercises_rejects_missing_field():
    with pytest.raises(ValueError):
        load_exercises('[[exercises]]\nname = "x"\n')


def test_clean(workdir, monkeypatch):
    toolchain = FakeToolchain()
    monkeypatch.setattr(subprocess, "run", toolchain)
    exercise = make(workdir, "example", PENDING)
    compiled = exercise.compile()
    assert isinstance(compiled, CompiledExercise)
    compiled.binary.write_text("")
    compiled.close()
    assert not compiled.binary.exists()
    assert toolchain.calls[0][:2] == ["rustc", str(exercise.path)]


def test_compile_failure_raises_and_cleans(workdir, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(compile_code=1, stderr=b"error: oops"))
    exercise = make(workdir, "broken", FINISHED)
    with pytest.raises(ExerciseFailed) as info:
        exercise.compile()
    assert info.value.output.stderr == "error: oops"
    assert list(workdir.glob("temp_*")) == []


def test_exercise_with_output(workdir, monkeypatch):
    toolchain = FakeToolchain(stdout=b"THIS TEST TOO SHALL PASS\n")
    monkeypatch.setattr(subprocess, "run", toolchain)
    exercise = make(workdir, "exercise_with_output", FINISHED, mode=Mode.TEST)
    with exercise.compile() as compiled:
        out = compiled.run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert toolchain.calls[0][:3] == ["rustc", "--test", str(exercise.path)]
    assert toolchain.calls[1][1:] == ["--show-output"]


def test_run_failure_raises(workdir, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeToolchain(run_code=101, stdout=b"panicked"))
    exercise = make(workdir, "crash", FINISHED)
    with exercise.compile() as compiled:
        with pytest.raises(ExerciseFailed) as info:
            compiled.run()
    assert info.value.output.stdout == "panicked"


def test_clippy_writes_manifest(workdir, monkeypatch):
    toolchain = FakeToolchain()
    monkeypatch.setattr(subprocess, "run", toolchain)
    (workdir / "exercises" / "clippy").mkdir(parents=True)
    exercise = make(workdir, "clippy1", PENDING, mode=Mode.CLIPPY)
    exercise.compile().close()
    manifest = (workdir / "exercises" / "clippy" / "Cargo.toml").read_text()
    assert 'name = "clippy1"' in manifest
    assert 'path = "clippy1.rs"' in manifest
    assert toolchain.calls[-1][:2] == ["cargo", "clippy"]
    assert toolchain.calls[1][:2] == ["cargo", "clean"]