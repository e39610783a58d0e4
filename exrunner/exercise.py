"""Exercise descriptions, their compilation and their completion state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
import weakref
from dataclasses import dataclass
from pathlib import Path

COLOR_ARGS = ("--color", "always")
I_AM_DONE_PATTERN = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """One source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """A compile or run step exited unsuccessfully."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


def _temp_file() -> Path:
    return Path.cwd() / f"temp_{os.getpid()}_{threading.get_ident()}"


def _remove(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError:
        pass


def _output(proc: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(proc.stdout or b"").decode("utf-8", "replace"),
        stderr=(proc.stderr or b"").decode("utf-8", "replace"),
    )


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _cargo_toml(name: str) -> str:
    return (
        "[package]\n"
        f'name = "{name}"\n'
        'version = "0.0.1"\n'
        'edition = "2021"\n'
        "[[bin]]\n"
        f'name = "{name}"\n'
        f'path = "{name}.rs"'
    )


class CompiledExercise:
    """A successfully built exercise; the binary is removed on close."""

    def __init__(self, exercise: Exercise, binary: Path) -> None:
        self.exercise = exercise
        self.binary = binary
        self._finalizer = weakref.finalize(self, _remove, binary)

    def run(self) -> ExerciseOutput:
        """Run the built binary; raise ExerciseFailed if it exits non-zero."""
        args = [str(self.binary)]
        if self.exercise.mode is Mode.TEST:
            args.append("--show-output")
        proc = subprocess.run(args, capture_output=True)
        output = _output(proc)
        if proc.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def close(self) -> None:
        self._finalizer()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as listed in the exercise catalogue."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise ExerciseFailed with the compiler output."""
        binary = _temp_file()
        source = str(self.path)
        if self.mode is Mode.COMPILE:
            proc = subprocess.run(
                ["rustc", source, "-o", str(binary), *COLOR_ARGS], capture_output=True
            )
        elif self.mode is Mode.TEST:
            proc = subprocess.run(
                ["rustc", "--test", source, "-o", str(binary), *COLOR_ARGS],
                capture_output=True,
            )
        else:
            proc = self._clippy(binary)

        if proc.returncode == 0:
            return CompiledExercise(self, binary)
        _remove(binary)
        raise ExerciseFailed(_output(proc))

    def _clippy(self, binary: Path) -> subprocess.CompletedProcess:
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(_cargo_toml(self.name))
        except OSError as err:
            if "NO_EMOJI" in os.environ:
                message = "Failed to write Clippy Cargo.toml file."
            else:
                message = "Failed to write 📎 Clippy 📎 Cargo.toml file."
            raise OSError(message) from err
        # Build a binary too, so clippy exercises can be run afterwards.
        subprocess.run(
            ["rustc", str(self.path), "-o", str(binary), *COLOR_ARGS], capture_output=True
        )
        # A clean is needed for clippy to report every lint.
        subprocess.run(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *COLOR_ARGS],
            capture_output=True,
        )
        return subprocess.run(
            [
                "cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *COLOR_ARGS,
                "--", "-D", "warnings", "-D", "clippy::float_cmp",
            ],
            capture_output=True,
        )

    def state(self) -> State:
        """Find the pending marker and the lines around it."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_PATTERN.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_PATTERN.search(line)), None
        )
        if matched is None:
            raise RuntimeError("pending marker spans several lines")

        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines[low : high + 1], start=low)
            )
        )

    def looks_done(self) -> bool:
        """True when the pending marker has been removed."""
        return self.state().done


def load_exercises(text: str) -> list[Exercise]:
    """Parse the TOML exercise catalogue."""
    data = tomllib.loads(text)
    try:
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in data["exercises"]
        ]
    except KeyError as err:
        raise ValueError(f"missing field {err.args[0]!r} in exercise list") from err