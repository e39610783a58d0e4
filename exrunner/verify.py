"""Checking exercises one after another until one is not finished."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable

from .exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from .ui import success, warn


class VerificationFailed(Exception):
    """An exercise did not compile, failed, or is still marked pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"verification of {exercise} failed")
        self.exercise = exercise


def _style(text: str, *codes: str) -> str:
    isatty = getattr(sys.stdout, "isatty", None)
    if codes and isatty is not None and isatty():
        return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"
    return text


_BOLD = "1"
_BLUE = "34"


class _ProgressBar:
    WIDTH = 60

    def __init__(self, total: int, position: int) -> None:
        self.total = total
        self.position = position
        self.message = ""
        isatty = getattr(sys.stderr, "isatty", None)
        self._enabled = isatty is not None and isatty()
        self._draw()

    def _draw(self) -> None:
        if not self._enabled:
            return
        width = self.WIDTH
        filled = min(width * self.position // self.total, width) if self.total else width
        if filled < width:
            bar = "#" * filled + ">" + "-" * (width - filled - 1)
        else:
            bar = "#" * width
        sys.stderr.write(f"\rProgress: [{bar}] {self.position}/{self.total} {self.message}")
        sys.stderr.flush()

    def advance(self, message: str) -> None:
        self.message = message
        self.position += 1
        self._draw()

    def finish(self) -> None:
        if self._enabled:
            sys.stderr.write("\n")
            sys.stderr.flush()


def verify(exercises: Iterable[Exercise], progress: tuple[int, int], verbose: bool) -> None:
    """Check each exercise in order; raise VerificationFailed at the first unfinished one."""
    num_done, total = progress
    bar = _ProgressBar(total, num_done)
    try:
        for exercise in exercises:
            if exercise.mode is Mode.TEST:
                passed = _compile_and_test(exercise, interactive=True, verbose=verbose)
            elif exercise.mode is Mode.COMPILE:
                passed = _compile_and_run_interactively(exercise)
            else:
                passed = _compile_only(exercise)
            if not passed:
                raise VerificationFailed(exercise)
            percentage = num_done / total * 100 if total else 0.0
            bar.advance(f"({percentage:.1f} %)")
    finally:
        bar.finish()


def test(exercise: Exercise, verbose: bool) -> None:
    """Compile and run an exercise's tests without prompting."""
    _compile_and_test(exercise, interactive=False, verbose=verbose)


def _compile(exercise: Exercise) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as err:
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise VerificationFailed(exercise) from err


def _compile_only(exercise: Exercise) -> bool:
    _compile(exercise).close()
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _compile(exercise) as compiled:
        try:
            output = compiled.run()
        except ExerciseFailed as err:
            warn(f"Ran {exercise} with errors")
            print(err.output.stdout)
            print(err.output.stderr)
            raise VerificationFailed(exercise) from err
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _compile(exercise) as compiled:
        try:
            output = compiled.run()
        except ExerciseFailed as err:
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(err.output.stdout)
            raise VerificationFailed(exercise) from err
    if verbose:
        print(output.stdout)
    if interactive:
        return prompt_for_completion(exercise, None)
    return True


def _separator() -> str:
    return _style("====================", _BOLD)


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True if the exercise is done; otherwise print where the marker is."""
    context = exercise.state().context
    if not context:
        return True

    if exercise.mode is Mode.COMPILE:
        success(f"Successfully ran {exercise}!")
    elif exercise.mode is Mode.TEST:
        success(f"Successfully tested {exercise}!")
    else:
        success(f"Successfully compiled {exercise}!")

    no_emoji = "NO_EMOJI" in os.environ
    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    elif exercise.mode is Mode.TEST:
        success_msg = "The code is compiling, and the tests pass!"
    elif no_emoji:
        success_msg = "The code is compiling, and Clippy is happy!"
    else:
        success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"

    print()
    if no_emoji:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(
        "or jump into the next one by removing the "
        f"{_style('`I AM NOT DONE`', _BOLD)} comment:"
    )
    print()
    for context_line in context:
        line = _style(context_line.line, _BOLD) if context_line.important else context_line.line
        number = _style(f"{context_line.number:>2}", _BLUE, _BOLD)
        print(f"{number} {_style('|', _BLUE)}  {line}")

    return False