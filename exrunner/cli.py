"""Command-line front end: listing, running, verifying and watching exercises."""

from __future__ import annotations

import argparse
import enum
import itertools
import math
import os
import queue
import subprocess
import sys
import threading
import time
from collections.abc import Iterable, Sequence
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, load_exercises
from .project import AnalyzerProject
from .run import RunFailed, reset, run
from .verify import VerificationFailed, verify

VERSION = "5.2.1"
DEBOUNCE_SECONDS = 2.0


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="exrunner",
        description="A collection of small exercises to get you used to writing and reading Rust code",
    )
    parser.add_argument("--nocapture", action="store_true", help="show outputs from the test exercises")
    parser.add_argument("-v", "--version", action="store_true", help="show the executable version")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("verify", help="Verifies all exercises according to the recommended order")
    sub.add_parser("watch", help="Reruns `verify` when files were edited")
    for name, text in (
        ("run", "Runs/Tests a single exercise"),
        ("reset", 'Resets a single exercise using "git stash -- <filename>"'),
        ("hint", "Returns a hint for the given exercise"),
    ):
        command = sub.add_parser(name, help=text)
        command.add_argument("name", help="the name of the exercise")
    sub.add_parser("lsp", help="Enable rust-analyzer for exercises")
    listing = sub.add_parser("list", help="Lists the exercises available")
    listing.add_argument("-p", "--paths", action="store_true", help="show only the paths of the exercises")
    listing.add_argument("-n", "--names", action="store_true", help="show only the names of the exercises")
    listing.add_argument(
        "-f", "--filter", default=None,
        help="provide a string to match exercise names; comma separated patterns are acceptable",
    )
    listing.add_argument("-u", "--unsolved", action="store_true", help="display only exercises not yet solved")
    listing.add_argument("-s", "--solved", action="store_true", help="display only exercises that have been solved")
    return parser


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Exercise:
    """Find an exercise by name, or the first pending one for "next"."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise LookupError(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise LookupError(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool = False,
    names: bool = False,
    filter: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> int:
    """Print the exercises with their status; return how many are done."""
    out = sys.stdout
    if not paths and not names:
        out.write(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}\n")
    patterns = [p for p in (filter or "").lower().split(",") if p.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        matches = any(p in exercise.name or p in fname for p in patterns)
        done = exercise.looks_done()
        if done:
            done_count += 1
        status = "Done" if done else "Pending"
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if wanted and (matches or filter is None):
            if paths:
                line = f"{fname}\n"
            elif names:
                line = f"{exercise.name}\n"
            else:
                line = f"{exercise.name:<17}\t{fname:<46}\t{status:<7}\n"
            out.write(line)
            out.flush()
    total = len(exercises)
    percentage = done_count / total * 100 if total else math.nan
    shown = "NaN" if math.isnan(percentage) else f"{percentage:.1f}"
    print(f"Progress: You completed {done_count} / {total} exercises ({shown} %).")
    return done_count


class _WatchShell:
    """Reads commands from stdin while watch mode runs."""

    def __init__(self, hint: str) -> None:
        self._hint = hint
        self._lock = threading.Lock()
        self.quit = threading.Event()

    @property
    def hint(self) -> str:
        with self._lock:
            return self._hint

    @hint.setter
    def hint(self, value: str) -> None:
        with self._lock:
            self._hint = value

    def start(self) -> None:
        print(
            "Welcome to watch mode! You can type 'help' to get an overview "
            "of the commands you can use here."
        )
        threading.Thread(target=self._loop, daemon=True).start()

    def _loop(self) -> None:
        while True:
            try:
                raw = sys.stdin.readline()
            except (OSError, ValueError) as err:
                print(f"error reading command: {err}")
                continue
            if not raw:
                return
            self.handle(raw.strip())

    def handle(self, command: str) -> None:
        if command == "hint":
            print(self.hint)
        elif command == "clear":
            print("\x1b[2J\x1b[1;1H")
        elif command == "quit":
            self.quit.set()
            print("Bye!")
        elif command == "help":
            print("Commands available to you in watch mode:")
            print("  hint  - prints the current exercise's hint")
            print("  clear - clears the screen")
            print("  quit  - quits watch mode")
            print("  help  - displays this help message")
            print()
            print("Watch mode automatically re-evaluates the current exercise")
            print("when you edit a file's contents.")
        else:
            print(f"unknown command: {command}")


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue) -> None:
        super().__init__()
        self._changes = changes

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._changes.put(os.fsdecode(event.src_path))


def _clear_screen() -> None:
    print("\x1bc")


def _settled(changes: queue.Queue, pending: dict[str, float]) -> list[str]:
    try:
        path = changes.get(timeout=1.0)
        pending[path] = time.monotonic()
        while True:
            path = changes.get_nowait()
            pending[path] = time.monotonic()
    except queue.Empty:
        pass
    now = time.monotonic()
    ready = [path for path, stamp in pending.items() if now - stamp >= DEBOUNCE_SECONDS]
    for path in ready:
        del pending[path]
    return ready


def _ends_with(filepath: Path, suffix: Path) -> bool:
    parts = suffix.parts
    return bool(parts) and filepath.parts[-len(parts):] == parts


def watch(exercises: Iterable[Exercise], verbose: bool) -> WatchStatus:
    """Verify, then re-verify whenever an exercise file changes."""
    exercises = list(exercises)
    changes: queue.Queue = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(changes), "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose)
            return WatchStatus.FINISHED
        except VerificationFailed as err:
            shell = _WatchShell(err.exercise.hint)
        shell.start()

        pending: dict[str, float] = {}
        while True:
            for changed in _settled(changes, pending):
                path = Path(changed)
                if path.suffix != ".rs" or not path.exists():
                    continue
                filepath = path.resolve()
                current = [e for e in exercises if _ends_with(filepath, e.path)][:1]
                others = (
                    e for e in exercises
                    if not e.looks_done() and not _ends_with(filepath, e.path)
                )
                num_done = sum(1 for e in exercises if e.looks_done())
                _clear_screen()
                try:
                    verify(itertools.chain(current, others), (num_done, len(exercises)), verbose)
                    return WatchStatus.FINISHED
                except VerificationFailed as err:
                    shell.hint = err.exercise.hint
            if shell.quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def rustc_exists() -> bool:
    """True if `rustc --version` can be run successfully."""
    try:
        proc = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL)
    except OSError:
        return False
    return proc.returncode == 0


def _silence_stdout() -> None:
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        pass


def _lsp() -> int:
    project = AnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError:
        print("Couldn't find toolchain path, do you have `rustc` installed?", file=sys.stderr)
        return 1
    try:
        project.exercises_to_json("exercises")
    except OSError:
        print("Couldn't parse exercises files", file=sys.stderr)
        return 1
    if not project.crates:
        print("Failed find any exercises, make sure you're in the exercises folder")
        return 0
    try:
        project.write_to_disk("./rust-project.json")
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print("rust-analyzer will now parse exercises, restart your language server or editor")
    return 0


def _watch(exercises: list[Exercise], verbose: bool) -> int:
    try:
        status = watch(exercises, verbose)
    except OSError as err:
        print(f"Error: Could not watch your progress. Error message was {err!r}.")
        print("Most likely you've run out of disk space or your 'inotify limit' has been reached.")
        return 1
    if status is WatchStatus.FINISHED:
        print("🎉 All exercises completed! 🎉")
        print(f"\n{FINISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `exrunner watch` again"
        )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command; returns the exit status."""
    args = _parser().parse_args(argv)

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print(f"\n{WELCOME}\n")

    if not Path("info.toml").exists():
        print(f"{sys.argv[0]} must be run from the exercises directory")
        print("Try `cd` into the directory that holds info.toml!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(Path("info.toml").read_text(encoding="utf-8"))
    verbose = args.nocapture

    if args.command is None:
        print(f"{DEFAULT_OUT}\n")
        return 0

    match args.command:
        case "list":
            try:
                list_exercises(
                    exercises, args.paths, args.names, args.filter, args.unsolved, args.solved
                )
            except BrokenPipeError:
                _silence_stdout()
                return 0
            except OSError:
                return 1
            return 0
        case "run" | "reset" | "hint":
            try:
                exercise = find_exercise(args.name, exercises)
            except LookupError as err:
                print(err)
                return 1
            if args.command == "hint":
                print(exercise.hint)
                return 0
            try:
                if args.command == "run":
                    run(exercise, verbose)
                else:
                    reset(exercise).wait()
            except RunFailed:
                return 1
            return 0
        case "verify":
            try:
                verify(exercises, (0, len(exercises)), verbose)
            except VerificationFailed:
                return 1
            return 0
        case "lsp":
            return _lsp()
        case "watch":
            return _watch(exercises, verbose)
    return 0


WELCOME = """\
  +-----------------------------------+
  |      welcome to the exercises     |
  +-----------------------------------+"""

DEFAULT_OUT = """\
Thanks for installing the exercises!

Is this your first time? Don't worry, these exercises were made for beginners!
We are going to teach you a lot of things about Rust, but before we can get
started, here's a couple of notes about how the exercises work:

1. The central concept here is that you solve exercises. These exercises
   usually have some sort of syntax error in them, which will cause them to
   fail compilation or testing. Sometimes there's a logic error instead of a
   syntax error. No matter what error, it's your job to find it and fix it!
   You'll know when you fixed it because then, the exercise will compile and
   the runner will be able to move on to the next exercise.
2. If you run in watch mode (which we recommend), it'll automatically start
   with the first exercise. Don't get confused by an error message popping up
   as soon as you start! This is part of the exercise that you're supposed to
   solve, so open the exercise file in an editor and start your detective work!
3. If you're stuck on an exercise, there is a helpful hint you can view by
   typing 'hint' (in watch mode), or running `exrunner hint exercise_name`.
4. If an exercise doesn't make sense to you, feel free to open an issue with
   the maintainers. Other learners may help you out too!
5. If you want to use `rust-analyzer` with exercises, which provides features
   like autocompletion, run the command `exrunner lsp`.

Got all that? Great! To get started, run `exrunner watch` in order to get the
first exercise. Make sure to have your editor open!"""

FINISH_LINE = """\
+----------------------------------------------------+
|          You made it to the finish line!           |
+----------------------------------------------------+

We hope you enjoyed learning about the various aspects of Rust!
If you noticed any issues, please don't hesitate to report them.
You can also contribute your own exercises to help the greater community!"""