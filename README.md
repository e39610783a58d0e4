# exrunner

`exrunner` steps you through a course of small programming exercises. Each
exercise is a source file that fails to compile, fails its tests or fails a
lint check until you fix it. `exrunner` compiles and runs the exercises in the
recommended order, tells you which one to work on next, shows hints and keeps
track of your progress.

An exercise counts as finished once it builds and passes, and once you have
removed its `I AM NOT DONE` marker comment.

## Installation

```
pip install exrunner
```

The exercises are built with `rustc` (and the lint exercises with
`cargo clippy`), so those tools must be on your `PATH`. Resetting an exercise
uses `git`.

## Getting started

Run every command from the course directory, the one that holds `info.toml`.
That file lists the exercises in order, each with a `name`, a `path`, a
`mode` (`compile`, `test` or `clippy`) and a `hint`.

```
exrunner watch
```

Watch mode verifies the exercises in order and stops at the first one that
fails. Edit the file it points to; once a saved `.rs` file below `exercises/`
has been quiet for two seconds, that exercise is checked again, followed by
the others that are still pending. While watching you can type:

- `hint`: show the hint for the current exercise
- `clear`: clear the screen
- `quit`: leave watch mode
- `help`: list these commands

## Commands

```
exrunner                     # show the introduction
exrunner -v                  # print the version
exrunner verify              # verify all exercises in order
exrunner watch               # verify, then re-verify whenever a file changes
exrunner run NAME            # compile and run (or test) one exercise
exrunner run next            # run the first exercise that is not done yet
exrunner hint NAME           # print the hint for an exercise
exrunner reset NAME          # stash your changes to an exercise with git
exrunner list                # list exercises with their path and status
exrunner lsp                 # write rust-project.json for editor support
```

`--nocapture` before a command shows the output of test exercises:

```
exrunner --nocapture run NAME
```

`list` takes these options:

- `-p`, `--paths`: show only the paths
- `-n`, `--names`: show only the names
- `-f`, `--filter PATTERNS`: show only exercises whose name or path contains
  one of the comma-separated patterns
- `-u`, `--unsolved`: show only exercises that are not done
- `-s`, `--solved`: show only exercises that are done

It ends with a progress line counting the exercises that are done.

The command exits with status 1 when it is not run from a directory holding
`info.toml`, when `rustc` cannot be found, when an exercise name is unknown,
or when running or verifying an exercise fails.

Set the `NO_EMOJI` environment variable to get plain-text status marks.

## Using it from Python

```python
from pathlib import Path

from exrunner.exercise import load_exercises

exercises = load_exercises(Path("info.toml").read_text())
pending = [e for e in exercises if not e.looks_done()]
print(f"{len(pending)} exercises left")
```

- `exrunner.exercise`: `load_exercises`, `Exercise` (with `compile`, `state`
  and `looks_done`), `CompiledExercise` (a context manager with `run` and
  `close`), `Mode`, `State`, `ContextLine`, `ExerciseOutput` and the
  `ExerciseFailed` exception.
- `exrunner.verify`: `verify`, `test`, `prompt_for_completion` and
  `VerificationFailed`.
- `exrunner.run`: `run`, `reset` and `RunFailed`.
- `exrunner.project`: `AnalyzerProject` and `Crate`, which build
  `rust-project.json`.
- `exrunner.cli`: `main`, `find_exercise`, `list_exercises`, `watch`,
  `rustc_exists` and `WatchStatus`.

`exrunner.lessons` holds worked solutions to course topics written as plain
Python, each with its tests: `quizzes`, `errors`, `hashmaps`, `enums`,
`branching`, `iterators`, `sharing`, `vectors`, `strings`, `structs`,
`traits`, `functions` and `threads`.

## What it does not do

`exrunner.lessons` has no worked solutions for the type-conversion topic or
for the topic on optional values; those exercises are only checked through the
commands above.