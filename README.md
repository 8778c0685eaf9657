# rustlings

A command-line runner for a set of small Rust exercises. It compiles each
exercise with `rustc`, runs the program or its tests, and tracks which
exercises you have finished. An exercise counts as pending while its source
still holds an `// I AM NOT DONE` comment.

## Installing

```
pip install .
```

`rustc` must be on your `PATH`; the command stops with status 1 if
`rustc --version` cannot be run. Clippy exercises also need `cargo`.

## The exercise directory

Run the command from a directory that holds an `info.toml` file listing the
exercises in their recommended order:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"   # or "test" or "clippy"
hint = "Declare the variable with `let`."
```

Started without a subcommand, `rustlings` prints a banner followed by the
contents of `default_out.txt` from the same directory.

## Use

```
rustlings                 # banner and the welcome text from default_out.txt
rustlings -v              # prints the version
rustlings verify          # checks every exercise in order, stops at the first unfinished one
rustlings watch           # re-checks whenever a file under ./exercises changes
rustlings run NAME        # compiles and runs (or tests) one exercise
rustlings run next        # runs the first exercise that is not done yet
rustlings hint NAME       # prints the hint for an exercise
rustlings list            # lists exercises with their status and overall progress
```

`rustlings --nocapture run NAME` (or `verify`, `watch`) also shows the output
of test exercises.

`list` accepts `--paths`/`-p` and `--names`/`-n` to show only paths or names,
`--filter`/`-f` with comma-separated patterns matched against names and
paths, and `--solved`/`-s` or `--unsolved`/`-u` to restrict by status.

In watch mode, type `hint`, `clear`, `quit` or `help`.

The command exits with status 1 when an exercise fails, cannot be found, or
the arguments are wrong, and with 0 otherwise.

Set `NO_EMOJI` in the environment to replace emoji in the output with plain
characters. Colours are used on a terminal; `CLICOLOR=0` turns them off and
`CLICOLOR_FORCE=1` turns them on everywhere.

## As a library

- `rustlings.exercise`: `Exercise`, `Mode`, `State`, `ContextLine`,
  `CompiledExercise`, `ExerciseOutput`, `ExerciseFailure` and
  `load_exercises(text)` to read an `info.toml`.
- `rustlings.verify`: `verify(exercises, verbose)`, `test(exercise, verbose)`
  and `VerificationError`.
- `rustlings.run`: `run(exercise, verbose)` and `RunError`.
- `rustlings.cli`: `main(argv)`, `find_exercise`, `list_exercises`, `watch`
  and `rustc_exists`.

## The exercises package

`rustlings.exercises` holds Python reference solutions of the exercises, one
module per topic: `quizzes`, `variables`, `functions`, `conditionals`,
`primitive_types`, `structs`, `enums`, `strings`, `modules`,
`collection_types`, `error_handling`, `advanced_errors`, `generics`,
`traits`, `optional`, `move_semantics`, `iterators`, `smart_pointers`,
`threads`, `macros`, `intro` and `clippy`.

## What it does not do

The package does not ship the Rust exercise files, `info.toml` or
`default_out.txt`; it works on whatever exercise directory you run it in.
There is no reference solution module for the type-conversion exercises.

## Tests

```
pip install .[test]
pytest
```