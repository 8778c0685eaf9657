"""Checking exercises in order and prompting once one is solved."""

from __future__ import annotations

from collections.abc import Iterable

from .exercise import CompiledExercise, Exercise, ExerciseFailure, Mode
from .ui import _Spinner, blue, bold, no_emoji, success, warn


class VerificationError(Exception):
    """An exercise failed to compile, run, or is still marked as not done."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"{exercise} is not finished")
        self.exercise = exercise


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn, raising VerificationError at the first unfinished one."""
    for exercise in exercises:
        try:
            match exercise.mode:
                case Mode.TEST:
                    finished = _compile_and_test(exercise, interactive=True, verbose=verbose)
                case Mode.COMPILE:
                    finished = _compile_and_run_interactively(exercise)
                case Mode.CLIPPY:
                    finished = _compile_only(exercise)
        except ExerciseFailure:
            finished = False
        if not finished:
            raise VerificationError(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's tests without prompting; raises ExerciseFailure."""
    _compile_and_test(exercise, interactive=False, verbose=verbose)


def _compile(exercise: Exercise, spinner: _Spinner) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailure as failure:
        spinner.finish_and_clear()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(failure.output.stderr)
        raise


def _compile_only(exercise: Exercise) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        _compile(exercise, spinner).close()
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            spinner.set_message(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailure as failure:
                spinner.finish_and_clear()
                warn(f"Ran {exercise} with errors")
                print(failure.output.stdout)
                print(failure.output.stderr)
                raise
    success(f"Successfully ran {exercise}!")
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _Spinner(f"Testing {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            try:
                output = compiled.run()
            except ExerciseFailure as failure:
                spinner.finish_and_clear()
                warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(failure.output.stdout)
                raise
    if verbose:
        print(output.stdout)
    success(f"Successfully tested {exercise}")
    return prompt_for_completion(exercise, None) if interactive else True


def _separator() -> str:
    return bold("====================")


def prompt_for_completion(exercise: Exercise, prompt_output: str | None = None) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is and return False."""
    state = exercise.state()
    if state.is_done():
        return True

    emoji_free = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if emoji_free
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    print()
    print(f"~*~ {message} ~*~" if emoji_free else f"🎉 🎉  {message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(f"or jump into the next one by removing the {bold('`I AM NOT DONE`')} comment:")
    print()
    for context_line in state.context:
        line = bold(context_line.line) if context_line.important else context_line.line
        number = bold(blue(f"{context_line.number:>2}"))
        print(f"{number} {blue('|')}  {line}")
    return False