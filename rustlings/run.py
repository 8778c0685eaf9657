"""Running a single exercise on request."""

from __future__ import annotations

from .exercise import Exercise, ExerciseFailure, Mode
from .ui import _Spinner, success, warn
from .verify import test


class RunError(Exception):
    """Running the exercise did not succeed."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run one exercise, showing its output; raises RunError on failure."""
    if exercise.mode is Mode.TEST:
        try:
            test(exercise, verbose)
        except ExerciseFailure as failure:
            raise RunError(exercise) from failure
    else:
        _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        try:
            compiled = exercise.compile()
        except ExerciseFailure as failure:
            spinner.finish_and_clear()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(failure.output.stderr)
            raise RunError(exercise) from failure

        spinner.set_message(f"Running {exercise}...")
        with compiled:
            try:
                output = compiled.run()
            except ExerciseFailure as failure:
                spinner.finish_and_clear()
                print(failure.output.stdout)
                print(failure.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise RunError(exercise) from failure

    print(output.stdout)
    success(f"Successfully ran {exercise}")