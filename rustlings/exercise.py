"""Exercises: their description, compilation, execution and completion state."""

from __future__ import annotations

import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from .ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    thread_id = "".join(c for c in f"ThreadId{threading.get_ident()}" if c.isalnum())
    return f"./temp_{os.getpid()}_{thread_id}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(StrEnum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    def is_done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


class ExerciseFailure(Exception):
    """Compiling or running an exercise did not succeed."""

    def __init__(self, output: ExerciseOutput):
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _output_of(completed: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(completed.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(completed.stderr or b"").decode("utf-8", errors="replace"),
    )


def _run(command: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(command, capture_output=True, check=False)


class CompiledExercise:
    """A compiled exercise; closing it removes the built binary."""

    def __init__(self, exercise: "Exercise"):
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary, returning its output or raising ExerciseFailure."""
        args = ["--show-output"] if self.exercise.mode is Mode.TEST else []
        completed = _run([temp_file(), *args])
        output = _output_of(completed)
        if completed.returncode != 0:
            raise ExerciseFailure(output)
        return output

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> "CompiledExercise":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _source_lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass
class Exercise:
    """An exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def _write_clippy_manifest(self) -> None:
        manifest = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        message = (
            "Failed to write Clippy Cargo.toml file."
            if no_emoji()
            else "Failed to write 📎 Clippy 📎 Cargo.toml file."
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(manifest)
        except OSError as error:
            raise OSError(message) from error

    def compile(self) -> CompiledExercise:
        """Build the exercise, raising ExerciseFailure with the compiler output on error."""
        path = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                completed = _run(["rustc", path, "-o", temp_file(), *RUSTC_COLOR_ARGS])
            case Mode.TEST:
                completed = _run(["rustc", "--test", path, "-o", temp_file(), *RUSTC_COLOR_ARGS])
            case Mode.CLIPPY:
                self._write_clippy_manifest()
                # Build a binary as well so the exercise can be run; failures show up in clippy.
                _run(["rustc", path, "-o", temp_file(), *RUSTC_COLOR_ARGS])
                # A clean is needed for clippy to report every lint.
                _run(["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS])
                completed = _run(
                    [
                        "cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                        *RUSTC_COLOR_ARGS,
                        "--", "-D", "warnings", "-D", "clippy::float_cmp",
                    ]
                )
        if completed.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailure(_output_of(completed))

    def state(self) -> State:
        """Return the exercise's state, with context around the pending marker."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _source_lines(source)
        matched = next((i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None)
        if matched is None:
            raise RuntimeError("This should not happen at all")
        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines)
                if first <= i <= last
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the source."""
        return self.state().is_done()

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from the text of an info.toml file."""
    data = tomllib.loads(text)
    try:
        return [
            Exercise(name=entry["name"], path=entry["path"], mode=entry["mode"], hint=entry["hint"])
            for entry in data["exercises"]
        ]
    except KeyError as error:
        raise ValueError(f"missing field {error.args[0]!r} in exercise list") from error