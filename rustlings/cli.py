"""Command-line interface: listing, running, verifying and watching exercises."""

from __future__ import annotations

import argparse
import itertools
import os
import queue
import subprocess
import sys
import threading
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, load_exercises
from .run import RunError, run
from .ui import no_emoji
from .verify import VerificationError, verify

VERSION = "4.6.0"
INFO_FILE = "info.toml"
DEFAULT_OUT_FILE = "default_out.txt"
WATCH_DIR = "./exercises"
DEBOUNCE_SECONDS = 2.0

_BANNER = (
    "",
    r"       welcome to...                      ",
    r"                 _   _ _                  ",
    r"  _ __ _   _ ___| |_| (_)_ __   __ _ ___  ",
    r" | '__| | | / __| __| | | '_ \ / _` / __| ",
    r" | |  | |_| \__ \ |_| | | | | | (_| \__ \ ",
    r" |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ ",
    r"                               |___/      ",
    "",
)

_FINISH_LINE = (
    "",
    "+----------------------------------------------------+",
    "|          You made it to the Fe-nish line!          |",
    "+--------------------------  ------------------------+",
    "                          \\/                         ",
    "     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒   ",
    "   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒ ",
    "   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒ ",
    " ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒ ",
    "   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓ ",
    "     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒   ",
    "       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒     ",
    "         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒       ",
    "           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒         ",
    "             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒           ",
    "           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒         ",
    "         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒       ",
    "       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒     ",
    "       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒     ",
    "           ▒▒  ▒▒                      ▒▒  ▒▒         ",
    "",
    "We hope you enjoyed learning about the various aspects of Rust!",
    "If you noticed any issues, please don't hesitate to report them to our repo.",
    "You can also contribute your own exercises to help the greater community!",
    "",
    "Before reporting an issue or contributing, please read our guidelines in CONTRIBUTING.md.",
)

_SHELL_HELP = (
    "Commands available to you in watch mode:",
    "  hint  - prints the current exercise's hint",
    "  clear - clears the screen",
    "  quit  - quits watch mode",
    "  help  - displays this help message",
    "",
    "Watch mode automatically re-evaluates the current exercise",
    "when you edit a file's contents.",
)


class WatchStatus(Enum):
    """How watch mode ended."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"


class ExerciseNotFound(LookupError):
    """No exercise matches the requested name."""


class _Parser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="rustlings",
        description="Rustlings is a collection of small exercises to get you used "
        "to writing and reading Rust code",
    )
    parser.add_argument("--nocapture", action="store_true", help="show outputs from the test exercises")
    parser.add_argument("-v", "--version", action="store_true", help="show the executable version")
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("verify", help="Verifies all exercises according to the recommended order")
    commands.add_parser("watch", help="Reruns `verify` when files were edited")

    run_parser = commands.add_parser("run", help="Runs/Tests a single exercise")
    run_parser.add_argument("name", help="the name of the exercise")

    hint_parser = commands.add_parser("hint", help="Returns a hint for the given exercise")
    hint_parser.add_argument("name", help="the name of the exercise")

    list_parser = commands.add_parser("list", help="Lists the exercises available in Rustlings")
    list_parser.add_argument("-p", "--paths", action="store_true", help="show only the paths of the exercises")
    list_parser.add_argument("-n", "--names", action="store_true", help="show only the names of the exercises")
    list_parser.add_argument(
        "-f",
        "--filter",
        default=None,
        help="provide a string to match exercise names; comma separated patterns are acceptable",
    )
    list_parser.add_argument("-u", "--unsolved", action="store_true", help="display only exercises not yet solved")
    list_parser.add_argument("-s", "--solved", action="store_true", help="display only exercises that have been solved")
    return parser


def rustc_exists() -> bool:
    """Whether `rustc --version` can be started and succeeds."""
    try:
        completed = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL, check=False)
    except OSError:
        return False
    return completed.returncode == 0


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Exercise:
    """Return the exercise called name, or the first unfinished one for "next"."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise ExerciseNotFound(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise ExerciseNotFound(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool = False,
    names: bool = False,
    filter: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> Iterator[str]:
    """Yield the lines of the exercise listing, ending with the progress summary."""
    if not paths and not names:
        yield f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}"
    patterns = [f for f in (filter or "").lower().split(",") if f.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        matches_filter = any(p in exercise.name or p in fname for p in patterns)
        is_done = exercise.looks_done()
        if is_done:
            done_count += 1
        status = "Done" if is_done else "Pending"
        wanted = (is_done and solved) or (not is_done and unsolved) or (not solved and not unsolved)
        if wanted and (matches_filter or filter is None):
            if paths:
                yield fname
            elif names:
                yield exercise.name
            else:
                yield f"{exercise.name:<17}\t{fname:<46}\t{status:<7}"
    total = len(exercises)
    percentage = f"{done_count / total * 100:.2f}" if total else "NaN"
    yield f"Progress: You completed {done_count} / {total} exercises ({percentage} %)."


def _write_lines(lines: Iterable[str]) -> int:
    for line in lines:
        try:
            sys.stdout.write(line + "\n")
            sys.stdout.flush()
        except BrokenPipeError:
            return 0
        except OSError:
            return 1
    return 0


def _clear_screen() -> None:
    print("\x1bc")


@dataclass
class _WatchSession:
    hint: str
    should_quit: threading.Event = field(default_factory=threading.Event)


def _shell_loop(session: _WatchSession) -> None:
    while True:
        try:
            line = sys.stdin.readline()
        except (OSError, ValueError) as error:
            print(f"error reading command: {error}")
            return
        if not line:
            return
        command = line.strip()
        if command == "hint":
            print(session.hint)
        elif command == "clear":
            print("\x1b[2J\x1b[1;1H")
        elif command == "quit":
            session.should_quit.set()
            print("Bye!")
        elif command == "help":
            print("\n".join(_SHELL_HELP))
        else:
            print(f"unknown command: {command}")


def _spawn_watch_shell(session: _WatchSession) -> None:
    print(
        "Welcome to watch mode! You can type 'help' to get an overview "
        "of the commands you can use here."
    )
    threading.Thread(target=_shell_loop, args=(session,), daemon=True).start()


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, events: "queue.Queue[Path]"):
        super().__init__()
        self._events = events

    def on_created(self, event: FileSystemEvent) -> None:
        self._record(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._record(event)

    def _record(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(Path(os.fsdecode(event.src_path)))


def _ends_with(filepath: Path, relative: Path) -> bool:
    tail = tuple(part for part in Path(relative).parts if part != ".")
    return bool(tail) and filepath.parts[-len(tail):] == tail


def _reverify(filepath: Path, exercises: Sequence[Exercise], verbose: bool, session: _WatchSession) -> bool:
    from_changed = itertools.dropwhile(lambda e: not _ends_with(filepath, e.path), exercises)
    others = (e for e in exercises if not e.looks_done() and not _ends_with(filepath, e.path))
    _clear_screen()
    try:
        verify(itertools.chain(from_changed, others), verbose)
    except VerificationError as failure:
        session.hint = failure.exercise.hint
        return False
    return True


def watch(exercises: Iterable[Exercise], verbose: bool = False) -> WatchStatus:
    """Verify exercises and re-verify whenever an exercise file changes."""
    exercises = list(exercises)
    events: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(events), WATCH_DIR, recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, verbose)
        except VerificationError as failure:
            session = _WatchSession(hint=failure.exercise.hint)
        else:
            return WatchStatus.FINISHED
        _spawn_watch_shell(session)

        last_seen: dict[Path, float] = {}
        while True:
            try:
                last_seen[events.get(timeout=1.0)] = time.monotonic()
            except queue.Empty:
                pass
            now = time.monotonic()
            settled = [p for p, seen in last_seen.items() if now - seen >= DEBOUNCE_SECONDS]
            for path in settled:
                del last_seen[path]
                if path.suffix == ".rs" and path.exists():
                    if _reverify(path.resolve(), exercises, verbose, session):
                        return WatchStatus.FINISHED
            if session.should_quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def _watch_command(exercises: Sequence[Exercise], verbose: bool) -> int:
    try:
        status = watch(exercises, verbose)
    except OSError as error:
        print(f"Error: Could not watch your progress. Error message was {error!r}.")
        print("Most likely you've run out of disk space or your 'inotify limit' has been reached.")
        return 1
    if status is WatchStatus.FINISHED:
        emoji = "★" if no_emoji() else "🎉"
        print(f"{emoji} All exercises completed! {emoji}")
        print("\n".join(_FINISH_LINE))
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `rustlings watch` again"
        )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print("\n".join(_BANNER))

    if not Path(INFO_FILE).exists():
        print(f"{sys.argv[0]} must be run from the rustlings directory")
        print("Try `cd rustlings/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(Path(INFO_FILE).read_text(encoding="utf-8"))
    verbose = args.nocapture

    match args.command:
        case None:
            print(Path(DEFAULT_OUT_FILE).read_text(encoding="utf-8"))
            return 0
        case "list":
            return _write_lines(
                list_exercises(exercises, args.paths, args.names, args.filter, args.unsolved, args.solved)
            )
        case "run" | "hint":
            try:
                exercise = find_exercise(args.name, exercises)
            except ExerciseNotFound as error:
                print(error)
                return 1
            if args.command == "hint":
                print(exercise.hint)
                return 0
            try:
                run(exercise, verbose)
            except RunError:
                return 1
            return 0
        case "verify":
            try:
                verify(exercises, verbose)
            except VerificationError:
                return 1
            return 0
        case "watch":
            return _watch_command(exercises, verbose)
    return 1


if __name__ == "__main__":
    sys.exit(main())