import json
import subprocess
from pathlib import Path

import pytest

from rustlings.cli import (
    ExerciseNotFound,
    find_exercise,
    list_exercises,
    main,
    rustc_exists,
)
from rustlings.exercise import Exercise

FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"
PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
PENDING_TEST = "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n"
COMP_SUCCESS = "fn main() {\n}\n"
TEST_SUCCESS = (
    "#[test]\nfn passing() {\n    println!(\"THIS TEST TOO SHALL PASS\");\n"
    "    assert!(true);\n}\n"
)
COMP_FAILURE = "fn main() {\n    let\n}\n"
TEST_FAILURE = "#[test]\nfn passing() {\n    asset!(true);\n}\n"


def _info_toml(entries):
    blocks = [
        "[[exercises]]\n"
        f"name = {json.dumps(name)}\n"
        f"path = {json.dumps(path)}\n"
        f"mode = {json.dumps(mode)}\n"
        f"hint = {json.dumps(hint)}\n"
        for name, path, mode, hint in entries
    ]
    return "\n".join(blocks)


def _project(root: Path, entries, sources, default_out="Default output text"):
    (root / "info.toml").write_text(_info_toml(entries))
    (root / "default_out.txt").write_text(default_out)
    for name, text in sources.items():
        (root / name).write_text(text)


def _fake_toolchain(monkeypatch, *, compile_ok=True, run_ok=True, stdout=b"", rustc=True):
    calls = []

    def fake(command, *args, **kwargs):
        calls.append(list(command))
        if list(command[:2]) == ["rustc", "--version"]:
            if not rustc:
                raise FileNotFoundError("rustc")
            return subprocess.CompletedProcess(command, 0)
        if command[0] in ("rustc", "cargo"):
            return subprocess.CompletedProcess(
                command, 0 if compile_ok else 1, stdout=b"", stderr=b"error: expected pattern"
            )
        return subprocess.CompletedProcess(command, 0 if run_ok else 101, stdout=stdout, stderr=b"")

    monkeypatch.setattr(subprocess, "run", fake)
    return calls


@pytest.fixture
def state_project(tmp_path, monkeypatch):
    _project(
        tmp_path,
        [
            ("finished_exercise", "finished_exercise.rs", "compile", ""),
            ("pending_exercise", "pending_exercise.rs", "compile", ""),
            ("pending_test_exercise", "pending_test_exercise.rs", "test", ""),
        ],
        {
            "finished_exercise.rs": FINISHED,
            "pending_exercise.rs": PENDING,
            "pending_test_exercise.rs": PENDING_TEST,
        },
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def success_project(tmp_path, monkeypatch):
    _project(
        tmp_path,
        [
            ("compSuccess", "compSuccess.rs", "compile", ""),
            ("testSuccess", "testSuccess.rs", "test", ""),
        ],
        {"compSuccess.rs": COMP_SUCCESS, "testSuccess.rs": TEST_SUCCESS},
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def failure_project(tmp_path, monkeypatch):
    _project(
        tmp_path,
        [
            ("compFailure", "compFailure.rs", "compile", ""),
            ("testFailure", "testFailure.rs", "test", "Hello!"),
        ],
        {"compFailure.rs": COMP_FAILURE, "testFailure.rs": TEST_FAILURE},
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _exercises(root):
    return [
        Exercise("finished_exercise", root / "finished_exercise.rs", "compile", ""),
        Exercise("pending_exercise", root / "pending_exercise.rs", "compile", ""),
        Exercise("pending_test_exercise", root / "pending_test_exercise.rs", "test", ""),
    ]


@pytest.mark.parametrize("flag", ["--version", "-v"])
def test_version_flag(flag, capsys):
    assert main([flag]) == 0
    assert capsys.readouterr().out == "v4.6.0\n"


def test_runs_without_arguments(success_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "welcome to..." in out
    assert "Default output text" in out


def test_fails_when_in_wrong_dir(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["list"]) == 1
    out = capsys.readouterr().out
    assert "must be run from the rustlings directory" in out
    assert "Try `cd rustlings/`!" in out


def test_missing_rustc(success_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch, rustc=False)
    assert main(["list"]) == 1
    assert "We cannot find `rustc`." in capsys.readouterr().out


def test_run_single_test_no_filename(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as info:
        main(["run"])
    assert info.value.code == 1


def test_verify_all_success(success_project, monkeypatch):
    _fake_toolchain(monkeypatch)
    assert main(["verify"]) == 0


def test_verify_fails_if_some_fails(failure_project, monkeypatch):
    _fake_toolchain(monkeypatch, compile_ok=False)
    assert main(["verify"]) == 1


def test_verify_stops_at_pending_exercise(state_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch)
    assert main(["verify"]) == 1
    assert "I AM NOT DONE" in capsys.readouterr().out


def test_run_single_compile_success(success_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch)
    assert main(["run", "compSuccess"]) == 0
    assert "Successfully ran compSuccess.rs" in capsys.readouterr().out


def test_run_single_compile_failure(failure_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch, compile_ok=False)
    assert main(["run", "compFailure"]) == 1
    assert "error: expected pattern" in capsys.readouterr().out


def test_run_single_test_success(success_project, monkeypatch):
    _fake_toolchain(monkeypatch)
    assert main(["run", "testSuccess"]) == 0


def test_run_single_test_failure(failure_project, monkeypatch):
    _fake_toolchain(monkeypatch, compile_ok=False)
    assert main(["run", "testFailure"]) == 1


def test_run_single_test_not_passed(failure_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch, run_ok=False)
    assert main(["run", "testFailure"]) == 1
    assert "Testing of testFailure.rs failed!" in capsys.readouterr().out


def test_run_single_test_no_exercise(failure_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch)
    assert main(["run", "compNoExercise.rs"]) == 1
    assert "No exercise found for 'compNoExercise.rs'!" in capsys.readouterr().out


def test_get_hint_for_single_test(failure_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch)
    assert main(["hint", "testFailure"]) == 0
    assert capsys.readouterr().out == "Hello!\n"


def test_run_compile_exercise_does_not_prompt(state_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch)
    assert main(["run", "pending_exercise"]) == 0
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_run_test_exercise_does_not_prompt(state_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch)
    assert main(["run", "pending_test_exercise"]) == 0
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_run_single_test_success_with_output(success_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch, stdout=b"THIS TEST TOO SHALL PASS\n")
    assert main(["--nocapture", "run", "testSuccess"]) == 0
    assert "THIS TEST TOO SHALL PAS" in capsys.readouterr().out


def test_run_single_test_success_without_output(success_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch, stdout=b"THIS TEST TOO SHALL PASS\n")
    assert main(["run", "testSuccess"]) == 0
    assert "THIS TEST TOO SHALL PAS" not in capsys.readouterr().out


def test_run_test_mode_passes_show_output(success_project, monkeypatch):
    calls = _fake_toolchain(monkeypatch)
    assert main(["run", "testSuccess"]) == 0
    compile_call = next(c for c in calls if c[0] == "rustc" and "--test" in c)
    assert compile_call[2] == "testSuccess.rs"
    assert calls[-1][1:] == ["--show-output"]


def test_rustlings_list(success_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch)
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "Pending" not in out
    assert "Progress: You completed 2 / 2 exercises (100.00 %)." in out


def test_rustlings_list_both_done_and_pending(state_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch)
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "Done" in out and "Pending" in out


def test_rustlings_list_without_pending(state_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch)
    assert main(["list", "--solved"]) == 0
    assert "Pending" not in capsys.readouterr().out


def test_rustlings_list_without_done(state_project, monkeypatch, capsys):
    _fake_toolchain(monkeypatch)
    assert main(["list", "--unsolved"]) == 0
    assert "Done" not in capsys.readouterr().out


def test_list_exercises_names(state_project):
    lines = list(list_exercises(_exercises(state_project), False, True, None, False, False))
    assert lines == [
        "finished_exercise",
        "pending_exercise",
        "pending_test_exercise",
        "Progress: You completed 1 / 3 exercises (33.33 %).",
    ]


def test_list_exercises_table(state_project):
    exercises = [
        Exercise("finished_exercise", Path("finished_exercise.rs"), "compile", ""),
        Exercise("pending_exercise", Path("pending_exercise.rs"), "compile", ""),
    ]
    header, first, second, progress = list(list_exercises(exercises, False, False, None, False, False))
    assert [part.strip() for part in header.split("\t")] == ["Name", "Path", "Status"]
    assert [part.strip() for part in first.split("\t")] == ["finished_exercise", "finished_exercise.rs", "Done"]
    assert [part.strip() for part in second.split("\t")] == ["pending_exercise", "pending_exercise.rs", "Pending"]
    assert progress == "Progress: You completed 1 / 2 exercises (50.00 %)."


def test_list_exercises_filter_is_case_insensitive(state_project):
    lines = list(list_exercises(_exercises(state_project), False, True, "PENDING", False, False))
    assert lines[:-1] == ["pending_exercise", "pending_test_exercise"]


def test_list_exercises_comma_separated_filter(state_project):
    lines = list(list_exercises(_exercises(state_project), False, True, "finished,  ", False, False))
    assert lines[:-1] == ["finished_exercise"]


def test_list_exercises_paths_and_solved(state_project):
    exercises = [
        Exercise("finished_exercise", Path("finished_exercise.rs"), "compile", ""),
        Exercise("pending_exercise", Path("pending_exercise.rs"), "compile", ""),
    ]
    lines = list(list_exercises(exercises, True, False, None, False, True))
    assert lines[:-1] == ["finished_exercise.rs"]


def test_find_exercise_by_name(state_project):
    exercises = _exercises(state_project)
    assert find_exercise("pending_test_exercise", exercises) is exercises[2]


def test_find_next_exercise(state_project):
    exercises = _exercises(state_project)
    assert find_exercise("next", exercises).name == "pending_exercise"


def test_find_next_when_all_done(state_project):
    exercises = _exercises(state_project)[:1]
    with pytest.raises(ExerciseNotFound, match="Congratulations"):
        find_exercise("next", exercises)


def test_find_unknown_exercise(state_project):
    with pytest.raises(ExerciseNotFound, match="No exercise found for 'missing'!"):
        find_exercise("missing", _exercises(state_project))


def test_rustc_exists_true(monkeypatch):
    calls = _fake_toolchain(monkeypatch)
    assert rustc_exists() is True
    assert calls == [["rustc", "--version"]]


def test_rustc_exists_false_when_missing(monkeypatch):
    _fake_toolchain(monkeypatch, rustc=False)
    assert rustc_exists() is False


def test_rustc_exists_false_on_failure(monkeypatch):
    monkeypatch.setattr(
        subprocess, "run", lambda command, *a, **k: subprocess.CompletedProcess(command, 1)
    )
    assert rustc_exists() is False