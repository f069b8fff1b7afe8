"""Run a single exercise, or reset it to its original contents."""

from __future__ import annotations

import subprocess
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.status import Status

from practicekit.exercise import Exercise, ExerciseFailed, Mode
from practicekit.ui import success, warn
from practicekit.verify import VerificationFailed
from practicekit.verify import test as run_tests


class RunFailed(Exception):
    """Running or resetting an exercise did not succeed."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(str(exercise))
        self.exercise = exercise


@contextmanager
def _spinner(message: str) -> Iterator[Status]:
    with Console(highlight=False, soft_wrap=True).status(message) as status:
        yield status


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile the exercise and run it, or run its tests."""
    if exercise.mode is Mode.TEST:
        try:
            run_tests(exercise, verbose)
        except VerificationFailed as exc:
            raise RunFailed(exercise) from exc
    else:
        _compile_and_run(exercise)


def reset(exercise: Exercise) -> None:
    """Stash local changes to the exercise file with git."""
    try:
        process = subprocess.Popen(["git", "stash", "--", str(exercise.path)])
    except OSError as exc:
        raise RunFailed(exercise) from exc
    process.wait()


def _compile_and_run(exercise: Exercise) -> None:
    with _spinner(f"Compiling {exercise}..."):
        try:
            compiled = exercise.compile()
        except ExerciseFailed as exc:
            failure = exc
        else:
            failure = None
    if failure is not None:
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(failure.output.stderr)
        raise RunFailed(exercise) from failure

    try:
        with compiled, _spinner(f"Running {exercise}..."):
            output = compiled.run()
    except ExerciseFailed as exc:
        print(exc.output.stdout)
        print(exc.output.stderr)
        warn(f"Ran {exercise} with errors")
        raise RunFailed(exercise) from exc
    print(output.stdout)
    success(f"Successfully ran {exercise}")