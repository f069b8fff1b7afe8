"""Check exercises in order, stopping at the first one that fails or is pending."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.status import Status
from rich.text import Text

from practicekit.exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from practicekit.ui import no_emoji, success, warn

_BAR_WIDTH = 60
_SEPARATOR = "===================="


class VerificationFailed(Exception):
    """An exercise failed to compile or run, or is still marked as pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(str(exercise))
        self.exercise = exercise


class _RunMode(enum.Enum):
    INTERACTIVE = enum.auto()
    NON_INTERACTIVE = enum.auto()


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


@contextmanager
def _spinner(message: str) -> Iterator[Status]:
    with _console().status(message) as status:
        yield status


def _separator() -> Text:
    return Text(_SEPARATOR, style="bold")


def _progress_line(position: int, total: int, percentage: float) -> None:
    filled = min(_BAR_WIDTH * position // total, _BAR_WIDTH) if total else 0
    bar = "#" * filled
    if filled < _BAR_WIDTH:
        bar += ">" + "-" * (_BAR_WIDTH - filled - 1)
    print(f"Progress: [{bar}] {position}/{total} ({percentage:.1f} %)")


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Verify each exercise in turn; raise VerificationFailed at the first failure."""
    num_done, total = progress
    percentage = num_done / total * 100.0 if total else 0.0
    position = num_done
    _progress_line(position, total, percentage)

    for exercise in exercises:
        if not _check(exercise, verbose, success_hints):
            raise VerificationFailed(exercise)
        if total:
            percentage += 100.0 / total
        position += 1
        _progress_line(position, total, percentage)


def _check(exercise: Exercise, verbose: bool, success_hints: bool) -> bool:
    if exercise.mode is Mode.TEST:
        return _compile_and_test(exercise, _RunMode.INTERACTIVE, verbose, success_hints)
    if exercise.mode is Mode.COMPILE:
        return _compile_and_run_interactively(exercise, success_hints)
    return _compile_only(exercise, success_hints)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise's test harness without prompting."""
    _compile_and_test(exercise, _RunMode.NON_INTERACTIVE, verbose, False)


def _compile(exercise: Exercise, message: str) -> CompiledExercise:
    with _spinner(message):
        try:
            return exercise.compile()
        except ExerciseFailed as exc:
            output = exc.output
    warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
    print(output.stderr)
    raise VerificationFailed(exercise)


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    with _compile(exercise, f"Compiling {exercise}..."):
        pass
    return prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    compiled = _compile(exercise, f"Compiling {exercise}...")
    try:
        with compiled, _spinner(f"Running {exercise}..."):
            output = compiled.run()
    except ExerciseFailed as exc:
        warn(f"Ran {exercise} with errors")
        print(exc.output.stdout)
        print(exc.output.stderr)
        raise VerificationFailed(exercise) from exc
    return prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, run_mode: _RunMode, verbose: bool, success_hints: bool
) -> bool:
    compiled = _compile(exercise, f"Testing {exercise}...")
    try:
        with compiled, _spinner(f"Testing {exercise}..."):
            output = compiled.run()
    except ExerciseFailed as exc:
        warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
        print(exc.output.stdout)
        raise VerificationFailed(exercise) from exc
    if verbose:
        print(output.stdout)
    if run_mode is _RunMode.INTERACTIVE:
        return prompt_for_completion(exercise, None, success_hints)
    return True


def prompt_for_completion(
    exercise: Exercise, prompt_output: str | None, success_hints: bool
) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.done():
        return True

    if exercise.mode is Mode.COMPILE:
        success(f"Successfully ran {exercise}!")
    elif exercise.mode is Mode.TEST:
        success(f"Successfully tested {exercise}!")
    else:
        success(f"Successfully compiled {exercise}!")

    plain = no_emoji()
    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    elif exercise.mode is Mode.TEST:
        success_msg = "The code is compiling, and the tests pass!"
    elif plain:
        success_msg = "The code is compiling, and Clippy is happy!"
    else:
        success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"

    console = _console()
    print()
    if plain:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(_separator())
        print(prompt_output)
        console.print(_separator())
        print()
    if success_hints:
        print("Hints:")
        console.print(_separator())
        print(exercise.hint)
        console.print(_separator())
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False