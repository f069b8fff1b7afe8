"""Command-line entry point: list, run, verify and watch exercises."""

from __future__ import annotations

import argparse
import enum
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Iterator, Sequence
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import TextIO

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from practicekit.exercise import Exercise, load_exercises
from practicekit.project import RustAnalyzerProject
from practicekit.run import RunFailed, reset, run
from practicekit.ui import no_emoji
from practicekit.verify import VerificationFailed, verify

WELCOME = "       welcome to...\n   practicekit exercises"

DEFAULT_OUT = """Thanks for installing the exercises!

Is this your first time? Don't worry, these exercises were made for beginners!
Here's a couple of notes about how they work:

1. The central concept is that you solve exercises. These exercises usually
   have some sort of syntax error in them, which will cause them to fail
   compilation or testing. Sometimes there's a logic error instead. No matter
   what error, it's your job to find it and fix it! You'll know when you fixed
   it because then the exercise will compile and the tool moves on to the next
   exercise.
2. If you run in watch mode (which we recommend), it'll automatically start
   with the first exercise. Don't get confused by an error message popping up
   as soon as you start! This is part of the exercise that you're supposed to
   solve, so open the exercise file in an editor and start your detective work!
3. If you're stuck on an exercise, there is a helpful hint you can view by
   typing 'hint' (in watch mode), or running `practicekit hint exercise_name`.
4. If you want to use `rust-analyzer` with exercises, which provides features
   like autocompletion, run the command `practicekit lsp`.

Got all that? Great! To get started, run `practicekit watch` in order to get the
first exercise. Make sure to have your editor open!"""

FINISH_LINE = """+----------------------------------------------------+
|          You made it to the finish line!           |
+----------------------------------------------------+

We hope you enjoyed learning about the various aspects of Rust!
You can also contribute your own exercises to help the greater community!"""

_WATCH_HELP = """Commands available to you in watch mode:
  hint   - prints the current exercise's hint
  clear  - clears the screen
  quit   - quits watch mode
  !<cmd> - executes a command, like `!rustc --explain E0381`
  help   - displays this help message

Watch mode automatically re-evaluates the current exercise
when you edit a file's contents."""


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = enum.auto()
    UNFINISHED = enum.auto()


class ExerciseNotFound(LookupError):
    """No exercise matches the requested name."""


class WatchShell:
    """Interprets the commands typed while watch mode is running."""

    def __init__(self, hint: str | None = None) -> None:
        self._hint = hint
        self._lock = threading.Lock()
        self.should_quit = threading.Event()

    def set_hint(self, hint: str | None) -> None:
        """Replace the hint of the exercise that failed last."""
        with self._lock:
            self._hint = hint

    def handle(self, line: str) -> None:
        """Act on one line of input."""
        command = line.strip()
        if command == "hint":
            with self._lock:
                hint = self._hint
            if hint is not None:
                print(hint)
        elif command == "clear":
            print("\x1b[2J\x1b[1;1H")
        elif command == "quit":
            self.should_quit.set()
            print("Bye!")
        elif command == "help":
            print(_WATCH_HELP)
        elif command.startswith("!"):
            shell_command = command[1:]
            parts = shell_command.split()
            if not parts:
                print("no command provided")
                return
            try:
                subprocess.run(parts)
            except OSError as exc:
                print(f"failed to execute command `{shell_command}`: {exc}")
        else:
            print(f"unknown command: {command}")

    def _serve(self) -> None:
        while True:
            try:
                line = sys.stdin.readline()
            except OSError as exc:
                print(f"error reading command: {exc}")
                continue
            if not line:
                return
            self.handle(line)


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Exercise:
    """Find an exercise by name, or the first pending one for 'next'."""
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
    out: TextIO | None = None,
) -> int:
    """Write the exercise table and a progress line; return how many are done."""
    out = sys.stdout if out is None else out
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
                out.write(f"{fname}\n")
            elif names:
                out.write(f"{exercise.name}\n")
            else:
                out.write(f"{exercise.name:<17}\t{fname:<46}\t{status:<7}\n")
    total = len(exercises)
    percentage = done_count / total * 100.0 if total else 0.0
    out.write(
        f"Progress: You completed {done_count} / {total} exercises ({percentage:.1f} %).\n"
    )
    out.flush()
    return done_count


def rustc_exists() -> bool:
    """True when `rustc --version` can be run successfully."""
    try:
        result = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL)
    except OSError:
        return False
    return result.returncode == 0


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue[Path]) -> None:
        super().__init__()
        self._changes = changes

    def _record(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._changes.put(Path(os.fsdecode(event.src_path)))

    def on_created(self, event: FileSystemEvent) -> None:
        self._record(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._record(event)


def _clear_screen() -> None:
    print("\x1bc")


def _ends_with(path: Path, suffix: Path) -> bool:
    parts = suffix.parts
    return len(parts) <= len(path.parts) and path.parts[len(path.parts) - len(parts):] == parts


def _pending_after_change(filepath: Path, exercises: Sequence[Exercise]) -> Iterator[Exercise]:
    changed = next((e for e in exercises if _ends_with(filepath, e.path)), None)
    if changed is not None:
        yield changed
    yield from (
        e for e in exercises if not e.looks_done() and not _ends_with(filepath, e.path)
    )


def watch(
    exercises: Sequence[Exercise], verbose: bool = False, success_hints: bool = False
) -> WatchStatus:
    """Verify exercises, then re-verify whenever an exercise file changes."""
    changes: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(changes), "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose, success_hints)
            return WatchStatus.FINISHED
        except VerificationFailed as exc:
            shell = WatchShell(exc.exercise.hint)

        print(
            "Welcome to watch mode! You can type 'help' to get an overview "
            "of the commands you can use here."
        )
        threading.Thread(target=shell._serve, daemon=True).start()

        while True:
            try:
                changed = changes.get(timeout=1.0)
            except queue.Empty:
                changed = None
            if changed is not None and changed.suffix == ".rs" and changed.exists():
                filepath = changed.resolve()
                num_done = sum(1 for e in exercises if e.looks_done())
                _clear_screen()
                try:
                    verify(
                        _pending_after_change(filepath, exercises),
                        (num_done, len(exercises)),
                        verbose,
                        success_hints,
                    )
                    return WatchStatus.FINISHED
                except VerificationFailed as exc:
                    shell.set_hint(exc.exercise.hint)
            if shell.should_quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def _version() -> str:
    try:
        return version("practicekit")
    except PackageNotFoundError:
        return "0.0.0"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="practicekit",
        description="A collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    parser.add_argument(
        "--nocapture", action="store_true", help="Show outputs from the test exercises"
    )
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("verify", help="Verify all exercises according to the recommended order")
    watch_cmd = sub.add_parser("watch", help="Rerun `verify` when files were edited")
    watch_cmd.add_argument("--success-hints", action="store_true", help="Show hints on success")
    for name, text in (
        ("run", "Run/Test a single exercise"),
        ("reset", 'Reset a single exercise using "git stash -- <filename>"'),
        ("hint", "Return a hint for the given exercise"),
    ):
        cmd = sub.add_parser(name, help=text)
        cmd.add_argument("name", help="The name of the exercise")
    list_cmd = sub.add_parser("list", help="List the exercises available")
    list_cmd.add_argument("-p", "--paths", action="store_true",
                          help="Show only the paths of the exercises")
    list_cmd.add_argument("-n", "--names", action="store_true",
                          help="Show only the names of the exercises")
    list_cmd.add_argument("-f", "--filter", default=None,
                          help="Comma separated patterns to match exercise names")
    list_cmd.add_argument("-u", "--unsolved", action="store_true",
                          help="Display only exercises not yet solved")
    list_cmd.add_argument("-s", "--solved", action="store_true",
                          help="Display only exercises that have been solved")
    sub.add_parser("lsp", help="Enable rust-analyzer for exercises")
    return parser


def _lsp() -> int:
    project = RustAnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError:
        print("Couldn't find toolchain path, do you have `rustc` installed?")
        return 1
    project.exercises_to_json()
    if not project.crates:
        print("Failed find any exercises, make sure you're in the exercises folder")
        return 0
    try:
        project.write_to_disk()
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print("rust-analyzer will now parse exercises, restart your language server or editor")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _parser().parse_args(argv)

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

    exercises = load_exercises("info.toml")
    verbose = args.nocapture

    if args.command is None:
        print(f"{DEFAULT_OUT}\n")
        return 0

    if args.command == "list":
        try:
            list_exercises(
                exercises, args.paths, args.names, args.filter,
                args.unsolved, args.solved,
            )
        except BrokenPipeError:
            return 0
        except OSError:
            return 1
        return 0

    if args.command in ("run", "reset", "hint"):
        try:
            exercise = find_exercise(args.name, exercises)
        except ExerciseNotFound as exc:
            print(exc)
            return 1
        if args.command == "hint":
            print(exercise.hint)
            return 0
        try:
            if args.command == "run":
                run(exercise, verbose)
            else:
                reset(exercise)
        except RunFailed:
            return 1
        return 0

    if args.command == "verify":
        try:
            verify(exercises, (0, len(exercises)), verbose, False)
        except VerificationFailed:
            return 1
        return 0

    if args.command == "lsp":
        return _lsp()

    try:
        status = watch(exercises, verbose, args.success_hints)
    except OSError as exc:
        print(f"Error: Could not watch your progress. Error message was {exc!r}.")
        print(
            "Most likely you've run out of disk space or your 'inotify limit' "
            "has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        emoji = "★" if no_emoji() else "🎉"
        print(f"{emoji} All exercises completed! {emoji}")
        print(f"\n{FINISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `practicekit watch` again"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())