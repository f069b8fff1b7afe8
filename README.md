# practicekit

practicekit walks you through a directory of small Rust exercises. Each
exercise is a source file with a deliberate mistake in it. practicekit compiles
it, runs it or runs its tests, and shows the compiler or program output when
something goes wrong. Once the exercise builds and passes, practicekit shows
the lines around the `I AM NOT DONE` marker. Remove that line and it moves on to
the next exercise.

## Installation

```
pip install practicekit
```

Exercises are built with `rustc`. Lint exercises also use `cargo clippy`. Both
must be on your `PATH`. `practicekit reset` uses `git`.

## The exercise directory

Run practicekit from a directory that contains an `info.toml` file. Each entry
in that file describes one exercise:

```toml
[[exercises]]
name = "intro1"
path = "exercises/intro/intro1.rs"
mode = "compile"
hint = "Remove the I AM NOT DONE comment to move on."
```

`mode` takes one of three values:

- `compile`: build the file and run the resulting program.
- `test`: build the file as a test harness and run its tests.
- `clippy`: write `exercises/clippy/Cargo.toml`, build the file, then run
  `cargo clippy` with warnings treated as errors.

An exercise counts as done once its file no longer has a line that starts
with `//` (or `///`) followed by `I AM NOT DONE`.

## Commands

```
practicekit                      # print the welcome text and a short guide
practicekit watch                # verify in order, re-checking whenever a file changes
practicekit watch --success-hints
practicekit verify               # verify every exercise in the order of info.toml
practicekit run <name>           # build and run (or test) a single exercise
practicekit run next             # the first exercise that is not done yet
practicekit hint <name>          # print an exercise's hint
practicekit reset <name>         # restore an exercise with `git stash -- <path>`
practicekit list                 # table of names, paths and status
practicekit list --paths         # only paths
practicekit list --names         # only names
practicekit list --filter intro,if
practicekit list --solved        # only finished exercises
practicekit list --unsolved      # only unfinished exercises
practicekit lsp                  # write rust-project.json for rust-analyzer
practicekit --version
```

Use `--nocapture` before the subcommand to see test output, for example
`practicekit --nocapture run tests1`.

`lsp` adds one crate for every `.rs` file below `./exercises`. It takes the
standard library sources from `RUST_SRC_PATH`, or else asks
`rustc --print sysroot`.

### Watch mode

Watch mode watches `./exercises` for created and modified `.rs` files. Type
these commands into the terminal while it runs:

- `hint`: print the hint for the exercise that failed last
- `clear`: clear the screen
- `quit`: leave watch mode
- `!<cmd>`: run a command, for example `!rustc --explain E0381`
- `help`: list these commands

Set the `NO_EMOJI` environment variable for plain-text symbols in the output.

## Exit status

Every command first needs an `info.toml` in the current directory and a working
`rustc`; without them it exits with status 1. `verify` and `run` exit with 1
when an exercise fails to build, run or pass its tests. `run`, `reset` and
`hint` exit with 1 when the named exercise does not exist, and `run next` when
every exercise is done. `reset` exits with 1 when `git` cannot be started.

## Using it from Python

The pieces behind the commands can be used directly:

```python
from practicekit.exercise import load_exercises
from practicekit.cli import find_exercise, list_exercises

exercises = load_exercises("info.toml")
list_exercises(exercises, unsolved=True)
exercise = find_exercise("next", exercises)
print(exercise.state().context)
```

`practicekit.verify.verify` raises `VerificationFailed` at the first exercise
that fails or is still pending; `practicekit.run.run` raises `RunFailed`.

## Reference solutions

The `practicekit.solutions` sub-package holds worked solutions to some of the
exercises as plain functions and classes, in the modules `conditionals`,
`basics`, `quizzes`, `errors`, `iterators`, `hashmaps`, `structs` and `traits`.

```python
from practicekit.solutions.quizzes import calculate_price_of_apples
from practicekit.solutions.iterators import divide

calculate_price_of_apples(35)   # 70
calculate_price_of_apples(41)   # 41
divide(81, 9)                   # 9
```

The type-conversion exercises have no reference solution in this package.