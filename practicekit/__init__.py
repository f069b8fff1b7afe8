"""Exercise trainer: build, run, verify and watch progress through small Rust exercises."""

__version__ = "0.1.0"