"""Command-line runner that compiles, tests and tracks small Rust exercises."""

__version__ = "4.6.0"