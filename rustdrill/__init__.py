"""Worked answers to small Rust exercises, and terminal output helpers."""

__version__ = "4.6.0"