"""Restore file timestamps in a git working tree from commit history."""

__version__ = "0.1.0"
