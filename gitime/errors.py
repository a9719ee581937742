"""Error types raised while synchronizing timestamps."""

from pathlib import Path
from typing import List, Union


class GitimeError(Exception):
    """Base class for every error that ends a run."""


class WorkingDirectoryError(GitimeError):
    """The current working directory could not be determined."""


class CommandError(GitimeError):
    """A git command could not be run or exited with a non-zero status."""

    def __init__(self, command: List[str], output: str):
        self.command = command
        self.output = output
        super().__init__(f"'{' '.join(command)}' failed:\n{output}")


class TimestampParseError(GitimeError):
    """A commit date did not match the expected git date layout."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Could not understand this time stamp: {text!r}")


class TimestampWriteError(GitimeError):
    """The filesystem refused to update a file's timestamps."""

    def __init__(self, path: Union[str, Path], cause: OSError):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Error changing file mtime of {path}: {cause}")


class MissingFileWarning(UserWarning):
    """A path listed in history no longer exists in the working tree."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"SKIP not existing file: {path}")
