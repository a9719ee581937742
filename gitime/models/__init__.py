"""Models for the application."""

from .git_history import GitHistory
from .timestamps import parse_git_date

__all__ = ["GitHistory", "parse_git_date"]
