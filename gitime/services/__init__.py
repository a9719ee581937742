"""Services for the application."""

from .git_history_factory import (
    create_git_history,
    create_git_history_from_settings,
)
from .timestamp_synchronizer import TimestampSynchronizer

__all__ = [
    "TimestampSynchronizer",
    "create_git_history",
    "create_git_history_from_settings",
]
