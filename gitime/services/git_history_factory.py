"""Factory for creating GitHistory instances from arguments or settings."""

from pathlib import Path
from typing import Union

from ..config.settings import Settings
from ..models import GitHistory
from ..protocols.git_history_protocol import GitHistoryProtocol


def create_git_history(
    local_path: Union[str, Path],
    debug_mode: bool = False,
) -> GitHistoryProtocol:
    """
    Create a GitHistory instance for a repository root.

    Args:
        local_path: Repository root directory
        debug_mode: If True, every git command is printed before it runs

    Returns:
        GitHistoryProtocol implementation
    """
    if debug_mode:
        print(f"🔧 DEBUG mode: reading history of {local_path}")
    return GitHistory(local_path, debug=debug_mode)


def create_git_history_from_settings(
    settings: Settings, local_path: Union[str, Path]
) -> GitHistoryProtocol:
    """
    Create a GitHistory instance using application settings.

    Args:
        settings: Application settings
        local_path: Repository root directory resolved by the caller

    Returns:
        GitHistoryProtocol implementation
    """
    return create_git_history(local_path=local_path, debug_mode=settings.GITIME_DEBUG)
