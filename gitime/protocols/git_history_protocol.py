"""Git history protocol interface."""

from pathlib import Path
from typing import List, Protocol, runtime_checkable

from ..schemas import CommitRecord


@runtime_checkable
class GitHistoryProtocol(Protocol):
    """Protocol for the read-only history queries timestamp sync needs."""

    @property
    def local_path(self) -> Path:
        """Repository root the history belongs to."""
        ...

    def list_commit_hashes(self) -> List[str]:
        """List commit hashes in `git log` order. May contain empty strings."""
        ...

    def get_commit(self, commit_hash: str) -> CommitRecord:
        """Get the author date and changed paths of one commit."""
        ...
