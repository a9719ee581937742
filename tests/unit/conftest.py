"""Shared fixtures for unit tests."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List

import pytest

from gitime.schemas import CommitRecord


class FakeGitHistory:
    """In-memory implementation of GitHistoryProtocol."""

    def __init__(self, local_path: Path, commits: List[CommitRecord]):
        self._local_path = local_path
        self._commits: Dict[str, CommitRecord] = {c.commit_hash: c for c in commits}
        self._order = [c.commit_hash for c in commits]
        self.requested: List[str] = []

    @property
    def local_path(self) -> Path:
        return self._local_path

    def list_commit_hashes(self) -> List[str]:
        # git output ends with a newline, which leaves a trailing empty entry
        return self._order + [""]

    def get_commit(self, commit_hash: str) -> CommitRecord:
        self.requested.append(commit_hash)
        return self._commits[commit_hash]


def make_commit(commit_hash: str, when: datetime, *paths: str) -> CommitRecord:
    return CommitRecord(commit_hash=commit_hash, authored_at=when, file_paths=list(paths))


@pytest.fixture
def jan_first() -> datetime:
    return datetime(2023, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def feb_first() -> datetime:
    return datetime(2023, 2, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def commit_factory():
    """Build CommitRecord objects from a hash, a date and paths."""
    return make_commit


@pytest.fixture
def history_factory(tmp_path):
    """Build a FakeGitHistory rooted at tmp_path."""

    def _factory(*commits: CommitRecord) -> FakeGitHistory:
        return FakeGitHistory(tmp_path, list(commits))

    return _factory
