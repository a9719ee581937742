from pathlib import Path
from typing import Callable

import pytest
from git import Actor, Repo

# 2023-01-01 10:00:00 +0000 and 2023-02-01 12:00:00 +0000
COMMIT_A_EPOCH = 1672567200
COMMIT_B_EPOCH = 1675252800

AUTHOR = Actor("Test Author", "author@example.com")


@pytest.fixture
def commit_epochs():
    """Author dates of commits A and B in seconds since the epoch."""
    return COMMIT_A_EPOCH, COMMIT_B_EPOCH


@pytest.fixture
def commit_files(tmp_path) -> Callable[..., str]:
    """
    Returns a helper that writes files into a repository at tmp_path and
    commits them with a fixed author and committer date.
    """
    repo = Repo.init(tmp_path)

    def _commit(message: str, epoch: int, **files: str) -> str:
        for name, content in files.items():
            path = Path(tmp_path) / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        repo.index.add(list(files))
        date = f"{epoch} +0000"
        commit = repo.index.commit(
            message,
            author=AUTHOR,
            committer=AUTHOR,
            author_date=date,
            commit_date=date,
        )
        return commit.hexsha

    return _commit


@pytest.fixture
def two_commit_repo(tmp_path, commit_files) -> Path:
    """Commit A adds x.txt; commit B modifies x.txt and adds y.txt."""
    commit_files("A", COMMIT_A_EPOCH, **{"x.txt": "one\n"})
    commit_files("B", COMMIT_B_EPOCH, **{"x.txt": "two\n", "y.txt": "new\n"})
    return tmp_path
