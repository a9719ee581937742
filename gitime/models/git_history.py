from pathlib import Path
from typing import List, Optional, Union

from git import Git, Repo
from git.exc import GitCommandNotFound, InvalidGitRepositoryError, NoSuchPathError

from ..errors import CommandError
from ..schemas import CommitRecord
from .timestamps import parse_git_date


class GitHistory:
    """Reads commit history of a local git working tree."""

    def __init__(self, local_path: Union[str, Path], debug: bool = False):
        self._local_path = Path(local_path)
        self.debug = debug
        self.repo: Optional[Repo] = None

    @property
    def local_path(self) -> Path:
        return self._local_path

    def open_repository(self) -> Repo:
        """Open the repository at local_path, once."""
        if self.repo is None:
            try:
                self.repo = Repo(self._local_path)
            except (InvalidGitRepositoryError, NoSuchPathError) as e:
                raise CommandError(
                    ["git", "-C", str(self._local_path), "rev-parse"],
                    f"Not a git repository: {e}",
                ) from e
        return self.repo

    def has_commits(self) -> bool:
        """Check whether HEAD points at a commit."""
        return self.open_repository().head.is_valid()

    def list_commit_hashes(self) -> List[str]:
        """List all commit hashes reachable from HEAD, oldest first."""
        if not self.has_commits():
            if self.debug:
                print("Repository has no commits yet")
            return []

        output = self._run(["log", "--reverse", "--pretty=%H"])
        return output.split("\n")

    def get_commit(self, commit_hash: str) -> CommitRecord:
        """Get the author date and changed paths of a commit."""
        output = self._run(
            [
                "-c",
                "core.quotepath=off",
                "show",
                "--name-only",
                "--date=default",
                "--pretty=%ad",
                commit_hash,
            ]
        )

        lines = output.split("\n")
        authored_at = parse_git_date(lines[0])
        file_paths = [line for line in lines[1:] if line != ""]

        return CommitRecord(
            commit_hash=commit_hash, authored_at=authored_at, file_paths=file_paths
        )

    def _run(self, args: List[str]) -> str:
        """Run a git command in the repository and return its stdout."""
        repo = self.open_repository()
        command = [Git.GIT_PYTHON_GIT_EXECUTABLE or "git", *args]
        if self.debug:
            print(f"Running: {' '.join(command)}")

        try:
            status, stdout, stderr = repo.git.execute(
                command, with_extended_output=True, with_exceptions=False
            )
        except GitCommandNotFound as e:
            raise CommandError(command, str(e)) from e

        if status != 0:
            raise CommandError(command, stdout + stderr)
        return stdout
