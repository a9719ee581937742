"""Stamps working tree files with the author date of their latest commit."""

import os
import sys
from pathlib import Path
from typing import Union

from ..errors import MissingFileWarning, TimestampWriteError
from ..protocols.git_history_protocol import GitHistoryProtocol
from ..schemas import CommitRecord, SyncResult


class TimestampSynchronizer:
    """Walks commit history and sets atime/mtime of each changed file.

    Commits are applied in the order the history lists them, so when several
    commits touch the same path the one applied last wins.
    """

    def __init__(self, local_path: Union[str, Path], git_history: GitHistoryProtocol):
        self.local_path = Path(local_path)
        self.git_history = git_history

    def sync(self) -> SyncResult:
        """Apply commit timestamps to every existing file listed in history."""
        result = SyncResult()

        for commit_hash in self.git_history.list_commit_hashes():
            if commit_hash == "":
                continue

            record = self.git_history.get_commit(commit_hash)
            self.apply_commit(record, result)
            result.commits_processed += 1

        return result

    def apply_commit(self, record: CommitRecord, result: SyncResult) -> None:
        """Stamp every existing file a single commit changed."""
        timestamp = record.authored_at.timestamp()

        for file_path in record.file_paths:
            print(f"{record.authored_at} : {file_path}")

            full_path = self.local_path / file_path
            if not full_path.exists():
                warning = MissingFileWarning(file_path)
                print(warning, file=sys.stderr)
                result.skipped_paths.append(file_path)
                continue

            try:
                os.utime(full_path, (timestamp, timestamp))
            except OSError as e:
                raise TimestampWriteError(full_path, e) from e
            result.files_updated += 1
