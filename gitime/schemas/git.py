from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class CommitRecord(BaseModel):
    """Author date and changed paths of a single commit."""

    commit_hash: str
    authored_at: datetime  # Always timezone-aware
    file_paths: List[str] = Field(default_factory=list)  # Relative to repo root


class SyncResult(BaseModel):
    """Summary of a timestamp synchronization run."""

    commits_processed: int = 0
    files_updated: int = 0
    skipped_paths: List[str] = Field(default_factory=list)
