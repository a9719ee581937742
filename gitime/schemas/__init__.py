"""Schemas for the application."""

from .git import CommitRecord, SyncResult

__all__ = ["CommitRecord", "SyncResult"]
