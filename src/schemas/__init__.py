"""Schemas for the application."""

from .changeset import ChangeSetRequest, ChangeSetResult
from .git import FileChange, FileStatus

__all__ = ["ChangeSetRequest", "ChangeSetResult", "FileChange", "FileStatus"]
