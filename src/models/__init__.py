"""Models for the application."""

from .errors import (
    ChangeSetError,
    InitialCommitError,
    MalformedPathError,
    RevisionNotFoundError,
)
from .git_diff_provider import GitDiffProvider, is_null_revision
from .static_diff_provider import StaticDiffProvider

__all__ = [
    "ChangeSetError",
    "GitDiffProvider",
    "InitialCommitError",
    "MalformedPathError",
    "RevisionNotFoundError",
    "StaticDiffProvider",
    "is_null_revision",
]
