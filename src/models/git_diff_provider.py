import logging
from pathlib import Path
from typing import List, Optional

from git import Commit, Repo
from git.exc import (
    BadName,
    BadObject,
    GitCommandError,
    InvalidGitRepositoryError,
    NoSuchPathError,
)

from ..schemas import FileChange, FileStatus
from .errors import ChangeSetError, InitialCommitError, RevisionNotFoundError

logger = logging.getLogger(__name__)

_STATUS_BY_CHANGE_TYPE = {status.value: status for status in FileStatus}


def is_null_revision(revision: Optional[str]) -> bool:
    """True for a missing old revision: None, blank, or the all-zero SHA."""
    if revision is None:
        return True
    revision = revision.strip()
    return not revision or set(revision) == {"0"}


class GitDiffProvider:
    """Lists changed files between two revisions of a local git repository."""

    def __init__(
        self,
        repo_path: str = ".",
        initial_commit_policy: str = "all",
    ):
        self.repo_path = Path(repo_path)
        self.initial_commit_policy = initial_commit_policy
        self.repo: Optional[Repo] = None

    def open_repository(self) -> Repo:
        """Open the repository, searching parent directories for .git."""
        if self.repo is None:
            try:
                self.repo = Repo(self.repo_path, search_parent_directories=True)
            except (InvalidGitRepositoryError, NoSuchPathError) as e:
                raise ChangeSetError(
                    f"Not a git repository: {self.repo_path}"
                ) from e
            logger.debug("Opened repository at %s", self.repo.working_tree_dir)
        return self.repo

    def close(self) -> None:
        """Release the persistent git processes held by the repository."""
        if self.repo is not None:
            self.repo.close()
            self.repo = None

    @property
    def repo_name(self) -> str:
        repo = self.open_repository()
        return Path(repo.working_tree_dir or self.repo_path.resolve()).name

    def resolve_commit(self, revision: str) -> Commit:
        repo = self.open_repository()
        try:
            return repo.commit(revision)
        except (BadName, BadObject, ValueError, GitCommandError) as e:
            raise RevisionNotFoundError(revision, str(e)) from e

    def get_changed_files(
        self, old_rev: Optional[str], new_rev: str = "HEAD"
    ) -> List[FileChange]:
        """Get list of files that differ between old_rev and new_rev."""
        new_commit = self.resolve_commit(new_rev)

        if is_null_revision(old_rev):
            if not new_commit.parents:
                return self._initial_commit_files(new_commit)
            old_commit = new_commit.parents[0]
            logger.info(
                "No old revision given, diffing against parent %s",
                old_commit.hexsha[:12],
            )
        else:
            old_commit = self.resolve_commit(old_rev)

        if old_commit.hexsha == new_commit.hexsha:
            logger.info("No changes detected")
            return []

        changes = []
        for item in old_commit.diff(new_commit):
            file_path = item.b_path or item.a_path
            if not file_path:
                continue
            changes.append(
                FileChange(
                    status=self._status_for(item),
                    file_path=file_path,
                    old_file_path=item.a_path if item.renamed_file else None,
                )
            )

        logger.info(
            "Found %d changed files between %s and %s",
            len(changes),
            old_commit.hexsha[:12],
            new_commit.hexsha[:12],
        )
        return changes

    def _initial_commit_files(self, commit: Commit) -> List[FileChange]:
        if self.initial_commit_policy == "error":
            raise InitialCommitError(commit.hexsha)

        logger.info(
            "Revision %s has no parent, treating every file as added",
            commit.hexsha[:12],
        )
        return [
            FileChange(status=FileStatus.ADDED, file_path=blob.path)
            for blob in commit.tree.traverse()
            if blob.type == "blob"
        ]

    @staticmethod
    def _status_for(item) -> FileStatus:
        status = _STATUS_BY_CHANGE_TYPE.get(item.change_type or "")
        if status is not None:
            return status
        if item.new_file:
            return FileStatus.ADDED
        if item.deleted_file:
            return FileStatus.DELETED
        if item.renamed_file:
            return FileStatus.RENAMED
        return FileStatus.MODIFIED
