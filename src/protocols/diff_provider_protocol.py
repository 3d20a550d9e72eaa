"""Diff provider protocol interface."""

from typing import List, Optional, Protocol, runtime_checkable

from ..schemas import FileChange


@runtime_checkable
class DiffProviderProtocol(Protocol):
    """Protocol for sources of changed files between two revisions."""

    @property
    def repo_name(self) -> str:
        """Repository name, used as the fallback path filter."""
        ...

    def get_changed_files(
        self, old_rev: Optional[str], new_rev: str = "HEAD"
    ) -> List[FileChange]:
        """Get list of files changed between old_rev and new_rev."""
        ...

    def close(self) -> None:
        """Release any resources held by the provider."""
        ...
