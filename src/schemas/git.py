from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class FileStatus(str, Enum):
    """Enum for file change statuses, as reported by git diff."""

    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    TYPE_CHANGED = "T"


class FileChange(BaseModel):
    """Represents a file change detected by git diff."""

    status: FileStatus
    file_path: str
    old_file_path: Optional[str] = None  # For renamed files

    def paths(self) -> List[str]:
        """All paths touched by this change, old path first for renames."""
        if self.old_file_path and self.old_file_path != self.file_path:
            return [self.old_file_path, self.file_path]
        return [self.file_path]
