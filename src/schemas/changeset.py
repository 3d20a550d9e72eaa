import json
from typing import List, Optional

from pydantic import BaseModel


class ChangeSetRequest(BaseModel):
    old_rev: Optional[str] = None
    new_rev: str = "HEAD"
    path_filter: Optional[str] = None


class ChangeSetResult(BaseModel):
    """The module set produced by one resolver invocation."""

    modules: List[str]
    path_filter: str
    old_rev: Optional[str] = None
    new_rev: Optional[str] = None
    matched_files: int = 0
    skipped_paths: List[str] = []

    @property
    def is_empty(self) -> bool:
        return not self.modules

    def to_json(self) -> str:
        """Serialize the module set as a compact JSON array."""
        return json.dumps(self.modules, separators=(",", ":"))
