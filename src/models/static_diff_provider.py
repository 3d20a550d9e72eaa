import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from ..schemas import FileChange, FileStatus

logger = logging.getLogger(__name__)

# `git diff --name-status` line: status letter, optional similarity score, tab.
_NAME_STATUS = re.compile(r"^(?P<status>[AMDRCT])\d*\t(?P<paths>.+)$")


def parse_changed_line(line: str) -> Optional[FileChange]:
    """Parse a plain path or a `git diff --name-status` line."""
    line = line.strip()
    if not line:
        return None

    match = _NAME_STATUS.match(line)
    if match is None:
        return FileChange(status=FileStatus.MODIFIED, file_path=line)

    status = FileStatus(match.group("status"))
    paths = match.group("paths").split("\t")
    if status in (FileStatus.RENAMED, FileStatus.COPIED) and len(paths) == 2:
        old_path, new_path = paths
        return FileChange(
            status=status,
            file_path=new_path,
            old_file_path=old_path if status == FileStatus.RENAMED else None,
        )
    return FileChange(status=status, file_path=paths[-1])


class StaticDiffProvider:
    """Serves a pre-computed list of changed paths.

    Used when the diff was produced elsewhere (e.g. `git diff --name-only`
    or `--name-status` piped into the CLI) and in DEBUG mode. Plain paths
    are reported as modified; revisions are ignored.
    """

    def __init__(self, lines: Iterable[str], repo_name: str = ""):
        self._changes = [
            change
            for change in (parse_changed_line(line) for line in lines if line)
            if change is not None
        ]
        self._repo_name = repo_name

    @classmethod
    def from_stream(cls, stream: TextIO, repo_name: str = "") -> "StaticDiffProvider":
        return cls(stream.read().splitlines(), repo_name=repo_name)

    @classmethod
    def from_file(cls, path: str, repo_name: str = "") -> "StaticDiffProvider":
        return cls(
            Path(path).read_text(encoding="utf-8").splitlines(), repo_name=repo_name
        )

    @property
    def repo_name(self) -> str:
        return self._repo_name or Path.cwd().name

    def get_changed_files(
        self, old_rev: Optional[str], new_rev: str = "HEAD"
    ) -> List[FileChange]:
        logger.debug("Serving %d pre-computed changed paths", len(self._changes))
        return list(self._changes)

    def close(self) -> None:
        """Nothing to release."""
