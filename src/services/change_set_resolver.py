"""Resolves the set of modules touched by a revision range."""

import fnmatch
import logging
from typing import Iterable, List, Optional, Tuple

from src.models import MalformedPathError
from src.protocols.diff_provider_protocol import DiffProviderProtocol
from src.schemas import ChangeSetResult, FileStatus

logger = logging.getLogger(__name__)

_GLOB_CHARS = set("*?[")


def matches_filter(path: str, path_filter: str) -> bool:
    """Prefix match, or fnmatch when the filter contains glob characters."""
    if _GLOB_CHARS & set(path_filter):
        return fnmatch.fnmatchcase(path, path_filter)
    return path.startswith(path_filter)


def _check_depth(depth: int) -> None:
    if depth < 1:
        raise ValueError(f"Module depth must be at least 1, got {depth}")


def module_for_path(path: str, depth: int = 2) -> Optional[str]:
    """First `depth` segments of a path, or None if it has fewer."""
    _check_depth(depth)
    segments = [s for s in path.strip("/").split("/") if s]
    if len(segments) < depth:
        return None
    return "/".join(segments[:depth])


def extract_modules(
    paths: Iterable[str],
    path_filter: str,
    depth: int = 2,
    malformed_policy: str = "skip",
) -> Tuple[List[str], int, List[str]]:
    """
    Derive the module set from a list of changed paths.

    Args:
        paths: Changed file paths, relative to the repository root
        path_filter: Prefix or glob restricting which paths are considered
        depth: Number of leading segments forming a module identifier
        malformed_policy: "skip" to ignore short paths, "error" to raise

    Returns:
        Tuple of (sorted unique modules, matched path count, skipped paths)
    """
    _check_depth(depth)
    modules = set()
    matched = 0
    skipped: List[str] = []

    for path in paths:
        if not path or not matches_filter(path, path_filter):
            continue
        matched += 1

        module = module_for_path(path, depth)
        if module is None:
            if malformed_policy == "error":
                raise MalformedPathError(path, depth)
            logger.debug("Skipping %s: too few segments for a module", path)
            skipped.append(path)
            continue
        modules.add(module)

    return sorted(modules), matched, skipped


class ChangeSetResolver:
    """Computes the modules affected between two revisions."""

    def __init__(
        self,
        diff_provider: DiffProviderProtocol,
        default_path_filter: str = "",
        depth: int = 2,
        include_deleted: bool = True,
        malformed_policy: str = "skip",
    ):
        _check_depth(depth)
        self.diff_provider = diff_provider
        self.default_path_filter = default_path_filter
        self.depth = depth
        self.include_deleted = include_deleted
        self.malformed_policy = malformed_policy

    def effective_filter(self, path_filter: Optional[str] = None) -> str:
        """Caller filter, else configured default, else the repository name."""
        return path_filter or self.default_path_filter or self.diff_provider.repo_name

    def changed_paths(
        self, old_rev: Optional[str], new_rev: str = "HEAD"
    ) -> List[str]:
        paths = []
        for change in self.diff_provider.get_changed_files(old_rev, new_rev):
            if change.status == FileStatus.DELETED and not self.include_deleted:
                continue
            paths.extend(change.paths())
        return paths

    def resolve(
        self,
        old_rev: Optional[str],
        new_rev: str = "HEAD",
        path_filter: Optional[str] = None,
    ) -> ChangeSetResult:
        """Resolve the module set for a revision range."""
        effective = self.effective_filter(path_filter)
        paths = self.changed_paths(old_rev, new_rev)

        modules, matched, skipped = extract_modules(
            paths,
            effective,
            depth=self.depth,
            malformed_policy=self.malformed_policy,
        )

        if modules:
            logger.info("Modules to rebuild: %s", ", ".join(modules))
        else:
            logger.info("No modules under '%s' changed, nothing to build", effective)

        return ChangeSetResult(
            modules=modules,
            path_filter=effective,
            old_rev=old_rev,
            new_rev=new_rev,
            matched_files=matched,
            skipped_paths=skipped,
        )
