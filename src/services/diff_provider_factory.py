"""Factory for creating diff providers and resolvers with DEBUG mode support."""

import logging

from ..config.settings import Settings
from ..models import GitDiffProvider, StaticDiffProvider
from ..protocols.diff_provider_protocol import DiffProviderProtocol
from .change_set_resolver import ChangeSetResolver

logger = logging.getLogger(__name__)


def create_diff_provider(
    repo_path: str = ".",
    initial_commit_policy: str = "all",
    debug_mode: bool = False,
    mock_changed_files=None,
) -> DiffProviderProtocol:
    """
    Create a diff provider based on debug mode.

    Args:
        repo_path: Local repository path
        initial_commit_policy: "all" or "error" for revisions without a parent
        debug_mode: If True, returns StaticDiffProvider; if False, GitDiffProvider
        mock_changed_files: Paths served by the StaticDiffProvider in debug mode

    Returns:
        DiffProviderProtocol implementation
    """
    if debug_mode:
        logger.info("DEBUG mode: Using StaticDiffProvider")
        return StaticDiffProvider(mock_changed_files or [])
    return GitDiffProvider(repo_path, initial_commit_policy=initial_commit_policy)


def create_diff_provider_from_settings(settings: Settings) -> DiffProviderProtocol:
    return create_diff_provider(
        repo_path=settings.REPO_PATH,
        initial_commit_policy=settings.INITIAL_COMMIT_POLICY,
        debug_mode=settings.DEBUG,
        mock_changed_files=settings.MOCK_CHANGED_FILES,
    )


def create_resolver_from_settings(
    settings: Settings, diff_provider: DiffProviderProtocol = None
) -> ChangeSetResolver:
    """Build a ChangeSetResolver wired to the configured diff provider."""
    return ChangeSetResolver(
        diff_provider or create_diff_provider_from_settings(settings),
        default_path_filter=settings.DEFAULT_PATH_FILTER,
        depth=settings.MODULE_DEPTH,
        include_deleted=settings.INCLUDE_DELETED,
        malformed_policy=settings.MALFORMED_PATH_POLICY,
    )
