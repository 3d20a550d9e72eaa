"""Services for the application."""

from .change_set_resolver import (
    ChangeSetResolver,
    extract_modules,
    matches_filter,
    module_for_path,
)
from .diff_provider_factory import (
    create_diff_provider,
    create_diff_provider_from_settings,
    create_resolver_from_settings,
)

__all__ = [
    "ChangeSetResolver",
    "create_diff_provider",
    "create_diff_provider_from_settings",
    "create_resolver_from_settings",
    "extract_modules",
    "matches_filter",
    "module_for_path",
]
