from functools import lru_cache
from typing import List, Literal

from pydantic import PositiveInt
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    CI runners export these as job-level env vars; CLI flags take precedence
    over anything configured here.
    """

    # Repository and filtering
    REPO_PATH: str = "."
    DEFAULT_PATH_FILTER: str = ""  # Empty falls back to the repo directory name
    MODULE_DEPTH: PositiveInt = 2

    # Change-set policies
    INCLUDE_DELETED: bool = True
    MALFORMED_PATH_POLICY: Literal["skip", "error"] = "skip"
    INITIAL_COMMIT_POLICY: Literal["all", "error"] = "all"

    # HTTP surface
    RESOLVE_TIMEOUT: int = 60  # Timeout in seconds for a resolve request

    LOG_LEVEL: str = "INFO"

    # Development and debugging
    DEBUG: bool = False
    MOCK_CHANGED_FILES: List[str] = []


@lru_cache
def get_settings() -> Settings:
    return Settings()
