"""Errors raised while resolving a change set."""


class ChangeSetError(Exception):
    """Base class for change-set resolution failures."""


class RevisionNotFoundError(ChangeSetError):
    """A revision could not be resolved in the repository."""

    def __init__(self, revision: str, reason: str = ""):
        self.revision = revision
        message = f"Unknown revision: {revision}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MalformedPathError(ChangeSetError):
    """A changed path has fewer segments than a module identifier needs."""

    def __init__(self, path: str, depth: int):
        self.path = path
        self.depth = depth
        super().__init__(
            f"Path '{path}' has fewer than {depth} segments and cannot name a module"
        )


class InitialCommitError(ChangeSetError):
    """The new revision has no parent and no old revision was given."""

    def __init__(self, revision: str):
        self.revision = revision
        super().__init__(f"Revision {revision} has no parent to diff against")
