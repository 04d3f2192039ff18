"""Application-layer exceptions. Do not reuse domain exceptions."""


class ApplicationError(Exception):
    """Base for all application-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RepositoryInitError(ApplicationError):
    """Raised when a repository cannot be created (permissions, corrupt .git, ...)."""


class RepositoryNotFound(ApplicationError):
    """Raised when no repository exists at the resolved path."""


class StagingError(ApplicationError):
    """Raised when the working tree cannot be staged."""


class CommitError(ApplicationError):
    """Raised when the commit cannot be written. Includes lock contention; never retried."""


class HistoryReadError(ApplicationError):
    """Raised when the commit log cannot be read."""


class ProviderQueryError(ApplicationError):
    """Raised when a git provider is unreachable or answers with an unrecognized response."""
