"""Domain-specific exceptions. Pure domain layer: no infrastructure."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DomainValidationError(DomainError):
    """Raised when caller input violates domain rules (e.g. empty commit message)."""


class InvalidIdentifier(DomainError):
    """Raised when an organization or application id cannot be turned into a repository path."""


class MalformedRemoteUrl(DomainError):
    """Raised when a remote URL matches neither the SSH nor the HTTPS grammar."""
