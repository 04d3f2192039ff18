"""Domain layer: models, schemas, path and URL rules, exceptions. Pure logic, no git or network."""

from app_versioning.domain.exceptions import (
    DomainError,
    DomainValidationError,
    InvalidIdentifier,
    MalformedRemoteUrl,
)
from app_versioning.domain.models import (
    CommitAuthorship,
    CommitOutcome,
    CommitRecord,
    Committed,
    NothingToCommit,
    RemoteUrl,
    RemoteUrlKind,
)
from app_versioning.domain.paths import resolve_repository_path
from app_versioning.domain.remote_url import (
    is_valid_git_remote_url,
    parse_remote_url,
    provider_name,
    repository_name,
    to_canonical_https_url,
)

__all__ = [
    "CommitAuthorship",
    "CommitOutcome",
    "CommitRecord",
    "Committed",
    "DomainError",
    "DomainValidationError",
    "InvalidIdentifier",
    "MalformedRemoteUrl",
    "NothingToCommit",
    "RemoteUrl",
    "RemoteUrlKind",
    "is_valid_git_remote_url",
    "parse_remote_url",
    "provider_name",
    "repository_name",
    "resolve_repository_path",
    "to_canonical_https_url",
]
