"""Domain models. Immutable value objects."""

from app_versioning.domain.models.commit import (
    CommitAuthorship,
    CommitOutcome,
    CommitRecord,
    Committed,
    NothingToCommit,
    RawCommit,
    format_commit_time,
)
from app_versioning.domain.models.remote_url import RemoteUrl, RemoteUrlKind

__all__ = [
    "CommitAuthorship",
    "CommitOutcome",
    "CommitRecord",
    "Committed",
    "NothingToCommit",
    "RawCommit",
    "RemoteUrl",
    "RemoteUrlKind",
    "format_commit_time",
]
