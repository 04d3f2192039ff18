"""Domain models for commits. Pure value objects: produced by the git engine, never mutated here."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Union


def format_commit_time(epoch_seconds: int) -> str:
    """Format a commit time (seconds since epoch) as an ISO-8601 UTC instant, e.g. 2023-05-01T12:00:00Z."""
    instant = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    return instant.strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class CommitAuthorship:
    """Author identity stamped into a commit. Also used as committer."""

    name: str
    email: str


@dataclass(frozen=True)
class CommitRecord:
    """One entry of the commit history as returned to callers."""

    hash: str
    author_name: str
    author_email: str
    message: str
    timestamp: str


@dataclass(frozen=True)
class RawCommit:
    """Commit as reported by the engine, before timestamp formatting."""

    hash: str
    author_name: str
    author_email: str
    message: str
    commit_time: int

    def to_record(self) -> CommitRecord:
        return CommitRecord(
            hash=self.hash,
            author_name=self.author_name,
            author_email=self.author_email,
            message=self.message,
            timestamp=format_commit_time(self.commit_time),
        )


@dataclass(frozen=True)
class Committed:
    """A new commit was written."""

    hash: str


@dataclass(frozen=True)
class NothingToCommit:
    """The working tree matched the parent commit; no commit was written."""


CommitOutcome = Union[Committed, NothingToCommit]
