"""Commit value objects: timestamp formatting and caller input validation."""

import pytest
from pydantic import ValidationError

from app_versioning.domain.models.commit import (
    Committed,
    NothingToCommit,
    RawCommit,
    format_commit_time,
)
from app_versioning.domain.schemas.commit import CommitRequest


def test_format_commit_time_is_iso_utc():
    assert format_commit_time(1682942400) == "2023-05-01T12:00:00Z"


def test_format_commit_time_epoch_zero():
    assert format_commit_time(0) == "1970-01-01T00:00:00Z"


def test_raw_commit_to_record():
    raw = RawCommit(
        hash="abc123",
        author_name="Test User",
        author_email="test@example.com",
        message="Initial commit\n\nbody",
        commit_time=1682942400,
    )
    record = raw.to_record()
    assert record.hash == "abc123"
    assert record.author_name == "Test User"
    assert record.author_email == "test@example.com"
    assert record.message == "Initial commit\n\nbody"
    assert record.timestamp == "2023-05-01T12:00:00Z"


def test_outcomes_are_distinguishable():
    assert Committed(hash="abc") != NothingToCommit()
    assert NothingToCommit() == NothingToCommit()
    assert isinstance(Committed(hash="abc"), Committed)


def test_commit_request_builds_authorship():
    request = CommitRequest(message="save", author_name=" Test User ", author_email="test@example.com")
    authorship = request.authorship()
    assert authorship.name == "Test User"
    assert authorship.email == "test@example.com"


@pytest.mark.parametrize(
    "payload",
    [
        {"message": "", "author_name": "a", "author_email": "a@b.c"},
        {"message": "   ", "author_name": "a", "author_email": "a@b.c"},
        {"message": "save", "author_name": " ", "author_email": "a@b.c"},
        {"message": "save", "author_name": "a", "author_email": "not-an-email"},
    ],
)
def test_commit_request_rejects_invalid_input(payload):
    with pytest.raises(ValidationError):
        CommitRequest(**payload)
