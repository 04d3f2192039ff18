"""HistoryReader: newest-first ordering, projection, missing repository, read failures."""

import re
from contextlib import contextmanager
from unittest.mock import MagicMock

import pytest

from app_versioning.application.commit_service import CommitService
from app_versioning.application.exceptions import HistoryReadError, RepositoryNotFound
from app_versioning.application.history_reader import HistoryReader
from app_versioning.application.repository_lifecycle import RepositoryLifecycle
from app_versioning.domain.exceptions import InvalidIdentifier
from app_versioning.domain.models.commit import CommitAuthorship, RawCommit

ISO_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")


@pytest.fixture
def history_reader(engine, git_root, logger):
    return HistoryReader(engine=engine, root=git_root, logger=logger)


@pytest.fixture
def commit_service(engine, logger):
    return CommitService(engine=engine, lifecycle=RepositoryLifecycle(engine, logger), logger=logger)


def test_history_newest_first(history_reader, commit_service, git_root, write_file):
    path = git_root / "org-1" / "app-1"
    write_file(path, "application.json", "{}")
    c1 = commit_service.commit(path, "C1", CommitAuthorship("Alice", "alice@example.com"))
    write_file(path, "application.json", '{"v": 2}')
    c2 = commit_service.commit(path, "C2", CommitAuthorship("Bob", "bob@example.com"))

    history = history_reader.history("org-1", "app-1")

    assert [record.hash for record in history] == [c2.hash, c1.hash]
    assert [record.message for record in history] == ["C2", "C1"]
    assert history[0].author_name == "Bob"
    assert history[0].author_email == "bob@example.com"
    assert history[1].author_name == "Alice"
    assert all(ISO_UTC.match(record.timestamp) for record in history)


def test_history_is_a_materialized_list(history_reader, commit_service, git_root, author, write_file):
    path = git_root / "org-1" / "app-1"
    write_file(path, "application.json", "{}")
    commit_service.commit(path, "first", author)

    history = history_reader.history("org-1", "app-1")

    assert isinstance(history, list)
    assert history == history_reader.history("org-1", "app-1")


def test_history_of_repository_without_commits_is_empty(history_reader, engine, git_root):
    engine.init(git_root / "org-1" / "app-1")
    assert history_reader.history("org-1", "app-1") == []


def test_history_missing_repository_raises(history_reader, git_root):
    with pytest.raises(RepositoryNotFound):
        history_reader.history("org-1", "missing-app")
    assert not (git_root / "org-1" / "missing-app").exists()


def test_history_unknown_branch_raises(history_reader, commit_service, git_root, author, write_file):
    path = git_root / "org-1" / "app-1"
    write_file(path, "application.json", "{}")
    commit_service.commit(path, "first", author)

    with pytest.raises(HistoryReadError):
        history_reader.history("org-1", "app-1", branch_name="does-not-exist")


def test_history_invalid_identifier(history_reader):
    with pytest.raises(InvalidIdentifier):
        history_reader.history("", "app-1")


def test_history_read_failure_closes_handle(git_root, logger):
    handle = MagicMock()
    handle.log.side_effect = OSError("packfile truncated")

    class Engine:
        def is_repository(self, path):
            return True

        @contextmanager
        def open(self, path):
            try:
                yield handle
            finally:
                handle.close()

    reader = HistoryReader(engine=Engine(), root=git_root, logger=logger)
    with pytest.raises(HistoryReadError):
        reader.history("org-1", "app-1")
    handle.close.assert_called_once()


def test_history_projects_engine_commits(git_root, logger):
    handle = MagicMock()
    handle.log.return_value = [
        RawCommit("b2", "Bob", "bob@example.com", "second", 1682942460),
        RawCommit("a1", "Alice", "alice@example.com", "first", 1682942400),
    ]
    engine = MagicMock()
    engine.is_repository.return_value = True
    engine.open.return_value.__enter__.return_value = handle

    reader = HistoryReader(engine=engine, root=git_root, logger=logger)
    history = reader.history("org-1", "app-1", branch_name="main")

    handle.log.assert_called_once_with(rev="main")
    engine.open.assert_called_once_with(git_root / "org-1" / "app-1")
    assert [r.timestamp for r in history] == ["2023-05-01T12:01:00Z", "2023-05-01T12:00:00Z"]
