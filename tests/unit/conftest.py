"""Shared fixtures: isolated settings, real GitPython engine on tmp_path, mock logger."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from app_versioning.config.settings import AppSettings
from app_versioning.domain.models.commit import CommitAuthorship
from app_versioning.infrastructure.git.gitpython_engine import GitPythonEngine


@pytest.fixture
def git_root(tmp_path) -> Path:
    return tmp_path / "git-storage"


@pytest.fixture
def settings(git_root):
    return AppSettings(
        _env_file=None,
        environment="test",
        git_root_path=str(git_root),
        provider_timeout_seconds=2.0,
    )


@pytest.fixture
def engine():
    return GitPythonEngine()


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def author():
    return CommitAuthorship(name="Test User", email="test@example.com")


@pytest.fixture
def write_file():
    """Write one application file into a working tree, creating parent dirs."""

    def _write(repo_path: Path, name: str, content: str) -> Path:
        target = repo_path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    return _write
