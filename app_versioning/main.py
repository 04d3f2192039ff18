# app_versioning/main.py

import logging
from typing import Optional

import httpx

from app_versioning.application.commit_service import CommitService
from app_versioning.application.git_executor import GitExecutor
from app_versioning.application.history_reader import HistoryReader
from app_versioning.application.repository_lifecycle import RepositoryLifecycle
from app_versioning.application.visibility_checker import VisibilityChecker
from app_versioning.config.logging import configure_logging
from app_versioning.config.settings import AppSettings, get_settings
from app_versioning.infrastructure.git.gitpython_engine import GitPythonEngine
from app_versioning.infrastructure.providers.visibility_client import ProviderVisibilityClient


def create_git_executor(
    settings: Optional[AppSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    setup_logging: bool = False,
) -> GitExecutor:
    """Wire settings, engine and provider client into a GitExecutor. Nothing is shared between executors."""
    settings = settings or get_settings()
    if setup_logging:
        configure_logging(settings.log_level)

    engine = GitPythonEngine()
    lifecycle = RepositoryLifecycle(
        engine=engine,
        logger=logging.getLogger("app_versioning.repository_lifecycle"),
    )
    commit_service = CommitService(
        engine=engine,
        lifecycle=lifecycle,
        logger=logging.getLogger("app_versioning.commit_service"),
    )
    history_reader = HistoryReader(
        engine=engine,
        root=settings.git_root_path,
        logger=logging.getLogger("app_versioning.history_reader"),
    )
    visibility_checker = VisibilityChecker(
        client=ProviderVisibilityClient(settings=settings, transport=transport),
        logger=logging.getLogger("app_versioning.visibility_checker"),
    )
    return GitExecutor(
        root=settings.git_root_path,
        lifecycle=lifecycle,
        commit_service=commit_service,
        history_reader=history_reader,
        visibility_checker=visibility_checker,
        logger=logging.getLogger("app_versioning.git_executor"),
    )
