# Application layer: services that orchestrate domain rules and the git/provider collaborators.

from app_versioning.application.commit_service import CommitService
from app_versioning.application.exceptions import (
    ApplicationError,
    CommitError,
    HistoryReadError,
    ProviderQueryError,
    RepositoryInitError,
    RepositoryNotFound,
    StagingError,
)
from app_versioning.application.git_engine import GitEngine, RepositoryHandle
from app_versioning.application.git_executor import GitExecutor
from app_versioning.application.history_reader import HistoryReader
from app_versioning.application.repository_lifecycle import RepositoryLifecycle
from app_versioning.application.visibility_checker import ProviderClient, VisibilityChecker

__all__ = [
    "CommitService",
    "GitExecutor",
    "HistoryReader",
    "RepositoryLifecycle",
    "VisibilityChecker",
    "ApplicationError",
    "CommitError",
    "HistoryReadError",
    "ProviderQueryError",
    "RepositoryInitError",
    "RepositoryNotFound",
    "StagingError",
    "GitEngine",
    "RepositoryHandle",
    "ProviderClient",
]
