"""Caller-facing git operations for application versioning. Entry point for the web/application layer."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from app_versioning.application.commit_service import CommitService
from app_versioning.application.history_reader import HistoryReader
from app_versioning.application.repository_lifecycle import RepositoryLifecycle
from app_versioning.application.visibility_checker import VisibilityChecker
from app_versioning.domain import remote_url
from app_versioning.domain.exceptions import DomainValidationError
from app_versioning.domain.models.commit import CommitOutcome, CommitRecord
from app_versioning.domain.paths import resolve_repository_path
from app_versioning.domain.schemas.commit import CommitRequest


class GitExecutor:
    """
    Thin facade over the services. Repository operations are synchronous (they block on git);
    the visibility check is async and is the only call that waits on an external service.
    """

    def __init__(
        self,
        root: Union[str, Path],
        lifecycle: RepositoryLifecycle,
        commit_service: CommitService,
        history_reader: HistoryReader,
        visibility_checker: VisibilityChecker,
        logger: logging.Logger,
    ) -> None:
        self._root = Path(root)
        self._lifecycle = lifecycle
        self._commit_service = commit_service
        self._history_reader = history_reader
        self._visibility_checker = visibility_checker
        self._logger = logger

    def get_repository_path(self, organization_id: str, application_id: str) -> Path:
        return resolve_repository_path(self._root, organization_id, application_id)

    def commit_application(
        self,
        repo_path: Union[str, Path],
        commit_message: str,
        author_name: str,
        author_email: str,
    ) -> CommitOutcome:
        """Commit every change under repo_path. Returns Committed(hash) or NothingToCommit."""
        try:
            request = CommitRequest(
                message=commit_message,
                author_name=author_name,
                author_email=author_email,
            )
        except ValidationError as e:
            raise DomainValidationError(f"Invalid commit request: {e}") from e
        self._logger.debug("commit_application", extra={"repo_path": str(repo_path)})
        return self._commit_service.commit(Path(repo_path), request.message, request.authorship())

    def create_new_repository(self, repo_path: Union[str, Path]) -> bool:
        """Create a repository at repo_path. Safe to call on an existing repository."""
        self._lifecycle.ensure_repository(Path(repo_path))
        return True

    def get_commit_history(
        self,
        organization_id: str,
        application_id: str,
        branch_name: Optional[str] = None,
    ) -> List[CommitRecord]:
        return self._history_reader.history(organization_id, application_id, branch_name)

    def convert_ssh_url_to_browser_supported_url(self, url: str) -> str:
        return remote_url.to_canonical_https_url(url)

    async def is_repo_private(self, url: str) -> bool:
        return await self._visibility_checker.is_private(remote_url.to_canonical_https_url(url))

    def get_repo_name(self, url: str) -> str:
        return remote_url.repository_name(url)

    def get_git_provider_name(self, url: str) -> str:
        return remote_url.provider_name(url)
