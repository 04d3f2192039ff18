"""Commit service: stages the working tree and records one versioned snapshot of an application."""

import logging
from pathlib import Path

from app_versioning.application.exceptions import ApplicationError, CommitError, StagingError
from app_versioning.application.git_engine import GitEngine
from app_versioning.application.repository_lifecycle import RepositoryLifecycle
from app_versioning.domain.models.commit import (
    CommitAuthorship,
    CommitOutcome,
    Committed,
    NothingToCommit,
)


class CommitService:
    """
    Orchestration only: create-if-absent, open, stage all, commit, close.
    Empty commits are never written; the caller gets NothingToCommit instead.
    Engine failures surface as StagingError / CommitError and are not retried.
    """

    def __init__(
        self,
        engine: GitEngine,
        lifecycle: RepositoryLifecycle,
        logger: logging.Logger,
    ) -> None:
        self._engine = engine
        self._lifecycle = lifecycle
        self._logger = logger

    def commit(self, path: Path, message: str, authorship: CommitAuthorship) -> CommitOutcome:
        path = Path(path)
        self._logger.debug("commit_requested", extra={"repo_path": str(path)})

        # Step 1: first save of a new application creates its repository
        if not self._lifecycle.repository_exists(path):
            self._lifecycle.ensure_repository(path)

        try:
            # Step 2: scoped handle, released on every exit path
            with self._engine.open(path) as repo:
                # Step 3: stage everything
                try:
                    repo.stage_all()
                except Exception as e:
                    raise StagingError(f"Could not stage changes in {path}: {e}") from e

                # Step 4: commit unless nothing changed
                try:
                    commit_hash = repo.commit(message, authorship, allow_empty=False)
                except Exception as e:
                    raise CommitError(f"Could not commit to {path}: {e}") from e
        except ApplicationError as e:
            self._logger.error(
                "commit_failed",
                extra={"repo_path": str(path), "error": e.message},
            )
            raise
        except Exception as e:
            self._logger.error(
                "commit_failed",
                extra={"repo_path": str(path), "error": str(e)},
            )
            raise CommitError(f"Could not open repository at {path}: {e}") from e

        if commit_hash is None:
            self._logger.info("nothing_to_commit", extra={"repo_path": str(path)})
            return NothingToCommit()

        self._logger.info(
            "commit_created",
            extra={"repo_path": str(path), "commit": commit_hash, "author_email": authorship.email},
        )
        return Committed(hash=commit_hash)
