"""History reader: commit log of one application's repository, newest first."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from app_versioning.application.exceptions import HistoryReadError, RepositoryNotFound
from app_versioning.application.git_engine import GitEngine
from app_versioning.domain.models.commit import CommitRecord
from app_versioning.domain.paths import resolve_repository_path


class HistoryReader:
    """Read-only. Expects the repository to exist already; never creates one."""

    def __init__(self, engine: GitEngine, root: Union[str, Path], logger: logging.Logger) -> None:
        self._engine = engine
        self._root = Path(root)
        self._logger = logger

    def history(
        self,
        organization_id: str,
        application_id: str,
        branch_name: Optional[str] = None,
    ) -> List[CommitRecord]:
        """Return every commit reachable from branch_name (default HEAD), newest first."""
        path = resolve_repository_path(self._root, organization_id, application_id)
        if not self._engine.is_repository(path):
            raise RepositoryNotFound(
                f"No repository for application {application_id} in organization {organization_id}"
            )

        try:
            with self._engine.open(path) as repo:
                raw_commits = repo.log(rev=branch_name)
        except Exception as e:
            self._logger.error(
                "history_read_failed",
                extra={"repo_path": str(path), "branch": branch_name, "error": str(e)},
            )
            raise HistoryReadError(f"Could not read history of {path}: {e}") from e

        records = [raw.to_record() for raw in raw_commits]
        self._logger.debug(
            "history_read",
            extra={"repo_path": str(path), "branch": branch_name, "count": len(records)},
        )
        return records
