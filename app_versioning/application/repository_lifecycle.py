"""Repository lifecycle: find or create the repository backing one application."""

import logging
from pathlib import Path

from app_versioning.application.exceptions import RepositoryInitError
from app_versioning.application.git_engine import GitEngine


class RepositoryLifecycle:
    """Idempotent repository creation. Calling ensure_repository on an initialized path is a no-op."""

    def __init__(self, engine: GitEngine, logger: logging.Logger) -> None:
        self._engine = engine
        self._logger = logger

    def repository_exists(self, path: Path) -> bool:
        return self._engine.is_repository(Path(path))

    def ensure_repository(self, path: Path) -> None:
        path = Path(path)
        if self.repository_exists(path):
            self._logger.debug("repository_exists", extra={"repo_path": str(path)})
            return

        self._logger.debug("repository_create", extra={"repo_path": str(path)})
        try:
            self._engine.init(path)
        except Exception as e:
            self._logger.error(
                "repository_create_failed",
                extra={"repo_path": str(path), "error": str(e)},
            )
            raise RepositoryInitError(f"Could not create repository at {path}: {e}") from e
        self._logger.info("repository_created", extra={"repo_path": str(path)})
