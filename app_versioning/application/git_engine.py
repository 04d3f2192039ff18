"""Git engine protocol. Application layer depends on this; infrastructure implements it."""

from pathlib import Path
from typing import ContextManager, List, Optional, Protocol

from app_versioning.domain.models.commit import CommitAuthorship, RawCommit


class RepositoryHandle(Protocol):
    """An open repository. Only valid inside the scope returned by GitEngine.open()."""

    def stage_all(self) -> None:
        """Stage every change in the working tree, including deletions."""
        ...

    def commit(self, message: str, author: CommitAuthorship, allow_empty: bool = False) -> Optional[str]:
        """Create a commit and return its hash, or None if empty and allow_empty is False."""
        ...

    def log(self, rev: Optional[str] = None) -> List[RawCommit]:
        """Commits reachable from rev (default HEAD), newest first."""
        ...

    def close(self) -> None:
        ...


class GitEngine(Protocol):
    """Object/ref storage collaborator. Hashing, trees and refs live behind this boundary."""

    def is_repository(self, path: Path) -> bool:
        """True if path is the top level of a usable repository."""
        ...

    def init(self, path: Path) -> None:
        """Create a new repository at path, creating parent directories."""
        ...

    def open(self, path: Path) -> ContextManager[RepositoryHandle]:
        """Open path; the handle is closed when the context exits, on success or failure."""
        ...
