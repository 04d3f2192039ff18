# app_versioning/infrastructure/git/gitpython_engine.py

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from git import Actor, InvalidGitRepositoryError, NoSuchPathError, Repo  # GitPython

from app_versioning.domain.models.commit import CommitAuthorship, RawCommit


class GitPythonRepository:
    """RepositoryHandle over a GitPython Repo. Hashing, trees and ref updates stay inside git."""

    def __init__(self, repo: Repo):
        self._repo = repo

    def stage_all(self) -> None:
        # git add -A: additions, modifications and deletions
        self._repo.git.add(A=True)

    def _has_staged_changes(self) -> bool:
        if not self._repo.head.is_valid():
            # unborn branch: anything in the index is a change
            return len(self._repo.index.entries) > 0
        return len(self._repo.index.diff("HEAD")) > 0

    def commit(self, message: str, author: CommitAuthorship, allow_empty: bool = False) -> Optional[str]:
        if not allow_empty and not self._has_staged_changes():
            return None
        actor = Actor(author.name, author.email)
        commit = self._repo.index.commit(message, author=actor, committer=actor)
        return commit.hexsha

    def log(self, rev: Optional[str] = None) -> List[RawCommit]:
        if rev is None and not self._repo.head.is_valid():
            return []
        return [
            RawCommit(
                hash=c.hexsha,
                author_name=c.author.name,
                author_email=c.author.email,
                message=c.message,
                commit_time=c.committed_date,
            )
            for c in self._repo.iter_commits(rev or "HEAD")
        ]

    def close(self) -> None:
        self._repo.close()


class GitPythonEngine:
    """GitEngine backed by GitPython and the git binary. Holds no state between calls."""

    def is_repository(self, path: Path) -> bool:
        path = Path(path)
        if not path.is_dir():
            return False
        try:
            repo = Repo(str(path))
        except (InvalidGitRepositoryError, NoSuchPathError):
            return False
        try:
            # a bare repo or a .git directory passed directly has no usable working tree here
            if repo.working_tree_dir is None:
                return False
            return Path(repo.working_tree_dir).resolve() == path.resolve()
        finally:
            repo.close()

    def init(self, path: Path) -> None:
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        Repo.init(str(path)).close()

    @contextmanager
    def open(self, path: Path) -> Iterator[GitPythonRepository]:
        handle = GitPythonRepository(Repo(str(path)))
        try:
            yield handle
        finally:
            handle.close()
