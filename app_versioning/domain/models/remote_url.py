"""Domain model for git remote URLs. One value type tagged by form, no subclassing."""

from dataclasses import dataclass
from enum import Enum


class RemoteUrlKind(str, Enum):
    """Grammar the remote URL was written in."""

    SSH = "ssh"
    HTTPS = "https"


@dataclass(frozen=True)
class RemoteUrl:
    """
    Parsed remote URL. Both kinds carry the same (host, owner_path, repo_name) triple,
    so converting between forms never loses information.
    owner_path is everything between the host and the repository name (may contain '/').
    """

    kind: RemoteUrlKind
    host: str
    owner_path: str
    repo_name: str

    @property
    def full_path(self) -> str:
        if not self.owner_path:
            return self.repo_name
        return f"{self.owner_path}/{self.repo_name}"

    def to_https(self) -> str:
        return f"https://{self.host}/{self.full_path}"

    def to_ssh(self) -> str:
        return f"git@{self.host}:{self.full_path}.git"
