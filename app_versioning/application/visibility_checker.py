"""Visibility checker: asks the hosting provider whether a remote repository is private."""

import logging
from typing import Protocol

from app_versioning.domain.models.remote_url import RemoteUrl
from app_versioning.domain.remote_url import parse_remote_url, provider_name


class ProviderClient(Protocol):
    """Protocol for one outbound visibility query. Implementations raise ProviderQueryError."""

    async def is_private(self, provider: str, remote: RemoteUrl) -> bool:
        """True if the repository is not publicly visible on the provider."""
        ...


class VisibilityChecker:
    """No caching, no retries. Never touches the filesystem, so no repository handle is held while waiting."""

    def __init__(self, client: ProviderClient, logger: logging.Logger) -> None:
        self._client = client
        self._logger = logger

    async def is_private(self, canonical_https_url: str) -> bool:
        remote = parse_remote_url(canonical_https_url)
        provider = provider_name(canonical_https_url)
        result = await self._client.is_private(provider, remote)
        self._logger.info(
            "visibility_checked",
            extra={"provider": provider, "repo_name": remote.repo_name, "private": result},
        )
        return result
