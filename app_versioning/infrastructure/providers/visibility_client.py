# app_versioning/infrastructure/providers/visibility_client.py

from typing import Any, Optional
from urllib.parse import quote

import httpx

from app_versioning.application.exceptions import ProviderQueryError
from app_versioning.config.settings import AppSettings, get_settings
from app_versioning.domain.models.remote_url import RemoteUrl

# Status codes meaning "exists but you may not see it" for anonymous callers
_HIDDEN_STATUS = {401, 403, 404}

# Hosts served by the configured public APIs; other hosts are self-hosted instances
GITHUB_PUBLIC_HOST = "github.com"
BITBUCKET_PUBLIC_HOST = "bitbucket.org"


class ProviderVisibilityClient:
    """
    One anonymous HTTPS request per query. github, gitlab and bitbucket are asked through
    their REST APIs on the remote's own host; any other provider falls back to probing the
    repository page itself. Redirects are never followed: a private page redirects to a login.
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings or get_settings()
        self._transport = transport

    async def is_private(self, provider: str, remote: RemoteUrl) -> bool:
        handler = {
            "github": self._github,
            "gitlab": self._gitlab,
            "bitbucket": self._bitbucket,
        }.get(provider.lower(), self._default)

        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self._settings.provider_timeout_seconds,
            follow_redirects=False,
        ) as client:
            return await handler(client, remote)

    async def _github(self, client: httpx.AsyncClient, remote: RemoteUrl) -> bool:
        if _hostname(remote) == GITHUB_PUBLIC_HOST:
            api_url = self._settings.github_api_url.rstrip("/")
        else:
            # GitHub Enterprise serves its REST API under /api/v3 on the instance host
            api_url = f"https://{remote.host}/api/v3"
        url = f"{api_url}/repos/{remote.full_path}"
        response = await self._get(client, url)
        if response.status_code == 404:
            return True
        return _json_flag(response, "private")

    async def _gitlab(self, client: httpx.AsyncClient, remote: RemoteUrl) -> bool:
        url = f"https://{remote.host}/api/v4/projects/{quote(remote.full_path, safe='')}"
        response = await self._get(client, url)
        if response.status_code == 404:
            return True
        visibility = _json_field(response, "visibility")
        if not isinstance(visibility, str):
            raise ProviderQueryError(f"Unrecognized visibility from gitlab: {visibility!r}")
        return visibility != "public"

    async def _bitbucket(self, client: httpx.AsyncClient, remote: RemoteUrl) -> bool:
        if _hostname(remote) != BITBUCKET_PUBLIC_HOST:
            # Bitbucket Server has a different API; ask the page itself
            return await self._default(client, remote)
        url = f"{self._settings.bitbucket_api_url.rstrip('/')}/repositories/{remote.full_path}"
        response = await self._get(client, url)
        if response.status_code in (403, 404):
            return True
        return _json_flag(response, "is_private")

    async def _default(self, client: httpx.AsyncClient, remote: RemoteUrl) -> bool:
        response = await self._get(client, remote.to_https())
        if response.is_success:
            return False
        if 300 <= response.status_code < 400 or response.status_code in _HIDDEN_STATUS:
            return True
        raise ProviderQueryError(
            f"Unexpected status {response.status_code} from {remote.host}"
        )

    async def _get(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        try:
            response = await client.get(url, headers={"Accept": "application/json"})
        except httpx.HTTPError as e:
            raise ProviderQueryError(f"Provider unreachable at {url}: {e}") from e
        if response.status_code >= 500:
            raise ProviderQueryError(f"Provider error {response.status_code} from {url}")
        return response


def _hostname(remote: RemoteUrl) -> str:
    return remote.host.split(":", 1)[0].lower()


def _json_field(response: httpx.Response, field: str) -> Any:
    if not response.is_success:
        raise ProviderQueryError(f"Unexpected status {response.status_code} from {response.request.url}")
    try:
        payload = response.json()
    except ValueError as e:
        raise ProviderQueryError(f"Provider returned non-JSON body from {response.request.url}") from e
    if not isinstance(payload, dict):
        raise ProviderQueryError(f"Unrecognized response from {response.request.url}")
    return payload.get(field)


def _json_flag(response: httpx.Response, field: str) -> bool:
    value = _json_field(response, field)
    if not isinstance(value, bool):
        raise ProviderQueryError(f"Unrecognized '{field}' value: {value!r}")
    return value
