"""Repository path derivation. Pure, no filesystem access."""

from pathlib import Path
from typing import Union

from app_versioning.domain.exceptions import InvalidIdentifier

_FORBIDDEN_IDENTIFIERS = frozenset({".", ".."})


def validate_identifier(name: str, value: str) -> None:
    """Identifiers become single path segments: non-empty, no separators, not '.' or '..'."""
    if not value or not value.strip():
        raise InvalidIdentifier(f"{name} must not be empty")
    if value in _FORBIDDEN_IDENTIFIERS or "/" in value or "\\" in value or "\x00" in value:
        raise InvalidIdentifier(f"{name} is not a valid path segment: {value!r}")


def resolve_repository_path(
    root: Union[str, Path],
    organization_id: str,
    application_id: str,
) -> Path:
    """Return root / organization_id / application_id. Same identity always yields the same path."""
    validate_identifier("organization_id", organization_id)
    validate_identifier("application_id", application_id)
    return Path(root) / organization_id / application_id
