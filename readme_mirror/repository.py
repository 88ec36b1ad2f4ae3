"""Repository URL parsing and raw-content URL construction."""

from __future__ import annotations

from pathlib import PurePosixPath
from urllib.parse import urlparse

from .config import DEFAULT_REVISION, GITHUB_HOST, RAW_SEGMENT
from .errors import InvalidRepositoryError
from .models import RepositoryReference


def parse_repository_url(
    url: str,
    revision: str = DEFAULT_REVISION,
    expected_host: str = GITHUB_HOST,
) -> RepositoryReference:
    """Validate a repository URL and pin it to ``revision``.

    Only the scheme, host and path are kept. A trailing ``.git`` on the last
    path segment is dropped so clone URLs work too.
    """
    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidRepositoryError(f"Not an absolute http(s) URL: {url}")

    host = (parsed.hostname or "").lower()
    if host != expected_host.lower():
        raise InvalidRepositoryError(
            f"The provided link is not a {expected_host} repository link: {url}"
        )

    path = parsed.path.rstrip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    name = PurePosixPath(path).name
    if not name:
        raise InvalidRepositoryError(f"No repository path in URL: {url}")
    if not revision:
        raise InvalidRepositoryError("Revision must not be empty")

    return RepositoryReference(
        url=f"{parsed.scheme}://{parsed.netloc}{path}",
        host=host,
        name=name,
        revision=revision,
    )


def raw_url(repository: RepositoryReference, relative_path: str) -> str:
    """Return the raw-content URL of ``relative_path`` at the pinned revision."""
    cleaned = relative_path
    while cleaned.startswith("./"):
        cleaned = cleaned[2:]
    cleaned = cleaned.lstrip("/")
    return f"{repository.url}/{RAW_SEGMENT}/{repository.revision}/{cleaned}"
