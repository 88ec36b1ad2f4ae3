"""Discovery and retrieval of repository-local assets referenced by the README."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from .canonical import SOURCE_ATTRIBUTES, SOURCE_SELECTOR, strip_raw_marker
from .config import IMAGE_EXTENSIONS, MirrorConfig
from .models import AssetResult, FetchedDocument, RepositoryReference
from .repository import raw_url

logger = logging.getLogger("readme_mirror")

_REMOTE_PREFIXES = ("http", "//", "data:", "mailto:", "#")
INLINE_IMAGE_PATTERN = re.compile(
    r"\[[^\]\n]*\]\((?!https?://|//)([^()\s]+\.(?:"
    + "|".join(IMAGE_EXTENSIONS)
    + r"))\)"
)


def is_local_reference(value: Optional[str]) -> bool:
    """Return True when ``value`` names a file inside the repository."""
    if not value:
        return False
    return not value.startswith(_REMOTE_PREFIXES)


def extract_structural_references(soup: BeautifulSoup) -> List[str]:
    """Collect local ``src``/``href`` values from img, link and script tags."""
    references: List[str] = []
    for element in soup.select(SOURCE_SELECTOR):
        for attribute in SOURCE_ATTRIBUTES:
            value = element.get(attribute)
            if isinstance(value, str) and is_local_reference(value):
                references.append(value)
    return references


def extract_inline_references(text: str) -> List[str]:
    """Collect local image paths from ``[label](path)`` link syntax."""
    return INLINE_IMAGE_PATTERN.findall(strip_raw_marker(text))


def collect_asset_references(document: FetchedDocument) -> List[str]:
    """Structural references first, then inline ones; duplicates are kept."""
    structural = extract_structural_references(document.soup)
    inline = extract_inline_references(document.text)
    logger.debug(
        "Found %d structural and %d inline asset references",
        len(structural),
        len(inline),
    )
    return structural + inline


def strip_url_suffix(reference: str) -> str:
    """Drop a trailing query or fragment, e.g. GitHub's ``#gh-dark-mode-only``."""
    return re.split(r"[?#]", reference, maxsplit=1)[0]


def resolve_destination(destination: Path, reference: str) -> Optional[Path]:
    """Map ``reference`` to a path under ``destination``, or None if it escapes."""
    relative = Path(reference)
    if relative.is_absolute():
        return None
    root = Path(os.path.normpath(destination))
    target = Path(os.path.normpath(root / relative))
    if target == root:
        return None
    try:
        target.relative_to(root)
    except ValueError:
        return None
    return target


def _write_response(resp: requests.Response, target: Path, chunk_size: int) -> None:
    partial = target.with_name(target.name + ".part")
    try:
        with partial.open("wb") as handle:
            for chunk in resp.iter_content(chunk_size=chunk_size):
                if chunk:
                    handle.write(chunk)
        os.replace(partial, target)
    except (OSError, requests.RequestException):
        partial.unlink(missing_ok=True)
        raise


def download_asset(
    reference: str,
    repository: RepositoryReference,
    destination: Path,
    session: requests.Session,
    config: MirrorConfig,
) -> AssetResult:
    """Fetch one asset into the mirrored layout; never raises for I/O failures."""
    path = strip_url_suffix(reference)
    url = raw_url(repository, path)
    target = resolve_destination(destination, path)
    if target is None:
        logger.warning("Skipping %s: path leaves the destination directory", reference)
        return AssetResult(reference, url, error="path leaves destination")

    try:
        resp = session.get(url, stream=True, timeout=config.request_timeout)
    except requests.RequestException as exc:
        logger.warning("Failed to download %s: %s", url, exc)
        return AssetResult(reference, url, error=str(exc))

    with resp:
        if not 200 <= resp.status_code < 300:
            logger.warning("Unexpected status code %d for %s", resp.status_code, url)
            return AssetResult(reference, url, error=f"HTTP {resp.status_code}")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("Failed to create directory %s: %s", target.parent, exc)
            return AssetResult(reference, url, error=str(exc))

        try:
            _write_response(resp, target, config.chunk_size)
        except (OSError, requests.RequestException) as exc:
            logger.warning("Failed to write content to file %s: %s", target, exc)
            return AssetResult(reference, url, error=str(exc))

    logger.info("Saved %s", target)
    return AssetResult(reference, url, path=target)


def download_assets(
    references: List[str],
    repository: RepositoryReference,
    destination: Path,
    session: requests.Session,
    config: MirrorConfig,
) -> List[AssetResult]:
    """Download every reference in order, continuing past individual failures."""
    if not references:
        return []
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Failed to create directory %s: %s", destination, exc)

    return [
        download_asset(reference, repository, destination, session, config)
        for reference in references
    ]
