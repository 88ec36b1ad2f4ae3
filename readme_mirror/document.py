"""Retrieval and canonicalization of the mirrored README."""

from __future__ import annotations

import logging
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from .canonical import canonicalize_text, canonicalize_tree
from .config import DOCUMENT_NAME, MirrorConfig
from .errors import FetchError, PersistError
from .models import FetchedDocument, RepositoryReference
from .repository import raw_url

logger = logging.getLogger("readme_mirror")


def fetch_document(
    repository: RepositoryReference,
    destination: Path,
    session: requests.Session,
    config: MirrorConfig,
) -> FetchedDocument:
    """Download the README, canonicalize it, and save it under ``destination``.

    The returned parse tree is built from the same canonical text that is
    written to disk, so asset extraction sees exactly what was saved.
    """
    url = raw_url(repository, DOCUMENT_NAME)
    logger.info("Fetching %s", url)
    try:
        resp = session.get(url, timeout=config.request_timeout)
    except requests.RequestException as exc:
        raise FetchError(f"Failed to retrieve {DOCUMENT_NAME}: {exc}", url) from exc

    with resp:
        if not 200 <= resp.status_code < 300:
            raise FetchError(
                f"Failed to retrieve {DOCUMENT_NAME}, status code: {resp.status_code}",
                url,
                resp.status_code,
            )
        raw_text = resp.content.decode("utf-8", errors="surrogateescape")

    text = canonicalize_text(raw_text)
    soup = canonicalize_tree(BeautifulSoup(text, "html.parser"))

    output_path = destination / DOCUMENT_NAME
    try:
        destination.mkdir(parents=True, exist_ok=True)
        # Bytes that are not UTF-8 and line endings round-trip unchanged.
        with output_path.open(
            "w", encoding="utf-8", errors="surrogateescape", newline=""
        ) as handle:
            handle.write(text)
    except OSError as exc:
        raise PersistError(f"Failed to write {output_path}: {exc}") from exc
    logger.info("Saved %s", output_path)

    return FetchedDocument(text=text, soup=soup, path=output_path)
