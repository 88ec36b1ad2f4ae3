"""High-level orchestration of a single README mirror run."""

from __future__ import annotations

import logging
import time
from typing import Optional

import requests

from .assets import collect_asset_references, download_assets
from .config import MirrorConfig
from .document import fetch_document
from .expand import write_expand_script
from .models import MirrorResult, RepositoryReference

logger = logging.getLogger("readme_mirror")


def mirror_readme(
    repository: RepositoryReference,
    config: MirrorConfig,
    session: Optional[requests.Session] = None,
) -> MirrorResult:
    """Fetch the README and its local assets into ``output_root/<repo name>``.

    Raises ``FetchError`` or ``PersistError`` when the document itself cannot
    be mirrored. Asset failures are reported on the returned result.
    """
    owns_session = session is None
    if session is None:
        session = requests.Session()

    destination = config.output_root / repository.name
    start = time.perf_counter()
    try:
        document = fetch_document(repository, destination, session, config)
        references = collect_asset_references(document)
        assets = download_assets(references, repository, destination, session, config)
    finally:
        if owns_session:
            session.close()

    result = MirrorResult(
        repository=repository,
        destination=destination,
        document_path=document.path,
        assets=assets,
    )
    if config.write_script:
        result.script_path = write_expand_script(repository.url, destination)

    logger.info(
        "Mirrored %s@%s in %.2fs (%d/%d assets downloaded, %d failed)",
        repository.url,
        repository.revision,
        time.perf_counter() - start,
        len(result.downloaded),
        len(assets),
        len(result.failed),
    )
    return result
