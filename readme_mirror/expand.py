"""Generation of the script that turns a mirror into a full clone."""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from .config import SCRIPT_NAME
from .errors import PersistError

logger = logging.getLogger("readme_mirror")

EXPAND_TEMPLATE = """#!/bin/bash
git clone {repository_url} .repo
mv -f .repo/* .repo/.* ./
rm -rf .repo
rm {script_name}
git reset --hard
"""


def render_expand_script(repository_url: str) -> str:
    return EXPAND_TEMPLATE.format(repository_url=repository_url, script_name=SCRIPT_NAME)


def write_expand_script(repository_url: str, destination: Path) -> Path:
    """Write an executable ``expand.sh`` into ``destination`` and return its path.

    Running it inside the mirror clones the repository over the mirrored
    files, leaving a regular working copy behind.
    """
    script_path = destination / SCRIPT_NAME
    try:
        destination.mkdir(parents=True, exist_ok=True)
        script_path.write_text(render_expand_script(repository_url), encoding="utf-8")
        mode = script_path.stat().st_mode
        script_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError as exc:
        raise PersistError(f"Failed to write {script_path}: {exc}") from exc
    logger.debug("Wrote %s", script_path)
    return script_path
