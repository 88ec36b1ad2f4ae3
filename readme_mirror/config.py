"""Configuration objects and constants for the README mirror."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

GITHUB_HOST = "github.com"
DEFAULT_REVISION = "master"
RAW_SEGMENT = "raw"
DOCUMENT_NAME = "README.md"
SCRIPT_NAME = "expand.sh"
IMAGE_EXTENSIONS = ("png", "jpg", "gif", "svg")


@dataclass
class MirrorConfig:
    """Top-level settings that control fetching and writing behaviour."""

    output_root: Path
    revision: str = DEFAULT_REVISION
    expected_host: str = GITHUB_HOST
    # None blocks until the server answers.
    request_timeout: Optional[float] = None
    chunk_size: int = 64 * 1024
    write_script: bool = True
