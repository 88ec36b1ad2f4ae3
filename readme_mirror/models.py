"""Data models used throughout the mirroring pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from bs4 import BeautifulSoup


@dataclass(frozen=True)
class RepositoryReference:
    """A hosted repository pinned to a revision."""

    url: str
    host: str
    name: str
    revision: str


@dataclass
class FetchedDocument:
    """Canonical document text, its parse tree, and where it was saved."""

    text: str
    soup: BeautifulSoup
    path: Path


@dataclass
class AssetResult:
    """Outcome of retrieving a single asset reference."""

    reference: str
    url: str
    path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class MirrorResult:
    """Summary of a completed mirror run."""

    repository: RepositoryReference
    destination: Path
    document_path: Path
    assets: List[AssetResult] = field(default_factory=list)
    script_path: Optional[Path] = None

    @property
    def downloaded(self) -> List[AssetResult]:
        return [asset for asset in self.assets if asset.ok]

    @property
    def failed(self) -> List[AssetResult]:
        return [asset for asset in self.assets if not asset.ok]
