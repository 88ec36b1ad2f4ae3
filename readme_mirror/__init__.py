"""Mirror a GitHub README and its repository-local assets to disk."""

from .config import MirrorConfig
from .errors import FetchError, InvalidRepositoryError, MirrorError, PersistError
from .mirror import mirror_readme
from .models import MirrorResult, RepositoryReference
from .repository import parse_repository_url

__all__ = [
    "FetchError",
    "InvalidRepositoryError",
    "MirrorConfig",
    "MirrorError",
    "MirrorResult",
    "PersistError",
    "RepositoryReference",
    "mirror_readme",
    "parse_repository_url",
]
