"""Command-line entry point for the README mirror."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_REVISION, MirrorConfig
from .errors import InvalidRepositoryError, MirrorError
from .mirror import mirror_readme
from .repository import parse_repository_url

logger = logging.getLogger("readme_mirror.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="readme-mirror",
        description=(
            "Download a GitHub repository's README.md together with the local "
            "assets it references, so it renders offline."
        ),
    )
    parser.add_argument("repository", help="GitHub repository URL, e.g. https://github.com/owner/repo")
    parser.add_argument(
        "revision",
        nargs="?",
        default=DEFAULT_REVISION,
        help=f"Branch or tag to mirror (default: {DEFAULT_REVISION})",
    )
    parser.add_argument(
        "--output",
        default=".",
        type=Path,
        help="Directory in which the <repository-name> folder is created",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: wait indefinitely)",
    )
    parser.add_argument(
        "--no-script",
        action="store_true",
        help="Do not write the expand.sh helper script",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(list(sys.argv[1:] if argv is None else argv))


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = MirrorConfig(
        output_root=Path(args.output),
        revision=args.revision,
        request_timeout=args.timeout,
        write_script=not args.no_script,
    )

    try:
        repository = parse_repository_url(
            args.repository, config.revision, config.expected_host
        )
    except InvalidRepositoryError as exc:
        logger.error("%s", exc)
        return 1

    try:
        result = mirror_readme(repository, config)
    except MirrorError as exc:
        logger.error("%s", exc)
        return 1

    for failure in result.failed:
        logger.debug("Not mirrored: %s (%s)", failure.reference, failure.error)
    return 0


if __name__ == "__main__":
    sys.exit(main())
