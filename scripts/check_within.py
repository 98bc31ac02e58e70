"""Command line interface to test whether one GeoJSON geometry is within another."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any


def _ensure_project_root_on_path() -> None:
    """Make the repository root importable when running as a script."""

    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_project_root_on_path()

from geowithin import GeoWithinError, contains, within  # noqa: E402  (import after path fix)
from geowithin.config import configure_logging  # noqa: E402
from geowithin.geojson import loads_geometry, read_geometry  # noqa: E402

logger = logging.getLogger(__name__)


def _load_argument(value: str) -> Mapping[str, Any]:
    """Inline GeoJSON when the argument looks like JSON, a file path otherwise."""

    if value.lstrip().startswith("{"):
        return loads_geometry(value)
    return read_geometry(Path(value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "first",
        help="GeoJSON file (or inline GeoJSON) holding the candidate inner geometry.",
    )
    parser.add_argument(
        "second",
        help="GeoJSON file (or inline GeoJSON) holding the candidate outer geometry.",
    )
    parser.add_argument(
        "--contains",
        action="store_true",
        help="Test whether FIRST contains SECOND instead.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to GEOWITHIN_LOG_LEVEL or WARNING).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    predicate = contains if args.contains else within

    try:
        first = _load_argument(args.first)
        second = _load_argument(args.second)
        result = predicate(first, second)
    except (GeoWithinError, OSError) as exc:
        logger.debug("check failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print("true" if result else "false")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
