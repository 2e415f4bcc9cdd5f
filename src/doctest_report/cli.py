"""Render a report from an items JSON file.

Example:
  doctest-report --items run/items.json --name UserApiTest --output-dir target/doctests
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import build_renderer, load_config_from_env
from .items import DocItemError, doc_items_from_json

logger = logging.getLogger("doctest_report")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _setup_logging(level: str) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Render doc items into an HTML report")
    ap.add_argument("--items", type=Path, required=True, help="JSON file with an 'items' list")
    ap.add_argument("--name", required=True, help="Report name (output file stem)")
    ap.add_argument("--introduction", default=None)
    ap.add_argument("--output-dir", type=Path, default=None)
    ap.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None)
    args = ap.parse_args(argv)

    try:
        config = load_config_from_env(output_dir=args.output_dir)
    except RuntimeError as exc:
        _setup_logging(args.log_level or "INFO")
        logger.error("Invalid configuration: %s", exc)
        return 2
    _setup_logging(args.log_level or config.log_level)

    try:
        items = doc_items_from_json(args.items)
    except (OSError, DocItemError) as exc:
        logger.error("Cannot load doc items: %s", exc)
        return 2

    try:
        result = build_renderer(config).render(items, args.name, args.introduction)
    except (RuntimeError, ValueError) as exc:
        logger.error("Cannot render report: %s", exc)
        return 2
    if result is None:
        print(f"No doc items in {args.items}; nothing written.")
        return 0

    print(result.path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
