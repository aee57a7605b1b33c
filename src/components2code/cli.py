"""Command-line entry point: render a snapshot JSON file as component markup.

Usage::

    components2code design.json --prefix U
    components2code design.json --json --output tree.json
    cat design.json | components2code -
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from components2code.config import DEFAULT_PREFIX, GeneratorConfig
from components2code.errors import Components2CodeError
from components2code.generator import MarkupGenerator
from components2code.hosts.snapshot import SnapshotHost

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="components2code",
        description="Compile exported design nodes into component markup",
    )
    parser.add_argument(
        "snapshot",
        help="Snapshot JSON file exported from the design tool ('-' for stdin)",
    )
    parser.add_argument(
        "--prefix",
        default=DEFAULT_PREFIX,
        help=f"Component tag prefix (default: {DEFAULT_PREFIX})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the filtered node tree as JSON instead of markup",
    )
    parser.add_argument(
        "--wrap-attributes",
        type=int,
        default=None,
        metavar="N",
        help="Put attributes on their own lines when a tag has more than N",
    )
    parser.add_argument(
        "--keep-empty-containers",
        action="store_true",
        help="Keep container elements that have no kept children",
    )
    parser.add_argument(
        "--no-match-prefix",
        action="store_true",
        help="Keep components whose names do not start with the prefix",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the result to this file instead of stdout",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def _load_host(source: str) -> SnapshotHost:
    if source == "-":
        return SnapshotHost.from_document(json.load(sys.stdin))
    return SnapshotHost.from_file(source)


async def _run(args: argparse.Namespace) -> str:
    config = GeneratorConfig(
        prefix=args.prefix,
        match_prefix=not args.no_match_prefix,
        max_inline_attributes=args.wrap_attributes,
        keep_empty_containers=args.keep_empty_containers,
    )
    host = _load_host(args.snapshot)
    generator = MarkupGenerator(host, config=config)
    roots = host.current_selection()
    if args.json:
        data = await generator.generate_json(roots)
        return json.dumps(data, ensure_ascii=False, indent=2)
    result = await generator.generate(roots)
    return result.markup


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        output = asyncio.run(_run(args))
        if args.output:
            Path(args.output).write_text(output + "\n", encoding="utf-8")
            logger.info("Wrote %s", args.output)
        else:
            print(output)
    except (Components2CodeError, OSError, TypeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
