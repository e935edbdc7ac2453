"""Command-line entry point for the software catalog API.

Examples:
    swcatalog list-software --limit 10
    swcatalog list-publishers --code-hostings
    swcatalog show-publisher 2ce5a0a7-4e0e-4fa5-9b1f-5e4b1fbc8dd0
    swcatalog create-publisher '{"description": "ACME", "codeHosting": [...]}'
    swcatalog --profile local -vv logs
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from .client import LOGS, PUBLISHERS, SOFTWARE, CatalogClient, parse_body
from .display import (
    format_json,
    format_publisher,
    format_software,
    record_rows,
    render_table,
)
from .errors import CatalogError
from .models import Publisher, Software
from .profiles import DEFAULT_PROFILE
from .utils.env import load_env_file_if_present

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected zero or a positive integer, got {value}")
    return number


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def _emit(lines: list[str], limit: int) -> None:
    for line in lines[:limit] if limit else lines:
        print(line)


def _emit_records(records: list[Any], lines: list[str], args: argparse.Namespace) -> None:
    if args.table:
        table = render_table(record_rows(records), limit=args.limit)
        if table:
            print(table)
    else:
        _emit(lines, args.limit)


def cmd_create_publisher(client: CatalogClient, args: argparse.Namespace) -> int:
    body = parse_body(args.data)
    print(format_json(client.create(PUBLISHERS, body)))
    return 0


def cmd_create_software(client: CatalogClient, args: argparse.Namespace) -> int:
    body = parse_body(args.data)
    print(format_json(client.create(SOFTWARE, body)))
    return 0


def cmd_update_software(client: CatalogClient, args: argparse.Namespace) -> int:
    body = parse_body(args.data)
    print(format_json(client.update(SOFTWARE, args.software_id, body)))
    return 0


def cmd_list_software(client: CatalogClient, args: argparse.Namespace) -> int:
    records = [Software.from_json(item) for item in client.get_paginated(SOFTWARE)]
    lines = [format_software(s, client.api_url) for s in records]
    _emit_records(records, lines, args)
    return 0


def cmd_list_publishers(client: CatalogClient, args: argparse.Namespace) -> int:
    items = client.get_paginated(PUBLISHERS)
    if args.code_hostings:
        hostings: list[Any] = []
        for publisher in items:
            entries = publisher.get("codeHosting") if isinstance(publisher, dict) else None
            if isinstance(entries, list):
                hostings.extend(entries)
        if args.table:
            table = render_table(hostings, limit=args.limit)
            if table:
                print(table)
        else:
            _emit([format_json(h) for h in hostings], args.limit)
        return 0

    records = [Publisher.from_json(item) for item in items]
    lines = [format_publisher(p, client.api_url) for p in records]
    _emit_records(records, lines, args)
    return 0


def cmd_show_software(client: CatalogClient, args: argparse.Namespace) -> int:
    software = Software.from_json(client.fetch_by_id(SOFTWARE, args.software_id))
    print(format_software(software, client.api_url))
    return 0


def cmd_show_publisher(client: CatalogClient, args: argparse.Namespace) -> int:
    publisher = Publisher.from_json(client.fetch_by_id(PUBLISHERS, args.publisher_id))
    print(format_publisher(publisher, client.api_url))
    return 0


def cmd_logs(client: CatalogClient, args: argparse.Namespace) -> int:
    entries = client.get_paginated(LOGS)
    if args.table:
        table = render_table(entries, limit=args.limit)
        if table:
            print(table)
    else:
        _emit([format_json(entry) for entry in entries], args.limit)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swcatalog",
        description="Client for the software catalog API (publishers, software, logs)",
    )
    parser.add_argument(
        "--profile",
        default=DEFAULT_PROFILE,
        help="API profile from swcatalog.api_profiles (default: %(default)s)",
    )
    parser.add_argument("--api-url", dest="api_url", default=None, help="Override the profile's API root")
    parser.add_argument(
        "--max-pages",
        dest="max_pages",
        type=_positive_int,
        default=None,
        help="Fail listings that need more than this many pages",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Log progress (-vv for HTTP details)"
    )

    listing = argparse.ArgumentParser(add_help=False)
    listing.add_argument("--table", action="store_true", help="Render records as a table")
    listing.add_argument("--limit", type=_non_negative_int, default=0, help="Rows to display (0: all)")

    sub = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    p = sub.add_parser("create-publisher", help="Create a publisher from a JSON body")
    p.add_argument("data", help="Publisher JSON")
    p.set_defaults(handler=cmd_create_publisher)

    p = sub.add_parser("create-software", help="Create a software record from a JSON body")
    p.add_argument("data", help="Software JSON")
    p.set_defaults(handler=cmd_create_software)

    p = sub.add_parser("update-software", help="Patch a software record")
    p.add_argument("software_id")
    p.add_argument("data", help="JSON with the fields to change")
    p.set_defaults(handler=cmd_update_software)

    p = sub.add_parser("list-software", parents=[listing], help="List every software record")
    p.set_defaults(handler=cmd_list_software)

    p = sub.add_parser("list-publishers", parents=[listing], help="List every publisher")
    p.add_argument(
        "--code-hostings",
        dest="code_hostings",
        action="store_true",
        help="Print the publishers' code hosting entries instead",
    )
    p.set_defaults(handler=cmd_list_publishers)

    p = sub.add_parser("show-software", help="Show one software record")
    p.add_argument("software_id")
    p.set_defaults(handler=cmd_show_software)

    p = sub.add_parser("show-publisher", help="Show one publisher")
    p.add_argument("publisher_id")
    p.set_defaults(handler=cmd_show_publisher)

    p = sub.add_parser("logs", parents=[listing], help="Print every log entry")
    p.set_defaults(handler=cmd_logs)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=_log_level(args.verbose), format=LOG_FORMAT)

    load_env_file_if_present()
    try:
        with CatalogClient.from_env(
            profile=args.profile, api_url=args.api_url, max_pages=args.max_pages
        ) as client:
            return args.handler(client, args)
    except CatalogError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
