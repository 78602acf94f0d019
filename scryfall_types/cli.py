"""Diagnostic CLI: validate saved or fetched API responses."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from scryfall_types.api_error import Error, parse_error
from scryfall_types.card import Card, parse_card
from scryfall_types.config import load_config
from scryfall_types.errors import (
    MalformedRecord,
    MissingContinuation,
    MissingRequiredField,
    ValidationError,
)
from scryfall_types.listing import (
    ELEMENT_PARSERS,
    ListPage,
    parse_any_list,
    parse_card_list,
    parse_set_list,
)
from scryfall_types.sets import Set, parse_set
from scryfall_types.transport import ApiError, HttpxTransport, paginate

console = Console()

PARSERS: Dict[str, Callable[[Any], Any]] = {
    "card": parse_card,
    "set": parse_set,
    "list": parse_any_list,
    "card-list": parse_card_list,
    "set-list": parse_set_list,
    "error": parse_error,
}


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Set up logging
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return

    args.func(args)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scryfall-types",
        description="Validate Scryfall API responses against the typed schema",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v info, -vv debug)",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to scryfall.yaml (default: scryfall.yaml)",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # check
    check_parser = subparsers.add_parser("check", help="Validate a saved JSON response")
    check_parser.add_argument("file", type=Path, help="JSON file to validate")
    check_parser.add_argument(
        "--kind",
        choices=sorted(PARSERS),
        default="card",
        help="Object kind stored in the file (default: card)",
    )
    check_parser.set_defaults(func=_cmd_check)

    # fetch
    fetch_parser = subparsers.add_parser(
        "fetch", help="Fetch a List from the API and validate every page"
    )
    fetch_parser.add_argument(
        "uri", help="List URI or API path, e.g. /cards/search?q=set:lea"
    )
    fetch_parser.add_argument(
        "--element",
        choices=sorted(ELEMENT_PARSERS),
        default="card",
        help="Element kind of the List (default: card)",
    )
    fetch_parser.add_argument(
        "--pages",
        type=int,
        default=1,
        help="Maximum number of pages to fetch (default: 1)",
    )
    fetch_parser.set_defaults(func=_cmd_fetch)

    return parser


# ------------------------------------------------------------------
# Command handlers
# ------------------------------------------------------------------


def _cmd_check(args: argparse.Namespace) -> None:
    path: Path = args.file
    if not path.exists():
        console.print(f"[red]File {path} does not exist[/red]")
        sys.exit(1)

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        console.print(f"[red]{path} is not valid JSON: {exc}[/red]")
        sys.exit(1)

    try:
        result = PARSERS[args.kind](raw)
    except ValidationError as exc:
        _print_failure(exc)
        sys.exit(1)

    _print_result(result)
    console.print(f"\n[green]{path}: valid {args.kind}[/green]")


def _cmd_fetch(args: argparse.Namespace) -> None:
    config = load_config(args.config)
    ok = asyncio.run(
        _run_fetch(HttpxTransport(config), args.uri, args.element, args.pages)
    )
    if not ok:
        sys.exit(1)


async def _run_fetch(
    transport: HttpxTransport, uri: str, element: str, pages: int
) -> bool:
    total = 0
    try:
        async for page in paginate(
            transport, uri, ELEMENT_PARSERS[element], max_pages=pages
        ):
            total += len(page)
            _print_result(page)
    except ValidationError as exc:
        _print_failure(exc)
        return False
    except ApiError as exc:
        _print_api_error(exc.error)
        return False
    finally:
        await transport.close()

    console.print(f"\n[green]Validated {total} {element} object(s)[/green]")
    return True


# ------------------------------------------------------------------
# Rendering
# ------------------------------------------------------------------


def _print_failure(exc: ValidationError) -> None:
    table = Table(title="Validation failure")
    table.add_column("Field", style="cyan")
    table.add_column("Problem", style="red")
    if isinstance(exc, MalformedRecord):
        table.add_row(exc.field, str(exc.cause))
    elif isinstance(exc, MissingRequiredField):
        table.add_row(exc.field, "missing")
    elif isinstance(exc, MissingContinuation):
        table.add_row("next_page", "has_more is true but next_page is missing")
    else:
        table.add_row("-", str(exc))
    console.print(table)


def _print_api_error(error: Error) -> None:
    console.print(f"[red]API error {error.status} ({error.code})[/red]: {error.details}")
    for warning in error.warnings or ():
        console.print(f"  [yellow]WARNING[/yellow] {warning}")


def _print_result(result: Any) -> None:
    if isinstance(result, ListPage):
        table = Table(title=f"List page ({len(result)} items)")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("has_more", str(result.has_more))
        table.add_row("next_page", str(result.next_page or "-"))
        table.add_row("total_cards", str(result.total_cards if result.total_cards is not None else "-"))
        console.print(table)
        for warning in result.warnings or ():
            console.print(f"  [yellow]WARNING[/yellow] {warning}")
    elif isinstance(result, Card):
        table = Table(title="Card")
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("name", result.name)
        table.add_row("set", result.set)
        table.add_row("rarity", result.rarity.value)
        table.add_row("layout", result.layout.value)
        table.add_row("released_at", result.released_at.isoformat())
        console.print(table)
    elif isinstance(result, Set):
        table = Table(title="Set")
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("code", result.code)
        table.add_row("name", result.name)
        table.add_row("set_type", result.set_type.value)
        table.add_row("card_count", str(result.card_count))
        console.print(table)
    elif isinstance(result, Error):
        _print_api_error(result)
