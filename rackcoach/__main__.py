"""Command-line entry point: `python -m rackcoach`.

Subcommands:
    solve  rank words for a rack and print reroll advice
    mcp    run the MCP server on stdio
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from . import config
from .core.dictionary import DictionaryLoadError, get_dictionary
from .logging_setup import configure_logging
from .service.commands import RackValidationError, solve_rack_command
from .service.schema import SolveRackRequest, SolveRackResponse


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rackcoach",
        description="Word recommendations and reroll advice for a letter rack.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="rank words for a rack")
    solve.add_argument("rack", help="rack letters, e.g. ABCDINT")
    solve.add_argument("-t", "--target", type=int, default=None, help="exact word length (2-15)")
    solve.add_argument(
        "-x", "--exclude", action="append", default=[], metavar="WORD",
        help="word to leave out (repeatable)",
    )
    solve.add_argument(
        "-b", "--bonus", action="append", default=[], metavar="CODE",
        help="bonus for the next word position: NONE, DL, TL, DW, TW (repeatable)",
    )
    solve.add_argument("-r", "--round", type=int, default=None, help="round 1-5 (default 1)")
    solve.add_argument("-n", "--limit", type=int, default=None, help="max recommendations")
    solve.add_argument("--json", action="store_true", help="print the raw JSON response")

    sub.add_parser("mcp", help="run the MCP server on stdio")
    return parser


def _print_response(console: Console, response: SolveRackResponse) -> None:
    words = Table(title=f"Rack {' '.join(response.rack_letters)} (round {response.round})")
    words.add_column("#", justify="right")
    words.add_column("Word")
    words.add_column("Score", justify="right")
    for idx, rec in enumerate(response.recommendations, start=1):
        words.add_row(str(idx), rec.word, str(rec.score))
    if response.recommendations:
        console.print(words)
    else:
        console.print("No playable words for this rack.")

    for suggestion in response.reroll_suggestions:
        console.rule(suggestion.target_word)
        console.print(f"Keep:   {' '.join(suggestion.keep_letters) or '-'}")
        console.print(f"Reroll: {' '.join(suggestion.reroll_letters) or '-'}")
        if suggestion.missing_letters:
            console.print(f"Fish for: {' '.join(suggestion.missing_letters)}")
        if suggestion.success_probability is not None:
            console.print(f"Success chance: {suggestion.success_probability:.0%}")
        for note in suggestion.notes:
            console.print(f"  • {note}")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "mcp":
        from .service.mcp_server import run_server

        run_server()
        return 0

    console = Console()
    try:
        if config.preload_dictionary():
            get_dictionary()
        request = SolveRackRequest(
            rack_letters=list(args.rack),
            target_word_length=args.target,
            invalid_words=args.exclude,
            rack_bonuses=args.bonus,
            round=args.round,
        )
        response = solve_rack_command(request, limit=args.limit)
    except RackValidationError as e:
        print(f"rackcoach: {e}", file=sys.stderr)
        return 2
    except DictionaryLoadError as e:
        print(f"rackcoach: dictionary unavailable: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(response.model_dump(), indent=2, ensure_ascii=False))
    else:
        _print_response(console, response)
    return 0


if __name__ == "__main__":
    sys.exit(main())
