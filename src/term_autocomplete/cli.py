"""Command-line query loop for weighted prefix autocompletion."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
import logging
from pathlib import Path
import sys
from typing import TextIO

import orjson
from pydantic import ValidationError

from term_autocomplete.config import Settings
from term_autocomplete.observability.logging import configure_logging
from term_autocomplete.observability.metrics import get_metrics
from term_autocomplete.search.models import MalformedInputError
from term_autocomplete.service import AutocompleteService


logger = logging.getLogger(__name__)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-autocomplete",
        description="Complete prefixes against a weighted dictionary, heaviest terms first",
    )
    parser.add_argument(
        "dictionary",
        nargs="?",
        type=Path,
        help="Dictionary file: an entry count, then '<weight> <text>' lines (defaults to DICTIONARY_PATH)",
    )
    parser.add_argument(
        "-q",
        "--query",
        dest="queries",
        action="append",
        metavar="PREFIX",
        help="Prefix to complete; repeatable. Without it prefixes are read from stdin, one per line",
    )
    parser.add_argument(
        "-k",
        "--limit",
        type=int,
        help="Maximum suggestions per prefix (defaults to RESULT_LIMIT, otherwise all matches)",
    )
    parser.add_argument(
        "--log-level",
        help="Override LOG_LEVEL for this run",
    )
    parser.add_argument(
        "--plain-logs",
        action="store_true",
        help="Write human-readable log lines instead of JSON",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Print Prometheus metrics after answering all prefixes",
    )
    return parser


def _validate_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.limit is not None and args.limit < 0:
        parser.error("--limit must be >= 0")


def _collect_overrides(args: argparse.Namespace) -> dict[str, object]:
    overrides: dict[str, object] = {}
    if args.dictionary is not None:
        overrides["dictionary_path"] = str(args.dictionary)
    if args.limit is not None:
        overrides["result_limit"] = args.limit
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.plain_logs:
        overrides["log_json"] = False
    return overrides


def _iter_prefixes(queries: Sequence[str] | None, stream: TextIO) -> Iterable[str]:
    if queries:
        yield from queries
        return
    for line in stream:
        yield line.rstrip("\r\n")


def _clean_prefix(prefix: str) -> str:
    """Replace lone surrogates (undecodable argv or stdin bytes) with U+FFFD."""
    return prefix.encode("utf-8", errors="surrogatepass").decode("utf-8", errors="replace")


def run_queries(service: AutocompleteService, prefixes: Iterable[str], out: TextIO) -> int:
    """Answer each prefix with one JSON line on ``out``; return the number answered."""
    answered = 0
    for raw_prefix in prefixes:
        prefix = _clean_prefix(raw_prefix)
        if prefix != raw_prefix:
            logger.warning("Prefix is not valid UTF-8; undecodable bytes replaced", extra={"prefix": prefix})
        response = service.complete(prefix)
        out.write(orjson.dumps(response.model_dump(mode="json")).decode("utf-8") + "\n")
        out.flush()
        answered += 1
    return answered


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    _validate_args(parser, args)

    try:
        settings = Settings(**_collect_overrides(args))
    except ValidationError as exc:
        configure_logging("INFO", json_output=not args.plain_logs)
        logger.error("Invalid configuration: %s", exc)
        return 1

    configure_logging(settings.get_log_level(), json_output=settings.log_json)

    try:
        service = AutocompleteService.from_settings(settings)
    except FileNotFoundError as exc:
        logger.error("Dictionary not found: %s", exc)
        return 1
    except MalformedInputError as exc:
        logger.error("Malformed dictionary: %s", exc)
        return 1
    except (OSError, ValueError) as exc:
        logger.error("Cannot load dictionary: %s", exc)
        return 1

    answered = run_queries(service, _iter_prefixes(args.queries, sys.stdin), sys.stdout)
    logger.info("Answered %d prefixes", answered)

    if args.metrics:
        sys.stdout.write(get_metrics().decode("utf-8"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
