"""CLI entry point for fontranges."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import Config, default_config, find_config, load_config
from .errors import FontRangesError
from .fetch import fetch_google_font_css, read_source
from .fontface import FamilyStats, analyze
from .ranges import count_range_code_points
from .report import format_summary, summarize, to_json

log = logging.getLogger(__name__)


def _load(config_path: Path | None) -> Config:
    path = config_path or find_config()
    if path is None:
        log.debug("No config file found, using defaults")
        return default_config()
    return load_config(path)


def _count_tokens(tokens: list[str]) -> int:
    failed = 0
    for token in tokens:
        try:
            print(f"{token}\t{count_range_code_points(token)}")
        except FontRangesError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            failed += 1
    return 1 if failed else 0


def _inputs(args: argparse.Namespace, config: Config) -> list[tuple[str, str]]:
    """(label, kind) pairs to analyze, in command-line order."""
    inputs = [(source, "source") for source in args.sources]
    inputs += [(family, "google") for family in args.google]
    if not inputs:
        inputs = [(family, "google") for family in config.google.families]
    return inputs


def _analyze_input(label: str, kind: str, config: Config) -> FamilyStats:
    if kind == "google":
        css = fetch_google_font_css(label, config)
    else:
        css = read_source(label, config)
    return analyze(css)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fontranges",
        description="Count unicode-range codepoints of @font-face rules per font family",
    )
    parser.add_argument(
        "sources",
        nargs="*",
        metavar="SOURCE",
        help="CSS file, http(s) URL, or '-' for stdin",
    )
    parser.add_argument(
        "--google", "-g",
        action="append",
        default=[],
        metavar="FAMILY",
        help="Analyze a Google Fonts family (repeatable)",
    )
    parser.add_argument(
        "--count",
        action="append",
        default=[],
        metavar="TOKEN",
        help="Print the codepoint count of a unicode-range token and exit (repeatable)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to fontranges.toml (default: ./fontranges.toml if present)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--chunks",
        action="store_true",
        help="List the codepoint count of every @font-face rule",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)",
    )

    args = parser.parse_args(argv)

    # Logging setup
    level = logging.WARNING
    if args.verbose >= 2:
        level = logging.DEBUG
    elif args.verbose >= 1:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)-8s %(name)s: %(message)s",
    )

    if args.count:
        return _count_tokens(args.count)

    try:
        config = _load(args.config)
    except FontRangesError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    inputs = _inputs(args, config)
    if not inputs:
        parser.error("no SOURCE or --google family given and none configured")

    results: dict[str, FamilyStats] = {}
    failed = 0
    for label, kind in inputs:
        try:
            stats = _analyze_input(label, kind, config)
        except FontRangesError as exc:
            print(f"Error: {label}: {exc}", file=sys.stderr)
            failed += 1
            continue
        results[label] = stats
        if not args.json:
            print(f"{label}:")
            print(format_summary(summarize(stats), show_chunks=args.chunks))

    if args.json:
        print(to_json(results))

    if failed:
        log.warning("%d of %d inputs failed", failed, len(inputs))
    return 1 if failed else 0
