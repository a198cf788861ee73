"""Console entry point: prompt for keywords and print ranked partners."""

import argparse
import json
import logging
import sys
from typing import Optional

from partner_finder.config import AppConfig, ConfigError, load_config, validate_config
from partner_finder.matching.matcher import search_with_status
from partner_finder.matching.models import SearchOutcome
from partner_finder.utils.logging_config import setup_logging
from partner_finder.utils.text_processing import parse_keywords

logger = logging.getLogger("partner_finder")

PROMPT = "Enter 1 or 2 keywords (separated by spaces): "


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Partner Finder - rank business partner profiles by keyword",
    )
    parser.add_argument(
        "keywords", nargs="*",
        help="Keywords to search for (prompted for when omitted)",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to YAML config file (default: built-in settings)",
    )
    parser.add_argument(
        "--data-file", default=None,
        help="Path to the JSON profile store (overrides config)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print results as JSON",
    )
    return parser.parse_args(argv)


def read_keywords(args: argparse.Namespace) -> list[str]:
    """Keywords from the command line, or one prompted line from stdin."""
    if args.keywords:
        return parse_keywords(" ".join(args.keywords))
    print(PROMPT, end="", flush=True)
    line = sys.stdin.readline()
    return parse_keywords(line)


def print_results(outcome: SearchOutcome, as_json: bool = False):
    """Print ranked results, or a no-results message."""
    if as_json:
        print(json.dumps([r.to_dict() for r in outcome.results], indent=2, ensure_ascii=False))
    elif not outcome.results:
        print("No results found.")
    else:
        print("\nSuitable business partners:")
        for result in outcome.results:
            print(f"{result.name} - Score: {result.score}")

    if outcome.store_failed:
        print(f"Warning: profile store could not be loaded ({outcome.load_error})", file=sys.stderr)
    elif not as_json:
        print(f"({outcome.records_loaded} profiles searched)")


def run_search(config: AppConfig, keywords: list[str]) -> SearchOutcome:
    logger.info("Searching %s for %s", config.store.data_file, keywords)
    return search_with_status(config.store.data_file, keywords)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    # Load config
    try:
        config = load_config(args.config)
    except (FileNotFoundError, ConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.data_file:
        config.store.data_file = args.data_file

    setup_logging(config.log_dir, config.log_level_value)

    for w in validate_config(config):
        logger.warning("Config: %s", w)

    keywords = read_keywords(args)
    outcome = run_search(config, keywords)
    print_results(outcome, as_json=args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
