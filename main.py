#!/usr/bin/env python3
"""
Patchnotes - changelog scraper

Main entry point. Fetches changelog documents, extracts their change records,
reconciles tag casing against the archive and prints the change log as JSON.
"""

import logging
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from bs4 import BeautifulSoup

from patchnotes import __version__
from patchnotes.config import ConfigManager, get_config
from patchnotes.errors import PatchNotesError
from patchnotes.fetcher import PageFetcher
from patchnotes.pipeline import finalize, run_pipeline, scrape_document
from patchnotes.tags import TagRules, read_archive_tags


def setup_logging(config: ConfigManager, verbose: int = 0):
    """Configure logging for the application."""
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = getattr(logging, str(config.get("logging.level", "INFO")).upper())
    format_str = config.get("logging.format", "%(asctime)s - %(levelname)s - %(message)s")

    # stdout carries the JSON output
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_filename:
        handlers.append(logging.FileHandler(config.log_filename))

    logging.basicConfig(level=level, format=format_str, handlers=handlers, force=True)


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Patchnotes - turn changelog pages into tagged change records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                    # Scrape every article linked from the index page
  python main.py https://example.com/news/1/hotfixes-january-24-2023
  python main.py --html saved.html --url https://example.com/news/1/hotfixes-january-24-2023
  python main.py --output site/changes.json -v
        """
    )

    parser.add_argument(
        "urls",
        nargs="*",
        help="Article URLs to scrape (default: discover from the index page)"
    )

    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to the configuration file (default: config.yaml)"
    )

    parser.add_argument(
        "--index-url",
        help="Index page listing the articles (overrides configuration)"
    )

    parser.add_argument(
        "--html",
        type=Path,
        help="Read a saved article from this file instead of fetching"
    )

    parser.add_argument(
        "--url",
        help="URL the saved article was published at (required with --html)"
    )

    parser.add_argument(
        "--archive-dir",
        help="Directory of earlier change logs used to seed tag casing"
    )

    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Write the change log to this file instead of stdout"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds allowed for fetching the whole batch"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Patchnotes {__version__}"
    )

    args = parser.parse_args(argv)
    if args.html and not args.url:
        parser.error("--url is required with --html")
    return args


def run(args, config: ConfigManager) -> str:
    """Run the pipeline for the parsed arguments and return the JSON change log."""
    rules = TagRules.from_config(config)
    archive_dir = args.archive_dir or config.archive_directory

    if args.html:
        with open(args.html, 'r', encoding='utf-8') as f:
            soup = BeautifulSoup(f.read(), "lxml")
        changes = scrape_document(soup, args.url, config, rules)
        change_log = finalize(changes, rules, read_archive_tags(archive_dir))
    else:
        timeout = args.timeout if args.timeout is not None else config.fetch_timeout
        with PageFetcher(timeout=timeout, user_agent=config.user_agent) as fetcher:
            change_log = run_pipeline(args.urls, config, rules, fetcher, archive_dir=archive_dir)

    return change_log.to_json()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    config = get_config(args.config)
    if args.index_url:
        config.set("index.url", args.index_url)
    setup_logging(config, args.verbose)

    try:
        output = run(args, config)
    except PatchNotesError as e:
        logging.error(f"Scrape failed: {e}")
        return 1

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output + "\n")
        logging.info(f"Change log written to {args.output}")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
