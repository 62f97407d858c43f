"""CLI entrypoint for glabcidoc.

Parses one or more GitLab CI files, merges their jobs (later files override
earlier ones) and prints the markdown documentation of the selected jobs.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pprint import pformat
from typing import List, Optional

from glabcidoc import __version__
from glabcidoc.config import DocgenConfig, merge_keywords
from glabcidoc.discovery import JobAggregator
from glabcidoc.errors import ConfigError, GlabCiDocError
from glabcidoc.generator import MarkdownGenerator
from glabcidoc.parsers import parse_file

logger = logging.getLogger(__name__)

MESSAGE_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the CLI.

    Notices, warnings and errors go to stderr so that stdout only carries the
    generated markdown.
    """
    package_logger = logging.getLogger("glabcidoc")
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT if debug else MESSAGE_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glabcidoc",
        description="Generate markdown documentation from GitLab CI job doc comments",
    )
    parser.add_argument(
        "files",
        nargs="+",
        metavar="FILE",
        help="YAML files",
    )
    parser.add_argument(
        "-H", "--only-hidden",
        action="store_true",
        help="Only consider hidden jobs (i.e. the ones used as templates)",
    )
    parser.add_argument(
        "-d", "--only-documented",
        action="store_true",
        help="Only consider documented jobs",
    )
    parser.add_argument(
        "-w", "--no-warn",
        dest="warn",
        action="store_false",
        help="Do not warn about missing documentation for jobs",
    )
    parser.add_argument(
        "-k", "--global-keyword",
        dest="global_keywords",
        action="append",
        default=[],
        metavar="KEY",
        help="Additional top-level key that is not a job (repeatable)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def load_config(args: argparse.Namespace) -> DocgenConfig:
    """Build the run configuration from the environment and CLI arguments."""
    config = DocgenConfig.from_env(
        only_hidden=args.only_hidden,
        only_documented=args.only_documented,
        warn=args.warn,
    )
    if args.debug:
        config.debug = True
    config.global_keywords = merge_keywords(config.global_keywords, args.global_keywords)
    return config


def cmd_generate(config: DocgenConfig, files: List[str]) -> int:
    """Generate the markdown documentation for the given files.

    Args:
        config: Run configuration.
        files: CI configuration files, in override order.

    Returns:
        Exit code (0 for success).
    """
    aggregator = JobAggregator(config)

    try:
        for path in files:
            aggregator.add(parse_file(path, config.global_keywords))
    except GlabCiDocError as e:
        logger.error("Error: %s", e)
        return 1

    logger.debug("Merged jobs:\n%s", pformat(aggregator.merged()))

    jobs = aggregator.select()
    aggregator.warn_undocumented(jobs)

    if not jobs:
        logger.info("Nothing to generate")
        return 0

    print(MarkdownGenerator().render(jobs))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint.

    Returns:
        Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ConfigError as e:
        setup_logging()
        logger.error("Error: %s", e)
        return 2

    setup_logging(config.debug)
    logger.debug("Configuration:\n%s", pformat(config))

    return cmd_generate(config, args.files)


if __name__ == "__main__":
    sys.exit(main())
