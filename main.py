"""CLI entrypoint: print a paper abstract, or its summary, from a web page."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from errors import ErrorKind, GistError
from models import PipelineOutput
from pipeline import run_pipeline

__version__ = "0.1.0"

LOGGER = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(
        prog="gist",
        description="Fetch a scientific abstract from a web page and optionally summarize it",
    )
    parser.add_argument("-u", "--url", required=True, help="Page containing an element with class 'abstract'")
    parser.add_argument(
        "-s",
        "--short",
        action="store_true",
        help="Print a summary from the remote summarization service instead of the full abstract",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def _log_level() -> int:
    """Level from GIST_LOG_LEVEL (e.g. DEBUG); unknown names fall back to INFO."""
    level = logging.getLevelName(os.getenv("GIST_LOG_LEVEL", "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def write_output(output: PipelineOutput) -> None:
    """Write the labelled result to stdout."""
    try:
        sys.stdout.write(output.render())
        sys.stdout.flush()
    except OSError as exc:
        raise GistError(ErrorKind.IO_FAILURE, cause=exc) from exc


def main(argv: list[str] | None = None) -> int:
    """Initialize config, run the pipeline once and return the exit status."""
    load_dotenv()
    logging.basicConfig(
        level=_log_level(),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    args = parse_args(argv)

    LOGGER.info("Application started")
    LOGGER.info("URL: %s, Short mode: %s", args.url, args.short)

    try:
        output = run_pipeline(args.url, short=args.short)
        write_output(output)
    except GistError as exc:
        LOGGER.error("Run failed (%s): %s", exc.kind.value, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    LOGGER.info("Application completed successfully")
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
