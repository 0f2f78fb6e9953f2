"""Command line entry point running the app under uvicorn."""

import argparse
import logging

import uvicorn

from .config import settings
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="stick-it", description="Run the Stick It server.")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument(
        "--reset",
        action="store_true",
        default=settings.reset_database,
        help="drop and recreate every table on startup",
    )
    parser.add_argument("--log-dir", default=settings.log_dir)
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    log_file = setup_logging(args.log_dir, settings.log_level)
    settings.reset_database = args.reset
    logger.info("starting server on %s:%s, logging to %s", args.host, args.port, log_file)
    uvicorn.run("stickit.api:app", host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
