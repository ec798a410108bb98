"""
Counter Command-Line Interface.

Usage:
    counters            # ephemeral session, nothing is written
    counters pushups    # load/save ./pushups.json
"""
import argparse
import sys
from pathlib import Path
from typing import Optional, List

from src.counters import __version__
from src.counters.application.session import CounterSession
from src.counters.infrastructure.cli.config import CounterCliConfig
from src.counters.infrastructure.errors import SetupError
from src.counters.infrastructure.json_repository import JsonSnapshotRepository
from src.counters.infrastructure.logging.counter_logger import (
    CounterLogger,
    create_counter_logger,
)
from src.counters.tui.app import run_tui


EXIT_OK = 0
EXIT_SETUP_ERROR = 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the counter CLI."""
    parser = argparse.ArgumentParser(
        prog="counters",
        description="Keep a list of named counters in your terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                # counters live only for this session
  %(prog)s pushups        # load and save ./pushups.json

Environment:
  COUNTERS_LOG_DIR        write logs to this directory
  COUNTERS_LOG_LEVEL      DEBUG, INFO, WARNING or ERROR (default: INFO)
  COUNTERS_JSON_LOGS      true for JSON log lines
        """,
    )

    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Snapshot name; the extension is normalised to .json",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = create_parser()
    return parser.parse_args(args)


def build_session(
    name: Optional[str],
    config: CounterCliConfig,
    logger: Optional[CounterLogger] = None,
    cwd: Optional[Path] = None,
) -> CounterSession:
    """
    Create the session for ``name``.

    Raises:
        SetupError: If the snapshot path cannot be resolved or an
            existing snapshot cannot be loaded
    """
    if name is None:
        return CounterSession.ephemeral(logger=logger)

    path = config.resolve_snapshot_path(name, cwd=cwd)
    return CounterSession.from_repository(JsonSnapshotRepository(path), logger=logger)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the counter TUI.

    Returns:
        Process exit code
    """
    args = parse_args(argv)
    config = CounterCliConfig.from_env()
    try:
        logger = create_counter_logger(
            "session",
            level=config.log_level,
            json_output=config.json_logs,
            log_dir=config.log_dir,
        )
    except OSError as e:
        print(f"Error: Couldn't open log directory {config.log_dir}: {e}", file=sys.stderr)
        return EXIT_SETUP_ERROR

    logger.debug("Effective configuration", **config.to_dict())

    try:
        session = build_session(args.name, config, logger=logger)
    except SetupError as e:
        logger.error("Setup failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SETUP_ERROR

    message = run_tui(session)
    if message:
        print(message)
    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
