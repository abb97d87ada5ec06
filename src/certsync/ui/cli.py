from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from certsync.adapters.sqlalchemy.unit_of_work import startup
from certsync.app import reconcile_all
from certsync.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Keep certifications in sync with their contacts",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log per-record propagation decisions",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create the database tables")

    reconcile = subparsers.add_parser(
        "reconcile",
        help="Align every stored certification with its contact",
    )
    reconcile.add_argument(
        "--batch-size",
        type=int,
        default=None,
        help="Number of certifications to check per commit (defaults to config)",
    )

    return parser.parse_args(list(argv))


def _validate(args: argparse.Namespace) -> None:
    if args.command == "reconcile" and args.batch_size is not None and args.batch_size <= 0:
        raise ValueError("Batch size must be positive")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        _validate(parsed_args)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "init-db":
            startup()
            log.info("Database initialised")
        elif parsed_args.command == "reconcile":
            startup()
            result = reconcile_all(batch_size=parsed_args.batch_size)
            log.info(
                "Reconcile finished: examined=%s, patched=%s, unresolved=%s",
                result.examined,
                result.patched,
                result.unresolved,
            )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during sync")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
