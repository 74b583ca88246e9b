"""Entry point for python -m pmdr."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .driver import Driver, Notifier
from .log import setup_logging
from .notifications import Notification
from .ui import run_ui

logger = logging.getLogger(f"{__package__}.__main__")


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="pmdr",
        description="Terminal Pomodoro timer: 25 minutes of work, then a break",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls:
  Space    Play/Pause
  s        Stop (press again to reset the tally)
  q        Quit

Every 4th completed work interval earns a 15-minute break instead of 5.
When a break ends the timer pauses until you press Play.
""",
    )

    parser.add_argument(
        "--no-notify",
        action="store_true",
        help="Disable notifications (bell and system)",
    )
    parser.add_argument(
        "--no-bell",
        action="store_true",
        help="Keep system notifications but skip the terminal bell",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="PATH",
        help="Write logs to PATH instead of the Textual devtools console",
    )

    return parser.parse_args(argv)


def build_notifier(args: argparse.Namespace) -> Optional[Notifier]:
    """Build the driver's notification callback from the CLI switches."""
    if args.no_notify:
        return None

    return Notification(bell=not args.no_bell).update


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    driver = Driver(notifier=build_notifier(args))
    logger.info("Starting PMDR")

    try:
        run_ui(driver)
    except KeyboardInterrupt:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
