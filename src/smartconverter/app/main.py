"""
Run with: python -m smartconverter
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from smartconverter.app.application import create_app
from smartconverter.app.ui.main_window import MainWindow
from smartconverter.logging_config import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="smartconverter", description="Unit converter")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    # Qt consumes its own options (-style, -platform, ...)
    args, _ = parser.parse_known_args(argv)
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    handlers = setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)
    logger.info(f"Starting with {len(handlers)} log handler(s)")

    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
