#!/usr/bin/env python3
"""
Main entry point for QuickFetch.
"""

import os
import sys
import argparse
import logging

from .modules import get_all_modules
from .ui.report import ReportGenerator

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("quickfetch")


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(prog="quickfetch", description="System Information Tool")
    parser.add_argument("--experimental", action="store_true",
                        help="Display with artwork similar to Neofetch")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log probe failures to stderr")
    parser.add_argument("--version", action="store_true", help="Show version information")
    return parser.parse_args(argv)


def setup_logging(verbose: bool):
    """Configure logging; output stays on stderr so it never mixes with the summary."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT
    )


def show_version():
    """Show version information."""
    from . import __version__
    print(f"QuickFetch {__version__}")


def main(argv=None):
    """Main function."""
    args = parse_arguments(argv)

    if args.version:
        show_version()
        return 0

    setup_logging(args.verbose)

    modules = get_all_modules()
    report_gen = ReportGenerator(modules)

    logger.debug("Collecting system information...")
    info = report_gen.collect()

    try:
        print(report_gen.generate(info, experimental=args.experimental))
        sys.stdout.flush()
    except BrokenPipeError:
        logger.debug("Output pipe closed before the summary was written")
        # stdout goes to devnull for the flush at interpreter exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        os.close(devnull)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
