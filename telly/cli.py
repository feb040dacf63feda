"""
Command line entrypoint.

Usage:
    telly config.ini "Your message here"
    telly config.ini "Nightly report" --file report.pdf
"""
import argparse
import logging
import sys
from pathlib import Path

from telly.config import load_endpoint_config
from telly.dispatcher import send
from telly.errors import TellyError
from telly.models import intent_from_args
from util.logging_util import set_log_level, setup_logger

logger = setup_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="telly",
        description="Send a message, or a file with a caption, to a fixed recipient through a bot API",
    )
    parser.add_argument(
        "config",
        type=Path,
        help="Path to the INI file holding basic, api_key and recipient"
    )
    parser.add_argument(
        "message",
        help="Message to send"
    )
    parser.add_argument(
        "-f", "--file",
        type=Path,
        metavar="PATH",
        help="Optional file to send as a document, with the message as caption"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log request details at debug level"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    try:
        config = load_endpoint_config(args.config)
        confirmation = send(config, intent_from_args(args.message, args.file))
    except TellyError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(confirmation)
    return 0


if __name__ == "__main__":
    sys.exit(main())
