#!/usr/bin/env python3
"""
Entrypoint for sending a one-off bot message.

Usage:
    python send_message.py config.ini "Your message here"
    python send_message.py config.ini "Caption" --file report.pdf

Or import and use programmatically:
    from send_message import notify
    notify("config.ini", "Task completed!")
"""
import sys

from telly.cli import main
from telly.config import load_endpoint_config
from telly.dispatcher import send
from telly.models import intent_from_args


def notify(config_path, message: str, file_path=None) -> str:
    """Send a message (and optionally a file) using the given config file."""
    config = load_endpoint_config(config_path)
    return send(config, intent_from_args(message, file_path))


if __name__ == "__main__":
    sys.exit(main())
