"""
Loads the endpoint configuration from an INI file.

The file has a single default section, either under an explicit
[DEFAULT] header or with no header at all:

    basic = https://api.telegram.org/bot
    api_key = 123456:ABC-DEF
    recipient = 987654321
"""

import configparser
from pathlib import Path

from telly.errors import ConfigLoadError, MissingConfigValue
from telly.models import EndpointConfig
from util.constants import (
    CONFIG_KEY_API_TOKEN,
    CONFIG_KEY_BASE_URL,
    CONFIG_KEY_RECIPIENT,
    REQUIRED_CONFIG_KEYS,
)
from util.logging_util import setup_logger

logger = setup_logger(__name__)


def _read_default_section(config_path: Path) -> dict[str, str]:
    try:
        text = config_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(config_path, str(e)) from e

    # interpolation off: tokens and URLs may legitimately contain '%'
    parser = configparser.ConfigParser(interpolation=None)
    try:
        # keys before any header land in DEFAULT; a later [DEFAULT] header merges in
        parser.read_string(f"[{parser.default_section}]\n{text}", source=str(config_path))
    except configparser.Error as e:
        raise ConfigLoadError(config_path, str(e)) from e

    return dict(parser.defaults())


def load_endpoint_config(config_path) -> EndpointConfig:
    """
    Reads basic, api_key and recipient from the config file.

    Raises ConfigLoadError if the file can't be read or parsed, and
    MissingConfigValue naming the first required key that is absent or empty.
    """
    config_path = Path(config_path)
    values = _read_default_section(config_path)

    for key in REQUIRED_CONFIG_KEYS:
        if not values.get(key, "").strip():
            raise MissingConfigValue(key)

    logger.debug(f"Loaded configuration from {config_path}")

    return EndpointConfig(
        base_url=values[CONFIG_KEY_BASE_URL].strip(),
        api_token=values[CONFIG_KEY_API_TOKEN].strip(),
        recipient_id=values[CONFIG_KEY_RECIPIENT].strip(),
    )
