import logging
import sys

# Configure logging format
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

LOG_PREVIEW_LENGTH = 200
REDACTED = "***"

_configured_loggers: dict[str, logging.Logger] = {}


def setup_logger(name: str, level=logging.INFO) -> logging.Logger:
    """
    Sets up a logger with consistent formatting.

    Records go to stderr so that stdout only ever carries the
    confirmation line printed by the CLI.

    Args:
        name: Name of the logger (typically __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding handlers multiple times
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)

        formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
        console_handler.setFormatter(formatter)

        logger.addHandler(console_handler)
        # the root logger would print everything a second time
        logger.propagate = False

    _configured_loggers[name] = logger
    return logger


def set_log_level(level: int) -> None:
    """
    Re-levels every logger (and its handlers) created through setup_logger.
    """
    for logger in _configured_loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


def redact_token(text: str, token: str) -> str:
    """Replaces every occurrence of the bot token in text."""
    if not token:
        return text
    return text.replace(token, REDACTED)


def _preview(text: str) -> str:
    return f"{text[:LOG_PREVIEW_LENGTH]}{'...' if len(text) > LOG_PREVIEW_LENGTH else ''}"


def log_request_built(logger: logging.Logger, request, api_token: str):
    """
    Logs an outgoing bot API request without leaking the token.

    Args:
        logger: Logger instance to use
        request: The OutgoingRequest about to be dispatched
        api_token: Token to redact from the URL
    """
    logger.info(f"📤 {request.method.value} {redact_token(request.url, api_token)}")
    logger.debug(f"  Payload: {request.payload_kind.name}")
    if request.body is not None:
        logger.debug(f"  Body size: {len(request.body)} bytes")


def log_response_received(logger: logging.Logger, status_code: int, body: bytes):
    """
    Logs the response returned by the bot API.

    Args:
        logger: Logger instance to use
        status_code: HTTP status code
        body: Raw response body
    """
    logger.info(f"📥 Response - Status: {status_code}, {len(body)} bytes")
    logger.debug(f"  Body: {_preview(body.decode('utf-8', errors='replace'))}")
