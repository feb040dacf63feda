"""
Errors raised while sending a message. None of them are retried; each
carries enough context to diagnose the failure without re-running.
"""

from pathlib import Path


class TellyError(Exception):
    """Base class for every failure of a send."""


class ConfigLoadError(TellyError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load configuration from {path}: {reason}")


class MissingConfigValue(TellyError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Missing '{key}' configuration value")


class FileReadError(TellyError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read file {path}: {reason}")


class FormConstructionError(TellyError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Could not build multipart form: {reason}")


class ApiRejection(TellyError):
    """The bot API answered with anything other than 200."""

    def __init__(self, status_code: int, body_text: str):
        self.status_code = status_code
        self.body_text = body_text
        super().__init__(f"Failed to send message: HTTP {status_code}: {body_text}")


class TransportError(TellyError):
    """DNS, connection, TLS or timeout failure before a response arrived."""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Failed to send message: {cause}")


class MessageEncodingError(TellyError):
    """The message text has characters that can't be sent as UTF-8."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Message text is not valid UTF-8: {reason}")
