"""
Data models for a single send.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union
from urllib.parse import parse_qs, urlsplit

from util.constants import SEND_DOCUMENT_METHOD, SEND_MESSAGE_METHOD, SUCCESS_STATUS_CODE


@dataclass(frozen=True)
class EndpointConfig:
    """
    Where every request is addressed.

    base_url and api_token are joined verbatim, so base_url has to end
    exactly where the token starts, e.g. "https://api.telegram.org/bot".
    """
    base_url: str
    api_token: str
    recipient_id: str

    @property
    def api_root(self) -> str:
        return f"{self.base_url}{self.api_token}"


@dataclass(frozen=True)
class TextMessage:
    body: str

    api_method = SEND_MESSAGE_METHOD
    description = "Message"


@dataclass(frozen=True)
class DocumentMessage:
    body: str
    file_path: Path

    api_method = SEND_DOCUMENT_METHOD
    description = "Message with file"

    @property
    def caption(self) -> Optional[str]:
        """The caption part, or None when there is no text to send."""
        return self.body or None


SendIntent = Union[TextMessage, DocumentMessage]


def intent_from_args(message: str, file_path: Optional[Path] = None) -> SendIntent:
    """Picks the variant from whether a file was given."""
    if file_path is None:
        return TextMessage(body=message)
    return DocumentMessage(body=message, file_path=Path(file_path))


class HttpMethod(Enum):
    GET = "GET"
    POST = "POST"


class PayloadKind(Enum):
    NONE = "none"
    URLENCODED_QUERY = "urlencoded-query"
    MULTIPART_FORM = "multipart-form"


@dataclass
class OutgoingRequest:
    url: str
    method: HttpMethod
    intent: SendIntent
    body: Optional[bytes] = None
    headers: dict = field(default_factory=dict)

    @property
    def payload_kind(self) -> PayloadKind:
        if self.body is not None:
            return PayloadKind.MULTIPART_FORM
        if "text" in parse_qs(urlsplit(self.url).query, keep_blank_values=True):
            return PayloadKind.URLENCODED_QUERY
        return PayloadKind.NONE


@dataclass
class ResponseOutcome:
    status_code: int
    body: bytes

    @property
    def ok(self) -> bool:
        return self.status_code == SUCCESS_STATUS_CODE

    @property
    def body_text(self) -> str:
        return self.body.decode("utf-8", errors="replace")
