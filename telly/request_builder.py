"""
Turns an endpoint configuration and a send intent into the exact HTTP
request the bot API expects.
"""

from urllib.parse import quote

import requests

from telly.errors import FileReadError, FormConstructionError, MessageEncodingError, TransportError
from telly.models import (
    DocumentMessage,
    EndpointConfig,
    HttpMethod,
    OutgoingRequest,
    SendIntent,
    TextMessage,
)
from util.logging_util import log_request_built, setup_logger

logger = setup_logger(__name__)


def percent_encode(text: str) -> str:
    """
    Percent-encodes text as UTF-8, leaving only A-Z a-z 0-9 - _ . ~ literal.
    Spaces become %20, never '+'.
    """
    return quote(text, safe="")


def get_method_url(config: EndpointConfig, api_method: str) -> str:
    return f"{config.api_root}/{api_method}?chat_id={config.recipient_id}"


def build_text_request(config: EndpointConfig, message: TextMessage) -> OutgoingRequest:
    try:
        text = percent_encode(message.body)
    except UnicodeEncodeError as e:
        # lone surrogates, e.g. undecodable bytes smuggled in through sys.argv
        raise MessageEncodingError(str(e)) from e
    url = f"{get_method_url(config, message.api_method)}&text={text}"
    return OutgoingRequest(url=url, method=HttpMethod.GET, intent=message)


def build_document_request(config: EndpointConfig, message: DocumentMessage) -> OutgoingRequest:
    """
    Builds a multipart POST with a `document` part holding the file's bytes
    under its original name, plus a verbatim `caption` part if there is text.
    """
    url = get_method_url(config, message.api_method)
    file_path = message.file_path

    if file_path.is_dir():
        raise FileReadError(file_path, "is a directory")
    try:
        handle = open(file_path, "rb")
    except OSError as e:
        raise FileReadError(file_path, e.strerror or str(e)) from e

    fields = {}
    if message.caption is not None:
        fields["caption"] = message.caption

    with handle:
        try:
            prepared = requests.Request(
                HttpMethod.POST.value,
                url,
                data=fields,
                files={"document": (file_path.name, handle)},
            ).prepare()
        except requests.exceptions.RequestException as e:
            # a malformed base URL fails the same way on both paths
            raise TransportError(str(e)) from e
        except (OSError, ValueError) as e:
            raise FormConstructionError(str(e)) from e

    return OutgoingRequest(
        url=url,
        method=HttpMethod.POST,
        intent=message,
        body=prepared.body,
        headers={"Content-Type": prepared.headers["Content-Type"]},
    )


def build_request(config: EndpointConfig, intent: SendIntent) -> OutgoingRequest:
    """
    Builds the request for either kind of send intent.

    Text messages need no I/O. Document messages read the file and raise
    FileReadError or FormConstructionError before anything touches the network.
    """
    if isinstance(intent, TextMessage):
        request = build_text_request(config, intent)
    elif isinstance(intent, DocumentMessage):
        request = build_document_request(config, intent)
    else:
        raise TypeError(f"Unsupported send intent: {type(intent).__name__}")

    log_request_built(logger, request, config.api_token)
    return request
