"""
Executes a built request against the bot API and decides whether it worked.

One attempt, no retries: sending the same intent twice sends two messages.
"""

from enum import Enum
from typing import Optional

import requests

from telly.errors import ApiRejection, TransportError
from telly.models import EndpointConfig, OutgoingRequest, ResponseOutcome, SendIntent
from telly.request_builder import build_request
from util.constants import RESPONSE_CHUNK_SIZE
from util.logging_util import log_response_received, setup_logger

logger = setup_logger(__name__)


class DispatchState(Enum):
    BUILT = "built"
    DISPATCHING = "dispatching"
    SUCCEEDED = "succeeded"
    API_REJECTED = "api_rejected"
    TRANSPORT_FAILED = "transport_failed"


def _transition(state: DispatchState):
    logger.debug(f"Dispatch state -> {state.value}")


def _read_body(response: requests.Response) -> bytes:
    """Collects the whole body as it streams in. No size cap."""
    body = bytearray()
    for chunk in response.iter_content(chunk_size=RESPONSE_CHUNK_SIZE):
        body.extend(chunk)
    return bytes(body)


def perform(request: OutgoingRequest, session: Optional[requests.Session] = None) -> ResponseOutcome:
    """
    Sends the request once and captures status and body, without judging them.

    The session and the response are both closed on every exit path. No
    timeout is set here, so the transport library's defaults apply.
    """
    try:
        with session or requests.Session() as http:
            with http.request(
                request.method.value,
                request.url,
                data=request.body,
                headers=request.headers,
                stream=True,
            ) as response:
                outcome = ResponseOutcome(status_code=response.status_code, body=_read_body(response))
    except requests.exceptions.RequestException as e:
        _transition(DispatchState.TRANSPORT_FAILED)
        raise TransportError(str(e)) from e

    log_response_received(logger, outcome.status_code, outcome.body)
    return outcome


def dispatch(request: OutgoingRequest, session: Optional[requests.Session] = None) -> str:
    """
    Sends the request and returns a confirmation line.

    Raises ApiRejection for any status other than 200, and TransportError
    when no response arrived at all.
    """
    _transition(DispatchState.DISPATCHING)
    outcome = perform(request, session)

    if not outcome.ok:
        _transition(DispatchState.API_REJECTED)
        raise ApiRejection(outcome.status_code, outcome.body_text)

    _transition(DispatchState.SUCCEEDED)
    return f"{request.intent.description} sent successfully"


def send(config: EndpointConfig, intent: SendIntent, session: Optional[requests.Session] = None) -> str:
    """Builds and dispatches a single message."""
    request = build_request(config, intent)
    _transition(DispatchState.BUILT)
    return dispatch(request, session)
