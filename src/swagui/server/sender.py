"""ASGI response sending — translates a swagui Response to ASGI messages.

Bodies are always fully buffered, so a response is exactly one
``http.response.start`` followed by one ``http.response.body``.
"""

import logging

from swagui._internal.asgi import Send
from swagui.http.response import Response

logger = logging.getLogger("swagui.server")


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def raw_headers(response: Response, body: bytes) -> list[tuple[bytes, bytes]]:
    """Build the ASGI header list for *response* with *body*."""
    headers: list[tuple[bytes, bytes]] = []
    if response.content_type is not None:
        headers.append((b"content-type", response.content_type.encode("latin-1")))
    for name, value in response.headers:
        headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))
    headers.append((b"content-length", str(len(body)).encode("latin-1")))
    return headers


async def send_response(response: Response, send: Send) -> bool:
    """Translate a swagui Response into ASGI send() calls.

    Returns False if the client went away mid-response. Nothing further
    is written in that case and the failure is not raised.
    """
    body = response.body_bytes if _body_allowed(response.status) else b""

    try:
        await send(
            {
                "type": "http.response.start",
                "status": response.status,
                "headers": raw_headers(response, body),
            }
        )
        await send(
            {
                "type": "http.response.body",
                "body": body,
            }
        )
    except OSError as exc:
        logger.debug("write aborted, status %d: %s", response.status, exc)
        return False
    return True
