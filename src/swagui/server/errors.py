"""Error handling for swagui requests.

Maps HTTPError exceptions and unexpected failures to terminal
responses. Nothing here retries; every failure ends its request.
"""

import logging

from swagui.errors import HTTPError
from swagui.http.request import Request
from swagui.http.response import Response

logger = logging.getLogger("swagui.server")


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a plain-text Response."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    resp = Response(body=exc.body, status=exc.status)
    if not exc.body:
        resp = resp.with_content_type(None)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Handle unexpected exceptions as bodiless 500 errors."""
    logger.exception("500 %s %s", request.method, request.path, exc_info=exc)
    return Response(status=500, content_type=None)
