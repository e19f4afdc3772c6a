"""ASGI handler — translates ASGI scope/messages to swagui types.

The only component that touches raw ASGI directly. Converts the scope
to a typed Request, awaits the dispatcher, and sends the Response back
through ASGI send().
"""

from collections.abc import Awaitable, Callable

from swagui._internal.asgi import Receive, Scope, Send
from swagui.errors import HTTPError
from swagui.http.request import Request
from swagui.http.response import Response
from swagui.server.errors import handle_http_error, handle_internal_error
from swagui.server.sender import send_response

type Dispatch = Callable[[Request], Awaitable[Response]]


async def handle_request(scope: Scope, receive: Receive, send: Send, *, dispatch: Dispatch) -> None:
    """Process a single HTTP request through *dispatch*."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = await dispatch(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send)
