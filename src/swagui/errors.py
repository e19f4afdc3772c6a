"""swagui exception hierarchy.

Shared by the registry, the asset stores, the dispatcher and the ASGI
layer so every module raises and catches the same types.
"""

from dataclasses import dataclass


class SwaguiError(Exception):
    """Base for all swagui-specific errors."""


class ConfigurationError(SwaguiError):
    """Raised when a handler, option or registry is set up wrongly.

    Always raised at construction or registration time, never while
    serving a request.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(SwaguiError):
    """An error that maps directly to an HTTP status code.

    Raised by the dispatcher. The ASGI layer catches these and turns
    them into a terminal response for the request.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()
    body: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — the path does not name a served resource."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail, body="Not Found")


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — only GET is served.

    Carries an ``Allow`` header; the response has no body.
    """

    def __init__(self, method: str, allowed: frozenset[str] = frozenset({"GET"})) -> None:
        allow_value = ", ".join(sorted(allowed))
        super().__init__(
            status=405,
            detail=f"{method} not allowed. Allowed methods: {allow_value}",
            headers=(("Allow", allow_value),),
        )


class DocumentNotRegistered(HTTPError, LookupError):
    """500 — no API document is registered under the instance name."""

    def __init__(self, name: str) -> None:
        super().__init__(status=500, detail=f"no document registered as {name!r}")


class AssetUnavailable(HTTPError):
    """500 — the asset store could not open or read a resource."""

    def __init__(self, name: str, reason: str = "") -> None:
        detail = f"asset {name!r} unavailable"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(status=500, detail=detail)
