"""Immutable HTTP request.

The dispatcher only reads the method and path, so that is all the
request carries. Bodies of GET requests are never consumed.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, frozen at creation."""

    method: str
    path: str

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(method=scope["method"], path=scope["path"])
