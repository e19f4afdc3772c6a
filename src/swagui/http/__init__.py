"""Immutable HTTP request and response types."""

from swagui.http.request import Request
from swagui.http.response import Response

__all__ = ["Request", "Response"]
