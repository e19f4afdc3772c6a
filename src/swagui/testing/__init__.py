"""Test utilities for swagui handlers::

    from swagui.testing import TestClient
"""

from swagui.testing.client import TestClient

__all__ = ["TestClient"]
