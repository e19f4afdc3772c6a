"""Shared fixtures: an isolated registry, in-memory assets, a handler."""

import pytest

from swagui.assets import MemoryAssets
from swagui.config import Config
from swagui.handler import SwaggerUI
from swagui.registry import DocumentRegistry

PNG_16 = b"\x89PNG\r\n\x1a\n16x16"
PNG_32 = b"\x89PNG\r\n\x1a\n32x32"


@pytest.fixture
def asset_files() -> dict[str, bytes]:
    return {
        "favicon-16x16.png": PNG_16,
        "favicon-32x32.png": PNG_32,
        "swagger-ui.css": b".swagger-ui { color: #3b4151; }",
        "swagger-ui.css.map": b'{"version":3}',
        "swagger-ui-bundle.js": b"var SwaggerUIBundle = function() {};",
        "swagger-ui-standalone-preset.js": b"var SwaggerUIStandalonePreset = {};",
        "oauth2-redirect.html": b"<html><body>redirect</body></html>",
    }


@pytest.fixture
def assets(asset_files: dict[str, bytes]) -> MemoryAssets:
    return MemoryAssets(asset_files)


@pytest.fixture
def registry() -> DocumentRegistry:
    return DocumentRegistry()


@pytest.fixture
def ui(assets: MemoryAssets, registry: DocumentRegistry) -> SwaggerUI:
    return SwaggerUI(assets, Config(), registry=registry)
