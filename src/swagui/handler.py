"""Swagger UI request dispatcher.

One ``SwaggerUI`` instance serves the bootstrap page, the registered API
document and the UI assets for whatever prefix the host mounts it under.
It is an ASGI application::

    import swagui

    swagui.register("swagger", openapi_json)
    docs = swagui.wrap_handler(swagui.bundled_assets(), swagui.doc_expansion("none"))

    # e.g. Starlette: Mount("/docs", app=docs)

Every request ends in exactly one response. Only GET is served; paths
that do not end in a known resource name get a 404. The prefix in front
of the resource name is captured from the first matching request and
kept for the lifetime of the instance.

Free-threading safety:
    - Config is a frozen dataclass (immutable)
    - The route prefix is written once, under ``threading.Lock``
    - Asset reads run in a worker thread via ``anyio.to_thread``
"""

import posixpath
import re
import threading
from enum import Enum

import anyio.to_thread

from swagui._internal.asgi import Receive, Scope, Send
from swagui.assets import AssetStore, bundled_assets
from swagui.config import Config, Option, build_config
from swagui.errors import AssetUnavailable, MethodNotAllowed, NotFound
from swagui.http.request import Request
from swagui.http.response import Response
from swagui.registry import DocumentRegistry, default_registry
from swagui.server.handler import handle_request
from swagui.templating import render_index


class Strategy(Enum):
    """How a recognized resource is produced."""

    INDEX = "index"
    DOCUMENT = "document"
    ASSET = "asset"


RESOURCES: dict[str, Strategy] = {
    "index.html": Strategy.INDEX,
    "doc.json": Strategy.DOCUMENT,
    "favicon-16x16.png": Strategy.ASSET,
    "favicon-32x32.png": Strategy.ASSET,
    "oauth2-redirect.html": Strategy.ASSET,
    "swagger-ui.css": Strategy.ASSET,
    "swagger-ui.css.map": Strategy.ASSET,
    "swagger-ui.js": Strategy.ASSET,
    "swagger-ui.js.map": Strategy.ASSET,
    "swagger-ui-bundle.js": Strategy.ASSET,
    "swagger-ui-bundle.js.map": Strategy.ASSET,
    "swagger-ui-standalone-preset.js": Strategy.ASSET,
    "swagger-ui-standalone-preset.js.map": Strategy.ASSET,
}

CONTENT_TYPES: dict[str, str] = {
    ".html": "text/html; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".js": "application/javascript",
    ".png": "image/png",
    ".json": "application/json; charset=utf-8",
}

# Longest names first so "swagger-ui.js.map" is never cut short at "swagger-ui.js".
_RESOURCE_PATTERN = re.compile(
    r"(?P<prefix>.*/)(?P<resource>"
    + "|".join(re.escape(name) for name in sorted(RESOURCES, key=len, reverse=True))
    + r")"
)


def content_type_for(resource: str) -> str | None:
    """Content type for a resource name, or None if the extension is unknown."""
    _, ext = posixpath.splitext(resource)
    return CONTENT_TYPES.get(ext)


def match_resource(path: str) -> tuple[str, str] | None:
    """Split *path* into ``(prefix, resource)`` or return None if not served."""
    match = _RESOURCE_PATTERN.fullmatch(path)
    if match is None:
        return None
    return match["prefix"], match["resource"]


class SwaggerUI:
    """ASGI application serving Swagger UI and its API document.

    Args:
        assets: Store the CSS/JS/PNG assets are read from. Defaults to
            ``bundled_assets()``.
        config: UI configuration. Empty ``instance_name`` and ``title``
            fall back to the defaults.
        registry: Document registry to read ``doc.json`` from. Defaults
            to the process-wide registry.
    """

    __slots__ = ("_assets", "_config", "_lock", "_prefix", "_registry")

    def __init__(
        self,
        assets: AssetStore | None = None,
        config: Config | None = None,
        *,
        registry: DocumentRegistry | None = None,
    ) -> None:
        self._assets = assets if assets is not None else bundled_assets()
        self._config = (config or Config()).normalized()
        self._registry = registry if registry is not None else default_registry
        self._lock = threading.Lock()
        self._prefix: str | None = None

    @property
    def config(self) -> Config:
        return self._config

    @property
    def prefix(self) -> str | None:
        """Route prefix captured from the first matched request, if any.

        Taken from the ASGI ``path`` alone. A host that strips the mount
        point out of ``path`` into ``root_path`` leaves ``"/"`` here.
        """
        return self._prefix

    def _bind_prefix(self, prefix: str) -> None:
        """Record *prefix* unless a prefix has already been recorded."""
        if self._prefix is not None:
            return
        with self._lock:
            if self._prefix is None:
                self._prefix = prefix

    async def handle(self, request: Request) -> Response:
        """Dispatch one request.

        Raises:
            MethodNotAllowed: For any method other than GET.
            NotFound: If the path does not end in a served resource.
            DocumentNotRegistered: If ``doc.json`` has nothing registered.
            AssetUnavailable: If an asset cannot be opened or read.
        """
        if request.method != "GET":
            raise MethodNotAllowed(request.method)

        matched = match_resource(request.path)
        if matched is None:
            raise NotFound

        prefix, resource = matched
        self._bind_prefix(prefix)

        body: str | bytes
        match RESOURCES[resource]:
            case Strategy.INDEX:
                body = render_index(self._config)
            case Strategy.DOCUMENT:
                body = self._registry.read_doc(self._config.instance_name)
            case Strategy.ASSET:
                body = await anyio.to_thread.run_sync(self._read_asset, resource)
        return Response(body=body, content_type=content_type_for(resource))

    def _read_asset(self, name: str) -> bytes:
        # Buffered in full so a failed read never leaves a truncated 200.
        try:
            stream = self._assets.open(name)
        except OSError as exc:
            raise AssetUnavailable(name, str(exc)) from exc
        try:
            with stream:
                return stream.read()
        except OSError as exc:
            raise AssetUnavailable(name, str(exc)) from exc

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI entry point."""
        await handle_request(scope, receive, send, dispatch=self.handle)

    def __repr__(self) -> str:
        return f"SwaggerUI(instance_name={self._config.instance_name!r}, prefix={self._prefix!r})"


def wrap_handler(assets: AssetStore | None = None, *options: Option) -> SwaggerUI:
    """Build a handler from the default config with *options* applied."""
    return SwaggerUI(assets, build_config(*options))


def custom_wrap_handler(config: Config, assets: AssetStore | None = None) -> SwaggerUI:
    """Build a handler from an explicit *config*."""
    return SwaggerUI(assets, config)
