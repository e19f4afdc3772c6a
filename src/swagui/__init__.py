"""swagui — Swagger UI and its API document behind one ASGI handler.

Mount a single handler under any prefix and it serves the UI page, the
registered API document (``doc.json``) and the Swagger UI assets::

    import swagui

    swagui.register("swagger", openapi_json)
    docs = swagui.wrap_handler(
        swagui.bundled_assets(),
        swagui.doc_expansion("none"),
        swagui.persist_authorization(True),
    )

Bundled assets need ``pip install swagui[bundle]``.
"""

__version__ = "0.1.0"
__all__ = [
    "AssetStore",
    "AssetUnavailable",
    "Config",
    "ConfigurationError",
    "DirectoryAssets",
    "DocumentNotRegistered",
    "DocumentRegistry",
    "HTTPError",
    "MemoryAssets",
    "MethodNotAllowed",
    "NotFound",
    "Option",
    "Request",
    "Response",
    "SwaggerUI",
    "SwaguiError",
    "build_config",
    "bundled_assets",
    "custom_wrap_handler",
    "deep_linking",
    "default_models_expand_depth",
    "doc_expansion",
    "instance_name",
    "oauth2_default_client_id",
    "persist_authorization",
    "read_doc",
    "register",
    "syntax_highlight",
    "title",
    "unregister",
    "url",
    "wrap_handler",
]

_CONFIG_NAMES = frozenset({
    "Config",
    "Option",
    "build_config",
    "deep_linking",
    "default_models_expand_depth",
    "doc_expansion",
    "instance_name",
    "oauth2_default_client_id",
    "persist_authorization",
    "syntax_highlight",
    "title",
    "url",
})


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import swagui`` fast; kida and anyio load with the handler.
    """
    if name in ("SwaggerUI", "wrap_handler", "custom_wrap_handler"):
        from swagui import handler as _handler

        return getattr(_handler, name)

    if name in _CONFIG_NAMES:
        from swagui import config as _config

        return getattr(_config, name)

    if name in ("DocumentRegistry", "register", "unregister", "read_doc"):
        from swagui import registry as _registry

        return getattr(_registry, name)

    if name in ("AssetStore", "DirectoryAssets", "MemoryAssets", "bundled_assets"):
        from swagui import assets as _assets

        return getattr(_assets, name)

    if name in ("Request", "Response"):
        from swagui import http as _http

        return getattr(_http, name)

    if name in (
        "AssetUnavailable",
        "ConfigurationError",
        "DocumentNotRegistered",
        "HTTPError",
        "MethodNotAllowed",
        "NotFound",
        "SwaguiError",
    ):
        from swagui import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
