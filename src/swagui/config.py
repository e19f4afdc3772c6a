"""Handler configuration.

Config is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups. Options are small functions that return an
updated copy; ``build_config`` applies them left to right::

    config = build_config(url("/openapi.json"), doc_expansion("none"))
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from swagui.errors import ConfigurationError

DEFAULT_INSTANCE = "swagger"
DEFAULT_TITLE = "Swagger UI"
DOC_EXPANSIONS = frozenset({"list", "full", "none"})

# Resolves to "<origin><directory of the current page>/oauth2-redirect.html"
# in the browser, so the redirect follows whatever prefix the UI is mounted at.
OAUTH2_REDIRECT_URL_JS = (
    "`${window.location.protocol}//${window.location.host}$"
    "{window.location.pathname.split('/').slice(0, window.location.pathname.split('/').length - 1).join('/')}"  # noqa: E501
    "/oauth2-redirect.html`"
)


@dataclass(frozen=True, slots=True)
class Config:
    """Swagger UI configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = Config(url="/openapi.json", deep_linking=False)
    """

    # URL of the API definition, relative to the UI page.
    url: str = "doc.json"
    # "list", "full" or "none"
    doc_expansion: str = "list"
    # Document registry key.
    instance_name: str = DEFAULT_INSTANCE
    title: str = DEFAULT_TITLE
    # -1 hides the models section entirely.
    default_models_expand_depth: int = 1
    deep_linking: bool = True
    persist_authorization: bool = False
    oauth2_default_client_id: str = ""
    syntax_highlight: bool = True

    def normalized(self) -> Config:
        """Fill in an empty instance name or title with the defaults."""
        changes: dict[str, Any] = {}
        if not self.instance_name:
            changes["instance_name"] = DEFAULT_INSTANCE
        if not self.title:
            changes["title"] = DEFAULT_TITLE
        return replace(self, **changes) if changes else self


type Option = Callable[[Config], Config]


def build_config(*options: Option, base: Config | None = None) -> Config:
    """Apply *options* in order over *base* (or the defaults)."""
    config = base if base is not None else Config()
    for option in options:
        config = option(config)
    return config


# ------------------------------------------------------------------
# Options
# ------------------------------------------------------------------


def url(value: str) -> Option:
    """URL pointing to the API definition (normally doc.json or swagger.yaml)."""
    return lambda config: replace(config, url=value)


def doc_expansion(value: str) -> Option:
    """Default expansion of operations: ``list``, ``full`` or ``none``."""
    if value not in DOC_EXPANSIONS:
        msg = f"doc_expansion must be one of {sorted(DOC_EXPANSIONS)}, got {value!r}"
        raise ConfigurationError(msg)
    return lambda config: replace(config, doc_expansion=value)


def deep_linking(value: bool) -> Option:
    """Enable deep links to tags and operations."""
    return lambda config: replace(config, deep_linking=value)


def default_models_expand_depth(depth: int) -> Option:
    """Default expansion depth for models (-1 hides the models)."""
    return lambda config: replace(config, default_models_expand_depth=depth)


def instance_name(name: str) -> Option:
    """Registry name the API document was registered under.

    Defaults to ``"swagger"``.
    """
    return lambda config: replace(config, instance_name=name)


def persist_authorization(value: bool) -> Option:
    """Keep authorization data across browser close/refresh."""
    return lambda config: replace(config, persist_authorization=value)


def oauth2_default_client_id(client_id: str) -> Option:
    """Client ID pre-filled in the OAuth2 authorization dialog."""
    return lambda config: replace(config, oauth2_default_client_id=client_id)


def syntax_highlight(value: bool) -> Option:
    return lambda config: replace(config, syntax_highlight=value)


def title(value: str) -> Option:
    return lambda config: replace(config, title=value)


# ------------------------------------------------------------------
# Template view
# ------------------------------------------------------------------


def js_literal(value: Any) -> str:
    """Encode *value* as a JavaScript literal safe inside ``<script>``."""
    return json.dumps(value).replace("</", "<\\/")


@dataclass(frozen=True, slots=True)
class IndexContext:
    """Values the index template interpolates.

    Everything emitted into the page's script block is already a
    JavaScript literal; only ``title`` lands in HTML context.
    """

    title: str
    url: str
    doc_expansion: str
    deep_linking: str
    default_models_expand_depth: str
    persist_authorization: str
    syntax_highlight: str
    oauth2_default_client_id: str
    oauth2_redirect_url: str = OAUTH2_REDIRECT_URL_JS

    @classmethod
    def from_config(cls, config: Config) -> IndexContext:
        return cls(
            title=config.title,
            url=js_literal(config.url),
            doc_expansion=js_literal(config.doc_expansion),
            deep_linking=js_literal(config.deep_linking),
            default_models_expand_depth=js_literal(config.default_models_expand_depth),
            persist_authorization=js_literal(config.persist_authorization),
            syntax_highlight=js_literal(config.syntax_highlight),
            oauth2_default_client_id=js_literal(config.oauth2_default_client_id),
        )
