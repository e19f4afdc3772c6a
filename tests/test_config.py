"""Tests for swagui.config — Config frozen dataclass and option functions."""

import pytest

from swagui.config import (
    DEFAULT_INSTANCE,
    DEFAULT_TITLE,
    Config,
    IndexContext,
    build_config,
    deep_linking,
    default_models_expand_depth,
    doc_expansion,
    instance_name,
    js_literal,
    oauth2_default_client_id,
    persist_authorization,
    syntax_highlight,
    title,
    url,
)
from swagui.errors import ConfigurationError


class TestConfig:
    def test_defaults(self) -> None:
        cfg = Config()

        assert cfg.url == "doc.json"
        assert cfg.doc_expansion == "list"
        assert cfg.instance_name == "swagger"
        assert cfg.title == "Swagger UI"
        assert cfg.default_models_expand_depth == 1
        assert cfg.deep_linking is True
        assert cfg.persist_authorization is False
        assert cfg.oauth2_default_client_id == ""
        assert cfg.syntax_highlight is True

    def test_frozen(self) -> None:
        cfg = Config()

        with pytest.raises(AttributeError):
            cfg.url = "other.json"  # type: ignore[misc]

    def test_normalized_fills_empty_fields(self) -> None:
        cfg = Config(instance_name="", title="").normalized()
        assert cfg.instance_name == DEFAULT_INSTANCE
        assert cfg.title == DEFAULT_TITLE

    def test_normalized_keeps_custom_fields(self) -> None:
        cfg = Config(instance_name="v2", title="Pets API")
        assert cfg.normalized() is cfg


class TestOptions:
    def test_url(self) -> None:
        expected = "https://example.com/openapi.json"
        assert url(expected)(Config()).url == expected

    def test_doc_expansion(self) -> None:
        cfg = Config()
        for expected in ("list", "full", "none"):
            cfg = doc_expansion(expected)(cfg)
            assert cfg.doc_expansion == expected

    def test_doc_expansion_rejects_unknown(self) -> None:
        with pytest.raises(ConfigurationError, match="doc_expansion"):
            doc_expansion("everything")

    def test_deep_linking(self) -> None:
        cfg = deep_linking(False)(Config())
        assert cfg.deep_linking is False
        assert deep_linking(True)(cfg).deep_linking is True

    def test_default_models_expand_depth(self) -> None:
        cfg = default_models_expand_depth(-1)(Config())
        assert cfg.default_models_expand_depth == -1
        assert default_models_expand_depth(3)(cfg).default_models_expand_depth == 3

    def test_instance_name(self) -> None:
        assert instance_name("custom_name")(Config()).instance_name == "custom_name"

    def test_persist_authorization(self) -> None:
        cfg = persist_authorization(True)(Config())
        assert cfg.persist_authorization is True
        assert persist_authorization(False)(cfg).persist_authorization is False

    def test_oauth2_default_client_id(self) -> None:
        cfg = oauth2_default_client_id("default_client_id")(Config())
        assert cfg.oauth2_default_client_id == "default_client_id"
        assert oauth2_default_client_id("")(cfg).oauth2_default_client_id == ""

    def test_syntax_highlight(self) -> None:
        assert syntax_highlight(False)(Config()).syntax_highlight is False

    def test_title(self) -> None:
        assert title("Pets API")(Config()).title == "Pets API"

    def test_option_leaves_original_untouched(self) -> None:
        cfg = Config()
        url("other.json")(cfg)
        assert cfg.url == "doc.json"


class TestBuildConfig:
    def test_no_options_gives_defaults(self) -> None:
        assert build_config() == Config()

    def test_last_write_wins(self) -> None:
        cfg = build_config(doc_expansion("list"), doc_expansion("full"))
        assert cfg.doc_expansion == "full"

    def test_distinct_fields_commute(self) -> None:
        a = build_config(url("x.json"), deep_linking(False), instance_name("v2"))
        b = build_config(instance_name("v2"), url("x.json"), deep_linking(False))
        assert a == b

    def test_base(self) -> None:
        base = Config(title="Pets API")
        cfg = build_config(url("pets.json"), base=base)
        assert cfg.title == "Pets API"
        assert cfg.url == "pets.json"


class TestIndexContext:
    def test_values_are_js_literals(self) -> None:
        view = IndexContext.from_config(Config(default_models_expand_depth=-1, deep_linking=False))
        assert view.url == '"doc.json"'
        assert view.doc_expansion == '"list"'
        assert view.deep_linking == "false"
        assert view.syntax_highlight == "true"
        assert view.default_models_expand_depth == "-1"
        assert view.oauth2_default_client_id == '""'

    def test_title_is_not_encoded(self) -> None:
        view = IndexContext.from_config(Config(title="Pets & Co"))
        assert view.title == "Pets & Co"

    def test_redirect_url_is_relative_to_page(self) -> None:
        view = IndexContext.from_config(Config())
        assert view.oauth2_redirect_url.startswith("`${window.location.protocol}")
        assert view.oauth2_redirect_url.endswith("/oauth2-redirect.html`")

    def test_js_literal_escapes_closing_tags(self) -> None:
        assert js_literal("</script><script>") == '"<\\/script><script>"'
