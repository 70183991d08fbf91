"""Tests for site configuration loading."""

import dataclasses
import logging
from typing import Optional, get_type_hints

import pytest

from config import ConfigurationError, SiteConfig, get_log_level, load_site_config
from features.catalog import CatalogError

TAGLINE = "RISC-V userspace emulator library"

CONFIG_KEYS = (
    "SITE_TITLE",
    "SITE_TAGLINE",
    "SITE_DESCRIPTION",
    "DOCS_PATH",
    "DOCS_LABEL",
    "STATIC_DIR",
    "STATIC_BASE_URL",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from a developer's .env."""
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def tagline_env(monkeypatch):
    """A deployment that sets its tagline."""
    monkeypatch.setenv("SITE_TAGLINE", TAGLINE)


class TestLoadSiteConfig:
    """Defaults and overrides."""

    def test_defaults(self, tagline_env) -> None:
        site = load_site_config()
        assert site.title == "libriscv"
        assert site.tagline == TAGLINE
        assert site.description.startswith("libriscv is a simple, slim and complete sandbox")
        assert site.docs_path == "/docs/intro"
        assert site.docs_label == "Documentation"
        assert site.static_base_url == "app/static"

    def test_env_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("SITE_TAGLINE", "Sandboxing at native speed")
        monkeypatch.setenv("SITE_TITLE", "libriscv docs")
        site = load_site_config()
        assert site.tagline == "Sandboxing at native speed"
        assert site.title == "libriscv docs"

    def test_empty_base_url_inlines(self, tagline_env, monkeypatch) -> None:
        monkeypatch.setenv("STATIC_BASE_URL", "")
        assert load_site_config().static_base_url is None

    def test_missing_tagline_fails(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_site_config()
        assert exc_info.value.key == "tagline"

    def test_blank_tagline_fails(self, monkeypatch) -> None:
        monkeypatch.setenv("SITE_TAGLINE", "   ")
        with pytest.raises(ConfigurationError) as exc_info:
            load_site_config()
        assert exc_info.value.key == "tagline"

    def test_relative_docs_path_rejected(self, tagline_env, monkeypatch) -> None:
        monkeypatch.setenv("DOCS_PATH", "docs/intro")
        with pytest.raises(ConfigurationError) as exc_info:
            load_site_config()
        assert exc_info.value.key == "docs_path"


class TestSiteConfig:
    """SiteConfig helpers."""

    def test_require_returns_value(self, site_config: SiteConfig) -> None:
        assert site_config.require("title") == "libriscv"

    def test_require_blank_raises(self, site_config: SiteConfig) -> None:
        site = dataclasses.replace(site_config, description="")
        with pytest.raises(ConfigurationError, match="description"):
            site.require("description")

    def test_is_frozen(self, site_config: SiteConfig) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            site_config.tagline = "changed"


class TestLogLevel:
    """LOG_LEVEL parsing."""

    def test_default_info(self) -> None:
        assert get_log_level() == logging.INFO

    def test_named_level(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

    def test_unknown_level(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ConfigurationError):
            get_log_level()


class TestConfigurationError:
    """Error attributes."""

    def test_default_message_names_key(self) -> None:
        err = ConfigurationError("tagline")
        assert err.key == "tagline"
        assert str(err) == "Missing required site setting: tagline"

    def test_message_is_optional(self) -> None:
        assert get_type_hints(ConfigurationError.__init__)["message"] == Optional[str]
        assert get_type_hints(CatalogError.__init__)["message"] == Optional[str]
