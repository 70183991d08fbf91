"""Tests for the static asset resolver."""

import base64
import logging

from config import DEFAULT_STATIC_DIR, HERO_ANIMATION, SiteConfig
from features.catalog import FEATURE_CATALOG
from services.asset_resolver import PLACEHOLDER_URI, AssetResolver


class TestUrlMode:
    """Resolving to Streamlit's static route."""

    def test_joins_base_url(self) -> None:
        resolver = AssetResolver("static", base_url="app/static/")
        assert resolver.resolve("img/libriscv.gif") == "app/static/img/libriscv.gif"

    def test_leading_slash_stripped(self) -> None:
        resolver = AssetResolver("static", base_url="app/static")
        assert resolver.resolve("/img/a.svg") == "app/static/img/a.svg"

    def test_from_config(self, site_config: SiteConfig) -> None:
        resolver = AssetResolver.from_config(site_config)
        assert not resolver.inlines_assets
        assert resolver.resolve("img/a.svg") == "app/static/img/a.svg"


class TestInlineMode:
    """Inlining files as data URIs."""

    def test_svg_inlined(self, static_dir) -> None:
        resolver = AssetResolver(str(static_dir))
        uri = resolver.resolve("img/icon.svg")
        assert uri.startswith("data:image/svg+xml;base64,")
        payload = base64.b64decode(uri.split(",", 1)[1])
        assert payload == b'<svg xmlns="http://www.w3.org/2000/svg"/>'

    def test_gif_inlined(self, static_dir) -> None:
        resolver = AssetResolver(str(static_dir))
        assert resolver.resolve("img/libriscv.gif") == "data:image/gif;base64," + base64.b64encode(b"GIF89a").decode()

    def test_repeated_resolve_is_stable(self, static_dir) -> None:
        resolver = AssetResolver(str(static_dir))
        assert resolver.resolve("img/icon.svg") == resolver.resolve("img/icon.svg")

    def test_missing_file_gives_placeholder(self, static_dir, caplog) -> None:
        resolver = AssetResolver(str(static_dir))
        with caplog.at_level(logging.WARNING, logger="services.asset_resolver"):
            assert resolver.resolve("img/missing.svg") == PLACEHOLDER_URI
        assert "Asset not found" in caplog.text

    def test_escaping_reference_gives_placeholder(self, static_dir, caplog) -> None:
        (static_dir.parent / "secret.txt").write_text("nope", encoding="utf-8")
        resolver = AssetResolver(str(static_dir))
        with caplog.at_level(logging.WARNING, logger="services.asset_resolver"):
            assert resolver.resolve("../secret.txt") == PLACEHOLDER_URI
        assert "escapes static dir" in caplog.text


class TestShippedAssets:
    """Every asset the page references ships in the default static dir."""

    def test_catalog_and_hero_assets_exist(self) -> None:
        resolver = AssetResolver(DEFAULT_STATIC_DIR)
        references = [record.illustration for record in FEATURE_CATALOG] + [HERO_ANIMATION]
        for reference in references:
            assert resolver.resolve(reference) != PLACEHOLDER_URI, reference

    def test_mime_types(self) -> None:
        resolver = AssetResolver(DEFAULT_STATIC_DIR)
        assert resolver.resolve(HERO_ANIMATION).startswith("data:image/gif;base64,R0lGODlh")
        for record in FEATURE_CATALOG:
            assert resolver.resolve(record.illustration).startswith("data:image/svg+xml;base64,")
