"""Pytest configuration and fixtures for landing page tests."""

import pytest

from config import SiteConfig
from services.asset_resolver import AssetResolver


@pytest.fixture
def site_config(tmp_path) -> SiteConfig:
    """Site config mirroring the production defaults, with a temp static dir."""
    return SiteConfig(
        title="libriscv",
        tagline="RISC-V userspace emulator library",
        description="libriscv is a simple, slim and complete sandbox that is highly embeddable and configurable.",
        static_dir=str(tmp_path / "static"),
        static_base_url="app/static",
    )


@pytest.fixture
def resolver() -> AssetResolver:
    """URL-mode resolver; never touches the filesystem."""
    return AssetResolver("static", base_url="app/static")


@pytest.fixture
def static_dir(tmp_path):
    """A static directory holding one SVG and one GIF."""
    root = tmp_path / "static"
    (root / "img").mkdir(parents=True)
    (root / "img" / "icon.svg").write_text('<svg xmlns="http://www.w3.org/2000/svg"/>', encoding="utf-8")
    (root / "img" / "libriscv.gif").write_bytes(b"GIF89a")
    return root
