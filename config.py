"""
Configuration for the libriscv documentation landing page
Central site configuration consumed by the header, the page shell and the asset resolver.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the same directory as this config file (for local dev)
env_path = Path(__file__).parent / ".env"
load_dotenv(dotenv_path=env_path)

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a required site setting is missing or malformed"""

    def __init__(self, key: str, message: Optional[str] = None):
        self.key = key
        self.message = message or f"Missing required site setting: {key}"
        super().__init__(self.message)


def get_secret(key: str, default: str = "") -> str:
    """
    Get a setting from environment variables (local) or Streamlit secrets (cloud).
    Streamlit Cloud uses st.secrets, local dev uses .env
    """
    # First try environment variables (works for local .env)
    value = os.environ.get(key, "")
    if value:
        return value

    # Then try Streamlit secrets (for Streamlit Cloud)
    try:
        import streamlit as st
        # load_if_toml_exists avoids Streamlit's missing-secrets error output
        if st.secrets.load_if_toml_exists() and key in st.secrets:
            return str(st.secrets[key])
    except Exception as e:
        # No secrets.toml outside Streamlit Cloud
        logger.debug("Streamlit secrets unavailable for %s: %s", key, e)

    return default


# =============================================================================
# SITE CONFIGURATION
# =============================================================================

DEFAULT_SITE_TITLE = "libriscv"
DEFAULT_SITE_DESCRIPTION = (
    "libriscv is a simple, slim and complete sandbox that is highly embeddable and configurable."
)

# Header call-to-action
DEFAULT_DOCS_PATH = "/docs/intro"
DEFAULT_DOCS_LABEL = "Documentation"

# Header animation (asset reference relative to STATIC_DIR)
HERO_ANIMATION = "img/libriscv.gif"
HERO_ANIMATION_ALT = "loading..."

# Static assets. Streamlit serves ./static at app/static when
# server.enableStaticServing is on; an empty base URL inlines assets instead.
DEFAULT_STATIC_DIR = str(Path(__file__).parent / "static")
DEFAULT_STATIC_BASE_URL = "app/static"

# =============================================================================
# LAYOUT
# =============================================================================

FEATURES_PER_ROW = 3  # Cards per row on wide viewports (col--4 of a 12-column row)
GRID_COLUMNS = 12
NARROW_VIEWPORT_PX = 996  # Below this, cards wrap to a single column

# =============================================================================
# BRANDING
# =============================================================================

PRIMARY_COLOR = "#2e8555"
PRIMARY_COLOR_DARK = "#29784c"
PRIMARY_COLOR_DARKER = "#277148"


@dataclass(frozen=True)
class SiteConfig:
    """Static per-build site settings read by the landing page"""
    title: str
    tagline: str
    description: str
    docs_path: str = DEFAULT_DOCS_PATH
    docs_label: str = DEFAULT_DOCS_LABEL
    static_dir: str = DEFAULT_STATIC_DIR
    static_base_url: Optional[str] = DEFAULT_STATIC_BASE_URL

    def require(self, key: str) -> str:
        """
        Read a required string setting, failing loudly when it is blank.

        Args:
            key: SiteConfig field name (e.g. "tagline")

        Returns:
            The setting value

        Raises:
            ConfigurationError: if the value is missing or whitespace only
        """
        value = getattr(self, key, None)
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError(key)
        return value

    def validate(self) -> "SiteConfig":
        """Check every setting the page renders; returns self for chaining"""
        for key in ("title", "tagline", "description", "docs_path", "docs_label"):
            self.require(key)
        if not self.docs_path.startswith("/"):
            raise ConfigurationError(
                "docs_path", f"docs_path must be an absolute site path, got {self.docs_path!r}"
            )
        return self


def load_site_config() -> SiteConfig:
    """
    Build the SiteConfig from .env / Streamlit secrets with defaults.

    SITE_TAGLINE has no default: a deployment without it fails to load
    instead of rendering a blank or stand-in header.

    Raises:
        ConfigurationError: if a rendered setting is blank
    """
    # An explicitly empty STATIC_BASE_URL means "inline assets as data URIs"
    base_url = os.environ.get("STATIC_BASE_URL")
    if base_url is None:
        base_url = get_secret("STATIC_BASE_URL", DEFAULT_STATIC_BASE_URL)

    site = SiteConfig(
        title=get_secret("SITE_TITLE", DEFAULT_SITE_TITLE),
        tagline=get_secret("SITE_TAGLINE", ""),
        description=get_secret("SITE_DESCRIPTION", DEFAULT_SITE_DESCRIPTION),
        docs_path=get_secret("DOCS_PATH", DEFAULT_DOCS_PATH),
        docs_label=get_secret("DOCS_LABEL", DEFAULT_DOCS_LABEL),
        static_dir=get_secret("STATIC_DIR", DEFAULT_STATIC_DIR),
        static_base_url=base_url.rstrip("/") or None,
    )
    logger.debug("Loaded site config for %s", site.title)
    return site.validate()


def get_log_level() -> int:
    """Resolve LOG_LEVEL (name like "DEBUG") to a logging level, default INFO"""
    name = get_secret("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigurationError("LOG_LEVEL", f"Unknown log level: {name}")
    return level
