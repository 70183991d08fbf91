"""
Static asset resolver for the landing page.

Turns an opaque asset reference (e.g. "img/undraw_safe_re_kiil.svg") into
something an <img src> can load: a URL under Streamlit's static route, or the
file inlined as a base64 data URI.
"""

import base64
import logging
import mimetypes
from functools import lru_cache
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Transparent 1x1 SVG shown when an asset can't be found
PLACEHOLDER_SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="1" height="1"/>'
PLACEHOLDER_URI = "data:image/svg+xml;base64," + base64.b64encode(PLACEHOLDER_SVG.encode("utf-8")).decode("ascii")


class AssetResolver:
    """
    Resolves asset references against the site's static directory.

    Usage:
        resolver = AssetResolver("static", base_url="app/static")
        resolver.resolve("img/libriscv.gif")   # "app/static/img/libriscv.gif"

        inline = AssetResolver("static")
        inline.resolve("img/libriscv.gif")     # "data:image/gif;base64,..."

    Missing files are not an error here: they log a warning and resolve to a
    transparent placeholder so the page still renders.
    """

    def __init__(self, static_dir: str, base_url: Optional[str] = None):
        self.static_dir = Path(static_dir)
        self.base_url = base_url.rstrip("/") if base_url else None
        # Per-instance memo so repeated renders read each file once
        self._inline = lru_cache(maxsize=64)(self._inline_uncached)

    @classmethod
    def from_config(cls, site) -> "AssetResolver":
        """Build a resolver from a SiteConfig"""
        return cls(site.static_dir, base_url=site.static_base_url)

    @property
    def inlines_assets(self) -> bool:
        return self.base_url is None

    def _locate(self, reference: str) -> Optional[Path]:
        """Map a reference to a file inside static_dir, or None if it escapes it"""
        root = self.static_dir.resolve()
        candidate = (root / reference.lstrip("/")).resolve()
        try:
            candidate.relative_to(root)
        except ValueError:
            return None
        return candidate

    def _inline_uncached(self, reference: str) -> str:
        path = self._locate(reference)
        if path is None:
            logger.warning("Asset reference escapes static dir: %s", reference)
            return PLACEHOLDER_URI
        if not path.is_file():
            logger.warning("Asset not found: %s", path)
            return PLACEHOLDER_URI

        mime_type, _ = mimetypes.guess_type(path.name)
        if mime_type is None:
            mime_type = "application/octet-stream"
        encoded = base64.b64encode(path.read_bytes()).decode("ascii")
        return f"data:{mime_type};base64,{encoded}"

    def resolve(self, reference: str) -> str:
        """
        Resolve an asset reference to an <img src> value.

        Args:
            reference: Path relative to the static directory

        Returns:
            A URL (base-URL mode) or a data URI (inline mode)
        """
        if self.base_url is not None:
            return f"{self.base_url}/{reference.lstrip('/')}"
        return self._inline(reference)
