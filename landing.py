"""
libriscv - Documentation Landing Page

The front page of the docs site:
1. Hero header with the libriscv animation, tagline and a Documentation button
2. Grid of feature cards built from the feature catalog

Rendering is a pure function of static config and the catalog, so the same
build always produces the same HTML.
"""

import argparse
import logging
from html import escape
from pathlib import Path
from typing import Optional, Sequence

import streamlit as st

from config import (
    FEATURES_PER_ROW,
    GRID_COLUMNS,
    NARROW_VIEWPORT_PX,
    PRIMARY_COLOR,
    PRIMARY_COLOR_DARK,
    SiteConfig,
    get_log_level,
    load_site_config,
)
from components.feature_grid import render_feature_grid
from components.hero import HeaderContent, render_hero_header
from features.catalog import FEATURE_CATALOG, FeatureRecord
from services.asset_resolver import AssetResolver
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def get_landing_css() -> str:
    """Get CSS for the landing page: hero banner and the wrapping feature grid"""
    column_width = 100 * (GRID_COLUMNS // FEATURES_PER_ROW) / GRID_COLUMNS
    return f"""
<style>
    /* Hide Streamlit chrome for the landing page */
    #MainMenu {{visibility: hidden;}}
    footer {{visibility: hidden;}}
    .stDeployButton {{display: none;}}

    .block-container {{
        max-width: 1140px !important;
        padding-top: 0 !important;
    }}

    /* Hero banner */
    .hero {{
        padding: 30px 0 4rem 0;
        text-align: center;
        position: relative;
        overflow: hidden;
    }}

    .hero--primary {{
        background-color: {PRIMARY_COLOR};
        color: #ffffff;
        border-radius: 12px;
    }}

    .hero-animation {{
        max-width: 100%;
        border-radius: 10px;
        border: solid 4px black;
    }}

    .hero__subtitle {{
        font-size: 1.5rem;
        margin: 1rem 0;
    }}

    .buttons {{
        display: flex;
        align-items: center;
        justify-content: center;
    }}

    .button {{
        display: inline-block;
        border-radius: 0.4rem;
        font-weight: 700;
        text-decoration: none !important;
        transition: all 0.2s ease;
    }}

    .button--secondary {{
        background: #ebedf0;
        color: #1c1e21 !important;
    }}

    .button--secondary:hover {{
        background: #dadde1;
        color: {PRIMARY_COLOR_DARK} !important;
    }}

    .button--lg {{
        font-size: 1.2rem;
        padding: 0.75rem 2rem;
    }}

    /* Feature grid */
    .features {{
        display: flex;
        align-items: center;
        padding: 2rem 0;
        width: 100%;
    }}

    .container {{
        margin: 0 auto;
        max-width: 1140px;
        padding: 0 1rem;
        width: 100%;
    }}

    .row {{
        display: flex;
        flex-wrap: wrap;
        margin: 0 -1rem;
    }}

    .col--4 {{
        flex: 0 0 {column_width:.4f}%;
        max-width: {column_width:.4f}%;
        padding: 0 1rem;
        box-sizing: border-box;
    }}

    .text--center {{
        text-align: center;
    }}

    .padding-horiz--md {{
        padding-left: 1rem;
        padding-right: 1rem;
    }}

    .feature-svg {{
        height: 200px;
        width: 200px;
    }}

    @media screen and (max-width: {NARROW_VIEWPORT_PX}px) {{
        .hero {{
            padding: 2rem;
        }}
        .col--4 {{
            flex: 0 0 100%;
            max-width: 100%;
        }}
    }}
</style>
"""


def build_landing_body(
    site: SiteConfig,
    resolver: AssetResolver,
    catalog: Sequence[FeatureRecord] = FEATURE_CATALOG
) -> str:
    """
    Compose the page body: hero header, then the feature grid in <main>.

    Args:
        site: Site configuration (tagline, docs link)
        resolver: Asset resolver for the animation and card illustrations
        catalog: Features to show, in display order

    Returns:
        Body HTML

    Raises:
        ConfigurationError: if the tagline is missing, or the catalog is malformed
    """
    header = HeaderContent.from_config(site)
    return (
        render_hero_header(header, resolver)
        + f"<main>{render_feature_grid(catalog, resolver)}</main>"
    )


def build_landing_document(
    site: SiteConfig,
    resolver: AssetResolver,
    catalog: Sequence[FeatureRecord] = FEATURE_CATALOG
) -> str:
    """Build a standalone HTML document (stylesheet + body) for static export"""
    body = build_landing_body(site, resolver, catalog)
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape(site.require('title'))}</title>\n"
        f'<meta name="description" content="{escape(site.require("description"))}">\n'
        f"{get_landing_css().strip()}\n"
        "</head>\n"
        f"<body>\n{body}\n</body>\n"
        "</html>\n"
    )


def export_landing_page(path: str, site: Optional[SiteConfig] = None) -> Path:
    """
    Write the standalone landing page to path.

    Assets are inlined unless the config sets a static base URL.
    """
    site = site or load_site_config()
    resolver = AssetResolver.from_config(site)
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(build_landing_document(site, resolver), encoding="utf-8")
    logger.info("Exported landing page to %s", output)
    return output


def render_landing_page(site: Optional[SiteConfig] = None):
    """Main landing page renderer"""
    site = site or load_site_config()
    resolver = AssetResolver.from_config(site)

    # Apply custom CSS
    st.markdown(get_landing_css(), unsafe_allow_html=True)

    # Header and feature grid
    st.markdown(build_landing_body(site, resolver), unsafe_allow_html=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Entry point. With --export, write the standalone page and exit;
    otherwise render in Streamlit (`streamlit run landing.py`).
    """
    parser = argparse.ArgumentParser(description="Build the libriscv docs landing page")
    parser.add_argument("--export", metavar="PATH",
                        help="Write the standalone HTML page to PATH")
    args = parser.parse_args(argv)

    setup_logging(get_log_level())
    if args.export:
        export_landing_page(args.export)
    else:
        render_landing_page()
    return 0


if __name__ == "__main__":
    main()
