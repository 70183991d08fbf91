"""
Hero header for the landing page: animation, tagline and the docs button.
"""

from dataclasses import dataclass
from html import escape

from config import HERO_ANIMATION, HERO_ANIMATION_ALT, SiteConfig
from services.asset_resolver import AssetResolver


@dataclass(frozen=True)
class HeaderContent:
    """Everything the hero header shows"""
    tagline: str
    cta_path: str
    cta_label: str
    animation: str = HERO_ANIMATION
    animation_alt: str = HERO_ANIMATION_ALT

    @classmethod
    def from_config(cls, site: SiteConfig) -> "HeaderContent":
        """
        Read the header from site configuration.

        Raises:
            ConfigurationError: if the tagline (or CTA) is blank
        """
        return cls(
            tagline=site.require("tagline"),
            cta_path=site.require("docs_path"),
            cta_label=site.require("docs_label"),
        )


def render_hero_header(header: HeaderContent, resolver: AssetResolver) -> str:
    """Render the hero banner HTML"""
    src = escape(resolver.resolve(header.animation))

    return (
        '<header class="hero hero--primary hero-banner">'
        '<div class="container">'
        f'<img class="hero-animation" src="{src}" alt="{escape(header.animation_alt)}">'
        f'<p class="hero__subtitle">{escape(header.tagline)}</p>'
        '<div class="buttons">'
        f'<a class="button button--secondary button--lg" href="{escape(header.cta_path)}" target="_self">'
        f'{escape(header.cta_label)}'
        '</a>'
        '</div>'
        '</div>'
        '</header>'
    )
