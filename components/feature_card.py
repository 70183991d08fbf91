"""
Feature card rendering.
Maps one FeatureRecord to the HTML for one card in the feature grid.
"""

from html import escape
from typing import Optional

from features.catalog import Description, FeatureRecord, PlainText, RichText, Span, SpanStyle
from services.asset_resolver import AssetResolver

# Column class for one card: a third of the 12-column row on wide viewports
CARD_COLUMN_CLASS = "col col--4"


def render_span(span: Span) -> str:
    """Render one inline span of a rich description"""
    text = escape(span.text)
    if span.style is SpanStyle.STRONG:
        return f"<strong>{text}</strong>"
    if span.style is SpanStyle.EMPHASIS:
        return f"<em>{text}</em>"
    if span.style is SpanStyle.CODE:
        return f"<code>{text}</code>"
    if span.style is SpanStyle.LINK:
        return f'<a href="{escape(span.href)}">{text}</a>'
    return text


def render_description(description: Description) -> str:
    """Render a PlainText or RichText description to inline HTML"""
    if isinstance(description, RichText):
        return "".join(render_span(span) for span in description.spans)
    if isinstance(description, PlainText):
        return escape(description.text)
    # FeatureRecord normalises anything else away at construction
    raise TypeError(f"Unsupported description type: {type(description).__name__}")


def render_feature_card(
    record: FeatureRecord,
    resolver: AssetResolver,
    key: Optional[int] = None
) -> str:
    """
    Render a single feature card.

    Layout, in fixed order: the illustration, the title as an <h3>, the
    description as a paragraph; both blocks centered in the card's column.
    The markup has no indentation so Streamlit's markdown pass doesn't turn
    it into a code block.

    Args:
        record: The feature to render
        resolver: Resolves record.illustration to an <img src>
        key: Optional position in the grid, emitted as data-key

    Returns:
        Card HTML
    """
    key_attr = f' data-key="{key}"' if key is not None else ""
    title = escape(record.title)
    src = escape(resolver.resolve(record.illustration))

    return (
        f'<div class="{CARD_COLUMN_CLASS} feature-card"{key_attr}>'
        f'<div class="text--center">'
        f'<img class="feature-svg" role="img" src="{src}" alt="{title}">'
        f'</div>'
        f'<div class="text--center padding-horiz--md">'
        f'<h3>{title}</h3>'
        f'<p>{render_description(record.description)}</p>'
        f'</div>'
        f'</div>'
    )
