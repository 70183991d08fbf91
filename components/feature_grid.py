"""
Feature grid: renders the whole catalog as a row of wrapping cards.
"""

import logging
from typing import Iterator, Sequence, Tuple

from components.feature_card import render_feature_card
from features.catalog import FeatureRecord, validate_catalog
from services.asset_resolver import AssetResolver

logger = logging.getLogger(__name__)


def iter_feature_cards(
    catalog: Sequence[FeatureRecord],
    resolver: AssetResolver
) -> Iterator[Tuple[int, str]]:
    """
    Lazily render the catalog card by card.

    Yields (key, card_html) in catalog order. Keys are positions, which is
    stable as long as the catalog is (it is a constant).
    """
    for idx, record in enumerate(catalog):
        yield idx, render_feature_card(record, resolver, key=idx)


def render_feature_grid(catalog: Sequence[FeatureRecord], resolver: AssetResolver) -> str:
    """
    Render the feature section: one card per record, in order.

    An empty catalog renders an empty row.

    Raises:
        CatalogError: if the catalog holds something other than FeatureRecord
    """
    records = validate_catalog(catalog, allow_empty=True)
    cards = "".join(card for _, card in iter_feature_cards(records, resolver))
    logger.debug("Rendered feature grid with %d cards", len(records))

    return (
        '<section class="features">'
        '<div class="container">'
        f'<div class="row">{cards}</div>'
        '</div>'
        '</section>'
    )
