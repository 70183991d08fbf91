"""
HTML components for the landing page.
"""

from .feature_card import render_description, render_feature_card
from .feature_grid import iter_feature_cards, render_feature_grid
from .hero import HeaderContent, render_hero_header

__all__ = [
    'HeaderContent',
    'iter_feature_cards',
    'render_description',
    'render_feature_card',
    'render_feature_grid',
    'render_hero_header',
]
