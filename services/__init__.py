"""
Collaborators the landing page delegates to.
"""

from .asset_resolver import AssetResolver, PLACEHOLDER_URI

__all__ = [
    'AssetResolver',
    'PLACEHOLDER_URI',
]
