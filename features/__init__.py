# Features package
"""
Static feature data for the libriscv landing page.

The catalog is plain data; rendering lives in the components package.
"""

from .catalog import (
    FEATURE_CATALOG,
    CatalogError,
    Description,
    FeatureRecord,
    PlainText,
    RichText,
    Span,
    SpanStyle,
    validate_catalog,
)

__all__ = [
    'FEATURE_CATALOG',
    'CatalogError',
    'Description',
    'FeatureRecord',
    'PlainText',
    'RichText',
    'Span',
    'SpanStyle',
    'validate_catalog',
]
