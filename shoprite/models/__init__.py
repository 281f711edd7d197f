"""
Data models for deals and circulars.

This module contains pure data classes with no business logic.
"""

from .circular import (
    CatalogueMetadata,
    CataloguePage,
    CircularBundle,
    ResolvedStore,
    StoreLocation,
    StoreSummary,
)
from .product import DealProduct

__all__ = [
    'DealProduct',
    'StoreLocation',
    'StoreSummary',
    'CatalogueMetadata',
    'CataloguePage',
    'ResolvedStore',
    'CircularBundle',
]
