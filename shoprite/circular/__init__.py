"""
ShopRite circulars hosted on RedPepper Digital.

Modules:
    api_client - JSON client for the RedPepper endpoints
    resolver   - Store/catalogue resolution and page listing
    cli        - get_circular command line entry point
"""

from .api_client import RedPepperClient
from .resolver import CircularResolver, title_matches_type

__all__ = [
    'RedPepperClient',
    'CircularResolver',
    'title_matches_type',
]
