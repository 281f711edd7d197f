"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
Values here are the built-in defaults; config/settings.yaml may override them.
"""

# RedPepper Digital hosts the ShopRite circulars under this client ID
REDPEPPER_CLIENT_ID = "4573"
REDPEPPER_BASE_URL = "https://app.redpepper.digital"

# Manasquan/Wall Township, NJ
DEFAULT_STORE_ID = "630"

SHOPRITE_BASE_URL = "https://www.shoprite.com"

# Cache lifetimes in seconds
HTML_CACHE_TTL = 86400       # raw category HTML kept for 24 hours
RESPONSE_CACHE_TTL = 3600    # Cache-Control max-age given to API callers

DEFAULT_PRODUCT_LIMIT = 20
REQUEST_TIMEOUT = 30

DEALS_USER_AGENT = "Mozilla/5.0 (compatible; ShopRite-Deals-API/1.0)"
CIRCULAR_USER_AGENT = "ShopRite-Circular-Fetcher/1.0"

CATALOGUE_TYPES = ("weekly", "wellness", "hispanic", "all")
