"""
Deals Service

Fetches a ShopRite category page (through the edge cache), pulls the
embedded page state out of it and returns the filtered product list.

Usage:
    service = DealsService(cache=MemoryEdgeCache())
    body, status = service.get_deals("641", "meat-id-520692", subcategory="Beef")
"""

import logging
from typing import Any, Dict, Optional, Tuple

import requests

from ..common.config_loader import Settings
from ..extraction import PreloadedStateParser, category_info, parse_products
from .cache import EdgeCache, MemoryEdgeCache

logger = logging.getLogger(__name__)

EXTRACTION_ERROR = "Could not extract product data from page"


class DealsService:
    """Read-through category page fetcher plus product extraction."""

    def __init__(
        self,
        cache: Optional[EdgeCache] = None,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Args:
            cache: Key/value store for raw HTML (default: in-process cache)
            session: HTTP session used for upstream fetches
            settings: Runtime settings (default: built-in defaults)
        """
        self.settings = settings or Settings()
        self.cache = cache if cache is not None else MemoryEdgeCache()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.settings.deals_user_agent})
        self.parser = PreloadedStateParser()

    def category_url(self, store: str, category: str) -> str:
        base = self.settings.shoprite_base_url.rstrip("/")
        return f"{base}/sm/planning/rsid/{store}/categories/{category}"

    def fetch_category_html(self, url: str) -> Tuple[Optional[str], int]:
        """
        Return the page HTML from cache, or fetch and cache it.

        Returns:
            (html, 200) on success, (None, upstream_status) on failure
        """
        html = self.cache.get(url)
        if html is not None:
            logger.debug("Cache hit: %s", url)
            return html, 200

        logger.info("Fetching %s", url)
        response = self.session.get(url, timeout=self.settings.request_timeout)
        if not response.ok:
            logger.error("HTTP %d fetching %s", response.status_code, url)
            return None, response.status_code

        html = response.text
        self.cache.put(url, html, self.settings.html_cache_ttl)
        return html, 200

    def get_deals(
        self,
        store: str,
        category: str,
        subcategory: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Tuple[Dict[str, Any], int]:
        """
        Build the deals response body.

        Returns:
            (body, status). Errors come back as {"error": ...} with the
            status the endpoint should answer with.
        """
        if limit is None:
            limit = self.settings.default_limit

        html, status = self.fetch_category_html(self.category_url(store, category))
        if html is None:
            return {"error": f"Failed to fetch ShopRite page: {status}"}, status

        state = self.parser.parse(html)
        if state is None:
            return {"error": EXTRACTION_ERROR}, 500

        products = parse_products(state, subcategory, limit)
        logger.info("store=%s category=%s: %d products", store, category, len(products))

        return {
            "store": store,
            "category": category,
            "subcategory": subcategory or None,
            "count": len(products),
            "products": [p.to_dict() for p in products],
            "categoryInfo": category_info(state),
        }, 200
