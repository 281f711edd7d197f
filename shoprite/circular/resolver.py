"""
Circular Resolver

Resolves a ShopRite store to its current circular on RedPepper and lists the
circular's page images.

The geo-location listing has one row per (store, catalogue version) pair, so
a store usually appears several times: once for the weekly circular and once
for each specialty circular (wellness, hispanic, ...). Catalogue IDs grow over
time, so the highest matching ID is the current one.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

from ..common.constants import DEFAULT_STORE_ID
from ..models import (
    CatalogueMetadata,
    CataloguePage,
    CircularBundle,
    ResolvedStore,
    StoreLocation,
    StoreSummary,
)
from .api_client import RedPepperClient

logger = logging.getLogger(__name__)


def title_matches_type(title: str, catalogue_type: str) -> bool:
    """
    Check a catalogue title against a circular type.

    weekly titles start with "Week of"; wellness and hispanic circulars
    mention the word anywhere in the title. "all" (or any other type)
    accepts everything.
    """
    title = (title or "").lower()
    if catalogue_type == "weekly":
        return title.startswith("week of")
    if catalogue_type == "wellness":
        return "wellness" in title
    if catalogue_type == "hispanic":
        return "hispanic" in title
    return True


def _catalogue_sort_key(catalogue_id: str) -> int:
    try:
        return int(catalogue_id)
    except (TypeError, ValueError):
        return -1


class CircularResolver:
    """
    Store and catalogue lookups against the RedPepper API.

    Usage:
        with RedPepperClient() as client:
            resolver = CircularResolver(client)
            store = resolver.find_store_and_catalogue("630", "weekly")
            pages = resolver.get_circular_pages(store.catalogue_id)
    """

    def __init__(self, client: RedPepperClient, max_workers: int = 8):
        self.client = client
        self.max_workers = max_workers

    def get_store_locations(self) -> Optional[List[StoreLocation]]:
        """Fetch every store/catalogue row for the client."""
        data = self.client.fetch_json(self.client.geo_location_url())
        if data is None:
            return None
        if not isinstance(data, list):
            logger.error("Unexpected geo-location payload: %s", type(data).__name__)
            return None
        return [StoreLocation.from_api(row) for row in data if isinstance(row, dict)]

    def get_catalogue_metadata(self, catalogue_id: str) -> Optional[CatalogueMetadata]:
        data = self.client.fetch_json(self.client.metadata_url(catalogue_id))
        if not isinstance(data, dict):
            return None
        return CatalogueMetadata.from_api(catalogue_id, data)

    def get_circular_pages(self, catalogue_id: str) -> Optional[List[CataloguePage]]:
        """
        Fetch a catalogue's pages sorted by page number.

        Returns:
            Pages in ascending order, or None if the request failed
        """
        data = self.client.fetch_json(self.client.pages_url(catalogue_id))
        if data is None or not isinstance(data, list):
            return None

        pages = [CataloguePage.from_api(page) for page in data if isinstance(page, dict)]
        return sorted(pages, key=lambda p: p.page_number)

    def _fetch_metadata_for(self, catalogue_ids: List[str]) -> Dict[str, Optional[CatalogueMetadata]]:
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            results = executor.map(self.get_catalogue_metadata, catalogue_ids)
            return dict(zip(catalogue_ids, results))

    def find_store_and_catalogue(
        self,
        store_id: str,
        catalogue_type: str = "weekly",
    ) -> Optional[ResolvedStore]:
        """
        Find the current catalogue of the given type for a store.

        Args:
            store_id: Store ID, e.g. "630"
            catalogue_type: "weekly", "wellness", "hispanic" or "all"

        Returns:
            ResolvedStore, or None if the store is unknown or has no
            catalogue of that type
        """
        locations = self.get_store_locations()
        if locations is None:
            return None

        store_entries = [loc for loc in locations if loc.store_id == store_id]
        if not store_entries:
            logger.error("Store ID %s not found", store_id)
            return None

        catalogue_ids = list(dict.fromkeys(e.catalogue_id for e in store_entries))
        metadata = self._fetch_metadata_for(catalogue_ids)

        candidates = [
            (catalogue_id, meta)
            for catalogue_id, meta in metadata.items()
            if meta is not None and title_matches_type(meta.title, catalogue_type)
        ]
        if not candidates:
            logger.error("No %s catalogues found for store %s", catalogue_type, store_id)
            return None

        candidates.sort(key=lambda c: _catalogue_sort_key(c[0]), reverse=True)
        catalogue_id, meta = candidates[0]

        entry = next(
            (e for e in store_entries if e.catalogue_id == catalogue_id),
            store_entries[0],
        )

        return ResolvedStore(
            store_id=entry.store_id,
            store_name=entry.store_name,
            city=entry.city,
            state=entry.state,
            address=entry.address,
            zipcode=entry.zipcode,
            phone=entry.phone,
            catalogue_id=catalogue_id,
            catalogue_title=meta.title,
            dma=entry.dma,
        )

    def match_stores_by_city(self, city_name: str) -> Optional[List[StoreSummary]]:
        """
        Distinct stores whose city or listing title contains `city_name`.

        Returns:
            Matches in listing order (empty if none), or None if the
            listing could not be fetched
        """
        locations = self.get_store_locations()
        if locations is None:
            return None

        needle = city_name.lower().strip()
        matches: Dict[str, StoreSummary] = {}
        for loc in locations:
            if needle in loc.city.lower() or needle in loc.title.lower():
                if loc.store_id not in matches:
                    matches[loc.store_id] = StoreSummary(
                        store_id=loc.store_id,
                        store_name=loc.store_name,
                        city=loc.city,
                        state=loc.state,
                    )
        return list(matches.values())

    def find_store_by_city(
        self,
        city_name: str,
        catalogue_type: str = "weekly",
    ) -> Optional[ResolvedStore]:
        """
        Resolve a store by partial city name.

        When several stores match, they are reported and the first one is used.
        """
        matches = self.match_stores_by_city(city_name)
        if matches is None:
            return None
        if not matches:
            logger.error('No stores found matching "%s"', city_name)
            return None

        if len(matches) > 1:
            logger.warning('Multiple stores found matching "%s":', city_name)
            for store in matches:
                logger.warning("  - %s (ID: %s)", store.store_name, store.store_id)
            logger.warning("Using first match: %s", matches[0].store_id)

        return self.find_store_and_catalogue(matches[0].store_id, catalogue_type)

    def list_all_stores(self) -> Optional[List[StoreSummary]]:
        """One entry per store ID, sorted by store name."""
        locations = self.get_store_locations()
        if locations is None:
            return None

        stores: Dict[str, StoreSummary] = {}
        for loc in locations:
            if loc.store_id not in stores:
                stores[loc.store_id] = StoreSummary(
                    store_id=loc.store_id,
                    store_name=loc.store_name,
                    city=loc.city,
                    state=loc.state,
                )

        return sorted(stores.values(), key=lambda s: s.store_name.lower())

    def get_first_page_url(self, store_id: str = DEFAULT_STORE_ID) -> Optional[str]:
        """Image URL of the first page of a store's weekly circular."""
        store = self.find_store_and_catalogue(store_id)
        if store is None:
            return None

        pages = self.get_circular_pages(store.catalogue_id)
        if pages:
            return pages[0].image_url
        return None

    def get_circular_for_store(self, store_id: str = DEFAULT_STORE_ID) -> Optional[CircularBundle]:
        """Store, metadata and pages of a store's weekly circular."""
        store = self.find_store_and_catalogue(store_id)
        if store is None:
            return None

        with ThreadPoolExecutor(max_workers=2) as executor:
            metadata_future = executor.submit(self.get_catalogue_metadata, store.catalogue_id)
            pages_future = executor.submit(self.get_circular_pages, store.catalogue_id)
            return CircularBundle(
                store=store,
                metadata=metadata_future.result(),
                pages=pages_future.result(),
            )
