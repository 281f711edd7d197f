"""
Circular data models.

Store locations, catalogue metadata and catalogue pages as reported by the
RedPepper API. The from_api constructors turn loosely-shaped upstream JSON
into explicit fields with fixed defaults ("Unknown", 0, "").
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..common.text_utils import parse_leading_int

UNKNOWN = "Unknown"


def _first_value(data: Dict[str, Any], field_name: str, default: Any) -> Any:
    """Read the first `value` of a Drupal field list, e.g. {"title": [{"value": "..."}]}."""
    items = data.get(field_name)
    if isinstance(items, list) and items and isinstance(items[0], dict):
        value = items[0].get("value")
        if value is not None:
            return value
    return default


@dataclass
class StoreLocation:
    """One geo-location row: a store paired with one of its catalogue versions."""
    store_id: str
    store_name: str = ""
    city: str = ""
    state: str = ""
    address: str = ""
    zipcode: str = ""
    phone: str = ""
    dma: str = ""
    catalogue_id: str = ""
    title: str = ""

    @classmethod
    def from_api(cls, row: Dict[str, Any]) -> "StoreLocation":
        return cls(
            store_id=str(row.get("field_store_id") or ""),
            store_name=row.get("field_store_name") or "",
            city=row.get("field_city") or "",
            state=row.get("field_state") or "",
            address=row.get("field_contact_address") or "",
            zipcode=row.get("field_zipcode") or "",
            phone=row.get("field_phone_number") or "",
            dma=row.get("field_dma") or "",
            catalogue_id=str(row.get("field_version") or ""),
            title=row.get("title") or "",
        )


@dataclass
class StoreSummary:
    """A distinct store, for listings."""
    store_id: str
    store_name: str
    city: str
    state: str


@dataclass
class CatalogueMetadata:
    id: str
    title: str = UNKNOWN
    client: str = UNKNOWN
    start_date: str = UNKNOWN
    end_date: str = UNKNOWN
    page_count: int = 0

    @classmethod
    def from_api(cls, catalogue_id: str, data: Dict[str, Any]) -> "CatalogueMetadata":
        return cls(
            id=catalogue_id,
            title=_first_value(data, "title", UNKNOWN),
            client=_first_value(data, "field_catalogue_client_name", UNKNOWN),
            start_date=_first_value(data, "field_catalogue_start_date", UNKNOWN),
            end_date=_first_value(data, "field_catalogue_finish_date", UNKNOWN),
            page_count=_first_value(data, "field_catalogue_pagecount", 0),
        )


@dataclass
class CataloguePage:
    page_number: int
    image_url: str
    width: str = ""
    height: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "CataloguePage":
        # Upstream JSON-escapes path separators inside the URL string
        image_url = (data.get("image") or "").replace("\\/", "/")
        return cls(
            page_number=parse_leading_int(data.get("page"), 0),
            image_url=image_url,
            width=data.get("field_page_image_original_width") or "",
            height=data.get("field_page_image_original_height") or "",
        )


@dataclass
class ResolvedStore:
    """A store together with the catalogue chosen for it."""
    store_id: str
    store_name: str
    city: str
    state: str
    address: str
    zipcode: str
    phone: str
    catalogue_id: str
    catalogue_title: str
    dma: str = ""


@dataclass
class CircularBundle:
    store: ResolvedStore
    metadata: Optional[CatalogueMetadata]
    pages: Optional[List[CataloguePage]]
