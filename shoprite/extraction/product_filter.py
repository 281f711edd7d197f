"""
Product Filter

Selects product cards from a decoded category page state and reshapes them
into DealProduct records.

Page state layout (relevant parts only):

    {
      "productCardDictionary": {"<sku>": {...card...}, ...},
      "departments": {
        "subCategory": {
          "subCategories": {"Beef": {"products": ["<sku>", ...]}, ...}
        }
      }
    }
"""

import logging
from typing import Any, Dict, List, Optional

from ..common.constants import DEFAULT_PRODUCT_LIMIT
from ..models import DealProduct

logger = logging.getLogger(__name__)


def category_info(data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Return departments.subCategory, or None when the page has none."""
    departments = data.get("departments") or {}
    return departments.get("subCategory") or None


def _subcategories(data: Dict[str, Any]) -> Dict[str, Any]:
    info = category_info(data) or {}
    return info.get("subCategories") or {}


def select_skus(
    data: Dict[str, Any],
    subcategory: Optional[str] = None,
    limit: int = DEFAULT_PRODUCT_LIMIT,
) -> List[str]:
    """
    Pick the SKUs to return, deduplicated in first-seen order and truncated.

    A named subcategory that exists restricts the pick to its SKUs; an unknown
    or empty name falls back to every subcategory.
    """
    subcategories = _subcategories(data)

    if subcategory and subcategory in subcategories:
        skus = list(subcategories[subcategory].get("products") or [])
    else:
        skus = []
        for subcat in subcategories.values():
            skus.extend(subcat.get("products") or [])

    unique = list(dict.fromkeys(skus))
    return unique[:max(limit, 0)]


def to_deal_product(card: Dict[str, Any], sku: Optional[str] = None) -> DealProduct:
    """Reshape a productCardDictionary entry."""
    image = card.get("image")
    if not isinstance(image, dict):
        image = {}
    default_category = card.get("defaultCategory") or []
    category = None
    if default_category and isinstance(default_category[0], dict):
        category = default_category[0].get("category")

    return DealProduct(
        sku=card.get("sku") or sku,
        name=card.get("name"),
        description=card.get("description"),
        brand=card.get("brand"),
        price=card.get("price"),
        unit_price=card.get("unitPrice"),
        was_price=card.get("wasPrice"),
        price_label=card.get("priceLabel"),
        is_discounted=card.get("isDiscounted"),
        image=image.get("cell") or image.get("default"),
        image_zoom=image.get("zoom"),
        available=card.get("available"),
        sell_by=card.get("sellBy"),
        category=category or card.get("category"),
    )


def parse_products(
    data: Dict[str, Any],
    subcategory: Optional[str] = None,
    limit: int = DEFAULT_PRODUCT_LIMIT,
) -> List[DealProduct]:
    """
    Build the product list for a category page.

    Args:
        data: Decoded __PRELOADED_STATE__
        subcategory: Optional subcategory name to restrict to
        limit: Maximum number of SKUs considered

    Returns:
        DealProduct list, at most `limit` long. SKUs listed under a
        subcategory but missing from productCardDictionary are dropped.
    """
    product_dict = data.get("productCardDictionary") or {}
    products = []
    missing = 0

    for sku in select_skus(data, subcategory, limit):
        card = product_dict.get(sku)
        if not card:
            missing += 1
            logger.debug("SKU %s listed but has no product card", sku)
            continue
        products.append(to_deal_product(card, sku))

    if missing:
        logger.info("Skipped %d SKUs without product cards", missing)

    return products
