"""
Deal product data model.

Pure data class for a product card taken from a ShopRite category page.
No business logic - only the field set and its wire shape.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class DealProduct:
    """
    A product as returned by the deals endpoint.

    Every field except the SKU is passed through from the page's
    productCardDictionary entry; upstream gaps stay None.
    """
    sku: str
    name: Optional[str] = None
    description: Optional[str] = None
    brand: Optional[str] = None
    price: Any = None
    unit_price: Any = None
    was_price: Any = None
    price_label: Optional[str] = None
    is_discounted: Optional[bool] = None
    image: Optional[str] = None         # thumbnail ("cell", else "default")
    image_zoom: Optional[str] = None
    available: Optional[bool] = None
    sell_by: Optional[str] = None
    category: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sku": self.sku,
            "name": self.name,
            "description": self.description,
            "brand": self.brand,
            "price": self.price,
            "unitPrice": self.unit_price,
            "wasPrice": self.was_price,
            "priceLabel": self.price_label,
            "isDiscounted": self.is_discounted,
            "image": self.image,
            "imageZoom": self.image_zoom,
            "available": self.available,
            "sellBy": self.sell_by,
            "category": self.category,
        }
