"""
Deal extraction from ShopRite category pages.

Usage:
    from shoprite.extraction import PreloadedStateParser, parse_products

    state = PreloadedStateParser().parse(html)
    products = parse_products(state, subcategory="Beef", limit=10)
"""

from .parsers import PreloadedStateParser
from .product_filter import category_info, parse_products, select_skus, to_deal_product

__all__ = [
    'PreloadedStateParser',
    'parse_products',
    'select_skus',
    'to_deal_product',
    'category_info',
]
