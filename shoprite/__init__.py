"""
ShopRite Deals & Circular Tools

Modules:
    models      - Data models (DealProduct, StoreLocation, CatalogueMetadata, ...)
    common      - Shared utilities (config loader, logging, constants)
    extraction  - Embedded page state parsing and product filtering
    deals       - Category deals HTTP endpoint with read-through HTML cache
    circular    - RedPepper circular store/catalogue resolution and CLI
"""
