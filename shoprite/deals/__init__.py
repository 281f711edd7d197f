"""
ShopRite category deals endpoint.

Modules:
    cache   - EdgeCache contract and in-process implementation
    service - Read-through page fetch and product extraction
    app     - Flask app factory exposing GET /shoprite-deals
"""

from .app import create_app
from .cache import EdgeCache, MemoryEdgeCache
from .service import DealsService

__all__ = [
    'create_app',
    'DealsService',
    'EdgeCache',
    'MemoryEdgeCache',
]
