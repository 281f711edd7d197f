"""
Parsers for data embedded in retailer pages.

- PreloadedStateParser: window.__PRELOADED_STATE__ Redux snapshot
"""

from .preloaded_state import PreloadedStateParser

__all__ = ['PreloadedStateParser']
