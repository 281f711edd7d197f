#!/usr/bin/env python3
"""
ShopRite Weekly Circular Fetcher

Fetches the current circular page images for a ShopRite store from the
RedPepper Digital API.

Usage:
    python3 get_circular.py                    # default store (Manasquan/Wall Township)
    python3 get_circular.py --store-id 630     # specify store by ID
    python3 get_circular.py --city Manasquan   # find store by city name
    python3 get_circular.py --list-stores      # list all available stores
    python3 get_circular.py --type wellness    # wellness circular instead of weekly
"""

import sys

from shoprite.circular.cli import main

if __name__ == "__main__":
    sys.exit(main())
