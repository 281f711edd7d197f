#!/usr/bin/env python3
"""
ShopRite Deals API server

Serves GET /shoprite-deals with an in-process HTML cache.

Usage:
    python3 deals_server.py
    DEALS_PORT=8080 python3 deals_server.py --verbose
"""

import argparse
import os

from dotenv import load_dotenv

from shoprite.common import load_settings, setup_logging
from shoprite.deals import DealsService, MemoryEdgeCache, create_app


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(description="ShopRite Deals API server")
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Interface to bind (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=int(os.environ.get("DEALS_PORT", 5000)),
        help="Port to listen on (default: $DEALS_PORT or 5000)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    settings = load_settings()
    service = DealsService(cache=MemoryEdgeCache(), settings=settings)
    app = create_app(service)
    app.run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
