"""
ShopRite Weekly Circular Fetcher

Finds a store's current circular on RedPepper and prints its page image URLs.
The last line of a successful run is the first page's image URL.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..common.config_loader import Settings, load_settings
from ..common.constants import CATALOGUE_TYPES
from ..common.log_config import setup_logging
from ..models import ResolvedStore
from .api_client import RedPepperClient
from .resolver import CircularResolver

logger = logging.getLogger(__name__)

EPILOG = """
Examples:
  get_circular.py                       # default store (Manasquan/Wall Township)
  get_circular.py --store-id 630        # specify store by ID
  get_circular.py --city Manasquan      # find store by city name
  get_circular.py --list-stores         # list all available stores
  get_circular.py --type wellness       # wellness circular instead of weekly
"""


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ShopRite Weekly Circular Fetcher",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--store-id",
        default=settings.default_store_id,
        help=f"Specify store by numeric ID (default: {settings.default_store_id})"
    )
    parser.add_argument(
        "--city",
        help="Find store by city name (partial match)"
    )
    parser.add_argument(
        "--type",
        dest="catalogue_type",
        default="weekly",
        choices=CATALOGUE_TYPES,
        help="Circular type: weekly (default), wellness, hispanic, or all"
    )
    parser.add_argument(
        "--list-stores",
        action="store_true",
        help="List all available ShopRite stores"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )
    return parser


def print_store_list(resolver: CircularResolver) -> int:
    print("Fetching store list...\n")
    stores = resolver.list_all_stores()
    if stores is None:
        print("Failed to fetch store list", file=sys.stderr)
        return 1

    print("Available ShopRite Stores:")
    print("=" * 60)
    for store in stores:
        print(f"{store.store_id:>4}  {store.store_name} ({store.city}, {store.state})")
    print(f"\nTotal: {len(stores)} stores")
    return 0


def print_store(store: ResolvedStore):
    print("ShopRite Weekly Circular Fetcher")
    print("=" * 40)
    print(f"\nStore: {store.store_name}")
    print(f"Address: {store.address}, {store.city}, {store.state} {store.zipcode}")
    print(f"Phone: {store.phone}")
    print(f"Store ID: {store.store_id}")
    print(f"Catalogue ID: {store.catalogue_id}")


def print_circular(resolver: CircularResolver, store: ResolvedStore) -> int:
    """Print metadata and pages for the resolved catalogue. Returns the exit code."""
    metadata = resolver.get_catalogue_metadata(store.catalogue_id)
    if metadata:
        print(f"\nCircular: {metadata.title}")
        print(f"Valid: {metadata.start_date} to {metadata.end_date}")
        print(f"Pages: {metadata.page_count}")

    print("\n" + "=" * 40)
    print("Circular Pages:")
    print("=" * 40)

    pages = resolver.get_circular_pages(store.catalogue_id)
    if pages is None:
        print("Failed to fetch circular pages!")
        return 1
    if not pages:
        print("No pages found")
        return 1

    for page in pages:
        print(f"Page {page.page_number}: {page.image_url}")

    print("\n" + "=" * 40)
    print("First page URL (for TRMNL):")
    print(pages[0].image_url)
    return 0


def main(argv: Optional[List[str]] = None, client: Optional[RedPepperClient] = None) -> int:
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    client = client or RedPepperClient(
        client_id=settings.redpepper_client_id,
        base_url=settings.redpepper_base_url,
        timeout=settings.request_timeout,
        user_agent=settings.circular_user_agent,
    )

    with client:
        resolver = CircularResolver(client)

        if args.list_stores:
            return print_store_list(resolver)

        if args.city:
            store = resolver.find_store_by_city(args.city, args.catalogue_type)
        else:
            store = resolver.find_store_and_catalogue(args.store_id, args.catalogue_type)

        if store is None:
            print("Could not find store", file=sys.stderr)
            return 1

        print_store(store)
        return print_circular(resolver, store)
