"""Shared test fixtures."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from shoprite.circular import CircularResolver, RedPepperClient

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def category_page_html():
    """Load the category page HTML fixture."""
    return (FIXTURES_DIR / "category_page.html").read_text(encoding="utf-8")


@pytest.fixture
def geo_locations():
    """Load the RedPepper geo-location listing fixture."""
    return json.loads((FIXTURES_DIR / "geo_locations.json").read_text(encoding="utf-8"))


@pytest.fixture
def preloaded_state():
    """A small decoded page state."""
    return {
        "departments": {
            "subCategory": {
                "name": "Meat",
                "subCategories": {
                    "Beef": {"products": ["A", "B", "MISSING"]},
                    "Pork": {"products": ["C", "A"]},
                    "Empty": {},
                },
            }
        },
        "productCardDictionary": {
            "A": {"sku": "A", "name": "Product A", "price": "$1.00",
                  "image": {"cell": "a-cell.jpg", "zoom": "a-zoom.jpg"}},
            "B": {"sku": "B", "name": "Product B", "price": "$2.00",
                  "image": {"default": "b.jpg"}},
            "C": {"sku": "C", "name": "Product C", "price": "$3.00"},
        },
    }


def metadata_payload(title, start="2026-10-16", end="2026-10-22", pages=12):
    """Build a RedPepper node payload in Drupal field-list form."""
    return {
        "title": [{"value": title}],
        "field_catalogue_client_name": [{"value": "ShopRite"}],
        "field_catalogue_start_date": [{"value": start}],
        "field_catalogue_finish_date": [{"value": end}],
        "field_catalogue_pagecount": [{"value": pages}],
    }


@pytest.fixture
def client():
    """RedPepper client with a known base URL."""
    c = RedPepperClient(client_id="4573", base_url="https://rp.test")
    yield c
    c.close()


@pytest.fixture
def stub_responses(client):
    """
    Route client.fetch_json through a dict of url -> payload.

    URLs missing from the dict behave like failed requests (None).
    """
    responses = {}
    with patch.object(client, "fetch_json", side_effect=lambda url: responses.get(url)):
        yield responses


@pytest.fixture
def resolver(client, stub_responses):
    return CircularResolver(client, max_workers=4)


@pytest.fixture
def circular_api(client, stub_responses, geo_locations):
    """A populated upstream: store 630 has two weekly circulars and a wellness one."""
    stub_responses[client.geo_location_url()] = geo_locations
    stub_responses[client.metadata_url("111")] = metadata_payload("Week of 1/1")
    stub_responses[client.metadata_url("222")] = metadata_payload("Week of 1/8")
    stub_responses[client.metadata_url("333")] = metadata_payload("Wellness Guide Winter")
    stub_responses[client.metadata_url("444")] = metadata_payload("Week of 1/8")
    stub_responses[client.metadata_url("555")] = metadata_payload("Hispanic Savings")
    stub_responses[client.pages_url("222")] = [
        {"page": "2", "image": "https:\\/\\/img.test\\/222\\/p2.jpg",
         "field_page_image_original_width": "1200", "field_page_image_original_height": "1800"},
        {"page": "1", "image": "https:\\/\\/img.test\\/222\\/p1.jpg",
         "field_page_image_original_width": "1200", "field_page_image_original_height": "1800"},
    ]
    return stub_responses


@pytest.fixture
def make_metadata():
    return metadata_payload
