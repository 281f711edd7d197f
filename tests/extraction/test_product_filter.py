"""Tests for shoprite/extraction/product_filter.py"""

import pytest

from shoprite.extraction import PreloadedStateParser
from shoprite.extraction.product_filter import (
    category_info,
    parse_products,
    select_skus,
    to_deal_product,
)


class TestSelectSkus:
    def test_unions_all_subcategories_in_order(self, preloaded_state):
        assert select_skus(preloaded_state) == ["A", "B", "MISSING", "C"]

    def test_known_subcategory_only(self, preloaded_state):
        assert select_skus(preloaded_state, "Pork") == ["C", "A"]

    def test_unknown_subcategory_falls_back_to_all(self, preloaded_state):
        assert select_skus(preloaded_state, "Lamb") == ["A", "B", "MISSING", "C"]

    def test_dedup_happens_before_limit(self, preloaded_state):
        preloaded_state["departments"]["subCategory"]["subCategories"] = {
            "X": {"products": ["A", "A", "A", "B"]},
        }
        assert select_skus(preloaded_state, limit=2) == ["A", "B"]

    def test_no_departments(self):
        assert select_skus({}) == []


class TestParseProducts:
    def test_skips_skus_without_cards(self, preloaded_state):
        skus = [p.sku for p in parse_products(preloaded_state)]
        assert skus == ["A", "B", "C"]

    @pytest.mark.parametrize("limit", [0, 1, 2, 3, 50])
    def test_never_exceeds_limit_or_duplicates(self, preloaded_state, limit):
        products = parse_products(preloaded_state, limit=limit)
        skus = [p.sku for p in products]
        assert len(skus) <= limit
        assert len(skus) == len(set(skus))
        assert set(skus) <= set(preloaded_state["productCardDictionary"])

    def test_limit_counts_missing_skus(self, preloaded_state):
        # A, B, MISSING are the first three; MISSING is dropped after truncation
        products = parse_products(preloaded_state, limit=3)
        assert [p.sku for p in products] == ["A", "B"]

    def test_subcategory_restricts_products(self, preloaded_state):
        products = parse_products(preloaded_state, subcategory="Pork")
        assert [p.sku for p in products] == ["C", "A"]

    def test_empty_product_dictionary(self, preloaded_state):
        preloaded_state["productCardDictionary"] = {}
        assert parse_products(preloaded_state) == []

    def test_fixture_page(self, category_page_html):
        state = PreloadedStateParser().parse(category_page_html)
        products = parse_products(state, subcategory="Beef")
        assert [p.sku for p in products] == ["SKU-1", "SKU-2"]


class TestToDealProduct:
    def test_full_card(self):
        card = {
            "sku": "1", "name": "Beef", "description": "d", "brand": "b",
            "price": "$4.99", "unitPrice": "$4.99/lb", "wasPrice": "$5.99",
            "priceLabel": "Sale", "isDiscounted": True,
            "image": {"cell": "cell.jpg", "default": "default.jpg", "zoom": "zoom.jpg"},
            "available": True, "sellBy": "weight",
            "defaultCategory": [{"category": "Beef"}], "category": "Meat",
        }
        product = to_deal_product(card)
        assert product.image == "cell.jpg"
        assert product.image_zoom == "zoom.jpg"
        assert product.category == "Beef"
        assert product.was_price == "$5.99"
        assert product.is_discounted is True

    def test_image_falls_back_to_default(self):
        product = to_deal_product({"sku": "1", "image": {"default": "default.jpg"}})
        assert product.image == "default.jpg"
        assert product.image_zoom is None

    def test_non_dict_image_is_ignored(self):
        product = to_deal_product({"sku": "1", "image": "a.jpg"})
        assert product.image is None
        assert product.image_zoom is None

    def test_category_falls_back(self):
        product = to_deal_product({"sku": "1", "defaultCategory": [], "category": "Meat"})
        assert product.category == "Meat"

    def test_sku_from_key_when_card_lacks_it(self):
        assert to_deal_product({"name": "x"}, "K1").sku == "K1"


class TestCategoryInfo:
    def test_returns_subcategory_block(self, preloaded_state):
        assert category_info(preloaded_state)["name"] == "Meat"

    def test_missing(self):
        assert category_info({"departments": {}}) is None
        assert category_info({}) is None
