"""Tests for shoprite/circular/cli.py"""

import pytest

from shoprite.circular.cli import main


class TestCircularReport:
    def test_default_store(self, client, circular_api, capsys):
        assert main([], client=client) == 0
        out = capsys.readouterr().out
        assert "Store: ShopRite of Wall" in out
        assert "Address: 2445 Atlantic Ave, Manasquan, NJ 08736" in out
        assert "Catalogue ID: 222" in out
        assert "Circular: Week of 1/8" in out
        assert "Valid: 2026-10-16 to 2026-10-22" in out
        assert "Page 1: https://img.test/222/p1.jpg" in out
        assert out.index("Page 1:") < out.index("Page 2:")
        assert out.strip().splitlines()[-1] == "https://img.test/222/p1.jpg"

    def test_by_city(self, client, circular_api, capsys):
        assert main(["--city", "Brick"], client=client) == 1
        # 641's weekly catalogue 444 has no page listing stubbed
        assert "Failed to fetch circular pages!" in capsys.readouterr().out

    def test_empty_page_list(self, client, circular_api, capsys):
        circular_api[client.pages_url("222")] = []
        assert main(["--store-id", "630"], client=client) == 1
        assert "No pages found" in capsys.readouterr().out

    def test_unknown_store(self, client, circular_api, capsys):
        assert main(["--store-id", "9999"], client=client) == 1
        assert "Could not find store" in capsys.readouterr().err

    def test_no_catalogue_of_type(self, client, circular_api, capsys):
        assert main(["--type", "hispanic"], client=client) == 1
        assert "Could not find store" in capsys.readouterr().err

    def test_non_numeric_page_values(self, client, circular_api, capsys):
        circular_api[client.pages_url("222")] = [
            {"page": "cover", "image": "https:\\/\\/img.test\\/222\\/cover.jpg"},
            {"page": "1", "image": "https:\\/\\/img.test\\/222\\/p1.jpg"},
        ]
        assert main(["--store-id", "630"], client=client) == 0
        out = capsys.readouterr().out
        assert "Page 0: https://img.test/222/cover.jpg" in out
        assert out.strip().splitlines()[-1] == "https://img.test/222/cover.jpg"

    def test_errors_keep_stdout_clean(self, client, circular_api, capsys):
        main(["--store-id", "9999"], client=client)
        assert "Could not find store" not in capsys.readouterr().out

    def test_rejects_unknown_type(self, client, circular_api):
        with pytest.raises(SystemExit) as exc:
            main(["--type", "monthly"], client=client)
        assert exc.value.code == 2


class TestListStores:
    def test_lists_distinct_stores(self, client, circular_api, capsys):
        assert main(["--list-stores"], client=client) == 0
        out = capsys.readouterr().out
        assert "Available ShopRite Stores:" in out
        assert " 630  ShopRite of Wall (Manasquan, NJ)" in out
        assert "Total: 4 stores" in out

    def test_listing_unavailable(self, client, stub_responses, capsys):
        assert main(["--list-stores"], client=client) == 1
        assert "Failed to fetch store list" in capsys.readouterr().err


def test_help_exits_zero(client, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"], client=client)
    assert exc.value.code == 0
    assert "--store-id" in capsys.readouterr().out
