"""Tests for CatalogService listing and filtering."""

from decimal import Decimal

import pytest

from services.catalog_service import PRODUCT_TABLE_HEADER, CatalogService


@pytest.fixture
def service(database) -> CatalogService:
    return CatalogService()


class TestCategories:
    def test_counts_include_empty_categories(self, service):
        assert service.categories_with_product_counts().splitlines() == [
            "Categories and how many products they have:",
            "Beverages has 2 products.",
            "Condiments has 2 products.",
            "Seafood has 0 products.",
            "Meat/Poultry has 2 products.",
        ]


class TestPriceFilter:
    def test_highest_first(self, service):
        assert [p.name for p in service.products_above(Decimal("18.50"))] == [
            "masoud deluxe", "masoud classic", "Chang",
        ]

    def test_threshold_is_exclusive(self, service):
        assert "Chai" not in [p.name for p in service.products_above(Decimal("18"))]

    def test_unknown_cost_never_matches(self, service):
        assert "Mystery Box" not in [p.name for p in service.products_above(Decimal("-1"))]

    def test_format(self, service):
        assert service.products_above_price(Decimal("30")) == (
            "pId : 5 - pName : masoud deluxe - pCost : $40 - PUnit : 2 in Stock"
        )

    def test_nothing_above(self, service):
        assert service.products_above_price(Decimal("1000")) == ""


class TestNameMatching:
    def test_substring(self, service):
        assert [p.name for p in service.products_like("oud")] == ["masoud classic", "masoud deluxe"]

    def test_pattern_wildcards(self, service):
        assert [p.name for p in service.products_like("Ch_i")] == ["Chai"]

    def test_format(self, service):
        assert service.products_matching("Mystery") == (
            "name : Mystery Box - stock : 1 - discounted : True"
        )


class TestProductTable:
    def test_layout(self, service):
        lines = service.product_table().splitlines()
        assert lines[0] == PRODUCT_TABLE_HEADER
        assert lines[0].split() == ["ID", "Product", "Name", "Cost", "Stock", "Disc."]
        assert len(lines[0]) == len(lines[1]) - len("False") + len("Disc.")
        assert lines[1] == f"005 {'masoud deluxe':<35} {'$40.00':>8} {2:>5} False"
        assert lines[-1] == f"006 {'Mystery Box':<35} {'':>8} {1:>5} True"
        assert len(lines) == 7
