"""Tests for catalog and product price services."""

import pytest
from fastapi import HTTPException

from agri_api.models import PriceRecord, PriceSeriesStatus, PriceSummary
from agri_api.services import CatalogService, ProductPriceService, slugify


class TestSlugify:

    @pytest.mark.parametrize("name, slug", [
        ("Rubber", "rubber"),
        ("Palm Oil", "palm-oil"),
        ("Exotic  Goods\tMix", "exotic-goods-mix"),
    ])
    def test_slugify(self, name, slug) -> None:
        assert slugify(name) == slug


class TestCatalogService:

    def test_resolve_slug(self, data_dir) -> None:
        assert CatalogService().resolve_slug("palm-oil") == "Palm Oil"

    def test_resolve_unknown_slug(self, data_dir) -> None:
        with pytest.raises(HTTPException) as exc:
            CatalogService().resolve_slug("spices")
        assert exc.value.status_code == 404

    def test_get_product(self, data_dir) -> None:
        product = CatalogService().get_product("P13001")
        assert product.category == "Rice"
        assert product.sale_type == "Farm gate"

    def test_negative_limit_rejected(self, data_dir) -> None:
        with pytest.raises(HTTPException) as exc:
            CatalogService().get_products(limit=-1)
        assert exc.value.status_code == 400


class TestPriceRange:

    def _summary(self, latest_min, latest_max, low, high, valid=True) -> PriceSummary:
        return PriceSummary(
            status=PriceSeriesStatus.AVAILABLE,
            has_data=True,
            has_valid_data=valid,
            latest=PriceRecord(date="2024-01-01", price_min=latest_min, price_max=latest_max),
            min=low,
            max=high,
            valid_count=1 if valid else 0,
            total_count=1
        )

    def test_position(self) -> None:
        price_range = ProductPriceService.compute_price_range(self._summary(15, 20, 10, 30))
        assert price_range.position_percent == 25

    def test_degenerate_range_has_no_position(self) -> None:
        price_range = ProductPriceService.compute_price_range(self._summary(10, 10, 10, 10))
        assert price_range.position_percent is None
        assert price_range.all_time_min == price_range.all_time_max == 10

    def test_invalid_latest_has_no_position(self) -> None:
        price_range = ProductPriceService.compute_price_range(self._summary(0, 55, 50, 60))
        assert price_range.position_percent is None
        assert price_range.latest_min == 0

    @pytest.mark.parametrize("latest_min, expected", [(5, 0.0), (45, 100.0)])
    def test_position_clamped(self, latest_min, expected) -> None:
        # latest below or above the all-time range of 10-30
        summary = self._summary(latest_min, 50, 10, 30)
        assert ProductPriceService.compute_price_range(summary).position_percent == expected

    def test_no_latest(self) -> None:
        summary = PriceSummary(status=PriceSeriesStatus.EMPTY, has_data=False, has_valid_data=False)
        assert ProductPriceService.compute_price_range(summary) is None


class TestLatestPrices:

    def test_each_lookup_independent(self, data_dir) -> None:
        latest = ProductPriceService().get_latest_prices(
            ["P11001", "P11003", "P19001", "P12001", "P13001"])
        assert latest["P11001"].date == "2024-03-01"
        assert latest["P11003"] is None
        assert latest["P19001"] is None
        assert latest["P12001"] is None
        assert latest["P13001"].price_max == 0

    def test_no_codes(self, data_dir) -> None:
        assert ProductPriceService().get_latest_prices([]) == {}

    def test_category_listing_unknown_slug(self, data_dir) -> None:
        with pytest.raises(HTTPException) as exc:
            ProductPriceService().get_category_listing("spices")
        assert exc.value.status_code == 404
