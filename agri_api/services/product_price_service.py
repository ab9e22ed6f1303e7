"""
Service for product price pages and category listings.

Combines the catalog, the price store and the analytics engine into the
payloads the dashboard renders. A product without price data is reported with
a NOT_FOUND summary rather than an error, so the page can show a
"no data available" state.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Dict, Optional

from fastapi import HTTPException

from .base_service import BaseService
from .catalog_service import CatalogService, slugify
from .price_analytics_service import PriceAnalyticsService
from ..config import app_config
from ..repositories import PriceHistoryRepository
from ..models import (
    PriceRecord, PriceRange, PriceSummary, ProductWithLatestPrice,
    CategoryDetailResponse, ProductDetailResponse, ProductChartResponse
)

logger = logging.getLogger(__name__)


class ProductPriceService(BaseService):
    """Service for per-product price operations."""

    def __init__(
        self,
        repository: PriceHistoryRepository = None,
        catalog_service: CatalogService = None,
        analytics: PriceAnalyticsService = None
    ):
        """Initialize service with repository dependency injection."""
        super().__init__(repository or PriceHistoryRepository())
        self.catalog_service = catalog_service or CatalogService()
        self.analytics = analytics or PriceAnalyticsService()

    def validate_input(self, **kwargs) -> bool:
        """Validate input parameters for price queries."""
        return self.analytics.validate_input(**kwargs)

    @staticmethod
    def compute_price_range(summary: PriceSummary) -> Optional[PriceRange]:
        """
        Position the latest observation inside the all-time valid range.

        position_percent is None when there is no valid data, the latest
        record is invalid or the range is degenerate (max == min). Otherwise
        it is clamped to 0-100.
        """
        if summary.latest is None:
            return None

        position = None
        span = summary.max - summary.min
        if summary.has_valid_data and summary.latest.is_valid and span > 0:
            position = (summary.latest.price_min - summary.min) / span * 100
            position = min(max(position, 0.0), 100.0)

        return PriceRange(
            latest_min=summary.latest.price_min,
            latest_max=summary.latest.price_max,
            all_time_min=summary.min,
            all_time_max=summary.max,
            position_percent=position
        )

    def get_latest_price(self, product_code: str) -> Optional[PriceRecord]:
        """Get the last raw record for a product, None without data."""
        row = self.repository.find_latest(product_code)
        if row is None:
            return None
        return PriceRecord(
            date=str(row['date']),
            price_min=float(row['price_min']),
            price_max=float(row['price_max'])
        )

    def get_latest_prices(self, product_codes) -> Dict[str, Optional[PriceRecord]]:
        """
        Get latest prices for many products concurrently.

        Each lookup is independent; a missing file for one product only
        yields None for that product.
        """
        codes = list(product_codes)
        if not codes:
            return {}

        workers = max(1, min(app_config.analytics.listing_workers, len(codes)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = executor.map(self.get_latest_price, codes)
            return dict(zip(codes, results))

    def get_category_listing(self, slug: str) -> CategoryDetailResponse:
        """Get a category's products with their latest prices."""
        try:
            category = self.catalog_service.resolve_slug(slug)
            products = self.catalog_service.get_products(category=category)
            latest = self.get_latest_prices(p.product_code for p in products)

            listing = [
                ProductWithLatestPrice(
                    **product.model_dump(),
                    latest_price=latest.get(product.product_code)
                )
                for product in products
            ]

            return CategoryDetailResponse(
                category=category,
                slug=slug,
                product_count=len(listing),
                products=listing
            )

        except HTTPException:
            raise
        except Exception as e:
            self.handle_exception(e, "Error retrieving category listing")

    def get_product_detail(
        self,
        product_code: str,
        reference_date: date = None,
        max_points: int = None
    ) -> ProductDetailResponse:
        """Get summary statistics and windowed charts for a product."""
        try:
            self.validate_input(max_points=max_points)
            product = self.catalog_service.get_product(product_code)
            series = self.repository.find_by_id(product_code)

            summary = self.analytics.compute_summary(series)
            charts = self.analytics.build_window_charts(
                series, reference_date=reference_date, max_points=max_points)

            logger.debug(
                f"Product {product_code}: status={summary.status.value} "
                f"records={summary.total_count} valid={summary.valid_count}")

            return ProductDetailResponse(
                product=product,
                category_slug=slugify(product.category),
                summary=summary,
                latest_avg_price=summary.latest.midpoint if summary.latest else None,
                price_range=self.compute_price_range(summary),
                charts=charts,
                total_data_points=summary.total_count,
                currency=app_config.analytics.currency_symbol,
                data_source=app_config.analytics.data_source
            )

        except HTTPException:
            raise
        except Exception as e:
            self.handle_exception(e, "Error retrieving product prices")

    def get_product_chart(
        self,
        product_code: str,
        window: str = None,
        max_points: int = None,
        reference_date: date = None
    ) -> ProductChartResponse:
        """Get one windowed, down-sampled chart series for a product."""
        try:
            window = window or app_config.analytics.default_window
            self.validate_input(window=window, max_points=max_points)
            self.catalog_service.get_product(product_code)

            series = self.repository.find_by_id(product_code)
            windowed = self.analytics.filter_by_window(
                series, window, reference_date)

            return ProductChartResponse(
                product_code=product_code,
                window=window,
                total_points=len(windowed),
                points=self.analytics.downsample_for_chart(
                    windowed, max_points)
            )

        except HTTPException:
            raise
        except Exception as e:
            self.handle_exception(e, "Error retrieving product chart")
