"""
Controller for product and price history endpoints.

This controller handles product lookups and per-product price analytics:
- Catalog product listing and product codes
- Summary statistics (latest, average, lowest, highest)
- Windowed, down-sampled chart series for rendering

Tags:
    - products
    - price-history
    - charting
    - rest-endpoints

Endpoints:
    - GET /products: Catalog products, optionally by category
    - GET /products/codes: Every product code
    - GET /products/{code}: Summary statistics and charts for all windows
    - GET /products/{code}/chart: One windowed chart series
"""

from datetime import date
from fastapi import Query, HTTPException, Depends
from typing import Optional, List

from .base_controller import BaseController
from .catalog_controller import get_catalog_service, get_product_price_service
from ..services import CatalogService, ProductPriceService
from ..models import Product, ProductDetailResponse, ProductChartResponse


class ProductController(BaseController):
    """Controller for product endpoints."""

    def _setup_routes(self):
        """Setup routes for product operations."""

        @self.router.get(
            "/products",
            response_model=List[Product],
            tags=["Products"],
            summary="Get catalog products"
        )
        async def get_products(
            category: Optional[str] = Query(
                None,
                description="Category name to filter by, e.g. 'Palm Oil'"
            ),
            limit: Optional[int] = Query(
                None,
                description="Maximum number of products to return",
                ge=1
            ),
            service: CatalogService = Depends(get_catalog_service)
        ):
            """Get catalog products in catalog order."""
            try:
                return service.get_products(category=category, limit=limit)
            except HTTPException:
                raise
            except Exception as e:
                self.handle_exception(e, "Error retrieving products")

        @self.router.get(
            "/products/codes",
            response_model=List[str],
            tags=["Products"]
        )
        async def get_product_codes(
            service: CatalogService = Depends(get_catalog_service)
        ):
            """Get every catalog product code."""
            try:
                return service.get_product_codes()
            except Exception as e:
                self.handle_exception(e, "Error retrieving product codes")

        @self.router.get(
            "/products/{code}",
            response_model=ProductDetailResponse,
            tags=["Products"],
            summary="Get price summary and charts for a product",
            description="""
            Summary statistics and chart series for one product.

            **Summary:**
            - **latest**: last observation in the series, whatever its validity
            - **average/min/max**: over records whose prices are both above zero
            - **status**: `available`, `empty` (no records) or `not_found` (no price data)

            **Charts:**
            - One series per window: `1m`, `3m`, `1y`, `all`
            - Windows are calendar based, counted back from `as_of` (default: today in Bangkok)
            - Series longer than `max_points` are decimated by position

            Unknown product codes return 404.
            """,
            response_description="Price summary, latest range position and chart series"
        )
        async def get_product(
            code: str,
            as_of: Optional[date] = Query(
                None,
                description="Reference date for window cutoffs in YYYY-MM-DD format"
            ),
            max_points: Optional[int] = Query(
                None,
                description="Maximum chart points per window (default: 365)",
                ge=1,
                le=10000
            ),
            service: ProductPriceService = Depends(get_product_price_service)
        ):
            """Get price summary and charts for a product."""
            try:
                return service.get_product_detail(
                    code,
                    reference_date=as_of,
                    max_points=max_points
                )
            except HTTPException:
                raise
            except Exception as e:
                self.handle_exception(e, "Error retrieving product")

        @self.router.get(
            "/products/{code}/chart",
            response_model=ProductChartResponse,
            tags=["Products"],
            summary="Get one windowed chart series for a product"
        )
        async def get_product_chart(
            code: str,
            window: Optional[str] = Query(
                None,
                description="Window: '1m', '3m', '1y' or 'all' (default: '1y')"
            ),
            as_of: Optional[date] = Query(
                None,
                description="Reference date for the window cutoff in YYYY-MM-DD format"
            ),
            max_points: Optional[int] = Query(
                None,
                description="Maximum chart points (default: 365)",
                ge=1,
                le=10000
            ),
            service: ProductPriceService = Depends(get_product_price_service)
        ):
            """Get one windowed, down-sampled chart series."""
            try:
                return service.get_product_chart(
                    code,
                    window=window,
                    max_points=max_points,
                    reference_date=as_of
                )
            except HTTPException:
                raise
            except Exception as e:
                self.handle_exception(e, "Error retrieving product chart")
