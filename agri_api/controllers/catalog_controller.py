"""
Controller for dashboard and category endpoints.

Endpoints:
    - GET /dashboard: Category cards and product preview
    - GET /categories: Category cards sorted by product count
    - GET /categories/{slug}: Category products with latest prices
"""

from fastapi import HTTPException, Depends
from typing import List

from .base_controller import BaseController
from ..services import CatalogService, ProductPriceService
from ..repositories import ProductRepository, PriceHistoryRepository
from ..models import CategoryInfo, DashboardResponse, CategoryDetailResponse


def get_catalog_service() -> CatalogService:
    """Dependency injection for CatalogService."""
    repository = ProductRepository()
    return CatalogService(repository)


def get_product_price_service() -> ProductPriceService:
    """Dependency injection for ProductPriceService."""
    repository = PriceHistoryRepository()
    return ProductPriceService(repository, catalog_service=get_catalog_service())


class CatalogController(BaseController):
    """Controller for dashboard and category endpoints."""

    def _setup_routes(self):
        """Setup routes for catalog operations."""

        @self.router.get(
            "/dashboard",
            response_model=DashboardResponse,
            tags=["Catalog"],
            summary="Get the dashboard overview",
            description="""
            Category cards with product counts, sorted largest first, plus a
            preview of the first catalog products.
            """
        )
        async def get_dashboard(
            service: CatalogService = Depends(get_catalog_service)
        ):
            """Get the dashboard overview."""
            try:
                return service.get_dashboard()
            except Exception as e:
                self.handle_exception(e, "Error retrieving dashboard")

        @self.router.get(
            "/categories",
            response_model=List[CategoryInfo],
            tags=["Catalog"]
        )
        async def get_categories(
            service: CatalogService = Depends(get_catalog_service)
        ):
            """Get all categories sorted by product count."""
            try:
                return service.get_categories()
            except Exception as e:
                self.handle_exception(e, "Error retrieving categories")

        @self.router.get(
            "/categories/{slug}",
            response_model=CategoryDetailResponse,
            tags=["Catalog"],
            summary="Get a category listing",
            description="""
            Products of one category with each product's latest observation.
            Products without price data are listed with a null latestPrice.
            Unknown slugs return 404.
            """
        )
        async def get_category(
            slug: str,
            service: ProductPriceService = Depends(get_product_price_service)
        ):
            """Get a category's products with latest prices."""
            try:
                return service.get_category_listing(slug)
            except HTTPException:
                raise
            except Exception as e:
                self.handle_exception(e, "Error retrieving category")
