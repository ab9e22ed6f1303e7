"""
Controller for API information and health endpoints.
"""

from .base_controller import BaseController
from ..config import app_config
from ..models import APIInfo, HealthResponse


class InfoController(BaseController):
    """Controller for API information and health endpoints."""

    def _setup_routes(self):
        """Setup routes for API info and health."""

        @self.router.get("/", response_model=APIInfo, tags=["System Information"])
        async def get_api_info():
            """API root endpoint with basic information."""
            return APIInfo(
                message=app_config.api.title,
                version=app_config.api.version,
                endpoints={
                    "dashboard": "/dashboard - Category overview and product preview",
                    "categories": "/categories - Category cards",
                    "category": "/categories/{slug} - Category products with latest prices",
                    "products": "/products - Catalog products",
                    "product_codes": "/products/codes - All product codes",
                    "product": "/products/{code} - Price summary and charts",
                    "product_chart": "/products/{code}/chart - Windowed chart series",
                    "health": "/health - Health check"
                }
            )

        @self.router.get("/health", response_model=HealthResponse, tags=["System Information"])
        async def health_check():
            """Health check endpoint."""
            return HealthResponse(
                status="healthy",
                service="agri-price-api"
            )
