"""
Controllers package for API endpoint handlers.
Imports all controllers for easy access.
"""

from fastapi import APIRouter

# Base controller
from .base_controller import BaseController

# Individual controllers
from .info_controller import InfoController
from .catalog_controller import CatalogController
from .product_controller import ProductController


class AgriPriceController:
    """
    Aggregate controller that combines all agricultural price controllers.
    """

    def __init__(self):
        """Initialize aggregate controller with all sub-controllers."""
        self.router = APIRouter()

        # Initialize individual controllers
        self.info_controller = InfoController()
        self.catalog_controller = CatalogController()
        self.product_controller = ProductController()

        # Include all routers
        self._setup_aggregate_routes()

    def _setup_aggregate_routes(self):
        """Setup aggregate routes by including all controller routers."""
        self.router.include_router(self.info_controller.router)
        self.router.include_router(self.catalog_controller.router)
        self.router.include_router(self.product_controller.router)


# Create aggregate controller
agri_price_controller = AgriPriceController()

__all__ = [
    # Base controller
    "BaseController",

    # Individual controllers
    "InfoController",
    "CatalogController",
    "ProductController",

    # Aggregate controller
    "AgriPriceController",
    "agri_price_controller"
]
