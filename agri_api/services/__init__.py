"""
Services package for business logic layer.
Imports all services for easy access.
"""

# Base service
from .base_service import BaseService

# Individual services
from .price_analytics_service import PriceAnalyticsService
from .catalog_service import CatalogService, slugify
from .product_price_service import ProductPriceService

__all__ = [
    # Base service
    "BaseService",

    # Individual services
    "PriceAnalyticsService",
    "CatalogService",
    "ProductPriceService",

    # Helpers
    "slugify"
]
