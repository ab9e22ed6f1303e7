"""
Models package for API data structures.
Imports all models for easy access.
"""

# Price models
from .price_models import CamelModel, PriceRecord, ChartPoint, PriceRange

# Catalog models
from .product_models import Product, CategoryInfo, ProductWithLatestPrice

# Analytics models
from .analytics_models import PriceSeriesStatus, TimeWindow, PriceSummary

# Response models
from .response_models import (
    DashboardResponse,
    CategoryDetailResponse,
    ProductDetailResponse,
    ProductChartResponse,
    APIInfo,
    HealthResponse
)

__all__ = [
    # Price models
    "CamelModel",
    "PriceRecord",
    "ChartPoint",
    "PriceRange",

    # Catalog models
    "Product",
    "CategoryInfo",
    "ProductWithLatestPrice",

    # Analytics models
    "PriceSeriesStatus",
    "TimeWindow",
    "PriceSummary",

    # Response models
    "DashboardResponse",
    "CategoryDetailResponse",
    "ProductDetailResponse",
    "ProductChartResponse",
    "APIInfo",
    "HealthResponse"
]
