"""
Response models for API endpoints.
"""

from pydantic import BaseModel
from typing import Dict, List, Optional

from .analytics_models import PriceSummary, TimeWindow
from .price_models import CamelModel, ChartPoint, PriceRange
from .product_models import CategoryInfo, Product, ProductWithLatestPrice


class DashboardResponse(CamelModel):
    """Model for the dashboard overview."""
    total_products: int
    total_categories: int
    categories: List[CategoryInfo]
    preview_products: List[Product]
    has_more_products: bool


class CategoryDetailResponse(CamelModel):
    """Model for a category listing with latest prices."""
    category: str
    slug: str
    product_count: int
    products: List[ProductWithLatestPrice]


class ProductDetailResponse(CamelModel):
    """Model for a product page."""
    product: Product
    category_slug: str
    summary: PriceSummary
    latest_avg_price: Optional[float] = None
    price_range: Optional[PriceRange] = None
    charts: Dict[str, List[ChartPoint]]  # keyed by TimeWindow value
    total_data_points: int
    currency: str
    data_source: str


class ProductChartResponse(CamelModel):
    """Model for a single windowed chart series."""
    product_code: str
    window: TimeWindow
    total_points: int  # points in the window before downsampling
    points: List[ChartPoint]


class APIInfo(BaseModel):
    """Model for API information."""
    message: str
    version: str
    endpoints: dict


class HealthResponse(BaseModel):
    """Model for health check response."""
    status: str
    service: str
