"""
Models for the product catalog.
"""

from typing import Optional

from .price_models import CamelModel, PriceRecord


class Product(CamelModel):
    """Model for a tracked agricultural commodity."""
    id: int
    product_code: str
    product_name: str
    category: str
    sale_type: str


class CategoryInfo(CamelModel):
    """Model for a category card."""
    name: str
    slug: str
    product_count: int
    icon: str
    description: str


class ProductWithLatestPrice(Product):
    """Model for a product card with its most recent observation."""
    latest_price: Optional[PriceRecord] = None
