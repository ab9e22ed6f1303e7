"""
Repository package for data access layer.
"""

from .base_repository import BaseRepository
from .product_repository import ProductRepository
from .price_history_repository import PriceHistoryRepository, records_to_frame

__all__ = [
    "BaseRepository",
    "ProductRepository",
    "PriceHistoryRepository",
    "records_to_frame"
]
