"""
Models for price series analytics.
"""

from enum import Enum
from typing import Optional

from .price_models import CamelModel, PriceRecord


class PriceSeriesStatus(str, Enum):
    """Outcome of looking up a product's price series."""
    NOT_FOUND = "not_found"   # no price data for the product code
    EMPTY = "empty"           # price data exists but holds no records
    AVAILABLE = "available"   # at least one record


class TimeWindow(str, Enum):
    """Trailing calendar period used to slice a price series."""
    ONE_MONTH = "1m"
    THREE_MONTHS = "3m"
    ONE_YEAR = "1y"
    ALL = "all"


class PriceSummary(CamelModel):
    """Model for summary statistics over a price series."""
    status: PriceSeriesStatus
    has_data: bool
    has_valid_data: bool
    latest: Optional[PriceRecord] = None
    average: float = 0.0
    min: float = 0.0
    max: float = 0.0
    valid_count: int = 0
    total_count: int = 0

    @property
    def not_found(self) -> bool:
        return self.status == PriceSeriesStatus.NOT_FOUND
