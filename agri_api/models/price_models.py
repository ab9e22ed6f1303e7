"""
Domain models for agricultural price data.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, as stored in the JSON data files."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PriceRecord(CamelModel):
    """Model for one dated min/max price observation."""
    date: str  # ISO-8601 date, YYYY-MM-DD
    price_min: float  # THB
    price_max: float  # THB

    @property
    def is_valid(self) -> bool:
        """Both prices strictly positive."""
        return self.price_min > 0 and self.price_max > 0

    @property
    def midpoint(self) -> float:
        return (self.price_min + self.price_max) / 2


class ChartPoint(CamelModel):
    """Model for a render-ready chart point."""
    date: str
    min: float
    max: float
    avg: float  # (min + max) / 2


class PriceRange(CamelModel):
    """Model for the latest price positioned inside the all-time range."""
    latest_min: float
    latest_max: float
    all_time_min: float
    all_time_max: float
    # percentage 0-100, None when the all-time range is degenerate
    position_percent: Optional[float] = None
