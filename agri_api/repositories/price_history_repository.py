"""
Repository for per-product price history.
Handles keyed reads of prices/<productCode>.json files.
"""

import logging
import os
import pandas as pd
from typing import Optional, Any

from .base_repository import BaseRepository
from ..config import data_manager

logger = logging.getLogger(__name__)

PRICE_COLUMNS = ['date', 'price_min', 'price_max']


def records_to_frame(records) -> pd.DataFrame:
    """
    Build a price series DataFrame from raw records.

    Accepts camelCase dicts as stored on disk (priceMin/priceMax), snake_case
    dicts, or PriceRecord models. Unparseable prices become 0 so the record is
    kept but treated as invalid.
    """
    rows = []
    for record in records or []:
        if hasattr(record, 'model_dump'):
            record = record.model_dump()
        if not isinstance(record, dict):
            logger.warning(f"Skipping malformed price record: {record!r}")
            continue
        rows.append({
            'date': record.get('date'),
            'price_min': record.get('priceMin', record.get('price_min')),
            'price_max': record.get('priceMax', record.get('price_max')),
        })

    df = pd.DataFrame(rows, columns=PRICE_COLUMNS)
    df['date'] = df['date'].fillna('').astype(str)
    for column in ('price_min', 'price_max'):
        df[column] = pd.to_numeric(
            df[column], errors='coerce').fillna(0.0).astype(float)
    return df


class PriceHistoryRepository(BaseRepository):
    """Repository for price history operations."""

    def __init__(self, store=None):
        self.data_manager = store or data_manager

    @property
    def prices_dir(self) -> str:
        config = self.data_manager.config
        return os.path.join(config.data_dir, config.data.prices_dir)

    def find_all(self) -> pd.DataFrame:
        """Find every price record across all products."""
        frames = []
        for product_code in self.find_product_codes():
            df = self.find_by_id(product_code)
            if df is not None and not df.empty:
                frames.append(df.assign(product_code=product_code))

        if not frames:
            return pd.DataFrame(columns=PRICE_COLUMNS + ['product_code'])
        return pd.concat(frames, ignore_index=True)

    def find_by_id(self, record_id: Any) -> Optional[pd.DataFrame]:
        """
        Find the price series for a product code.

        Returns None when the product has no usable price file (missing,
        unreadable or malformed alike), and an empty DataFrame when the file
        exists but holds no records.
        """
        path = self.data_manager.config.price_file_path(str(record_id))
        payload = self.data_manager.try_read_json(path)
        if payload is None:
            return None

        if isinstance(payload, dict):
            history = payload.get('priceHistory')
        else:
            history = payload

        if not isinstance(history, list):
            logger.warning(
                f"Price file for {record_id} has no priceHistory list, treating as missing")
            return None

        return records_to_frame(history)

    def count(self) -> int:
        """Count products that have a price file."""
        return len(self.find_product_codes())

    def find_product_codes(self) -> list:
        """Find product codes that have a price file."""
        if not os.path.isdir(self.prices_dir):
            return []
        return sorted(
            name[:-len('.json')]
            for name in os.listdir(self.prices_dir)
            if name.endswith('.json')
        )

    def find_latest(self, product_code: str) -> Optional[pd.Series]:
        """Find the last raw record of a product's series."""
        df = self.find_by_id(product_code)
        if df is None or df.empty:
            return None
        return df.iloc[-1]
