"""
Repository for the product catalog.
Read-only access to products.json and categories.json.
"""

import pandas as pd
from typing import List, Optional, Any

from .base_repository import BaseRepository
from ..config import data_manager

PRODUCT_COLUMNS = ['id', 'productCode', 'productName', 'category', 'saleType']


class ProductRepository(BaseRepository):
    """Repository for catalog operations."""

    def __init__(self, store=None):
        self.data_manager = store or data_manager

    def find_all(self) -> pd.DataFrame:
        """Find all products in catalog order."""
        products = self.data_manager.load_products()
        df = pd.DataFrame(products, columns=PRODUCT_COLUMNS)
        return df

    def find_by_id(self, record_id: Any) -> Optional[pd.Series]:
        """Find product by product code."""
        df = self.find_all()
        matches = df[df['productCode'] == record_id]
        return matches.iloc[0] if not matches.empty else None

    def count(self) -> int:
        """Count catalog products."""
        return len(self.data_manager.load_products())

    def find_by_category(self, category: str) -> pd.DataFrame:
        """Find products in a category, catalog order preserved."""
        df = self.find_all()
        return df[df['category'] == category].reset_index(drop=True)

    def find_categories(self) -> List[str]:
        """Find all category names."""
        return list(self.data_manager.load_categories())

    def count_by_category(self) -> pd.Series:
        """Count products per category name."""
        return self.find_all().groupby('category').size()
