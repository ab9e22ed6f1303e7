"""
JSON Data Store Configuration and Management Module

This module provides centralized access to the pre-generated JSON files that
back the Thai Agricultural Price API. It implements the Repository pattern
with a singleton DataStoreManager for consistent data access across all
repositories.

Tags:
    - datastore
    - configuration
    - json
    - data-access
    - repository-pattern

Features:
    - Singleton data store manager for consistent file access
    - Process-wide memoization of read-only reference data (catalog, categories)
    - Guarded reads that degrade to "absent" instead of raising
    - Pandas DataFrame integration for data analysis

Usage:
    The data_manager instance is automatically available for import:

    ```python
    from agri_api.config import data_manager

    # Load the product catalog (parsed once per process)
    products = data_manager.load_products()

    # Read a price history file, None when missing or unreadable
    payload = data_manager.try_read_json(app_config.price_file_path("P11001"))
    ```

Data Layout:
    - <data_dir>/products.json: list of product objects
    - <data_dir>/categories.json: list of category names
    - <data_dir>/prices/<productCode>.json: product object with "priceHistory"
"""

import json
import logging
import os
from typing import Any, List, Optional

from .settings import ApplicationConfig, app_config

logger = logging.getLogger(__name__)


class DataStoreManager:
    """
    Centralized file access for the JSON data store.

    This class provides a unified interface for all data reads including:
    - Path resolution from application configuration
    - Strict reads that raise on failure
    - Guarded reads that return None on any read or parse failure
    - Memoized reference data shared by all requests

    Examples:
        >>> store = DataStoreManager()
        >>> products = store.load_products()
        >>> payload = store.try_read_json("/path/to/prices/P11001.json")
    """

    def __init__(self, config: ApplicationConfig = None):
        """
        Initialize the DataStoreManager with configuration settings.

        Args:
            config: Application configuration. Defaults to the global app_config.
        """
        self.config = config or app_config
        self._products: Optional[List[dict]] = None
        self._categories: Optional[List[str]] = None

    def read_json(self, path: str) -> Any:
        """
        Read and parse a JSON file.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the file is not valid JSON.
        """
        with open(path, 'r', encoding=self.config.data.encoding) as f:
            return json.load(f)

    def try_read_json(self, path: Optional[str]) -> Optional[Any]:
        """
        Read and parse a JSON file, returning None on any failure.

        Missing files are logged at debug level, unreadable or malformed files
        at warning level so operators can tell them apart from real absence.
        """
        if path is None:
            return None
        if not os.path.exists(path):
            logger.debug(f"Data file not found: {path}")
            return None
        try:
            return self.read_json(path)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read data file {path}: {e}")
            return None

    def load_products(self) -> List[dict]:
        """Load the product catalog, parsing it once per process."""
        if self._products is None:
            products = self.read_json(self.config.products_path)
            if not isinstance(products, list):
                raise ValueError(
                    f"Product catalog must be a JSON list: {self.config.products_path}")
            self._products = products
            logger.info(f"Loaded {len(products)} products from catalog")
        return self._products

    def load_categories(self) -> List[str]:
        """
        Load the category names, parsing them once per process.

        Falls back to the categories found in the catalog, in first-seen
        order, when no categories file exists.
        """
        if self._categories is None:
            payload = self.try_read_json(self.config.categories_path)
            if isinstance(payload, list):
                self._categories = [str(name) for name in payload]
            else:
                seen = []
                for product in self.load_products():
                    category = product.get('category')
                    if category and category not in seen:
                        seen.append(category)
                self._categories = seen
        return self._categories

    def clear_cache(self) -> None:
        """Drop memoized reference data so the next access re-reads it."""
        self._products = None
        self._categories = None


# Create a singleton instance for use throughout the application
# This ensures the reference data is parsed once and shared by all repositories
data_manager = DataStoreManager()
