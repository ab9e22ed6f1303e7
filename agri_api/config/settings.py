"""
Application configuration settings.
Spring Boot-like configuration management.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables from .env file next to the package, then the CWD
load_dotenv(Path(__file__).parent.parent / '.env')
load_dotenv()


class DataConfig(BaseModel):
    """JSON data store configuration settings."""

    data_dir: str = "data"  # Relative to agri_api directory
    products_file: str = "products.json"
    categories_file: str = "categories.json"
    prices_dir: str = "prices"
    encoding: str = "utf-8"


class APIConfig(BaseModel):
    """API configuration settings."""

    title: str = "Thai Agricultural Price API"
    description: str = "REST API serving Thai agricultural commodity prices with summary statistics and chart-ready price history"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    reload: bool = False

    # CORS settings
    allow_origins: list = ["*"]
    allow_credentials: bool = True
    allow_methods: list = ["*"]
    allow_headers: list = ["*"]


class AnalyticsConfig(BaseModel):
    """Price analytics and presentation settings."""

    max_chart_points: int = 365
    default_window: str = "1y"
    timezone: str = "Asia/Bangkok"
    preview_product_count: int = 12
    listing_workers: int = 8
    currency_symbol: str = "฿"
    data_source: str = "MOC Open Data API"


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ApplicationConfig:
    """Main application configuration."""

    def __init__(self):
        self.data = DataConfig()
        self.api = APIConfig()
        self.analytics = AnalyticsConfig()
        self.logging = LoggingConfig()

    @classmethod
    def from_environment(cls) -> 'ApplicationConfig':
        """Create configuration from environment variables"""
        config = cls()

        if os.getenv('AGRI_DATA_DIR'):
            config.data.data_dir = os.getenv('AGRI_DATA_DIR')

        if os.getenv('AGRI_PRICES_DIR'):
            config.data.prices_dir = os.getenv('AGRI_PRICES_DIR')

        if os.getenv('AGRI_MAX_CHART_POINTS'):
            config.analytics.max_chart_points = int(
                os.getenv('AGRI_MAX_CHART_POINTS'))

        if os.getenv('AGRI_TIMEZONE'):
            config.analytics.timezone = os.getenv('AGRI_TIMEZONE')

        if os.getenv('AGRI_LISTING_WORKERS'):
            config.analytics.listing_workers = int(
                os.getenv('AGRI_LISTING_WORKERS'))

        if os.getenv('AGRI_LOG_LEVEL'):
            config.logging.level = os.getenv('AGRI_LOG_LEVEL')

        if os.getenv('AGRI_API_HOST'):
            config.api.host = os.getenv('AGRI_API_HOST')

        if os.getenv('AGRI_API_PORT'):
            config.api.port = int(os.getenv('AGRI_API_PORT'))

        if os.getenv('AGRI_API_DEBUG'):
            config.api.debug = os.getenv('AGRI_API_DEBUG').lower() == 'true'

        return config

    @property
    def data_dir(self) -> str:
        """Get the absolute data directory path."""
        if os.path.isabs(self.data.data_dir):
            return self.data.data_dir
        # Relative paths are resolved against the agri_api directory
        package_dir = os.path.dirname(
            os.path.dirname(os.path.abspath(__file__)))
        return os.path.join(package_dir, self.data.data_dir)

    @property
    def products_path(self) -> str:
        """Get the products catalog file path."""
        return os.path.join(self.data_dir, self.data.products_file)

    @property
    def categories_path(self) -> str:
        """Get the categories file path."""
        return os.path.join(self.data_dir, self.data.categories_file)

    def price_file_path(self, product_code: str) -> Optional[str]:
        """
        Get the price history file path for a product code.

        Returns None for codes that would escape the prices directory.
        """
        if not product_code or os.path.basename(product_code) != product_code:
            return None
        return os.path.join(self.data_dir, self.data.prices_dir, f"{product_code}.json")


# Global configuration instance
app_config = ApplicationConfig.from_environment()
