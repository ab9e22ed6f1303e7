"""
Service for product catalog and category operations.
"""

import re
from typing import List, Optional
from fastapi import HTTPException

from .base_service import BaseService
from ..config import app_config
from ..repositories import ProductRepository
from ..models import Product, CategoryInfo, DashboardResponse

# Card metadata per category: (icon, description)
CATEGORY_META = {
    "Rubber": ("🌳", "Natural rubber products"),
    "Palm Oil": ("🌴", "Palm oil and FFB"),
    "Rice": ("🍚", "Thai rice varieties"),
    "Fruits": ("🥭", "Tropical fruits"),
    "Seafood": ("🦐", "Shrimp and fish"),
    "Livestock": ("🥚", "Eggs and pork"),
    "Feed": ("🌾", "Animal feed"),
    "Grains": ("🌽", "Corn and grains"),
    "Cassava": ("🥔", "Cassava products"),
    "Vegetables": ("🥬", "Fresh vegetables"),
    "Condiments": ("🧄", "Garlic and spices"),
    "Oilseeds": ("🫘", "Soybeans and seeds"),
}
DEFAULT_CATEGORY_META = ("📦", "Agricultural products")


def slugify(category: str) -> str:
    """Lower-case a category name and replace whitespace runs with '-'."""
    return re.sub(r"\s+", "-", category.lower())


class CatalogService(BaseService):
    """Service for catalog operations."""

    def __init__(self, repository: ProductRepository = None):
        """Initialize service with repository dependency injection."""
        super().__init__(repository or ProductRepository())

    def validate_input(self, **kwargs) -> bool:
        """Validate input parameters for catalog queries."""
        limit = kwargs.get('limit')

        if limit is not None and limit < 0:
            raise HTTPException(
                status_code=400, detail="Limit cannot be negative")

        return True

    @staticmethod
    def _to_products(df) -> List[Product]:
        """Convert catalog rows to Pydantic models."""
        products = []
        for _, row in df.iterrows():
            products.append(Product(
                id=int(row['id']),
                product_code=str(row['productCode']),
                product_name=str(row['productName']),
                category=str(row['category']),
                sale_type=str(row['saleType'])
            ))
        return products

    def get_products(self, category: Optional[str] = None, limit: Optional[int] = None) -> List[Product]:
        """Get catalog products, optionally restricted to a category name."""
        self.validate_input(limit=limit)

        if category:
            df = self.repository.find_by_category(category)
        else:
            df = self.repository.find_all()

        if limit is not None:
            df = df.head(limit)

        return self._to_products(df)

    def get_product(self, product_code: str) -> Product:
        """Get one product by code, 404 when it is not in the catalog."""
        row = self.repository.find_by_id(product_code)
        if row is None:
            self.not_found(f"Product not found: {product_code}")

        return Product(
            id=int(row['id']),
            product_code=str(row['productCode']),
            product_name=str(row['productName']),
            category=str(row['category']),
            sale_type=str(row['saleType'])
        )

    def get_product_codes(self) -> List[str]:
        """Get every catalog product code."""
        return [str(code) for code in self.repository.find_all()['productCode']]

    def get_categories(self) -> List[CategoryInfo]:
        """Get category cards sorted by product count, largest first."""
        counts = self.repository.count_by_category()

        categories = []
        for name in self.repository.find_categories():
            icon, description = CATEGORY_META.get(name, DEFAULT_CATEGORY_META)
            categories.append(CategoryInfo(
                name=name,
                slug=slugify(name),
                product_count=int(counts.get(name, 0)),
                icon=icon,
                description=description
            ))

        categories.sort(key=lambda c: c.product_count, reverse=True)
        return categories

    def resolve_slug(self, slug: str) -> str:
        """Map a category slug back to its name, 404 when unknown."""
        for name in self.repository.find_categories():
            if slugify(name) == slug:
                return name
        self.not_found(f"Category not found: {slug}")

    def get_dashboard(self) -> DashboardResponse:
        """Get the dashboard overview."""
        try:
            preview_count = app_config.analytics.preview_product_count
            total_products = self.repository.count()
            categories = self.get_categories()

            return DashboardResponse(
                total_products=total_products,
                total_categories=len(categories),
                categories=categories,
                preview_products=self.get_products(limit=preview_count),
                has_more_products=total_products > preview_count
            )

        except HTTPException:
            raise
        except Exception as e:
            self.handle_exception(e, "Error building dashboard")
