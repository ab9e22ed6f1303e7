"""
Shared pytest fixtures.

Builds a throwaway JSON data directory and points the global configuration
and data store at it, so repositories, services and the HTTP app all read
the same fixture data.
"""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from agri_api.config import app_config, data_manager


PRODUCTS = [
    {"id": 1, "productCode": "P11001", "productName": "Rubber Sheet Grade 3",
     "category": "Rubber", "saleType": "Wholesale"},
    {"id": 2, "productCode": "P11002", "productName": "Field Latex",
     "category": "Rubber", "saleType": "Farm gate"},
    {"id": 3, "productCode": "P11003", "productName": "Cup Lump",
     "category": "Rubber", "saleType": "Farm gate"},
    {"id": 4, "productCode": "P12001", "productName": "Oil Palm FFB",
     "category": "Palm Oil", "saleType": "Farm gate"},
    {"id": 5, "productCode": "P13001", "productName": "Hom Mali Paddy",
     "category": "Rice", "saleType": "Farm gate"},
    {"id": 6, "productCode": "P19001", "productName": "Mystery Crop",
     "category": "Exotic Goods", "saleType": "Retail"},
]

CATEGORIES = ["Rice", "Rubber", "Palm Oil", "Exotic Goods"]

PRICE_FILES = {
    # two valid records plus one zero-price record in the middle
    "P11001": [
        {"date": "2024-01-15", "priceMin": 10, "priceMax": 20},
        {"date": "2024-02-01", "priceMin": 0, "priceMax": 0},
        {"date": "2024-03-01", "priceMin": 30, "priceMax": 40},
    ],
    # latest record is invalid
    "P11002": [
        {"date": "2024-01-01", "priceMin": 50, "priceMax": 60},
        {"date": "2024-01-02", "priceMin": 0, "priceMax": 55},
    ],
    # file exists with no records
    "P12001": [],
    # all records zero
    "P13001": [
        {"date": "2024-01-01", "priceMin": 0, "priceMax": 0},
        {"date": "2024-01-02", "priceMin": 0, "priceMax": 0},
    ],
}


def _write_json(path: Path, payload) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path, monkeypatch) -> Path:
    """Fixture data directory wired into app_config and data_manager."""
    prices_dir = tmp_path / "prices"
    prices_dir.mkdir()

    _write_json(tmp_path / "products.json", PRODUCTS)
    _write_json(tmp_path / "categories.json", CATEGORIES)

    products_by_code = {p["productCode"]: p for p in PRODUCTS}
    for code, history in PRICE_FILES.items():
        _write_json(prices_dir / f"{code}.json",
                    {**products_by_code[code], "priceHistory": history})

    # P11003 has no price file; P19001 has a corrupt one
    (prices_dir / "P19001.json").write_text("{not json", encoding="utf-8")

    monkeypatch.setattr(app_config.data, "data_dir", str(tmp_path))
    data_manager.clear_cache()
    yield tmp_path
    data_manager.clear_cache()


@pytest.fixture
def client(data_dir) -> TestClient:
    """HTTP client against the app reading fixture data."""
    from agri_api.main import app
    return TestClient(app)
