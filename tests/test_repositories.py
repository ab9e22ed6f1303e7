"""Tests for the catalog and price history repositories."""

import json
import logging

import pandas as pd

from agri_api.config import data_manager
from agri_api.repositories import PriceHistoryRepository, ProductRepository, records_to_frame


class TestProductRepository:

    def test_find_all_in_catalog_order(self, data_dir) -> None:
        df = ProductRepository().find_all()
        assert len(df) == 6
        assert list(df["productCode"])[:2] == ["P11001", "P11002"]

    def test_find_by_id(self, data_dir) -> None:
        repo = ProductRepository()
        row = repo.find_by_id("P12001")
        assert row["productName"] == "Oil Palm FFB"
        assert repo.find_by_id("NOPE") is None

    def test_find_by_category(self, data_dir) -> None:
        df = ProductRepository().find_by_category("Rubber")
        assert list(df["productCode"]) == ["P11001", "P11002", "P11003"]

    def test_count_by_category(self, data_dir) -> None:
        counts = ProductRepository().count_by_category()
        assert counts["Rubber"] == 3
        assert counts["Rice"] == 1

    def test_categories_from_file(self, data_dir) -> None:
        assert ProductRepository().find_categories() == ["Rice", "Rubber", "Palm Oil", "Exotic Goods"]

    def test_categories_fall_back_to_catalog(self, data_dir) -> None:
        (data_dir / "categories.json").unlink()
        data_manager.clear_cache()
        assert ProductRepository().find_categories() == ["Rubber", "Palm Oil", "Rice", "Exotic Goods"]

    def test_catalog_parsed_once(self, data_dir) -> None:
        repo = ProductRepository()
        assert repo.count() == 6
        (data_dir / "products.json").write_text("[]", encoding="utf-8")
        assert repo.count() == 6
        data_manager.clear_cache()
        assert repo.count() == 0


class TestPriceHistoryRepository:

    def test_find_by_id_returns_series(self, data_dir) -> None:
        df = PriceHistoryRepository().find_by_id("P11001")
        assert list(df.columns) == ["date", "price_min", "price_max"]
        assert list(df["date"]) == ["2024-01-15", "2024-02-01", "2024-03-01"]
        assert df["price_min"].dtype == float

    def test_empty_file_is_empty_frame_not_none(self, data_dir) -> None:
        df = PriceHistoryRepository().find_by_id("P12001")
        assert df is not None
        assert df.empty

    def test_missing_file_is_none(self, data_dir) -> None:
        assert PriceHistoryRepository().find_by_id("P11003") is None

    def test_corrupt_file_is_none_and_logged(self, data_dir, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            assert PriceHistoryRepository().find_by_id("P19001") is None
        assert "P19001" in caplog.text

    def test_payload_without_history_is_none(self, data_dir) -> None:
        (data_dir / "prices" / "P77.json").write_text(json.dumps({"productCode": "P77"}), encoding="utf-8")
        assert PriceHistoryRepository().find_by_id("P77") is None

    def test_bare_list_payload(self, data_dir) -> None:
        (data_dir / "prices" / "P78.json").write_text(
            json.dumps([{"date": "2024-01-01", "priceMin": 1, "priceMax": 2}]), encoding="utf-8")
        df = PriceHistoryRepository().find_by_id("P78")
        assert len(df) == 1

    def test_path_traversal_is_none(self, data_dir) -> None:
        assert PriceHistoryRepository().find_by_id("../products") is None

    def test_find_latest(self, data_dir) -> None:
        repo = PriceHistoryRepository()
        assert repo.find_latest("P11001")["date"] == "2024-03-01"
        assert repo.find_latest("P12001") is None
        assert repo.find_latest("P11003") is None

    def test_product_codes_and_count(self, data_dir) -> None:
        repo = PriceHistoryRepository()
        assert repo.find_product_codes() == ["P11001", "P11002", "P12001", "P13001", "P19001"]
        assert repo.count() == 5

    def test_find_all(self, data_dir) -> None:
        df = PriceHistoryRepository().find_all()
        assert len(df) == 7
        assert set(df["product_code"]) == {"P11001", "P11002", "P13001"}


class TestRecordsToFrame:

    def test_unparseable_prices_become_zero(self) -> None:
        df = records_to_frame([
            {"date": "2024-01-01", "priceMin": "n/a", "priceMax": None},
            {"date": "2024-01-02", "price_min": "5.5", "price_max": 6},
        ])
        assert list(df["price_min"]) == [0.0, 5.5]
        assert list(df["price_max"]) == [0.0, 6.0]

    def test_malformed_records_skipped_and_logged(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            df = records_to_frame([
                {"date": "2024-01-01", "priceMin": 1, "priceMax": 2},
                "junk",
                None,
            ])
        assert list(df["date"]) == ["2024-01-01"]
        assert "'junk'" in caplog.text
        assert caplog.text.count("Skipping malformed price record") == 2

    def test_empty(self) -> None:
        df = records_to_frame([])
        assert df.empty
        assert list(df.columns) == ["date", "price_min", "price_max"]
        assert isinstance(df, pd.DataFrame)
