"""Tests for catalog retrieval."""

from decimal import Decimal

import pytest

from bargainwala.core.store import get_product, list_item_requests, save_item_request
from bargainwala.tools.retrieval import search_products


class TestSearchProducts:
    def test_empty_query_returns_catalog(self, db_session):
        result = search_products("", session=db_session)
        assert len(result) == 8
        assert result[0]["name"] == "Recommended Product 1"
        assert result[-1]["name"] == "Recommended Product 8"

    def test_prices_step_by_35_50(self, db_session):
        result = search_products(session=db_session)
        assert Decimal(result[0]["price"]) == Decimal("35.50")
        assert Decimal(result[7]["price"]) == Decimal("284.00")

    def test_case_insensitive_substring(self, db_session):
        result = search_products("PRODUCT 3", session=db_session)
        assert [p["name"] for p in result] == ["Recommended Product 3"]

    def test_no_match(self, db_session):
        assert search_products("bananas", session=db_session) == []

    def test_empty_database(self, empty_db_session):
        assert search_products("", session=empty_db_session) == []


class TestProductCrud:
    def test_get_product(self, db_session):
        product = get_product(db_session, 2)
        assert product.name == "Recommended Product 2"
        assert "Product 2" in product.description

    def test_get_missing_product(self, db_session):
        assert get_product(db_session, 999) is None


class TestItemRequests:
    def test_save_request(self, db_session):
        save_item_request(db_session, "  Mangoes ")
        db_session.commit()
        assert [r.text for r in list_item_requests(db_session)] == ["Mangoes"]

    def test_empty_request_rejected(self, db_session):
        with pytest.raises(ValueError):
            save_item_request(db_session, "   ")
