"""Tests for expiring-soon and restock selection."""

from datetime import date

import pytest

from prox.expiring import expiration_status, expiring_items, needs_restock
from prox.models import (
    EstimateResult,
    EstimateSource,
    ItemDescriptor,
    TrackedItem,
    parse_iso_date,
)

TODAY = date(2024, 6, 10)


def _tracked(name, expiration=None, restock=None):
    return TrackedItem(
        name=name,
        category="Produce",
        purchased_at=date(2024, 6, 1),
        estimated_expiration_at=expiration,
        estimated_restock_at=restock,
    )


class TestExpiringItems:
    def test_filters_and_sorts(self):
        items = [
            _tracked("Rice", date(2024, 12, 1)),
            _tracked("Milk", date(2024, 6, 14)),
            _tracked("Spinach", date(2024, 6, 11)),
            _tracked("Old Bread", date(2024, 6, 2)),
            _tracked("Edge", date(2024, 6, 17)),
            _tracked("Too Late", date(2024, 6, 18)),
        ]
        result = expiring_items(items, TODAY)
        assert [i.name for i in result] == ["Old Bread", "Spinach", "Milk", "Edge"]

    def test_skips_items_without_expiration(self):
        result = expiring_items([_tracked("Unknown")], TODAY)
        assert result == []

    def test_custom_window(self):
        items = [_tracked("Milk", date(2024, 6, 14)), _tracked("Eggs", date(2024, 6, 12))]
        result = expiring_items(items, TODAY, within_days=2)
        assert [i.name for i in result] == ["Eggs"]


class TestExpirationStatus:
    @pytest.mark.parametrize(
        "expiration, label, level",
        [
            (date(2024, 6, 1), "Expired", "expired"),
            (date(2024, 6, 10), "Expired", "expired"),
            (date(2024, 6, 11), "Tomorrow", "urgent"),
            (date(2024, 6, 12), "2 days", "soon"),
            (date(2024, 6, 13), "3 days", "soon"),
            (date(2024, 6, 15), "5 days", "upcoming"),
        ],
    )
    def test_labels(self, expiration, label, level):
        status = expiration_status(expiration, TODAY)
        assert status.label == label
        assert status.level == level

    def test_days_left(self):
        assert expiration_status(date(2024, 6, 3), TODAY).days_left == -7


class TestNeedsRestock:
    def test_due_items_sorted(self):
        items = [
            _tracked("Coffee", restock=date(2024, 6, 10)),
            _tracked("Apples", restock=date(2024, 6, 5)),
            _tracked("Flour", restock=date(2024, 8, 1)),
            _tracked("Nothing"),
        ]
        result = needs_restock(items, TODAY)
        assert [i.name for i in result] == ["Apples", "Coffee"]


class TestTrackedItem:
    def test_from_estimate(self):
        descriptor = ItemDescriptor("Kale", "Produce", date(2024, 6, 1))
        result = EstimateResult(date(2024, 6, 7), date(2024, 6, 7), EstimateSource.HEURISTIC)
        item = TrackedItem.from_estimate(descriptor, result, store_name="Corner Market")
        assert item.name == "Kale"
        assert item.estimated_expiration_at == date(2024, 6, 7)
        assert item.estimate_source is EstimateSource.HEURISTIC
        assert item.store_name == "Corner Market"

    def test_from_dict_snake_case(self):
        item = TrackedItem.from_dict({
            "name": "Milk",
            "category": "Dairy",
            "purchased_at": "2024-06-01",
            "estimated_expiration_at": "2024-06-07",
            "estimated_restock_at": "2024-06-07",
            "estimate_source": "llm",
        })
        assert item.purchased_at == date(2024, 6, 1)
        assert item.estimated_expiration_at == date(2024, 6, 7)
        assert item.estimate_source is EstimateSource.REMOTE

    def test_from_dict_camel_case(self):
        item = TrackedItem.from_dict({
            "name": "Milk",
            "purchasedAt": "2024-06-01T09:30:00Z",
            "estimatedExpirationAt": "2024-06-07",
            "source": "heuristic",
        })
        assert item.category == ""
        assert item.purchased_at == date(2024, 6, 1)
        assert item.estimated_restock_at is None
        assert item.estimate_source is EstimateSource.HEURISTIC

    def test_from_dict_unknown_source_is_none(self, caplog):
        item = TrackedItem.from_dict({
            "name": "Milk",
            "purchasedAt": "2024-06-01",
            "source": "manual",
        })
        assert item.estimate_source is None
        assert "unknown estimate source" in caplog.text

    def test_from_dict_quantity_and_unit(self):
        item = TrackedItem.from_dict({
            "name": "Apples",
            "purchasedAt": "2024-06-01",
            "quantity": 1.5,
            "unit": "kg",
        })
        assert item.quantity == 1.5
        assert item.unit == "kg"
        assert item.quantity_label() == "1.5 kg"

    @pytest.mark.parametrize(
        "quantity, unit, label",
        [(None, "", ""), (None, "lb", ""), (3, "", "3"), (2.0, "lb", "2 lb")],
    )
    def test_quantity_label(self, quantity, unit, label):
        item = TrackedItem("Eggs", "Dairy", date(2024, 6, 1), quantity=quantity, unit=unit)
        assert item.quantity_label() == label

    def test_parse_iso_date_drops_time(self):
        assert parse_iso_date("2024-01-01T10:00:00Z") == date(2024, 1, 1)
        assert parse_iso_date("2024-01-01") == date(2024, 1, 1)

    def test_result_to_dict(self):
        result = EstimateResult(date(2024, 1, 6), date(2024, 1, 6), EstimateSource.REMOTE)
        assert result.to_dict() == {
            "estimatedExpirationAt": "2024-01-06",
            "estimatedRestockAt": "2024-01-06",
            "source": "remote",
        }
