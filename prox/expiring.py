"""Selection of items that are about to expire or need restocking."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from .models import TrackedItem

DEFAULT_WITHIN_DAYS = 7


@dataclass(frozen=True)
class ExpirationStatus:
    days_left: int
    label: str  # "Expired", "Tomorrow", "3 days", ...
    level: str  # expired / urgent / soon / upcoming


def expiring_items(
    items: Iterable[TrackedItem],
    today: date,
    within_days: int = DEFAULT_WITHIN_DAYS,
) -> list[TrackedItem]:
    """Items expiring on or before ``today + within_days``, soonest first.

    Already-expired items are included. Items without an expiration date
    are skipped.
    """
    cutoff = today + timedelta(days=within_days)
    selected = [
        item
        for item in items
        if item.estimated_expiration_at is not None
        and item.estimated_expiration_at <= cutoff
    ]
    return sorted(selected, key=lambda item: item.estimated_expiration_at)


def expiration_status(expiration: date, today: date) -> ExpirationStatus:
    days_left = (expiration - today).days
    if days_left <= 0:
        return ExpirationStatus(days_left, "Expired", "expired")
    if days_left == 1:
        return ExpirationStatus(days_left, "Tomorrow", "urgent")
    if days_left <= 3:
        return ExpirationStatus(days_left, f"{days_left} days", "soon")
    return ExpirationStatus(days_left, f"{days_left} days", "upcoming")


def needs_restock(items: Iterable[TrackedItem], today: date) -> list[TrackedItem]:
    """Items whose restock date has arrived, earliest first."""
    due = [
        item
        for item in items
        if item.estimated_restock_at is not None
        and item.estimated_restock_at <= today
    ]
    return sorted(due, key=lambda item: item.estimated_restock_at)
