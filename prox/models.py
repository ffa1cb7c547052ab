"""Value objects shared by the estimation engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum

logger = logging.getLogger(__name__)


class EstimateSource(str, Enum):
    """Where the day counts of an estimate came from."""

    HEURISTIC = "heuristic"
    REMOTE = "remote"


@dataclass(frozen=True)
class ItemDescriptor:
    """A grocery item to estimate dates for."""

    name: str  # free text, any case
    category: str  # Produce, Dairy, ... or a custom category
    purchased_at: date


@dataclass(frozen=True)
class ShelfLifePair:
    shelf_life_days: int
    restock_days: int


@dataclass(frozen=True)
class EstimateResult:
    """Absolute expiration and restock dates for one item."""

    estimated_expiration_at: date
    estimated_restock_at: date
    source: EstimateSource

    def to_dict(self) -> dict[str, str]:
        return {
            "estimatedExpirationAt": self.estimated_expiration_at.isoformat(),
            "estimatedRestockAt": self.estimated_restock_at.isoformat(),
            "source": self.source.value,
        }


@dataclass
class TrackedItem:
    """An inventory record as the caller stores it."""

    name: str
    category: str
    purchased_at: date
    estimated_expiration_at: date | None = None
    estimated_restock_at: date | None = None
    estimate_source: EstimateSource | None = None
    store_name: str = ""
    quantity: float | None = None
    unit: str = ""

    def quantity_label(self) -> str:
        """``"2 lb"``, ``"3"``, or ``""`` when no quantity is recorded."""
        if self.quantity is None:
            return ""
        return f"{self.quantity:g} {self.unit}".strip()

    @classmethod
    def from_estimate(
        cls,
        descriptor: ItemDescriptor,
        result: EstimateResult,
        store_name: str = "",
    ) -> TrackedItem:
        return cls(
            name=descriptor.name,
            category=descriptor.category,
            purchased_at=descriptor.purchased_at,
            estimated_expiration_at=result.estimated_expiration_at,
            estimated_restock_at=result.estimated_restock_at,
            estimate_source=result.source,
            store_name=store_name,
        )

    @classmethod
    def from_dict(cls, data: dict) -> TrackedItem:
        """Build an item from a JSON record (camelCase or snake_case keys)."""

        def _get(snake: str, camel: str) -> str:
            return data.get(snake) or data.get(camel) or ""

        expiration = _get("estimated_expiration_at", "estimatedExpirationAt")
        restock = _get("estimated_restock_at", "estimatedRestockAt")
        source = _get("estimate_source", "source")
        estimate_source = _SOURCE_TAGS.get(source) if source else None
        if source and estimate_source is None:
            logger.warning("Ignoring unknown estimate source %r for %r", source, data["name"])
        quantity = data.get("quantity")
        return cls(
            name=data["name"],
            category=data.get("category", ""),
            purchased_at=parse_iso_date(_get("purchased_at", "purchasedAt")),
            estimated_expiration_at=(
                parse_iso_date(expiration) if expiration else None
            ),
            estimated_restock_at=parse_iso_date(restock) if restock else None,
            estimate_source=estimate_source,
            store_name=_get("store_name", "storeName"),
            quantity=float(quantity) if quantity is not None else None,
            unit=data.get("unit") or "",
        )


# Older records tag remote estimates as "llm"
_SOURCE_TAGS: dict[str, EstimateSource] = {
    "heuristic": EstimateSource.HEURISTIC,
    "remote": EstimateSource.REMOTE,
    "llm": EstimateSource.REMOTE,
}


def parse_iso_date(value: str) -> date:
    """Parse ``YYYY-MM-DD``, ignoring any time part of an ISO timestamp."""
    return date.fromisoformat(value[:10])
