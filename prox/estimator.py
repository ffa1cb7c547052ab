"""Expiration and restock date estimation.

A remote estimator is tried first. Any failure falls back to the built-in
keyword/category rule table, so :meth:`DateEstimator.estimate` always
returns a result.
"""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Iterable
from datetime import date, timedelta

from .models import EstimateResult, EstimateSource, ItemDescriptor, ShelfLifePair
from .remote import RemoteEstimator, RemoteUnavailable
from .rules import DEFAULT_RULES, RuleTable

logger = logging.getLogger(__name__)

MIN_DAYS = 1
MAX_DAYS = 365


def sanitize_days(value: int | float) -> int:
    """Truncate toward zero and clamp to ``[MIN_DAYS, MAX_DAYS]``."""
    return min(max(MIN_DAYS, math.trunc(value)), MAX_DAYS)


def compute_dates(
    purchased_at: date, pair: ShelfLifePair, source: EstimateSource
) -> EstimateResult:
    """Turn day counts into absolute dates.

    Expiration is capped at ``MAX_DAYS`` after purchase and restock is
    never later than expiration.
    """
    latest = purchased_at + timedelta(days=MAX_DAYS)
    expiration = min(purchased_at + timedelta(days=pair.shelf_life_days), latest)
    restock = min(purchased_at + timedelta(days=pair.restock_days), expiration)
    return EstimateResult(
        estimated_expiration_at=expiration,
        estimated_restock_at=restock,
        source=source,
    )


class DateEstimator:
    """Estimates dates for grocery items.

    Args:
        remote: Optional remote estimator. ``None`` means heuristics only.
        rules: Rule table used for the fallback path.
    """

    def __init__(
        self,
        remote: RemoteEstimator | None = None,
        rules: RuleTable = DEFAULT_RULES,
    ) -> None:
        self._remote = remote
        self._rules = rules

    @property
    def rules(self) -> RuleTable:
        return self._rules

    async def estimate(self, descriptor: ItemDescriptor) -> EstimateResult:
        pair = await self._remote_pair(descriptor)
        if pair is not None:
            return compute_dates(descriptor.purchased_at, pair, EstimateSource.REMOTE)

        pair = self._rules.lookup(descriptor.name, descriptor.category)
        return compute_dates(descriptor.purchased_at, pair, EstimateSource.HEURISTIC)

    async def estimate_many(
        self, descriptors: Iterable[ItemDescriptor]
    ) -> list[EstimateResult]:
        """Estimate several items concurrently. Results keep input order."""
        return list(await asyncio.gather(*(self.estimate(d) for d in descriptors)))

    async def _remote_pair(self, descriptor: ItemDescriptor) -> ShelfLifePair | None:
        if self._remote is None:
            return None

        try:
            estimate = await self._remote.estimate_days(descriptor)
        except RemoteUnavailable as e:
            logger.warning(
                "Remote estimate failed for %r, falling back to heuristics: %s",
                descriptor.name,
                e,
            )
            return None
        except Exception:
            logger.warning(
                "Remote estimator raised unexpectedly for %r, falling back to heuristics",
                descriptor.name,
                exc_info=True,
            )
            return None

        return ShelfLifePair(
            shelf_life_days=sanitize_days(estimate.shelf_life_days),
            restock_days=sanitize_days(estimate.restock_days),
        )
