"""Grocery expiration and restock date estimation."""

from .config import ProxConfig, load_config
from .estimator import DateEstimator, compute_dates, sanitize_days
from .expiring import ExpirationStatus, expiration_status, expiring_items, needs_restock
from .models import (
    EstimateResult,
    EstimateSource,
    ItemDescriptor,
    ShelfLifePair,
    TrackedItem,
)
from .remote import RemoteEstimator, RemoteUnavailable, create_backend
from .rules import DEFAULT_RULES, GLOBAL_DEFAULT, RuleTable, lookup

__all__ = [
    "DateEstimator",
    "compute_dates",
    "sanitize_days",
    "ItemDescriptor",
    "ShelfLifePair",
    "EstimateResult",
    "EstimateSource",
    "TrackedItem",
    "RuleTable",
    "DEFAULT_RULES",
    "GLOBAL_DEFAULT",
    "lookup",
    "RemoteEstimator",
    "RemoteUnavailable",
    "create_backend",
    "expiring_items",
    "expiration_status",
    "needs_restock",
    "ExpirationStatus",
    "ProxConfig",
    "load_config",
]
