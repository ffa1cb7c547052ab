"""Remote estimator base class, response schema, and factory."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

if TYPE_CHECKING:
    from ..config import ProxConfig
    from ..models import ItemDescriptor


class RemoteUnavailable(Exception):
    """The remote estimator could not produce a usable answer."""


class RemoteEstimate(BaseModel):
    """Day counts as returned by a remote estimator, before clamping."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    # Integers stay integers so values beyond float range still clamp
    shelf_life_days: int | float = Field(alias="shelfLifeDays")
    restock_days: int | float = Field(alias="restockDays")

    @field_validator("shelf_life_days", "restock_days", mode="before")
    @classmethod
    def _require_number(cls, value: Any) -> Any:
        # No numeric strings or booleans
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"expected a number, got {type(value).__name__}")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("expected a finite number")
        return value


def parse_remote_payload(payload: Any) -> RemoteEstimate:
    """Validate a decoded JSON body.

    Raises:
        RemoteUnavailable: If the body is not an object with numeric
            ``shelfLifeDays`` and ``restockDays``.
    """
    if not isinstance(payload, dict):
        raise RemoteUnavailable(
            f"Expected a JSON object, got {type(payload).__name__}"
        )
    try:
        return RemoteEstimate.model_validate(payload)
    except ValidationError as e:
        raise RemoteUnavailable(f"Malformed estimate payload: {e}") from e


class RemoteEstimator(ABC):
    """Abstract base for services that estimate shelf life and restock days."""

    @abstractmethod
    async def estimate_days(self, descriptor: ItemDescriptor) -> RemoteEstimate:
        """Estimate day counts for one item.

        Any failure must be raised as :class:`RemoteUnavailable`.
        """
        ...


def create_backend(config: ProxConfig) -> RemoteEstimator | None:
    """Create the configured remote estimator, or ``None`` for heuristics only."""
    backend_name = config.remote.backend

    match backend_name:
        case "none" | "":
            return None
        case "http":
            from .http import HttpRemoteEstimator

            return HttpRemoteEstimator(
                url=config.remote.http.url,
                api_key=config.remote.http.api_key,
                timeout=config.remote.timeout,
            )
        case "claude":
            from .claude import ClaudeRemoteEstimator

            return ClaudeRemoteEstimator(
                api_key=config.remote.claude.api_key,
                model=config.remote.claude.model,
            )
        case _:
            raise ValueError(
                f"Unknown remote estimator backend: {backend_name!r} "
                f"(choose one of none / http / claude)"
            )
