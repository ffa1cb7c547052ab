"""HTTPS JSON client for a hosted estimate-dates service."""

from __future__ import annotations

import httpx

from ..models import ItemDescriptor
from . import RemoteEstimate, RemoteEstimator, RemoteUnavailable, parse_remote_payload


class HttpRemoteEstimator(RemoteEstimator):
    """POST ``{name, category, purchasedAt}`` and read back day counts.

    No timeout is applied unless one is given; callers that need bounded
    latency wrap :meth:`estimate_days` themselves.
    """

    def __init__(
        self,
        url: str = "",
        api_key: str = "",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    async def estimate_days(self, descriptor: ItemDescriptor) -> RemoteEstimate:
        if not self._url:
            raise RemoteUnavailable(
                "Remote estimator URL is not set. "
                "Check the config file or the PROX_ESTIMATOR_URL environment variable."
            )

        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        body = {
            "name": descriptor.name,
            "category": descriptor.category,
            "purchasedAt": descriptor.purchased_at.isoformat(),
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(self._url, json=body, headers=headers)
        except httpx.HTTPError as e:
            raise RemoteUnavailable(f"Request to remote estimator failed: {e}") from e

        if not response.is_success:
            raise RemoteUnavailable(
                f"Remote estimator returned HTTP {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise RemoteUnavailable("Remote estimator returned invalid JSON") from e

        return parse_remote_payload(payload)
