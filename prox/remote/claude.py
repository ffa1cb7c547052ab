"""Claude API backend that estimates shelf life directly from an LLM."""

from __future__ import annotations

import json
from datetime import date

from ..models import ItemDescriptor
from . import RemoteEstimate, RemoteEstimator, RemoteUnavailable, parse_remote_payload

_SYSTEM_PROMPT = """\
You are a food safety and household inventory expert. Your task is to predict \
realistic shelf life and household replenishment timing for grocery items.

Rules:
- Base expiration estimates on USDA food safety guidelines and typical storage conditions
- Assume items are stored properly (refrigerated if needed, sealed containers, etc.)
- Base restocking on typical household consumption patterns
- Be conservative with perishable items
- Keep all estimates within 365 days
- Return only valid JSON with numeric values

Current date: {today}
Purchase date: {purchased_at}
"""

_USER_PROMPT = """\
Estimate shelf life and restock timing for:
Item: "{name}"
Category: "{category}"

Return JSON format:
{{
  "shelfLifeDays": <number of days from purchase date until expiration>,
  "restockDays": <number of days from purchase date until the household typically needs to restock>
}}
"""


class ClaudeRemoteEstimator(RemoteEstimator):
    """Estimate day counts with Claude."""

    def __init__(
        self, api_key: str = "", model: str = "claude-sonnet-4-5-20250929"
    ) -> None:
        self._api_key = api_key
        self._model = model

    async def estimate_days(self, descriptor: ItemDescriptor) -> RemoteEstimate:
        if not self._api_key:
            raise RemoteUnavailable(
                "Anthropic API key is not set. "
                "Check the config file or the ANTHROPIC_API_KEY environment variable."
            )

        try:
            import anthropic
        except ImportError:
            raise ImportError(
                "anthropic SDK is required: pip install 'prox[claude]'"
            ) from None

        system = _SYSTEM_PROMPT.format(
            today=date.today().isoformat(),
            purchased_at=descriptor.purchased_at.isoformat(),
        )
        user = _USER_PROMPT.format(name=descriptor.name, category=descriptor.category)

        client = anthropic.AsyncAnthropic(api_key=self._api_key)
        try:
            response = await client.messages.create(
                model=self._model,
                max_tokens=200,
                temperature=0.2,
                system=system,
                messages=[{"role": "user", "content": user}],
            )
        except anthropic.APIError as e:
            raise RemoteUnavailable(f"Claude API error: {e}") from e

        if not response.content:
            raise RemoteUnavailable("Claude returned an empty response")
        return _parse_response(response.content[0].text)


def _parse_response(text: str) -> RemoteEstimate:
    """Parse the JSON object from Claude's reply."""
    # Strip markdown fences if present
    cleaned = text.strip()
    if cleaned.startswith("```"):
        lines = cleaned.split("\n")
        lines = [l for l in lines[1:] if not l.strip().startswith("```")]
        cleaned = "\n".join(lines)

    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise RemoteUnavailable(f"Claude reply is not JSON: {cleaned[:80]!r}") from e
    return parse_remote_payload(payload)
