"""OpenAI moderation client — implements the ModerationClient interface.

Posts free text to ``{base_url}/moderations`` and returns the ``flagged``
verdict of the first result.
"""

import logging
from typing import Any

import httpx

from post_service.application.interfaces import ModerationClient
from post_service.domain.exceptions import ModerationError

logger = logging.getLogger(__name__)


class OpenAIModerationClient(ModerationClient):
    """Infrastructure adapter — connects to the OpenAI moderation API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=30.0)

    async def check_safety(self, text: str) -> bool:
        url = f"{self._base_url}/moderations"

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.post(
                    url, headers=self._get_headers(), json={"input": text}
                )
            except httpx.HTTPError as exc:
                logger.error("Moderation request failed: %s", exc)
                raise ModerationError(f"Moderation request failed: {exc}") from exc

            data = self._parse_body(response)
            return self._parse_verdict(data, response.status_code)

        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _parse_body(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            raise ModerationError(
                f"Moderation API returned a non-JSON body (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from exc
        if not isinstance(data, dict):
            raise ModerationError(
                "Moderation API returned an unexpected body",
                status_code=response.status_code,
            )
        return data

    @staticmethod
    def _parse_verdict(data: dict[str, Any], status_code: int) -> bool:
        error = data.get("error")
        if error is not None:
            message = error.get("message") if isinstance(error, dict) else str(error)
            logger.warning("Moderation API error (HTTP %d): %s", status_code, message)
            raise ModerationError(message or "Unknown moderation error", status_code=status_code)

        if status_code >= 400:
            raise ModerationError(
                f"Moderation API returned HTTP {status_code}", status_code=status_code
            )

        results = data.get("results")
        if not results or not isinstance(results[0], dict) or "flagged" not in results[0]:
            raise ModerationError("Moderation API response has no results", status_code=status_code)
        return bool(results[0]["flagged"])
