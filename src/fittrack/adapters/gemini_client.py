"""Google Generative Language (Gemini) REST client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"


class GeminiClient(Protocol):
    """Interface for Gemini API interactions."""

    async def generate_content(
        self,
        *,
        api_key: str,
        version: str,
        model: str,
        payload: dict[str, object],
    ) -> dict[str, object]:
        """Call ``generateContent`` for a model and return raw API data."""

    async def list_models(self, *, api_key: str, version: str) -> dict[str, object]:
        """List available models and return raw API data."""


@dataclass
class HttpxGeminiClient(GeminiClient):
    """HTTPX-backed Gemini client."""

    http_client: httpx.AsyncClient
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30

    @classmethod
    def create(
        cls, base_url: str = DEFAULT_BASE_URL, timeout_seconds: float = 30
    ) -> "HttpxGeminiClient":
        """Create a Gemini client with a managed httpx session."""
        return cls(
            http_client=httpx.AsyncClient(),
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )

    async def generate_content(
        self,
        *,
        api_key: str,
        version: str,
        model: str,
        payload: dict[str, object],
    ) -> dict[str, object]:
        """Generate content with one model on one API version."""
        url = f"{self.base_url}/{version}/models/{model}:generateContent"
        response = await self.http_client.post(
            url,
            params={"key": api_key},
            json=payload,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def list_models(self, *, api_key: str, version: str) -> dict[str, object]:
        """List models visible to the API key."""
        url = f"{self.base_url}/{version}/models"
        response = await self.http_client.get(
            url,
            params={"key": api_key, "pageSize": 1000},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
