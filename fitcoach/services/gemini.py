"""Generative-language API client used by the AI coach."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

import httpx

from fitcoach.core.config import Settings, get_settings
from fitcoach.core.enums import ChatRole
from fitcoach.core.exceptions import AIServiceUnavailableError
from fitcoach.schemas.coach import ChatMessageRead

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES = {429, 503}
RETRY_BACKOFF_SECONDS = 1.0

GENERATION_CONFIG = {
    "temperature": 0.7,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 1024,
}


class GeminiClient:
    """Client for the `generateContent` endpoint.

    Pass `transport` to swap the network layer (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        backoff_seconds: float = RETRY_BACKOFF_SECONDS,
    ):
        self._settings = settings or get_settings()
        self._transport = transport
        self._backoff = backoff_seconds

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.gemini_api_key)

    @property
    def _url(self) -> str:
        base = self._settings.gemini_base_url.rstrip("/")
        return f"{base}/models/{self._settings.gemini_model}:generateContent"

    @staticmethod
    def build_contents(
        prompt: str,
        history: Sequence[ChatMessageRead] = (),
        system_prompt: str | None = None,
    ) -> list[dict]:
        contents = []
        if system_prompt:
            contents.append({"role": "user", "parts": [{"text": system_prompt}]})
        for turn in history:
            role = "user" if turn.role == ChatRole.USER else "model"
            contents.append({"role": role, "parts": [{"text": turn.message}]})
        contents.append({"role": "user", "parts": [{"text": prompt}]})
        return contents

    async def _post(self, body: dict) -> dict:
        attempts = self._settings.ai_max_retries + 1
        async with httpx.AsyncClient(
            timeout=self._settings.ai_timeout_seconds,
            transport=self._transport,
        ) as client:
            for attempt in range(1, attempts + 1):
                try:
                    response = await client.post(
                        self._url,
                        params={"key": self._settings.gemini_api_key},
                        json=body,
                    )
                except httpx.HTTPError as e:
                    if attempt == attempts:
                        raise AIServiceUnavailableError(f"AI request failed: {e}") from e
                    logger.warning("AI request error (attempt %d/%d): %s", attempt, attempts, e)
                else:
                    if response.status_code < 400:
                        try:
                            return response.json()
                        except ValueError as e:
                            raise AIServiceUnavailableError("AI API returned a non-JSON body") from e
                    if response.status_code not in RETRY_STATUS_CODES or attempt == attempts:
                        raise AIServiceUnavailableError(
                            f"AI API error: {response.status_code} - {response.text}",
                            status_code=response.status_code,
                        )
                    logger.warning(
                        "AI API returned %d (attempt %d/%d), retrying",
                        response.status_code, attempt, attempts,
                    )
                await asyncio.sleep(self._backoff * attempt)
        raise AIServiceUnavailableError("AI request failed")

    async def generate(
        self,
        prompt: str,
        history: Sequence[ChatMessageRead] = (),
        system_prompt: str | None = None,
    ) -> str:
        """Send prompt (plus optional system prompt and prior turns); return the first candidate's text."""
        if not self.is_configured:
            raise AIServiceUnavailableError("GEMINI_API_KEY not configured")

        data = await self._post({
            "contents": self.build_contents(prompt, history, system_prompt),
            "generationConfig": GENERATION_CONFIG,
        })
        try:
            parts = data["candidates"][0]["content"]["parts"]
            return "".join(part.get("text", "") for part in parts)
        except (KeyError, IndexError, TypeError) as e:
            raise AIServiceUnavailableError("Invalid response from AI API") from e
