from typing import Any, Protocol

import httpx

from .config import Settings, get_settings


class ProviderError(Exception):
    """Raised when the generative-language provider cannot produce a result."""


class SummaryProvider(Protocol):
    async def generate(self, prompt: str) -> str: ...

    async def list_models(self) -> dict[str, Any]: ...


def _upstream_error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        message = body["error"].get("message")
        if message:
            return message
    return f"Provider returned HTTP {response.status_code}."


def extract_text(payload: dict[str, Any]) -> str:
    """Join the text parts of the first candidate in a generateContent response."""
    candidates = payload.get("candidates") or []
    if not isinstance(candidates, list):
        raise ProviderError("Provider returned an unexpected response.")
    if not candidates:
        raise ProviderError("Provider returned no candidates.")

    candidate = candidates[0]
    if not isinstance(candidate, dict):
        raise ProviderError("Provider returned an unexpected response.")
    content = candidate.get("content") or {}
    parts = (content.get("parts") or []) if isinstance(content, dict) else []
    if not isinstance(parts, list):
        raise ProviderError("Provider returned an unexpected response.")

    text = "".join(str(part.get("text", "")) for part in parts if isinstance(part, dict))
    if not text:
        reason = candidate.get("finishReason")
        suffix = f" (finish reason: {reason})" if reason else ""
        raise ProviderError(f"Provider returned an empty response{suffix}.")
    return text


class GeminiProvider:
    def __init__(self, api_key: str, model: str, base_url: str, timeout: float) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout

    async def generate(self, prompt: str) -> str:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        body = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, params={"key": self.api_key}, json=body)
        except httpx.TimeoutException as exc:
            raise ProviderError("Provider call timed out.") from exc
        except httpx.RequestError as exc:
            raise ProviderError(f"Failed to reach provider: {exc}") from exc

        if response.status_code >= 400:
            raise ProviderError(_upstream_error_message(response))

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError("Provider returned a non-JSON response.") from exc
        if not isinstance(payload, dict):
            raise ProviderError("Provider returned an unexpected response.")
        try:
            return extract_text(payload)
        except (AttributeError, KeyError, IndexError, TypeError) as exc:
            raise ProviderError("Provider returned an unexpected response.") from exc

    async def list_models(self) -> dict[str, Any]:
        url = f"{self.base_url}/models"

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params={"key": self.api_key})
        except httpx.RequestError as exc:
            raise ProviderError(str(exc) or "Failed to reach provider.") from exc

        # Passed through as-is, including upstream error bodies.
        try:
            return response.json()
        except ValueError as exc:
            raise ProviderError("Provider returned a non-JSON response.") from exc


def build_provider(settings: Settings) -> GeminiProvider:
    return GeminiProvider(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout=settings.provider_timeout_seconds,
    )


def get_provider() -> SummaryProvider:
    return build_provider(get_settings())
