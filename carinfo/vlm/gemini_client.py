"""
Purpose:
- Call the Gemini `generateContent` REST endpoint with the vehicle prompt and
  return the cleaned reply text.

Notes:
- Requires: settings.google_api_key (GOOGLE_API_KEY in env or .env).
- No retries and no explicit timeout; httpx defaults apply.
- A transport can be injected (tests pass httpx.MockTransport).
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional
import httpx
from ..core.errors import GeminiResponseError, UpstreamServiceError
from ..core.settings import Settings
from ..services.fences import strip_code_fences
from .prompt import build_request

logger = logging.getLogger(__name__)

def _extract_text(payload: Dict[str, Any]) -> str:
    candidates = payload.get("candidates") or []
    if not candidates:
        reason = (payload.get("promptFeedback") or {}).get("blockReason", "no candidates")
        raise GeminiResponseError(detail=f"Gemini returned no candidates: {reason}")

    first = candidates[0]
    parts = (first.get("content") or {}).get("parts") or []
    text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
    if not text:
        raise GeminiResponseError(
            detail=f"Gemini candidate has no text (finishReason={first.get('finishReason')})"
        )
    return text

class GeminiClient:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport
        base = settings.gemini_base_url.rstrip("/")
        self.url = f"{base}/{settings.gemini_api_version}/models/{settings.gemini_model}:generateContent"

    async def describe_vehicle(self, image: bytes, mime_type: str) -> str:
        """
        Send image + prompt, return reply text with code fences stripped.
        Raises UpstreamServiceError when Gemini is unreachable or answers non-2xx,
        GeminiResponseError when the reply has no text.
        """
        body = build_request(image, mime_type, self.settings)
        headers = {"x-goog-api-key": self.settings.google_api_key}
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                r = await client.post(self.url, json=body, headers=headers)
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamServiceError(
                detail=f"Gemini HTTP {e.response.status_code}: {e.response.text[:500]}"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamServiceError(detail=f"Gemini request failed: {e!r}") from e

        try:
            payload = r.json()
        except ValueError as e:
            raise GeminiResponseError(detail="Gemini returned a non-JSON body") from e

        text = _extract_text(payload)
        logger.debug("Gemini raw reply: %s", text)
        return strip_code_fences(text)
