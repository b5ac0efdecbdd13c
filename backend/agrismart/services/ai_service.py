# backend/agrismart/services/ai_service.py

from typing import Optional, List, Dict

import httpx
from pydantic import ValidationError

from agrismart.core.config import settings
from agrismart.core.errors import ConfigurationError, UpstreamUnavailable, MalformedResponse
from agrismart.core.logger import logger
from agrismart.core.utils_logging import error_detail
from agrismart.schemas.chat import ChatCompletionPayload


class ChatCompletionClient:
    """Relay to an OpenAI-compatible /chat/completions endpoint."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: Optional[str] = None,
        url: Optional[str] = None,
        model: Optional[str] = None,
    ):
        if not api_key:
            raise ConfigurationError("AI_GATEWAY_API_KEY is not configured")
        self.http = http
        self.api_key = api_key
        self.url = url or settings.AI_GATEWAY_URL
        self.model = model or settings.AI_MODEL

    async def complete(self, messages: List[Dict[str, str]]) -> str:
        """Send the conversation, return the first choice's message content."""
        logger.info(
            "Requesting chat completion",
            extra={"provider": self.model, "path": self.url},
        )

        try:
            resp = await self.http.post(
                self.url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json={"model": self.model, "messages": messages},
            )
        except httpx.HTTPError as exc:
            logger.error("AI gateway unreachable", extra={"provider": self.model, **error_detail(exc)})
            raise UpstreamUnavailable(f"AI gateway unreachable: {exc}") from exc

        if not resp.is_success:
            logger.error(
                "AI gateway error",
                extra={"provider": self.model, "status_code": resp.status_code, "error": resp.text[:500]},
            )
            raise UpstreamUnavailable(f"AI gateway returned {resp.status_code}")

        try:
            payload = ChatCompletionPayload.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise MalformedResponse(f"completion payload lacks choices[0].message.content: {exc}") from exc

        return payload.choices[0].message.content
