"""
Chat-completion suggestion source.

Asks a chat model behind the storefront's AI proxy to pick one product.
The proxy exposes one OpenAI-style endpoint per provider:

    POST {base_url}/{provider}/chat
    {"model": ..., "messages": [...], "temperature": ...}

and answers with ``choices[0].message.content``. The model is asked for
JSON only, but the first ``{...}`` block of the content is extracted so
that chatty answers still parse.

Every failure (transport, status, timeout, payload) is raised as a
SuggestionSourceError subclass.

Example:
    >>> source = ChatSuggestionSource("glm", api_key="...", base_url="http://localhost:8000/api/ai")
    >>> external = await source.suggest(request)
"""

from __future__ import annotations

import asyncio
import json
import re
from typing import Any, Dict, Optional

import aiohttp
from pydantic import ValidationError

from stylist.domain.entities.suggestion import ExternalSuggestion
from stylist.domain.interfaces.suggestion_source_interface import (
    SuggestionRequest,
    SuggestionSourceInterface,
)
from stylist.utils.config import LLMConfig
from stylist.utils.exceptions import (
    MalformedSuggestionError,
    SourceRequestError,
    SourceTimeoutError,
)
from stylist.utils.logger import get_logger

logger = get_logger(__name__)


# ============================================
# Constants
# ============================================

PROVIDER_MODELS = {
    "glm": "glm-4",
    "kimi": "moonshot-v1-8k",
}

SYSTEM_PROMPT = "You are a fashion stylist. Always return valid JSON only."

JSON_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)


# ============================================
# Prompt and response handling
# ============================================


def build_styling_prompt(request: SuggestionRequest) -> str:
    """
    Build the user prompt for one suggestion request.

    The catalog goes in as its reduced projection (no price, no image).
    """
    current = json.dumps(request.current_product.model_dump(mode="json"))
    cart = json.dumps([item.model_dump(mode="json") for item in request.cart_items])
    catalog = json.dumps(request.catalog_projection())

    return f"""You are a professional fashion stylist AI for an ecommerce website.

You are given:
1. The product the user is currently viewing: {current}
2. The products in their cart: {cart}
3. The full product catalog: {catalog}

Your task:
- Select exactly ONE product that complements the outfit
- It must complete the look (top <-> bottom)
- Avoid duplicates (don't suggest items already in cart or currently viewing)
- Explain why it matches (color, fit, style)

Return JSON only:
{{
  "suggestedProductId": "product_id",
  "reason": "detailed explanation",
  "styleTags": ["casual", "streetwear", "formal"]
}}"""


def extract_message_content(payload: Any) -> str:
    """Return ``choices[0].message.content`` from a chat-completion response."""
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedSuggestionError(
            "Chat response has no choices[0].message.content",
            content=str(payload),
        ) from e

    if not isinstance(content, str):
        raise MalformedSuggestionError("Chat message content is not text", content=str(content))
    return content


def parse_completion(content: str) -> ExternalSuggestion:
    """
    Parse the model's answer into an ExternalSuggestion.

    Raises:
        MalformedSuggestionError: If no valid suggestion object is found.
    """
    match = JSON_OBJECT_PATTERN.search(content)
    if match is None:
        raise MalformedSuggestionError("No JSON object in completion", content=content)

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise MalformedSuggestionError(f"Invalid JSON in completion: {e}", content=content) from e

    try:
        return ExternalSuggestion.model_validate(data)
    except ValidationError as e:
        raise MalformedSuggestionError(
            f"Completion is not a suggestion: {e.error_count()} validation errors",
            content=content,
        ) from e


# ============================================
# Source
# ============================================


class ChatSuggestionSource(SuggestionSourceInterface):
    """Suggestion source backed by a chat-completion provider."""

    def __init__(
        self,
        provider: str,
        api_key: str,
        base_url: str,
        temperature: float = 0.7,
        timeout_seconds: float = 15.0,
    ):
        """
        Initialize the source.

        Args:
            provider: Provider name, one of PROVIDER_MODELS.
            api_key: Bearer token for the provider.
            base_url: Base URL of the AI proxy.
            temperature: Sampling temperature.
            timeout_seconds: Total timeout for the HTTP call.
        """
        if provider not in PROVIDER_MODELS:
            raise ValueError(f"Unknown provider {provider!r}. Choose from: {list(PROVIDER_MODELS)}")
        if not api_key:
            raise ValueError(f"API key required for provider {provider!r}")

        self.provider = provider
        self.model = PROVIDER_MODELS[provider]
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.temperature = temperature
        self.timeout_seconds = timeout_seconds

    @property
    def name(self) -> str:
        return f"chat:{self.provider}"

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/{self.provider}/chat"

    def build_body(self, request: SuggestionRequest) -> Dict[str, Any]:
        """Request body for the chat endpoint."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_styling_prompt(request)},
            ],
            "temperature": self.temperature,
        }

    async def suggest(self, request: SuggestionRequest) -> ExternalSuggestion:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        body = self.build_body(request)

        logger.debug(f"Requesting suggestion from {self.endpoint} (model {self.model})")

        try:
            async with aiohttp.ClientSession(headers=headers) as session:
                async with session.post(
                    self.endpoint,
                    json=body,
                    timeout=aiohttp.ClientTimeout(total=self.timeout_seconds),
                ) as response:
                    if response.status != 200:
                        raise SourceRequestError(
                            f"HTTP {response.status} from {self.endpoint}",
                            provider=self.provider,
                            status_code=response.status,
                        )
                    payload = await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            raise SourceTimeoutError(
                f"{self.name} did not answer within {self.timeout_seconds}s",
                timeout_seconds=self.timeout_seconds,
            ) from e
        except aiohttp.ClientError as e:
            raise SourceRequestError(f"{self.name} request failed: {e}", provider=self.provider) from e
        except json.JSONDecodeError as e:
            raise MalformedSuggestionError(f"{self.name} returned invalid JSON: {e}") from e

        suggestion = parse_completion(extract_message_content(payload))
        logger.debug(f"{self.name} suggested {suggestion.suggested_product_id}")
        return suggestion


def build_suggestion_source(config: LLMConfig) -> Optional[ChatSuggestionSource]:
    """
    Create the source for the first provider that has an API key.

    Returns:
        The configured source, or None when no provider has a key (the
        recommender then uses the local heuristic only).
    """
    for provider in config.provider_order:
        api_key = config.api_key_for(provider)
        if api_key:
            logger.info(f"Using chat provider {provider} for suggestions")
            return ChatSuggestionSource(
                provider=provider,
                api_key=api_key,
                base_url=config.base_url,
                temperature=config.temperature,
                timeout_seconds=config.timeout_seconds,
            )

    logger.info("No chat provider API key configured, using local heuristic only")
    return None
