"""Claude Messages API client."""

import logging
from dataclasses import dataclass, field
from typing import Any

import anthropic

from src.config.settings import Settings

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """The text-generation service failed or returned an unusable response."""


@dataclass
class UpstreamResult:
    """Generated text plus the API's token usage block."""

    text: str
    usage: dict[str, Any] = field(default_factory=dict)


class UpstreamClient:
    """Thin wrapper around ``anthropic.AsyncAnthropic`` for single-prompt calls."""

    def __init__(self, settings: Settings, client: anthropic.AsyncAnthropic | None = None):
        """
        Initialize the upstream client.

        Args:
            settings: Application settings (API key, model, base URL)
            client: Optional pre-built SDK client, mainly for tests
        """
        self.settings = settings
        self.model = settings.anthropic_model
        self._client = client

    def _get_client(self) -> anthropic.AsyncAnthropic:
        # Built on first use so refusals work without an API key configured.
        if self._client is None:
            client_kwargs: dict[str, Any] = {
                "api_key": self.settings.anthropic_api_key,
                "max_retries": 0,
            }
            if self.settings.anthropic_base_url:
                client_kwargs["base_url"] = self.settings.anthropic_base_url
            self._client = anthropic.AsyncAnthropic(**client_kwargs)
        return self._client

    async def generate(self, prompt: str, max_tokens: int) -> UpstreamResult:
        """
        Send one user prompt and return the first text block.

        Raises:
            UpstreamError: On any API or transport failure
        """
        logger.debug("Calling %s with max_tokens=%d", self.model, max_tokens)
        try:
            message = await self._get_client().messages.create(
                model=self.model,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIStatusError as e:
            raise UpstreamError(f"Claude API error: {e.response.text}") from e
        except anthropic.AnthropicError as e:
            raise UpstreamError(f"Claude API error: {e}") from e

        text = next(
            (block.text for block in message.content if getattr(block, "type", None) == "text"),
            None,
        )
        if text is None:
            raise UpstreamError("Claude API error: response contained no text content")

        usage = message.usage.model_dump(exclude_none=True) if message.usage is not None else {}
        return UpstreamResult(text=text, usage=usage)

    async def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        if self._client is not None:
            await self._client.close()
            self._client = None
