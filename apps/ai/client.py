"""
Thin wrapper around the hosted LLM messages API.

Only forced tool use is needed: every call offers exactly one tool and
requires the model to answer with it, so the answer is the tool input
object.
"""

import logging
from typing import Any, Dict, Optional

import anthropic
from django.conf import settings

from .services.exceptions import AIServiceNotConfiguredError, UpstreamServiceError

logger = logging.getLogger(__name__)


class LLMClient:
    """
    Send single-turn prompts that must be answered through a tool.

    Args:
        api_key: Provider API key. Calls fail with
            AIServiceNotConfiguredError while it is empty.
        model: Model identifier.
        base_url: API origin; empty for the SDK default.
        timeout: Request timeout in seconds.
        max_tokens: Completion budget per call.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str],
        model: str,
        base_url: Optional[str] = None,
        timeout: int = 30,
        max_tokens: int = 1024,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url or None
        self.timeout = timeout
        self.max_tokens = max_tokens

    @classmethod
    def from_settings(cls) -> 'LLMClient':
        return cls(
            api_key=settings.ANTHROPIC_API_KEY,
            model=settings.AI_MODEL,
            base_url=settings.AI_BASE_URL,
            timeout=settings.AI_REQUEST_TIMEOUT,
        )

    def _sdk_client(self) -> anthropic.Anthropic:
        return anthropic.Anthropic(
            api_key=self.api_key,
            base_url=self.base_url,
            timeout=self.timeout,
            max_retries=0,
        )

    def call_tool(self, *, prompt: str, tool: Dict[str, Any]) -> Dict[str, Any]:
        """
        Ask the model to answer ``prompt`` by calling ``tool``.

        Returns:
            The tool input object produced by the model.

        Raises:
            AIServiceNotConfiguredError: If no API key is configured.
            UpstreamServiceError: On transport or API errors, or a response
                without the expected tool call.
        """
        if not self.api_key:
            raise AIServiceNotConfiguredError("AI service not configured")

        try:
            message = self._sdk_client().messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                tools=[tool],
                tool_choice={'type': 'tool', 'name': tool['name']},
                messages=[{'role': 'user', 'content': prompt}],
            )
        except anthropic.APIError as e:
            logger.error("LLM request for tool %s failed: %s", tool['name'], e)
            raise UpstreamServiceError("LLM request failed") from e

        for block in message.content:
            if block.type == 'tool_use' and block.name == tool['name'] and isinstance(block.input, dict):
                return block.input

        logger.error("LLM response had no %s tool call (stop_reason=%s)", tool['name'], message.stop_reason)
        raise UpstreamServiceError("LLM response did not contain a tool result")
