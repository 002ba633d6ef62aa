"""Chat-completion client for the OpenAI API.

One request per call: no continuation, no retries. The caller supplies the
complete request body (model, messages, response_format) and an explicit
``OpenAIConfig`` so credentials never come from ambient process state.

Usage:
    config = OpenAIConfig.from_settings(get_settings())
    content = await call_chat_completion_async(body, config)
"""

import httpx
from typing import Dict, Any, Optional
from core.logging import log_debug
from utils.exceptions import ConfigurationError, UpstreamServiceError

EMPTY_CONTENT = "{}"


class OpenAIConfig:
    """Connection settings for the chat-completion endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 180.0,
        default_model: str = "gpt-5",
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.default_model = default_model

    @classmethod
    def from_settings(cls, settings) -> "OpenAIConfig":
        return cls(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=settings.openai_timeout,
            default_model=settings.openai_model,
        )

    @property
    def completions_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    def validate(self):
        """Validate that required credentials are present."""
        if not self.api_key:
            raise ConfigurationError(
                "OpenAI API key not configured. Please provide "
                "OPENAI_API_KEY in your environment or .env file."
            )


def _build_headers(config: OpenAIConfig) -> Dict[str, str]:
    """Build headers for the chat-completion request."""
    return {
        "Authorization": f"Bearer {config.api_key}",
        "Content-Type": "application/json",
    }


def _extract_content(result: Any) -> Optional[str]:
    """Return ``choices[0].message.content`` or None when any part is missing."""
    if not isinstance(result, dict):
        return None
    choices = result.get("choices")
    if not choices:
        return None
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None


async def call_chat_completion_async(
    body: Dict[str, Any],
    config: OpenAIConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """
    Submit one chat-completion request and return the message content.

    Args:
        body: Request body with model, messages and response_format
        config: Endpoint, credential and timeout settings
        transport: Optional httpx transport (tests pass a MockTransport)

    Returns:
        str: The model's message content, or "{}" when it is absent or empty

    Raises:
        ConfigurationError: If the API key is not configured
        UpstreamServiceError: If the service answers with a non-2xx status
    """
    config.validate()

    log_debug(
        f"POST {config.completions_url} model={body.get('model')} "
        f"messages={len(body.get('messages', []))}",
        "openai_llm",
    )

    async with httpx.AsyncClient(timeout=config.timeout, transport=transport) as client:
        response = await client.post(
            config.completions_url,
            json=body,
            headers=_build_headers(config),
        )

    if not response.is_success:
        raise UpstreamServiceError(response.status_code, response.text)

    content = _extract_content(response.json())
    return content or EMPTY_CONTENT
