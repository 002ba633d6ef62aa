"""Utilities module."""

from .openai_llm import (
    call_chat_completion_async,
    OpenAIConfig
)

__all__ = [
    'call_chat_completion_async',
    'OpenAIConfig'
]
