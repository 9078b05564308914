"""Response envelopes for the supported chat-completion providers."""

from aikit.envelopes.base import ResponseEnvelope, extract_text, load_envelope
from aikit.envelopes.claude_envelope import ClaudeMessageResponse, ClaudeResponseContent
from aikit.envelopes.openai_envelope import (
    OpenAIChatResponse,
    OpenAIChoice,
    OpenAIResponseMessage,
    OpenAIUsage,
)

__all__ = [
    "ClaudeMessageResponse",
    "ClaudeResponseContent",
    "OpenAIChatResponse",
    "OpenAIChoice",
    "OpenAIResponseMessage",
    "OpenAIUsage",
    "ResponseEnvelope",
    "extract_text",
    "load_envelope",
]
