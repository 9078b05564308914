"""Provider-tagged response envelopes and the text adapter over them."""

from typing import Annotated, Any, Union

from pydantic import Discriminator, Tag, TypeAdapter, ValidationError

from aikit.envelopes.claude_envelope import ClaudeMessageResponse
from aikit.envelopes.openai_envelope import OpenAIChatResponse
from aikit.errors import EnvelopeError


def _envelope_tag(payload: Any) -> str | None:
    if isinstance(payload, (OpenAIChatResponse, ClaudeMessageResponse)):
        return payload.provider
    if isinstance(payload, dict):
        if "choices" in payload:
            return "openai"
        if "content" in payload:
            return "claude"
    return None


ResponseEnvelope = Annotated[
    Union[
        Annotated[OpenAIChatResponse, Tag("openai")],
        Annotated[ClaudeMessageResponse, Tag("claude")],
    ],
    Discriminator(_envelope_tag),
]


def load_envelope(payload: Any) -> Union[OpenAIChatResponse, ClaudeMessageResponse]:
    """Build the matching envelope variant from a decoded API response body.

    Bodies with ``choices`` are OpenAI chat completions, bodies with
    ``content`` are Claude messages.
    """
    if isinstance(payload, (OpenAIChatResponse, ClaudeMessageResponse)):
        return payload
    try:
        return TypeAdapter(ResponseEnvelope).validate_python(payload)
    except ValidationError as e:
        raise EnvelopeError(f"Unrecognized response envelope: {e}") from e


def extract_text(envelope: Union[OpenAIChatResponse, ClaudeMessageResponse]) -> str:
    """Return the content string of an envelope or raise ContentMissing."""
    return envelope.extract_text()
