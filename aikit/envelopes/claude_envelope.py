"""Anthropic Claude messages response envelope."""

import json
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from aikit.errors import ContentMissing


class ClaudeResponseContent(BaseModel):
    """A single content block: text, or tool_use carrying structured input."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str = "text"
    text: Optional[str] = None
    input: Optional[Any] = None

    @property
    def has_text(self) -> bool:
        return self.type == "text" and bool(self.text and self.text.strip())


class ClaudeUsage(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    input_tokens: int = 0
    output_tokens: int = 0


class ClaudeMessageResponse(BaseModel):
    """Body of a /v1/messages response."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    provider: Literal["claude"] = Field(default="claude", exclude=True)
    id: Optional[str] = None
    type: str = "message"
    role: str = "assistant"
    model: Optional[str] = None
    content: List[ClaudeResponseContent] = Field(default_factory=list)
    stop_reason: Optional[str] = None
    usage: Optional[ClaudeUsage] = None

    def text_segments(self) -> tuple[str, ...]:
        """Text of every text-bearing block, in order."""
        return tuple(block.text for block in self.content if block.has_text)

    def extract_text(self) -> str:
        """Return the first text block, falling back to the first tool_use input.

        Tool-use responses carry the structured result in ``input`` rather
        than as text; it is serialized back to JSON so it goes through the
        same decode path.
        """
        segments = self.text_segments()
        if segments:
            return segments[0]
        for block in self.content:
            if block.type == "tool_use" and block.input is not None:
                return json.dumps(block.input)
        raise ContentMissing("No content in Claude response")
