"""OpenAI chat-completion response envelope."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from aikit.errors import ContentMissing


class OpenAIResponseMessage(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    role: str = "assistant"
    content: Optional[str] = None
    refusal: Optional[str] = None


class OpenAIChoice(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    index: int = 0
    message: OpenAIResponseMessage
    logprobs: Optional[object] = None
    finish_reason: Optional[str] = None


class OpenAIUsage(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class OpenAIChatResponse(BaseModel):
    """Body of a /chat/completions response."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    provider: Literal["openai"] = Field(default="openai", exclude=True)
    id: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    model: Optional[str] = None
    choices: List[OpenAIChoice] = Field(default_factory=list)
    usage: Optional[OpenAIUsage] = None
    system_fingerprint: Optional[str] = None

    def text_segments(self) -> tuple[str, ...]:
        """Message content of every choice, in order, skipping empty ones."""
        return tuple(
            c.message.content for c in self.choices
            if c.message.content and c.message.content.strip()
        )

    def extract_text(self) -> str:
        """Return the first choice's message content."""
        if not self.choices:
            raise ContentMissing("No content in OpenAI response")
        message = self.choices[0].message
        if not message.content or not message.content.strip():
            if message.refusal:
                raise ContentMissing(
                    f"No content in OpenAI response (refusal: {message.refusal})"
                )
            raise ContentMissing("No content in OpenAI response")
        return message.content
