"""aikit - typed decoding of chat-completion responses from OpenAI and Claude."""

from aikit.config import ParserSettings, load_settings
from aikit.envelopes import (
    ClaudeMessageResponse,
    OpenAIChatResponse,
    ResponseEnvelope,
    extract_text,
    load_envelope,
)
from aikit.errors import (
    AIKitError,
    ConfigError,
    ContentMissing,
    DecodeFailure,
    EnvelopeError,
    InvalidEncoding,
    ParsingError,
)
from aikit.models import DecodeOutcome, ExtractionCandidate, ExtractionStage
from aikit.utils.extraction import extract_first_json, extract_json_from_mixed_content
from aikit.utils.fences import strip_fences
from aikit.utils.json_parsing import (
    clean_json_response,
    parse_claude_response,
    parse_json,
    parse_json_from_response,
    parse_json_string,
    parse_openai_response,
    parse_response,
    try_parse_json_string,
)
from aikit.utils.log import setup_logging
from aikit.utils.validation import looks_like_json

__version__ = "0.1.0"

__all__ = [
    "AIKitError",
    "ClaudeMessageResponse",
    "ConfigError",
    "ContentMissing",
    "DecodeFailure",
    "DecodeOutcome",
    "EnvelopeError",
    "ExtractionCandidate",
    "ExtractionStage",
    "InvalidEncoding",
    "OpenAIChatResponse",
    "ParserSettings",
    "ParsingError",
    "ResponseEnvelope",
    "clean_json_response",
    "extract_first_json",
    "extract_json_from_mixed_content",
    "extract_text",
    "load_envelope",
    "load_settings",
    "looks_like_json",
    "parse_claude_response",
    "parse_json",
    "parse_json_from_response",
    "parse_json_string",
    "parse_openai_response",
    "parse_response",
    "setup_logging",
    "strip_fences",
    "try_parse_json_string",
]
