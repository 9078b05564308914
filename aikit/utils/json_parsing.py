"""Robust typed JSON decoding of LLM responses."""

import logging
from typing import Any, Callable, Optional, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from aikit.config import ParserSettings, load_settings
from aikit.envelopes import (
    ClaudeMessageResponse,
    OpenAIChatResponse,
    ResponseEnvelope,
    load_envelope,
)
from aikit.errors import DecodeFailure, EnvelopeError, InvalidEncoding
from aikit.models import DecodeOutcome, ExtractionCandidate, ExtractionStage
from aikit.utils.extraction import extract_first_json
from aikit.utils.fences import fence_span, strip_fences
from aikit.utils.validation import is_decodable_shape

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NOTHING_FOUND = "No JSON value found in response"


def _direct_candidate(text: str) -> Optional[ExtractionCandidate]:
    return ExtractionCandidate.from_span(text, 0, len(text), ExtractionStage.direct)


def _fence_stripped_candidate(text: str) -> Optional[ExtractionCandidate]:
    start, end = fence_span(text)
    return ExtractionCandidate.from_span(text, start, end, ExtractionStage.fence_stripped)


# Tried in order; the first candidate that decodes wins.
STRATEGIES: tuple[Callable[[str], Optional[ExtractionCandidate]], ...] = (
    _direct_candidate,
    _fence_stripped_candidate,
    extract_first_json,
)


def _preview(text: str, limit: int) -> str:
    if len(text) <= limit:
        return repr(text)
    return repr(text[:limit]) + f"... ({len(text)} chars)"


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors(include_url=False):
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts) or str(error)


def try_parse_json_string(
    text: str,
    as_type: Type[T],
    settings: Optional[ParserSettings] = None,
) -> DecodeOutcome[T]:
    """
    Run the extraction pipeline over ``text`` without raising.

    Strategies tried in order:
    1. Direct decode
    2. Decode with markdown fences stripped
    3. Decode the first balanced {...} or [...] substring
    """
    settings = settings or load_settings()
    adapter = TypeAdapter(as_type)
    attempted = set()
    last_candidate = None
    last_error = _NOTHING_FOUND

    for strategy in STRATEGIES:
        candidate = strategy(text)
        if candidate is None:
            continue
        key = candidate.text.strip()
        if key in attempted:
            continue
        attempted.add(key)
        if not is_decodable_shape(candidate.text):
            logger.debug(f"{candidate.stage.value}: skipped, not JSON-shaped")
            continue

        last_candidate = candidate
        try:
            value = adapter.validate_json(candidate.text, strict=settings.strict or None)
        except ValidationError as e:
            last_error = _describe(e)
            logger.debug(
                f"{candidate.stage.value}: decode failed ({last_error}) for "
                f"{_preview(candidate.text, settings.log_preview_chars)}"
            )
            continue
        logger.debug(f"Decoded {len(candidate)} chars via {candidate.stage.value}")
        return DecodeOutcome.success(value, candidate)

    return DecodeOutcome.failure(last_error, last_candidate or _direct_candidate(text))


def parse_json_string(
    text: str,
    as_type: Type[T],
    settings: Optional[ParserSettings] = None,
) -> T:
    """Decode a model's raw text output into ``as_type``.

    Raises DecodeFailure, carrying the original un-stripped text, when no
    strategy produces a value.
    """
    outcome = try_parse_json_string(text, as_type, settings)
    if outcome.ok:
        return outcome.value
    logger.warning(f"Failed to decode LLM response as {_type_name(as_type)}: {outcome.error}")
    raise DecodeFailure(text, outcome.error)


def parse_json(
    data: Union[bytes, bytearray, memoryview],
    as_type: Type[T],
    settings: Optional[ParserSettings] = None,
) -> T:
    """Decode a UTF-8 byte buffer, then run it through parse_json_string."""
    try:
        text = bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncoding(str(e)) from e
    return parse_json_string(text, as_type, settings)


def parse_openai_response(
    envelope: Union[OpenAIChatResponse, dict],
    as_type: Type[T],
    settings: Optional[ParserSettings] = None,
) -> T:
    """Decode the first choice of an OpenAI chat completion into ``as_type``."""
    envelope = _coerce(envelope, OpenAIChatResponse)
    return parse_json_string(envelope.extract_text(), as_type, settings)


def parse_claude_response(
    envelope: Union[ClaudeMessageResponse, dict],
    as_type: Type[T],
    settings: Optional[ParserSettings] = None,
) -> T:
    """Decode the first text block of a Claude message into ``as_type``."""
    envelope = _coerce(envelope, ClaudeMessageResponse)
    return parse_json_string(envelope.extract_text(), as_type, settings)


def parse_response(
    envelope: Union[ResponseEnvelope, dict],
    as_type: Type[T],
    settings: Optional[ParserSettings] = None,
) -> T:
    """Decode either provider's envelope, picking the variant from its shape."""
    envelope = load_envelope(envelope)
    return parse_json_string(envelope.extract_text(), as_type, settings)


def clean_json_response(text: str) -> str:
    """Strip fences and surrounding prose, leaving the JSON substring if any."""
    stripped = strip_fences(text)
    candidate = extract_first_json(stripped)
    return candidate.text if candidate else stripped


def parse_json_from_response(text: Optional[str]) -> Optional[Union[list, dict]]:
    """
    Extract JSON from an LLM response without a target type.

    Returns the decoded dict or list, or None when the text is empty or
    holds no decodable JSON container.
    """
    if not text or not text.strip():
        return None
    outcome = try_parse_json_string(text, Any)
    if outcome.ok and isinstance(outcome.value, (dict, list)):
        return outcome.value
    return None


def _coerce(envelope: Any, model: Type[Any]) -> Any:
    if isinstance(envelope, model):
        return envelope
    try:
        return model.model_validate(envelope)
    except ValidationError as e:
        raise EnvelopeError(f"Not a valid {model.__name__}: {e}") from e


def _type_name(as_type: Any) -> str:
    return getattr(as_type, "__name__", None) or str(as_type)
