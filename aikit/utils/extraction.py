"""Isolate the first complete JSON value embedded in free-form text."""

from enum import Enum
from typing import Optional

from aikit.models import ExtractionCandidate, ExtractionStage
from aikit.utils.validation import looks_like_json

_MATCHING_OPENER = {"}": "{", "]": "["}


class _ScanState(Enum):
    NORMAL = "normal"
    IN_STRING = "in_string"
    IN_STRING_ESCAPE = "in_string_escape"


def extract_first_json(text: str) -> Optional[ExtractionCandidate]:
    """
    Find the first balanced {...} or [...] span in ``text``.

    One left-to-right pass. Double-quoted strings are tracked from the start
    of the text, so brackets quoted in the surrounding prose never open a
    span and brackets inside a span's strings never affect its depth. Every
    closing bracket must match the innermost open one; on a mismatch the
    open span is abandoned and scanning resumes after the bad bracket.

    This is first-match, not longest-match: with several disjoint JSON
    values in the text only the first is returned, even if a later one is
    larger. If a span is still open when the text ends, None is returned
    rather than guessing at a fragment inside it.
    """
    stack = []
    start = 0
    state = _ScanState.NORMAL
    for i, ch in enumerate(text):
        if state is _ScanState.IN_STRING_ESCAPE:
            state = _ScanState.IN_STRING
        elif state is _ScanState.IN_STRING:
            if ch == "\\":
                state = _ScanState.IN_STRING_ESCAPE
            elif ch == '"':
                state = _ScanState.NORMAL
        elif ch == '"':
            state = _ScanState.IN_STRING
        elif ch == "{" or ch == "[":
            if not stack:
                start = i
            stack.append(ch)
        elif (ch == "}" or ch == "]") and stack:
            if stack[-1] != _MATCHING_OPENER[ch]:
                stack.clear()
                continue
            stack.pop()
            if not stack:
                return ExtractionCandidate.from_span(
                    text, start, i + 1, ExtractionStage.balanced_extraction
                )
    return None


def extract_json_from_mixed_content(text: str) -> Optional[str]:
    """Return the JSON substring of prose-wrapped content, or None."""
    candidate = extract_first_json(text)
    if candidate is None or not looks_like_json(candidate.text):
        return None
    return candidate.text
