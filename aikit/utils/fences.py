"""Markdown code-fence stripping for LLM output.

Accepted grammar, applied after trimming surrounding whitespace::

    fenced := FENCE TAG? HSPACE* NEWLINE? BODY (FENCE)?
    FENCE  := three or more backticks, or three or more tildes
    TAG    := [A-Za-z0-9_+.-]+ followed by whitespace, "{", "[" or the end

The language tag is optional and matched without regard to case (``json``,
``JSON`` and ``jsonc`` are all just tags). The closing fence must use the
same character as the opening one and be at least as long; when it is
missing, as happens with truncated responses, only the opening fence is
removed. Fences nested directly inside one another are unwrapped until none
remain, so stripping is idempotent.
"""

import re
from typing import Tuple

_OPEN_FENCE = re.compile(
    r"(?P<fence>`{3,}|~{3,})[ \t]*(?:[A-Za-z0-9_+.\-]+(?=[\s{\[]|$))?[ \t]*(?:\r?\n)?"
)


def _trim(text: str, start: int, end: int) -> Tuple[int, int]:
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return start, end


def fence_span(text: str) -> Tuple[int, int]:
    """Return (start, end) offsets of the fence-stripped body within ``text``."""
    start, end = _trim(text, 0, len(text))
    while True:
        m = _OPEN_FENCE.match(text, start, end)
        if not m:
            return start, end
        fence = m.group("fence")
        body_start = m.end()
        body_end = end
        run = 0
        while body_end - run > body_start and text[body_end - run - 1] == fence[0]:
            run += 1
        if run >= len(fence):
            body_end -= run
        start, end = _trim(text, body_start, body_end)


def strip_fences(text: str) -> str:
    """Remove an optional markdown fence and surrounding whitespace."""
    start, end = fence_span(text)
    return text[start:end]
