"""Cheap structural checks run before a full decode."""

_CONTAINER_PAIRS = (("{", "}"), ("[", "]"))
_SCALAR_STARTS = frozenset('"-0123456789tfn')


def looks_like_json(text: str) -> bool:
    """True when the trimmed text starts and ends with a matching {…} or […] pair.

    This is only a pre-filter: it accepts plenty of strings that will not
    decode, and full grammar checking is left to the decoder.
    """
    trimmed = text.strip()
    if len(trimmed) < 2:
        return False
    return any(trimmed[0] == o and trimmed[-1] == c for o, c in _CONTAINER_PAIRS)


def is_decodable_shape(text: str) -> bool:
    """True when the text could plausibly be any JSON value, scalars included."""
    trimmed = text.strip()
    if not trimmed:
        return False
    return looks_like_json(trimmed) or trimmed[0] in _SCALAR_STARTS
