"""Exception hierarchy for aikit.

Every error raised by the package inherits from AIKitError, so callers can
catch broad or specific failures:

    try:
        prescription = parse_claude_response(envelope, ParsedPrescription)
    except ContentMissing:
        ...  # the model returned nothing usable
    except DecodeFailure as e:
        logger.error(e.original_text)
    except AIKitError as e:
        ...
"""


class AIKitError(Exception):
    """Base exception for all aikit errors."""


class ConfigError(AIKitError):
    """Raised when an AIKIT_* setting cannot be interpreted."""


class EnvelopeError(AIKitError):
    """Raised when a raw payload is not a recognizable provider envelope."""


class ParsingError(AIKitError):
    """Raised when a response cannot be turned into the requested type."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ContentMissing(ParsingError):
    """The envelope has no choices, no content blocks, or empty content."""


class InvalidEncoding(ParsingError):
    """A byte buffer is not valid UTF-8."""

    def __init__(self, detail: str = ""):
        message = "Failed to decode JSON: Invalid UTF-8 data"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class DecodeFailure(ParsingError):
    """Every extraction strategy was tried and none decoded.

    The message always embeds the full original input so the offending
    payload is visible in logs.
    """

    def __init__(self, original_text: str, underlying_message: str):
        self.original_text = original_text
        self.underlying_message = underlying_message
        super().__init__(
            f"Failed to decode JSON: {underlying_message}. JSON content: {original_text}"
        )
