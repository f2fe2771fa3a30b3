"""Exceptions raised by transcript parsers."""


class MalformedInputError(ValueError):
    """Structured content could not be deserialized into a transcript."""

    def __init__(self, reason: str):
        super().__init__(f"Malformed structured transcript: {reason}")
        self.reason = reason
