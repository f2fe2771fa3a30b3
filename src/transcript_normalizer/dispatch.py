"""Format detection and dispatch to the matching parser."""

import logging

from transcript_normalizer.models import NormalizedTranscript, TranscriptFormat
from transcript_normalizer.parsers import (
    CueParser,
    DiarizedTextParser,
    StructuredParser,
    TranscriptParser,
)

logger = logging.getLogger(__name__)

# Priority order matters: first recognizer that accepts the content wins.
# The text parser accepts everything and must stay last.
PARSERS: list[TranscriptParser] = [
    CueParser(),
    StructuredParser(),
    DiarizedTextParser(),
]


def detect_format(content: str) -> TranscriptFormat:
    """Return the first format whose recognizer accepts the content."""
    for parser in PARSERS:
        if parser.can_parse(content):
            return parser.format
    return TranscriptFormat.TEXT


def normalize(content: str) -> NormalizedTranscript:
    """Auto-detect the format and parse content. Never raises for str input.

    Structured content that fails to parse falls back to the text parser.
    """
    for parser in PARSERS:
        if not parser.can_parse(content):
            continue
        outcome = parser.try_parse(content)
        if outcome.ok:
            logger.debug(
                "Parsed %d segments as %s",
                len(outcome.transcript.segments),
                parser.format.value,
            )
            return outcome.transcript
        logger.debug("Falling back from %s: %s", parser.format.value, outcome.reason)

    # Unreachable while DiarizedTextParser accepts everything.
    return DiarizedTextParser().parse(content)
