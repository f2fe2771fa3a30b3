"""Normalize meeting transcripts from VTT, diarized text and JSON exports."""

from transcript_normalizer.dispatch import detect_format, normalize
from transcript_normalizer.errors import MalformedInputError
from transcript_normalizer.extract import extract_action_items, extract_attendees
from transcript_normalizer.models import (
    NormalizedTranscript,
    Speaker,
    TranscriptFormat,
    TranscriptMetadata,
    TranscriptSegment,
    TranscriptSource,
)
from transcript_normalizer.parsers import (
    ParseOutcome,
    parse_cue,
    parse_diarized_text,
    parse_structured,
    try_parse_structured,
)
from transcript_normalizer.sources import detect_source
from transcript_normalizer.speakers import is_likely_speaker_name

__all__ = [
    "normalize",
    "detect_format",
    "parse_cue",
    "parse_diarized_text",
    "parse_structured",
    "try_parse_structured",
    "extract_action_items",
    "extract_attendees",
    "detect_source",
    "is_likely_speaker_name",
    "MalformedInputError",
    "ParseOutcome",
    "NormalizedTranscript",
    "Speaker",
    "TranscriptFormat",
    "TranscriptMetadata",
    "TranscriptSegment",
    "TranscriptSource",
]
