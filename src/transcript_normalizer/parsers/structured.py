"""Structured (JSON export) transcript parser.

Accepted shapes:
- `{"transcript": [...]}` or `{"segments": [...]}` (Zoom-style exports)
- a bare array of entries

Entry fields are read through alias pairs because exporters disagree on naming.
"""

import json
import logging
from typing import Any

from transcript_normalizer.errors import MalformedInputError
from transcript_normalizer.models import NormalizedTranscript, TranscriptFormat
from transcript_normalizer.sources import detect_source
from .base import ParseOutcome, TranscriptBuilder, TranscriptParser

logger = logging.getLogger(__name__)

ENTRY_CONTAINER_KEYS = ("transcript", "segments")

SPEAKER_FIELDS = ("speaker", "speaker_name")
TEXT_FIELDS = ("text", "content")
START_FIELDS = ("start_time", "startTime")
END_FIELDS = ("end_time", "endTime")
CONFIDENCE_FIELDS = ("confidence",)


def _first(entry: dict, fields: tuple[str, ...]) -> Any:
    for field in fields:
        value = entry.get(field)
        if value is not None and value != "":
            return value
    return None


def _as_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_str(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    return str(value)


def _entries(data: Any) -> list:
    if isinstance(data, list):
        return data
    if not isinstance(data, dict):
        raise MalformedInputError(f"expected an object or array, got {type(data).__name__}")

    for key in ENTRY_CONTAINER_KEYS:
        if key in data and data[key] is not None:
            entries = data[key]
            if not isinstance(entries, list):
                raise MalformedInputError(f"'{key}' must be an array")
            return entries
    return []


def parse_structured(content: str) -> NormalizedTranscript:
    """Parse a JSON transcript export.

    Raises:
        MalformedInputError: If the content is not JSON or not a transcript shape.
    """
    try:
        data = json.loads(content)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized int literals, and nesting too deep to decode
        raise MalformedInputError(str(e)) from e

    builder = TranscriptBuilder(TranscriptFormat.JSON)
    for entry in _entries(data):
        if not isinstance(entry, dict):
            continue
        text = _as_str(_first(entry, TEXT_FIELDS))
        if text is None:
            continue
        builder.add(
            text,
            speaker=_as_str(_first(entry, SPEAKER_FIELDS)),
            start_time=_as_float(_first(entry, START_FIELDS)),
            end_time=_as_float(_first(entry, END_FIELDS)),
            confidence=_as_float(_first(entry, CONFIDENCE_FIELDS)),
        )

    return builder.build(detect_source(content))


def try_parse_structured(content: str) -> ParseOutcome:
    """Parse a JSON transcript export, reporting failure instead of raising."""
    try:
        return ParseOutcome.success(parse_structured(content))
    except MalformedInputError as e:
        return ParseOutcome.failure(e.reason)


class StructuredParser(TranscriptParser):
    format = TranscriptFormat.JSON

    def can_parse(self, content: str) -> bool:
        return content.strip().startswith(("{", "["))

    def parse(self, content: str) -> NormalizedTranscript:
        return parse_structured(content)

    def try_parse(self, content: str) -> ParseOutcome:
        outcome = try_parse_structured(content)
        if not outcome.ok:
            logger.debug("Structured parse failed: %s", outcome.reason)
        return outcome
