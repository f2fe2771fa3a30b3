"""Diarized plain-text parser.

Rules:
- Every non-blank line is its own segment; blank lines are ignored.
- A line may start with `[H:MM:SS]` or `(H:MM:SS)`.
- A following `Name: text` prefix marks the speaker, but only when the name
  passes the speaker name heuristics. Otherwise the whole line is text.
"""

import re

from transcript_normalizer.models import (
    NormalizedTranscript,
    TranscriptFormat,
    TranscriptSource,
)
from transcript_normalizer.sources import detect_source
from transcript_normalizer.speakers import is_likely_speaker_name
from transcript_normalizer.utils import parse_clock_timestamp
from .base import TranscriptBuilder, TranscriptParser

_LEADING_TIMESTAMP = re.compile(r"^[\[(](\d{1,2}:\d{2}:\d{2})[\])]\s*")
_SPEAKER_LABEL = re.compile(r"^([^:]{1,50}):\s*(.+)$")


def parse_diarized_text(
    content: str, source_hint: TranscriptSource | None = None
) -> NormalizedTranscript:
    """Parse `Name: text` style transcripts, one segment per line."""
    builder = TranscriptBuilder(TranscriptFormat.TEXT)

    for line in content.split("\n"):
        text = line.strip()
        if not text:
            continue

        start_time = None
        stamp = _LEADING_TIMESTAMP.match(text)
        if stamp:
            start_time = parse_clock_timestamp(stamp.group(1))
            text = text[stamp.end():]

        speaker = None
        label = _SPEAKER_LABEL.match(text)
        if label and is_likely_speaker_name(label.group(1).strip()):
            speaker = label.group(1).strip()
            text = label.group(2)

        builder.add(text, speaker=speaker, start_time=start_time)

    return builder.build(source_hint or detect_source(content))


class DiarizedTextParser(TranscriptParser):
    format = TranscriptFormat.TEXT

    def can_parse(self, content: str) -> bool:
        return True

    def parse(self, content: str) -> NormalizedTranscript:
        return parse_diarized_text(content)
