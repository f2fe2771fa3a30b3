"""WebVTT cue parser.

Blocks are separated by blank lines. Each block needs a `start --> end` timing
line; blocks without one are dropped. Speakers come from Teams-style voice tags
(`<v Name>text</v>`) or Zoom-style `Name: text` prefixes.
"""

import logging
import re

from transcript_normalizer.models import NormalizedTranscript, TranscriptFormat
from transcript_normalizer.sources import detect_source
from transcript_normalizer.utils import parse_cue_timestamp
from .base import TranscriptBuilder, TranscriptParser

logger = logging.getLogger(__name__)

CUE_HEADER = "WEBVTT"
CUE_ARROW = "-->"
_SKIPPED_BLOCK_PREFIXES = (CUE_HEADER, "NOTE")

_BLOCK_SEPARATOR = re.compile(r"\n[ \t]*\n\s*")
_CUE_INDEX = re.compile(r"^\d+$")
_VOICE_TAG = re.compile(r"<v\s+([^>]+)>(.*?)</v>")
_COLON_LABEL = re.compile(r"^([^:]+):\s*(.+)$")
_MAX_LABEL_LENGTH = 50


def _split_speaker(text: str) -> tuple[str | None, str]:
    voice = _VOICE_TAG.search(text)
    if voice:
        return voice.group(1).strip(), voice.group(2).strip()

    colon = _COLON_LABEL.match(text)
    if colon and len(colon.group(1)) < _MAX_LABEL_LENGTH:
        return colon.group(1).strip(), colon.group(2).strip()

    return None, text


def parse_cue(content: str) -> NormalizedTranscript:
    """Parse WebVTT content into a normalized transcript."""
    builder = TranscriptBuilder(TranscriptFormat.VTT)
    normalized = content.replace("\r\n", "\n").replace("\r", "\n")

    for block in _BLOCK_SEPARATOR.split(normalized):
        lines = [line.strip() for line in block.strip().split("\n")]
        if not lines[0] or lines[0].startswith(_SKIPPED_BLOCK_PREFIXES):
            continue

        timing = next((line for line in lines if CUE_ARROW in line), None)
        if timing is None:
            logger.debug("Dropping cue block without timing: %r", lines[0][:80])
            continue

        start_str, _, end_str = timing.partition(CUE_ARROW)
        text_lines = [
            line
            for line in lines
            if line and CUE_ARROW not in line and not _CUE_INDEX.match(line)
        ]
        speaker, text = _split_speaker(" ".join(text_lines))

        builder.add(
            text,
            speaker=speaker,
            start_time=parse_cue_timestamp(start_str),
            end_time=parse_cue_timestamp(end_str),
        )

    return builder.build(detect_source(content))


class CueParser(TranscriptParser):
    format = TranscriptFormat.VTT

    def can_parse(self, content: str) -> bool:
        # Any arrow counts, even in prose; see DESIGN.md.
        return CUE_HEADER in content or CUE_ARROW in content

    def parse(self, content: str) -> NormalizedTranscript:
        return parse_cue(content)
