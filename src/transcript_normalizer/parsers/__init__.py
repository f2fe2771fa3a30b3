"""Transcript format parsers."""

from .base import ParseOutcome, TranscriptBuilder, TranscriptParser
from .cue import CueParser, parse_cue
from .structured import StructuredParser, parse_structured, try_parse_structured
from .text import DiarizedTextParser, parse_diarized_text

__all__ = [
    "ParseOutcome",
    "TranscriptBuilder",
    "TranscriptParser",
    "CueParser",
    "StructuredParser",
    "DiarizedTextParser",
    "parse_cue",
    "parse_structured",
    "try_parse_structured",
    "parse_diarized_text",
]
