"""Speaker label heuristics and the per-parse speaker registry."""

import re
from typing import Callable

from transcript_normalizer.models import Speaker

_SENTENCE_STARTERS = re.compile(
    r"^(the|a|an|this|that|these|those|it|there|here|we|they|i|you)\b",
    re.IGNORECASE,
)
_SENTENCE_PUNCTUATION = re.compile(r"[.!?]")

# Ordered (name, predicate) pairs; a label is rejected by the first predicate
# that returns False.
SPEAKER_NAME_RULES: list[tuple[str, Callable[[str], bool]]] = [
    ("length", lambda label: 2 <= len(label) <= 50),
    ("punctuation", lambda label: not _SENTENCE_PUNCTUATION.search(label)),
    ("shouting", lambda label: not (label == label.upper() and len(label) > 5)),
    ("sentence_starter", lambda label: not _SENTENCE_STARTERS.match(label)),
]


def validate_speaker_name(label: str) -> str | None:
    """Return the name of the first rule the label fails, or None if it passes."""
    for name, rule in SPEAKER_NAME_RULES:
        if not rule(label):
            return name
    return None


def is_likely_speaker_name(label: str) -> bool:
    """Check whether a leading `Label:` looks like a speaker rather than prose."""
    return validate_speaker_name(label) is None


class SpeakerRegistry:
    """Speakers seen during one parse call, keyed by their raw label.

    Labels are not case-folded or trimmed further, so `Alice` and `alice` are
    two speakers.
    """

    def __init__(self):
        self._counts: dict[str, int] = {}

    def record(self, label: str | None) -> None:
        if not label:
            return
        self._counts[label] = self._counts.get(label, 0) + 1

    def __len__(self) -> int:
        return len(self._counts)

    def speakers(self) -> list[Speaker]:
        # dicts keep insertion order, which is first-seen order here
        return [
            Speaker(id=label, name=label, segment_count=count)
            for label, count in self._counts.items()
        ]
