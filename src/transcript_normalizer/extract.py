"""Post-processing of normalized transcripts: action items and attendees."""

import re
from typing import Iterable

from transcript_normalizer.models import NormalizedTranscript, TranscriptSegment

# (name, pattern) pairs; a segment matching any of them is an action item.
ACTION_ITEM_RULES: list[tuple[str, re.Pattern]] = [
    (name, re.compile(rf"\b{phrase}\b", re.IGNORECASE))
    for name, phrase in [
        ("action_item", r"action item"),
        ("todo", r"todo"),
        ("follow_up", r"follow up"),
        ("next_step", r"next step"),
        ("will_send", r"will send"),
        ("will_share", r"will share"),
        ("will_schedule", r"will schedule"),
        ("need_to", r"need to"),
        ("should", r"should"),
        ("must", r"must"),
    ]
]

ATTENDEE_LINE_RULES: list[tuple[str, re.Pattern]] = [
    ("attendees", re.compile(r"\battendees?:\s*(.+)", re.IGNORECASE)),
    ("participants", re.compile(r"\bparticipants?:\s*(.+)", re.IGNORECASE)),
    ("present", re.compile(r"\bpresent:\s*(.+)", re.IGNORECASE)),
]

_NAME_SEPARATORS = re.compile(r"[,;]|\band\b", re.IGNORECASE)
_MIN_NAME_LENGTH = 3


def matching_action_rules(text: str) -> list[str]:
    """Return the names of the action-item rules that match text."""
    return [name for name, pattern in ACTION_ITEM_RULES if pattern.search(text)]


def extract_action_items(segments: Iterable[TranscriptSegment]) -> list[str]:
    """Return the text of each segment that reads like an action item.

    A segment is listed once no matter how many keywords it contains.
    """
    return [s.text for s in segments if matching_action_rules(s.text)]


def _listed_names(line: str) -> list[str]:
    names = []
    for _, pattern in ATTENDEE_LINE_RULES:
        match = pattern.search(line)
        if not match:
            continue
        for token in _NAME_SEPARATORS.split(match.group(1)):
            name = token.strip()
            if len(name) >= _MIN_NAME_LENGTH:
                names.append(name)
    return names


def extract_attendees(transcript: NormalizedTranscript) -> list[str]:
    """Collect attendee names from speakers and explicit attendee listings.

    Speakers come first in first-seen order, then names listed after
    `Attendees:`, `Participants:` or `Present:`. Duplicates are removed by
    exact string comparison only.
    """
    attendees: dict[str, None] = {}
    for speaker in transcript.speakers:
        if speaker.name:
            attendees.setdefault(speaker.name, None)

    for line in transcript.text.split("\n"):
        for name in _listed_names(line):
            attendees.setdefault(name, None)

    return list(attendees)
