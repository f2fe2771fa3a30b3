"""Source platform detection from content fingerprints."""

from transcript_normalizer.models import TranscriptSource

# Evaluated in order; the first source with a matching marker wins.
SOURCE_MARKERS: list[tuple[TranscriptSource, tuple[str, ...]]] = [
    (TranscriptSource.TEAMS, ("microsoft teams", "<v ")),
    (TranscriptSource.ZOOM, ("zoom", "zoom.us")),
    (TranscriptSource.DRIVE, ("google meet", "meet.google.com")),
]


def detect_source(content: str) -> TranscriptSource:
    """Infer the originating platform with a case-insensitive substring search."""
    lower = content.lower()
    for source, markers in SOURCE_MARKERS:
        if any(marker in lower for marker in markers):
            return source
    return TranscriptSource.UNKNOWN
