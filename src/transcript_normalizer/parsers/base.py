"""Abstract base and shared helpers for transcript parsers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from transcript_normalizer.models import (
    NormalizedTranscript,
    TranscriptFormat,
    TranscriptMetadata,
    TranscriptSegment,
    TranscriptSource,
)
from transcript_normalizer.speakers import SpeakerRegistry


@dataclass(frozen=True)
class ParseOutcome:
    """Result of a parse attempt: a transcript on success, a reason on failure."""

    transcript: NormalizedTranscript | None = None
    reason: str | None = None

    @classmethod
    def success(cls, transcript: NormalizedTranscript) -> "ParseOutcome":
        return cls(transcript=transcript)

    @classmethod
    def failure(cls, reason: str) -> "ParseOutcome":
        return cls(reason=reason)

    @property
    def ok(self) -> bool:
        return self.transcript is not None


class TranscriptParser(ABC):
    format: TranscriptFormat

    @abstractmethod
    def can_parse(self, content: str) -> bool:
        """Return True if the content looks like this parser's format."""
        ...

    @abstractmethod
    def parse(self, content: str) -> NormalizedTranscript:
        """Parse content into a normalized transcript."""
        ...

    def try_parse(self, content: str) -> ParseOutcome:
        """Parse without raising. Default: parsers that cannot fail."""
        return ParseOutcome.success(self.parse(content))


class TranscriptBuilder:
    """Accumulates segments and speakers for a single parse call."""

    def __init__(self, format: TranscriptFormat):
        self.format = format
        self._segments: list[TranscriptSegment] = []
        self._registry = SpeakerRegistry()

    def add(
        self,
        text: str,
        speaker: str | None = None,
        start_time: float | None = None,
        end_time: float | None = None,
        confidence: float | None = None,
    ) -> bool:
        """Append a segment; blank text is dropped. Returns whether it was kept."""
        text = text.strip()
        if not text:
            return False
        self._segments.append(
            TranscriptSegment(
                speaker=speaker or None,
                text=text,
                start_time=start_time,
                end_time=end_time,
                confidence=confidence,
            )
        )
        self._registry.record(speaker)
        return True

    def build(self, source: TranscriptSource) -> NormalizedTranscript:
        segments = list(self._segments)
        speakers = self._registry.speakers()
        total_duration = segments[-1].end_time if segments else None

        return NormalizedTranscript(
            text=" ".join(s.text for s in segments),
            segments=segments,
            speakers=speakers,
            metadata=TranscriptMetadata(
                format=self.format,
                source=source,
                total_duration=total_duration,
                speaker_count=len(speakers),
                has_timestamps=any(s.start_time is not None for s in segments),
            ),
        )
