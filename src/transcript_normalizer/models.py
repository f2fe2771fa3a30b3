"""Data models for normalized transcripts."""

from enum import Enum

from pydantic import BaseModel


class TranscriptFormat(str, Enum):
    VTT = "vtt"
    TEXT = "text"
    JSON = "json"


class TranscriptSource(str, Enum):
    TEAMS = "teams"
    ZOOM = "zoom"
    DRIVE = "drive"
    UNKNOWN = "unknown"


class TranscriptSegment(BaseModel):
    model_config = {"frozen": True}

    speaker: str | None = None
    text: str
    start_time: float | None = None
    end_time: float | None = None
    confidence: float | None = None


class Speaker(BaseModel):
    model_config = {"frozen": True}

    id: str
    name: str | None = None
    email: str | None = None
    segment_count: int = 0


class TranscriptMetadata(BaseModel):
    model_config = {"frozen": True}

    format: TranscriptFormat
    source: TranscriptSource = TranscriptSource.UNKNOWN
    total_duration: float | None = None
    speaker_count: int = 0
    has_timestamps: bool = False


class NormalizedTranscript(BaseModel):
    model_config = {"frozen": True}

    text: str = ""
    segments: list[TranscriptSegment] = []
    speakers: list[Speaker] = []
    metadata: TranscriptMetadata
