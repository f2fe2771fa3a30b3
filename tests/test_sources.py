"""Tests for source platform detection."""

from transcript_normalizer.models import TranscriptSource
from transcript_normalizer.sources import detect_source


class TestDetectSource:
    def test_teams_by_name(self):
        assert detect_source("Recorded in Microsoft Teams") == TranscriptSource.TEAMS

    def test_teams_by_voice_tag(self):
        assert detect_source("<v Alice>hi</v>") == TranscriptSource.TEAMS

    def test_zoom(self):
        assert detect_source("Join at https://us02web.zoom.us/j/123") == TranscriptSource.ZOOM

    def test_drive(self):
        assert detect_source("meet.google.com/abc-defg-hij") == TranscriptSource.DRIVE
        assert detect_source("Google Meet recording") == TranscriptSource.DRIVE

    def test_unknown(self):
        assert detect_source("Alice: hello") == TranscriptSource.UNKNOWN

    def test_case_insensitive(self):
        assert detect_source("ZOOM call") == TranscriptSource.ZOOM

    def test_priority_order(self):
        content = "Google Meet notes copied from a Zoom call in Microsoft Teams"
        assert detect_source(content) == TranscriptSource.TEAMS
