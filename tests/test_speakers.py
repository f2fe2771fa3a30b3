"""Tests for speaker name heuristics and the speaker registry."""

import pytest

from transcript_normalizer.speakers import (
    SPEAKER_NAME_RULES,
    SpeakerRegistry,
    is_likely_speaker_name,
    validate_speaker_name,
)


class TestSpeakerNameRules:
    @pytest.mark.parametrize("label", ["Bob", "Alice Smith", "Dr Jane O'Neil", "CEO", "Speaker 1"])
    def test_accepts_names(self, label):
        assert is_likely_speaker_name(label)

    @pytest.mark.parametrize(
        "label, rule",
        [
            ("B", "length"),
            ("x" * 51, "length"),
            ("Note. Later", "punctuation"),
            ("Really?", "punctuation"),
            ("AGENDA ITEMS", "shouting"),
            ("The plan", "sentence_starter"),
            ("we agreed on", "sentence_starter"),
            ("I think", "sentence_starter"),
        ],
    )
    def test_rejects_with_rule(self, label, rule):
        assert validate_speaker_name(label) == rule
        assert not is_likely_speaker_name(label)

    def test_short_uppercase_allowed(self):
        assert validate_speaker_name("HOST") is None

    def test_starter_must_be_whole_word(self):
        # "Ian" starts with "i" but is not the word "I"
        assert is_likely_speaker_name("Ian")
        assert is_likely_speaker_name("Theo")

    def test_rules_are_ordered(self):
        names = [name for name, _ in SPEAKER_NAME_RULES]
        assert names == ["length", "punctuation", "shouting", "sentence_starter"]


class TestSpeakerRegistry:
    def test_counts_in_first_seen_order(self):
        registry = SpeakerRegistry()
        for label in ["Bob", "Alice", "Bob", None, "Bob"]:
            registry.record(label)
        speakers = registry.speakers()
        assert [s.id for s in speakers] == ["Bob", "Alice"]
        assert [s.segment_count for s in speakers] == [3, 1]
        assert speakers[0].name == "Bob"
        assert len(registry) == 2

    def test_labels_are_case_sensitive(self):
        registry = SpeakerRegistry()
        registry.record("alice")
        registry.record("Alice")
        assert len(registry) == 2

    def test_empty(self):
        assert SpeakerRegistry().speakers() == []
