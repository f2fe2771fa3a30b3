"""Tests for cache logic."""

from transcript_normalizer.cache import TranscriptCache


class TestTranscriptCache:
    def test_set_and_get(self):
        cache = TranscriptCache(max_size=10, ttl=3600)
        data = {"text": "hello"}
        cache.set("Alice: hello", data)
        assert cache.get("Alice: hello") == data

    def test_miss(self):
        cache = TranscriptCache(max_size=10, ttl=3600)
        assert cache.get("never seen") is None

    def test_content_is_exact_key(self):
        cache = TranscriptCache(max_size=10, ttl=3600)
        cache.set("Alice: hello", {"text": "hello"})
        assert cache.get("Alice: hello ") is None
        assert cache.get("alice: hello") is None

    def test_stats_initial(self):
        cache = TranscriptCache(max_size=10, ttl=3600)
        stats = cache.stats()
        assert stats["size"] == 0
        assert stats["hits"] == 0
        assert stats["misses"] == 0

    def test_stats_after_operations(self):
        cache = TranscriptCache(max_size=10, ttl=3600)
        cache.set("a", {"text": "hi"})
        cache.get("a")  # hit
        cache.get("b")  # miss
        stats = cache.stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate"] == 50.0

    def test_max_size(self):
        cache = TranscriptCache(max_size=2, ttl=3600)
        cache.set("a", {"text": "1"})
        cache.set("b", {"text": "2"})
        cache.set("c", {"text": "3"})
        # One of the first two should have been evicted
        assert cache.stats()["size"] == 2
