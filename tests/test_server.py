"""Tests for server startup."""

import pytest
from unittest.mock import patch

from transcript_normalizer.server import mcp, app_lifespan


class TestServerStartup:
    @pytest.mark.asyncio
    async def test_lifespan(self):
        with patch("transcript_normalizer.server.Settings") as MockSettings:
            mock_settings = MockSettings.return_value
            mock_settings.cache_max_size = 10
            mock_settings.cache_ttl_seconds = 60
            mock_settings.rate_limit_per_minute = 30
            mock_settings.log_level = "debug"

            async with app_lifespan(mcp):
                from transcript_normalizer import server
                assert server._cache is not None
                assert server._cache.stats()["max_size"] == 10

    def test_mcp_name(self):
        assert mcp is not None
        assert mcp.name == "Meeting Transcript Normalizer"

    def test_meeting_brief_prompt(self):
        from transcript_normalizer.server import meeting_brief
        prompt = meeting_brief("Alice: hi")
        assert "get_action_items" in prompt
        assert "Alice: hi" in prompt

    def test_help_resource(self):
        from transcript_normalizer.server import help_resource
        assert "normalize_transcript" in help_resource()
