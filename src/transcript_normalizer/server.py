"""Meeting Transcript Normalizer MCP Server."""

import logging
import sys
import time
from collections import deque
from contextlib import asynccontextmanager
from typing import Annotated, Literal

from pydantic import Field
from mcp.server.fastmcp import FastMCP

from transcript_normalizer.cache import TranscriptCache
from transcript_normalizer.config import Settings, Transport
from transcript_normalizer.dispatch import normalize
from transcript_normalizer.extract import extract_action_items, extract_attendees
from transcript_normalizer.models import NormalizedTranscript, TranscriptSegment
from transcript_normalizer.utils import format_timestamp

# Logging to stderr (MCP convention)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("transcript-normalizer")

# Module-level state
_cache = None
_settings = None
_rate_window = deque()

# Tools only transform the content they are given
TOOL_ANNOTATIONS = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "openWorldHint": False,
}


@asynccontextmanager
async def app_lifespan(server: FastMCP):
    global _cache, _settings, _rate_window
    _settings = Settings()
    logging.getLogger().setLevel(_settings.log_level.upper())
    _cache = TranscriptCache(
        max_size=_settings.cache_max_size,
        ttl=_settings.cache_ttl_seconds,
    )
    _rate_window = deque()

    logger.info("Server started")
    yield

    logger.info(f"Server stopped (cache: {_cache.stats()})")


mcp = FastMCP(
    "Meeting Transcript Normalizer",
    instructions="Normalize meeting transcripts (VTT, diarized text, JSON exports) and extract action items and attendees",
    lifespan=app_lifespan,
)


def _check_rate_limit():
    """Sliding window rate limit."""
    now = time.time()
    limit = (_settings.rate_limit_per_minute if _settings else 60)
    while _rate_window and _rate_window[0] < now - 60:
        _rate_window.popleft()
    if len(_rate_window) >= limit:
        raise ValueError(
            f"Rate limit exceeded ({limit}/min). Try again in a few seconds."
        )
    _rate_window.append(now)


def _check_content(content: str) -> str | None:
    """Return an error message if content cannot be processed."""
    limit = _settings.max_content_chars if _settings else None
    if limit and len(content) > limit:
        return f"Error: Transcript too large ({len(content)} chars, limit {limit})."
    return None


def _normalize_cached(content: str) -> NormalizedTranscript:
    """Normalize with cache layer."""
    cached = _cache.get(content) if _cache else None
    if cached:
        return NormalizedTranscript.model_validate(cached)

    result = normalize(content)
    if _cache:
        _cache.set(content, result.model_dump())
    return result


def _segments_to_markdown(segments: list[TranscriptSegment]) -> str:
    """Format segments as markdown with timestamps and speakers."""
    lines = []
    for seg in segments:
        prefix = ""
        if seg.start_time is not None:
            prefix += f"**[{format_timestamp(seg.start_time)}]** "
        if seg.speaker:
            prefix += f"**{seg.speaker}:** "
        lines.append(f"{prefix}{seg.text}")
    return "\n".join(lines)


def _summary_header(result: NormalizedTranscript) -> str:
    meta = result.metadata
    duration = (
        format_timestamp(meta.total_duration)
        if meta.total_duration is not None
        else "n/a"
    )
    return (
        f"## Normalized Transcript\n"
        f"**Format:** {meta.format.value} | **Source:** {meta.source.value} | "
        f"**Segments:** {len(result.segments)} | **Speakers:** {meta.speaker_count} | "
        f"**Duration:** {duration}\n"
    )


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def normalize_transcript(
    content: Annotated[str, Field(description="Raw transcript content: WebVTT, diarized 'Name: text' lines, or a JSON export")],
    format: Annotated[Literal["summary", "segments", "json"], Field(default="summary", description="Output format: summary for metadata and speakers, segments for the speaker-attributed segments, json for the full normalized structure")] = "summary",
) -> str:
    """Detect the transcript format and normalize it into speaker-attributed segments."""
    _check_rate_limit()

    error = _check_content(content)
    if error:
        return error

    result = _normalize_cached(content)

    if format == "json":
        return result.model_dump_json(indent=2)
    if format == "segments":
        return f"{_summary_header(result)}\n{_segments_to_markdown(result.segments)}"

    speakers = "\n".join(
        f"- {s.name} ({s.segment_count} segment(s))" for s in result.speakers
    )
    return f"{_summary_header(result)}\n### Speakers\n{speakers or '_none detected_'}"


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def get_action_items(
    content: Annotated[str, Field(description="Raw transcript content in any supported format")],
) -> str:
    """List the transcript statements that read like action items or commitments."""
    _check_rate_limit()

    error = _check_content(content)
    if error:
        return error

    result = _normalize_cached(content)
    items = extract_action_items(result.segments)
    if not items:
        return "No action items found."

    body = "\n".join(f"- {item}" for item in items)
    return f"## Action Items\n**{len(items)} item(s) found**\n\n{body}"


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def get_attendees(
    content: Annotated[str, Field(description="Raw transcript content in any supported format")],
) -> str:
    """List meeting attendees from speaker labels and explicit attendee listings."""
    _check_rate_limit()

    error = _check_content(content)
    if error:
        return error

    attendees = extract_attendees(_normalize_cached(content))
    if not attendees:
        return "No attendees found."

    body = "\n".join(f"- {name}" for name in attendees)
    return f"## Attendees\n**{len(attendees)} attendee(s)**\n\n{body}"


# -- MCP Prompts --


@mcp.prompt()
def meeting_brief(
    content: Annotated[str, Field(description="Raw meeting transcript content")],
) -> str:
    """Produce a short meeting brief with attendees and follow-ups."""
    return f"""Please use the normalize_transcript tool (format="segments"), then get_attendees and get_action_items on this meeting transcript:

{content}

Then write a brief including:
1. Who attended
2. The main topics discussed, attributed to speakers
3. Every action item with its owner, if one is named

Keep the brief concise."""


# -- MCP Resources --


@mcp.resource("transcript://help")
def help_resource() -> str:
    """Usage guide for the Meeting Transcript Normalizer MCP server."""
    return """# Meeting Transcript Normalizer - Help Guide

## Supported formats (auto-detected)
- WebVTT: `WEBVTT` header or `-->` timing lines, speakers via `<v Name>` or `Name:`
- JSON exports: `{"transcript": [...]}`, `{"segments": [...]}` or a bare array
- Diarized text: one `Name: text` statement per line, optional `[H:MM:SS]` prefix

## Available Tools

### normalize_transcript
Normalize content into segments, speakers and metadata.
- Example: normalize_transcript(content="Alice: Hello", format="segments")

### get_action_items
List statements containing action phrases (follow up, need to, will send, ...).

### get_attendees
List speakers plus names from `Attendees:`, `Participants:` or `Present:` lines.
"""


def main():
    settings = Settings()
    if settings.transport == Transport.STREAMABLE_HTTP:
        mcp.settings.host = settings.http_host
        mcp.settings.port = settings.http_port
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
