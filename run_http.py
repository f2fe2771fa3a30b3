"""HTTP runner for MCP server (remote deployment)."""
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.server import TransportSecuritySettings
from transcript_normalizer.config import Settings
from transcript_normalizer.server import (
    app_lifespan,
    normalize_transcript,
    get_action_items,
    get_attendees,
    meeting_brief,
    help_resource,
    TOOL_ANNOTATIONS,
)

settings = Settings()

server = FastMCP(
    "Meeting Transcript Normalizer",
    instructions="Normalize meeting transcripts and extract action items and attendees",
    lifespan=app_lifespan,
    host=settings.http_host,
    port=settings.http_port,
    transport_security=TransportSecuritySettings(enable_dns_rebinding_protection=False),
)

# Register tools with annotations
server.tool(annotations=TOOL_ANNOTATIONS)(normalize_transcript)
server.tool(annotations=TOOL_ANNOTATIONS)(get_action_items)
server.tool(annotations=TOOL_ANNOTATIONS)(get_attendees)

# Register prompts
server.prompt()(meeting_brief)

# Register resources
server.resource("transcript://help")(help_resource)

server.run(transport="streamable-http")
