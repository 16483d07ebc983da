# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 argprep authors
#

from fastmcp import FastMCP

from . import __version__
from .lifespan import lifespan
from .tools import tools
from .utils.text import get_file_text


def make_server() -> FastMCP:
    """Create an MCP server."""
    return FastMCP(
        name="argprep",
        version=__version__,
        instructions=get_file_text("mcp_info.md"),
        tools=tools(),
        lifespan=lifespan,
    )
