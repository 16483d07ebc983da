"""
Common test fixtures and configuration.
"""

import pytest

from fastmcp import Client

from argprep.mcp.server import make_server

from .testing.settings import default_settings, override_setting


# add imported fixtures to __all__ so they're considered in use in the module
__all__ = ["default_settings", "override_setting"]


@pytest.fixture
async def mcp_client():
    """A client for the MCP server."""
    async with Client(make_server()) as client:
        yield client
