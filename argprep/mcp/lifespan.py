# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 argprep authors
#

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastmcp import FastMCP
from fastmcp.utilities.logging import get_logger

from .settings import SETTINGS


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Server lifespan context manager."""
    logger = get_logger("argprep")

    # startup logging
    logger.info(f"Server {server.name} settings: {SETTINGS.model_dump()}")

    yield {}
