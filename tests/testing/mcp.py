# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 argprep authors
#

import json

from functools import cached_property

import pytest

from fastmcp.client.client import CallToolResult


class ToolCallResult:
    """Result returned by a tool call."""

    def __init__(self, result: CallToolResult):
        self.result = result

    @cached_property
    def is_error(self):
        return self.result.isError

    @cached_property
    def text(self):
        [content] = self.result.content
        return content.text

    def json(self):
        return json.loads(self.text)


def guard_parametrize(values):
    """
    Parametrizes with `value` (taken from `values`), and `mangle` which is either
    `json.dumps` or the identity function, so each value is sent both as-is and
    JSON-encoded, the way some clients stringify object arguments.
    """
    mangle = pytest.mark.parametrize("mangle", [json.dumps, lambda x: x])
    value = pytest.mark.parametrize("value", values)
    return lambda fn: mangle(value(fn))


class MCPTest:
    """Base test class for argprep tools, called through an in-memory client."""

    tool_name: str

    @pytest.fixture(autouse=True)
    def setup_client(self, mcp_client):
        self.client = mcp_client

    async def assert_call(self, params, error=False) -> ToolCallResult:
        call_result = await self.client.call_tool_mcp(self.tool_name, params)
        result = ToolCallResult(call_result)
        assert result.is_error == error
        return result

    async def assert_error(self, params, message: str) -> ToolCallResult:
        """Call the tool expecting an error which mentions `message`."""
        result = await self.assert_call(params, error=True)
        assert message in result.text
        return result
