"""
Tests for the argument preprocessing MCP tools.
"""

import pytest

from .testing.mcp import MCPTest, guard_parametrize


INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "query": {"type": "string"},
        "limit": {"type": "integer", "default": 10},
        "threshold": {"anyOf": [{"type": "number"}, {"type": "null"}], "default": None},
        "exact": {"type": "boolean"},
        "filters": {"type": "object"},
    },
    "required": ["query"],
}


class TestArgprepInfo(MCPTest):
    tool_name = "argprep_info"

    async def test_info(self):
        result = await self.assert_call({})
        info = result.json()
        assert info["meta"]["importance"] == "critical"
        assert info["tools"] == ["argprep_number_fields", "argprep_preprocess"]
        assert "argprep_preprocess" in info["content"]


class TestArgprepNumberFields(MCPTest):
    tool_name = "argprep_number_fields"

    @guard_parametrize([INPUT_SCHEMA])
    async def test_fields(self, mangle, value):
        result = await self.assert_call({"input_schema": mangle(value)})
        assert result.json() == {"fields": ["limit", "threshold"]}

    async def test_fields_without_integers(self, override_setting):
        override_setting("coerce_integers", False)
        result = await self.assert_call({"input_schema": INPUT_SCHEMA})
        assert result.json() == {"fields": ["threshold"]}

    async def test_not_object_schema(self):
        await self.assert_error(
            {"input_schema": {"type": "array"}},
            "The input schema is not an object schema, got a schema of type 'array'. "
            "This likely means",
        )


class TestArgprepPreprocess(MCPTest):
    tool_name = "argprep_preprocess"

    @guard_parametrize([{"query": "42", "limit": "5", "threshold": " 0.5 ", "exact": "1"}])
    async def test_preprocess(self, mangle, value):
        result = await self.assert_call({"arguments": mangle(value), "input_schema": INPUT_SCHEMA})
        assert result.json() == {
            "arguments": {"query": "42", "limit": 5, "threshold": 0.5, "exact": "1"},
            "coerced_fields": ["limit", "threshold"],
        }

    @pytest.mark.parametrize("value", ["1e3", "1.50", "0x1A", "10 items"])
    async def test_unclean_numbers_untouched(self, value):
        arguments = {"query": "q", "limit": value}
        result = await self.assert_call({"arguments": arguments, "input_schema": INPUT_SCHEMA})
        assert result.json() == {"arguments": arguments, "coerced_fields": []}

    async def test_nested_untouched(self):
        arguments = {"query": "q", "filters": {"limit": "5"}, "limit": 3}
        result = await self.assert_call({"arguments": arguments, "input_schema": INPUT_SCHEMA})
        assert result.json() == {"arguments": arguments, "coerced_fields": []}

    async def test_coercion_disabled(self, override_setting):
        override_setting("coerce_numbers", False)
        arguments = {"query": "q", "limit": "5"}
        result = await self.assert_call({"arguments": arguments, "input_schema": INPUT_SCHEMA})
        assert result.json() == {"arguments": arguments, "coerced_fields": []}

    async def test_not_object_schema(self):
        await self.assert_error(
            {"arguments": {"limit": "5"}, "input_schema": {"type": "integer"}},
            "got a schema of type 'integer'",
        )

    async def test_arguments_not_json(self):
        await self.assert_error(
            {"arguments": "limit=5", "input_schema": INPUT_SCHEMA},
            "Field arguments, if a string, must be a non-string encoded as JSON",
        )
