# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 argprep authors
#

"""
ToolErrors which tell the caller how to fix the arguments of a tool call.
"""

from collections.abc import Mapping
from typing import Any

from fastmcp.exceptions import ToolError


def annotated_error(
    problem: str,
    likely_cause: str,
    next_steps: str,
    original_error: str | None = None,
) -> ToolError:
    """
    Create a ToolError explaining what went wrong and what to do about it.

    Args:
        problem: Clear description of what went wrong
        likely_cause: Most probable reason for the failure
        next_steps: Actionable advice for resolving the issue
        original_error: Optional underlying error details

    Returns:
        ToolError with structured message including context and guidance
    """
    message = f"{problem}. This likely means {likely_cause}. Next steps: {next_steps}"
    if original_error:
        message += f". Original error: {original_error}"
    return ToolError(message)


def input_schema_error(input_schema: Mapping[str, Any]) -> ToolError:
    """Error for an input schema which doesn't describe named arguments."""
    schema_type = input_schema.get("type")
    if schema_type is None:
        found = "a schema with no type and no properties"
    else:
        found = f"a schema of type {schema_type!r}"

    return annotated_error(
        problem=f"The input schema is not an object schema, got {found}",
        likely_cause="it describes a single value rather than a set of named arguments",
        next_steps='pass the full inputSchema of the tool, with "type": "object"',
    )
