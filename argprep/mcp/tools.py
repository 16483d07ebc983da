# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 argprep authors
#

from typing import Annotated, Any, Callable

from pydantic import Field

from .models import NumberFieldsResult, PreprocessResult
from .preprocess import extract_number_fields, preprocess_arguments
from .schema import ObjectSchema, from_json_schema
from .settings import SETTINGS
from .utils.error import input_schema_error
from .utils.guard import argument_guard
from .utils.text import get_file_text
from .utils.tool import ToolsetInfo, info_tool_result


def tools() -> list[Callable[..., Any]]:
    """List of available argument preprocessing tools."""
    return [
        argprep_info,
        argprep_number_fields,
        argprep_preprocess,
    ]


def argprep_info() -> ToolsetInfo:
    """
    Key information for LLMs using the argprep_ tools; call this first.

    Returns:
        Text to guide correct and effective use of the toolset.
    """
    return info_tool_result(
        get_file_text("argprep_info.md"),
        [tool.__name__ for tool in tools() if tool is not argprep_info],
    )


@argument_guard
def argprep_number_fields(
    input_schema: Annotated[
        dict[str, Any],
        Field(description="JSON Schema of the tool arguments (the tool's inputSchema)"),
    ],
) -> NumberFieldsResult:
    """
    List the top-level fields of a tool input schema which expect numbers.

    Only these fields are ever converted by argprep_preprocess.
    """
    argument_schema = _object_schema(input_schema)
    return NumberFieldsResult(fields=sorted(extract_number_fields(argument_schema)))


@argument_guard
def argprep_preprocess(
    arguments: Annotated[
        dict[str, Any],
        Field(description="Tool arguments, as sent by the client"),
    ],
    input_schema: Annotated[
        dict[str, Any],
        Field(description="JSON Schema of the tool arguments (the tool's inputSchema)"),
    ],
) -> PreprocessResult:
    """
    Convert string-encoded numbers in tool arguments, ready for validation.

    A string is converted only when its field expects a number and the string
    is exactly how the number is normally written (surrounding whitespace
    aside). "42" becomes 42, but "1e3", "1.50" and "0x1A" stay strings.

    Returns:
        The converted arguments and the names of the converted fields.
    """
    argument_schema = _object_schema(input_schema)
    if not SETTINGS.coerce_numbers:
        return PreprocessResult(arguments=arguments, coerced_fields=[])

    processed = preprocess_arguments(
        arguments, argument_schema, integers=SETTINGS.coerce_integers
    )
    coerced = [
        name
        for name, value in processed.items()
        if isinstance(arguments[name], str) and not isinstance(value, str)
    ]
    return PreprocessResult(arguments=processed, coerced_fields=sorted(coerced))


def _object_schema(input_schema: dict[str, Any]) -> ObjectSchema:
    argument_schema = from_json_schema(input_schema, integers=SETTINGS.coerce_integers)
    if not isinstance(argument_schema, ObjectSchema):
        raise input_schema_error(input_schema)
    return argument_schema
