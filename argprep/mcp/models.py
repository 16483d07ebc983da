# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 argprep authors
#

from typing import Any

from pydantic import BaseModel, Field


class NumberFieldsResult(BaseModel):
    """Number fields found in a tool input schema."""

    fields: list[str] = Field(..., description="Sorted names of top-level number fields")


class PreprocessResult(BaseModel):
    """Tool arguments after string-encoded numbers were converted."""

    arguments: dict[str, Any] = Field(..., description="Arguments with numbers converted")
    coerced_fields: list[str] = Field(
        ..., description="Sorted names of the fields whose value was converted"
    )
