from pydantic import BaseModel, Field


class ToolsetInfo(BaseModel):
    """Guidance for using a toolset."""

    meta: dict[str, str]
    tools: list[str] = Field(..., description="Tools the guidance applies to")
    content: str


def info_tool_result(content: str, tools: list[str]) -> ToolsetInfo:
    """
    Mark toolset guidance as something the model should read before calling `tools`.
    """
    return ToolsetInfo(
        content=content,
        tools=sorted(tools),
        meta={
            "importance": "critical",
            "read_before": ", ".join(sorted(tools)),
        },
    )
