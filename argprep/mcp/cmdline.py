# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 argprep authors
#

import json

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, Json, TypeAdapter
from pydantic_settings import (
    BaseSettings,
    CliApp,
    CliPositionalArg,
    CliSubCommand,
)

from .preprocess import preprocess_arguments
from .server import make_server
from .settings import SETTINGS
from .utils.mcp_json import MCP_SETTINGS_PROFILES, Profile, mcp_config


JSON_OBJECT = TypeAdapter(Json[dict[str, Any]])


class AgentConfigListCommand(BaseModel):
    """List available config profiles"""

    def cli_cmd(self) -> None:
        print("Available profiles:")
        for name in sorted(MCP_SETTINGS_PROFILES):
            print(f" - {name}")


class AgentConfigGenerateCommand(BaseModel):
    """Output configuration for a profile"""

    profile: CliPositionalArg[Profile] = Field(description="profile name")

    def cli_cmd(self) -> None:
        print(mcp_config(self.profile))


class AgentConfigCommand(BaseModel):
    """Manage .json.mcp file content"""

    list: CliSubCommand[AgentConfigListCommand]
    generate: CliSubCommand[AgentConfigGenerateCommand]

    def cli_cmd(self) -> None:
        CliApp.run_subcommand(self)


class PreprocessCommand(BaseModel):
    """Convert string-encoded numbers in tool arguments"""

    schema_path: CliPositionalArg[Path] = Field(description="JSON Schema file for the arguments")
    arguments: CliPositionalArg[str] = Field(description="arguments as a JSON object")

    def cli_cmd(self) -> None:
        input_schema = JSON_OBJECT.validate_python(self.schema_path.read_text())
        arguments = JSON_OBJECT.validate_python(self.arguments)
        if SETTINGS.coerce_numbers:
            arguments = preprocess_arguments(
                arguments, input_schema, integers=SETTINGS.coerce_integers
            )
        print(json.dumps(arguments, indent=2))


class RunCommand(BaseModel):
    """Run the MCP server"""

    def cli_cmd(self) -> None:
        mcp = make_server()
        mcp.run(show_banner=False)


class CLIArguments(
    BaseSettings, cli_parse_args=True, cli_kebab_case=True, cli_use_class_docs_for_groups=True
):
    """Command line arguments."""

    agent_config: CliSubCommand[AgentConfigCommand]
    preprocess: CliSubCommand[PreprocessCommand]
    run: CliSubCommand[RunCommand]

    def cli_cmd(self) -> None:
        if not self.model_dump(exclude_none=True):
            # no option was provided, run by default
            RunCommand().cli_cmd()
        else:
            CliApp.run_subcommand(self)
