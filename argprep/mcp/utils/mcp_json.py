# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 argprep authors
#

import json
import sys

from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from ..settings import Settings


class Profile(StrEnum):
    DEFAULT = "default"
    PASSTHROUGH = "passthrough"


# profiles for mcp.json env variables
MCP_SETTINGS_PROFILES = {
    Profile.DEFAULT: Settings(),
    Profile.PASSTHROUGH: Settings(coerce_numbers=False),
}


class MCPServerConfig(BaseModel):
    """The .mcp.json file content."""

    command: str
    args: tuple[str, ...] | None = None
    env: dict[str, str] | None = None

    def file_content(self) -> dict[str, Any]:
        """Content of the mcp.json file."""
        return {
            "mcpServers": {
                "argprep": self.model_dump(exclude_none=True),
            }
        }


def mcp_config(profile: Profile) -> str:
    """Return the .mcp.json content running the server with a profile."""
    command, args = _get_command()
    env = _get_profile_env(profile)
    config = MCPServerConfig(command=command, args=args, env=env)

    return json.dumps(config.file_content(), indent=2)


def _get_command() -> tuple[str, tuple[str, ...] | None]:
    script = sys.argv[0]
    if script.endswith("__main__.py"):
        return sys.executable, ("-m", "argprep.mcp")
    return script, None


def _get_profile_env(profile: Profile) -> dict[str, str] | None:
    settings = MCP_SETTINGS_PROFILES[profile]
    env_prefix = Settings.model_config["env_prefix"]
    env = {
        (env_prefix + name).upper(): str(value)
        for name, value in settings.model_dump(exclude_defaults=True).items()
    }
    return env or None
