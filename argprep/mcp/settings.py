# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 argprep authors
#

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings."""

    model_config = SettingsConfigDict(
        env_prefix="argprep_mcp_",
        validate_assignment=True,
    )

    coerce_numbers: bool = Field(
        default=True,
        description="Convert string-encoded numbers in tool arguments",
    )
    coerce_integers: bool = Field(
        default=True,
        description="Treat integer-typed fields as number fields",
    )


SETTINGS = Settings()
