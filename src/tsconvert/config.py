"""Configuration for the tsconvert command-line tool."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .formats import FormatName
from .logging import LogLevel, Profile

__all__ = ["CLIConfig"]


class CLIConfig(BaseSettings):
    """Settings for the command-line tool.

    Read from environment variables prefixed with ``TSCONVERT_``. The
    conversion engine itself takes no configuration; these settings only
    control logging and the default output format of the command-line tool.
    """

    model_config = SettingsConfigDict(
        env_prefix="TSCONVERT_", case_sensitive=False
    )

    log_level: LogLevel = Field(
        LogLevel.WARNING,
        title="Log level",
        description="Log level of the tsconvert logger",
    )

    profile: Profile = Field(
        Profile.development,
        title="Logging profile",
        description="Logging profile, development or production",
    )

    default_format: FormatName = Field(
        FormatName.LOCAL_READABLE,
        title="Default format",
        description=(
            "Format used when rendering a timestamp without an explicit"
            " format"
        ),
    )
