"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FILE = "/var/log/mumble-server/mumble-server.log"


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # IRC configuration
    irc_server: str = Field(default="irc.wetfish.net", description="IRC server to connect to")
    irc_port: int = Field(default=6697, description="IRC port to connect to")
    irc_channel: str = Field(default="#wetfish", description="IRC channel to join and report to")
    irc_nick: str = Field(default="mumbot", description="IRC nick, also used as user and real name")
    irc_password: str | None = Field(default=None, description="IRC server password")
    irc_secure: bool = Field(default=True, description="Connect to IRC over TLS")

    # Mumble server log
    log_file: str = Field(default=DEFAULT_LOG_FILE, description="Path of the mumble server log")

    # Reporting
    min_delay_seconds: int = Field(
        default=300, description="Minimum time between two chat reports in seconds"
    )

    # Diagnostics
    log_level: str = Field(default="INFO", description="Log level: DEBUG, INFO, WARNING or ERROR")

    @field_validator("irc_port")
    @classmethod
    def validate_irc_port(cls, v: int) -> int:
        """Validate the port is in the TCP range."""
        if not 1 <= v <= 65535:
            raise ValueError("irc_port must be between 1 and 65535")
        return v

    @field_validator("irc_channel")
    @classmethod
    def validate_irc_channel(cls, v: str) -> str:
        """Validate the channel name carries a channel prefix."""
        if not v.startswith(("#", "&")):
            raise ValueError("irc_channel must start with '#' or '&'")
        return v

    @field_validator("min_delay_seconds")
    @classmethod
    def validate_min_delay_seconds(cls, v: int) -> int:
        """Validate the delay is not negative."""
        if v < 0:
            raise ValueError("min_delay_seconds must not be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for ``logging.basicConfig``."""
        return logging.getLevelName(self.log_level)

    def describe(self) -> dict[str, object]:
        """Return the configuration for logging, with the password redacted."""
        values = self.model_dump()
        if values.get("irc_password"):
            values["irc_password"] = "***REDACTED***"
        return values
