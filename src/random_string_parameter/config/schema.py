"""Pydantic models for config.yaml configuration."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from random_string_parameter.parameters.random_string import DEFAULT_REGEX


class RandomStringConfig(BaseModel):
    """Random string parameter type configuration."""

    regex: str = Field(
        default=DEFAULT_REGEX,
        description="Regular expression user-entered values must fully match",
    )


class ServerConfig(BaseModel):
    """API server configuration."""

    host: str = Field(default="127.0.0.1", description="Server bind address")
    port: int = Field(default=8080, description="Server port", ge=1, le=65535)
    root_url: str = Field(
        default="http://localhost:8080/",
        description="Public root URL used by forms to reach the validation endpoint",
    )
    cors_origins: list[str] = Field(
        default=["http://localhost:8080"],
        description="Allowed CORS origins (use ['*'] for development only)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Root log level"
    )


class ExtensionsConfig(BaseModel):
    """Third-party parameter type discovery."""

    discover: bool = Field(
        default=True,
        description="Load parameter types from the random_string_parameter.extensions entry points",
    )
    blocked: list[str] = Field(default_factory=list, description="Entry point names to skip")


class PluginConfig(BaseModel):
    """Root configuration schema."""

    random_string: RandomStringConfig = Field(default_factory=RandomStringConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    extensions: ExtensionsConfig = Field(default_factory=ExtensionsConfig)

    def descriptor_options(self) -> dict[str, dict[str, Any]]:
        """Options for each registered parameter type, keyed by type name."""
        return {
            "random-string": {
                "regex": self.random_string.regex,
                "root_url": self.server.root_url,
            },
        }
