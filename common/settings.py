"""Typed runtime settings for both services, read once at process start."""

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class ServiceSettings(BaseSettings):
    """Settings every service needs.

    Environment variable names map directly to field names in uppercase.
    Example: `service_version` reads from `SERVICE_VERSION`. Empty variables are
    treated as unset so the defaults apply.

    Attributes:
        port: Port the HTTP server listens on.
        bind_host: Interface the HTTP server binds to.
        service_version: Value reported in the `version` field.
        log_level: Root log level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
    )

    port: int = Field(default=8080, ge=1, le=65535)
    bind_host: str = Field(default="0.0.0.0")
    service_version: str = Field(default="v1", min_length=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


class LeafSettings(ServiceSettings):
    """Settings for App1, the service with no outbound dependencies.

    Attributes:
        service_name: Value reported in the `service` field.
    """

    service_name: str = Field(default="app1", min_length=1)


class CallerSettings(ServiceSettings):
    """Settings for App2, which calls App1 on every identity request.

    Attributes:
        service_name: Value reported in the `service` field.
        app1_service: Host name of App1, usually its cluster service name.
        app1_port: Port App1 listens on.
    """

    service_name: str = Field(default="app2", min_length=1)
    app1_service: str = Field(default="app1", min_length=1)
    app1_port: int = Field(default=8080, ge=1, le=65535)

    @property
    def app1_url(self) -> str:
        return f"http://{self.app1_service}:{self.app1_port}"


def _load(settings_class):
    try:
        return settings_class()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def load_leaf_settings() -> LeafSettings:
    """Load and validate App1 settings from environment and dotenv.

    Raises:
        SettingsLoadError: Raised when a value is present but invalid.
    """

    return _load(LeafSettings)


def load_caller_settings() -> CallerSettings:
    """Load and validate App2 settings from environment and dotenv.

    Raises:
        SettingsLoadError: Raised when a value is present but invalid.
    """

    return _load(CallerSettings)
