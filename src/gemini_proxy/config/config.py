"""Define configuration for the project."""

import tomllib
from pathlib import Path
from typing import Literal

from pydantic import Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings", "split_address"]


_app_config_path = Path(__file__).parent / "resources" / "app.toml"

with Path.open(_app_config_path, "rb") as f:
    _config = tomllib.load(f)
    _app_config = _config.get("app", {})
    _server_config = _app_config.get("server", {})
    _upstream_config = _app_config.get("upstream", {})
    _log_config = _app_config.get("logging", {})


def split_address(addr: str) -> tuple[str, int]:
    """Split a ``host:port`` listen address.

    An empty host (``":8080"``) binds all interfaces.

    Args:
        addr: Listen address in ``host:port`` form.

    Returns:
        Tuple of host and port.

    Raises:
        ValueError: If the address has no valid port.
    """
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"Invalid listen address: {addr!r}")
    return host.strip("[]") or "0.0.0.0", int(port)  # noqa: S104


class Settings(BaseSettings):
    """Application configuration settings."""

    # Environment configuration
    app_env: Literal["development", "testing", "production"] = Field(
        default="development",
        description="Current application environment determining behavior.",
        validation_alias="ENV",
    )

    # Server configuration
    listen_addr: str = Field(
        default=_server_config.get("listen_addr", ":8080"),
        description="Address the proxy listens on, in host:port form.",
        validation_alias="LISTEN_ADDR",
    )

    metrics_addr: str | None = Field(
        default=None,
        description="Optional separate address for the Prometheus metrics server.",
        validation_alias="METRICS_ADDR",
    )

    version: str = Field(
        default=_server_config.get("version", "0.1.0"),
        description="Version of the application.",
    )

    # Upstream configuration
    gemini_api_key: str | None = Field(
        default=None,
        description="One or more Gemini API keys separated by the key delimiter.",
        validation_alias="GEMINI_API_KEY",
        repr=False,
    )

    api_key_delimiter: str = Field(
        default=_upstream_config.get("api_key_delimiter", ";"),
        description="Delimiter separating multiple API keys.",
    )

    disconnect_poll_interval: float = Field(
        default=_upstream_config.get("disconnect_poll_interval", 0.1),
        description="Seconds between client disconnect checks during upstream calls.",
        gt=0,
    )

    # Log configuration
    log_dir: str = Field(
        default=_log_config.get("log_dir", "log"),
        description="Directory for storing log files.",
    )

    log_file: str = Field(
        default=_log_config.get("log_file", "app.log"),
        description="Name of the log file.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (e.g., DEBUG, INFO, WARNING, ERROR).",
    )

    rotation: str = Field(
        default=_log_config.get("rotation", "10 MB"),
        description="Log rotation strategy (time or size-based).",
    )

    loki_url: str | None = Field(
        default=None,
        validation_alias="LOKI_URL",
        description="Loki push endpoint used for structured logs in production.",
    )

    @computed_field(repr=False)
    @property
    def api_keys(self) -> list[str]:
        """Configured API keys in order, blank segments dropped."""
        if not self.gemini_api_key:
            return []
        keys = self.gemini_api_key.split(self.api_key_delimiter)
        return [key.strip() for key in keys if key.strip()]

    @computed_field
    @property
    def host(self) -> str:
        """Host the server binds to."""
        return split_address(self.listen_addr)[0]

    @computed_field
    @property
    def port(self) -> int:
        """Network port the server listens on."""
        return split_address(self.listen_addr)[1]

    @computed_field
    @property
    def log_path(self) -> Path:
        """Path where application logs are stored."""
        return Path(self.log_dir) / self.log_file

    @computed_field
    @property
    def reload(self) -> bool:
        """Whether to enable auto-reload on code changes."""
        return bool(_server_config.get("reload")) and self.app_env == "development"

    @model_validator(mode="after")
    def validate_log_level(self) -> "Settings":
        """Adjust log level based on environment."""
        if self.app_env == "production" and self.log_level == "DEBUG":
            self.log_level = "INFO"
        return self

    @model_validator(mode="after")
    def validate_addresses(self) -> "Settings":
        """Reject listen addresses without a usable port."""
        split_address(self.listen_addr)
        if self.metrics_addr:
            split_address(self.metrics_addr)
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        env_ignore_empty=True,
    )


# Create a single instance of Settings to use throughout the application
settings = Settings()
