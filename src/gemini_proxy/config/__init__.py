"""Configuration module for the Gemini proxy.

This module provides centralized configuration management for the proxy,
including logging setup, error codes, and application settings.

Key Components:
- settings: Application configuration loaded from environment variables and TOML files
- Logging: Loguru-based logging configuration with development/production modes
- Error handling: Centralized error codes and public error messages

Upstream credentials, listen addresses and logging options can all be set
through environment variables, falling back to the defaults shipped in the
app.toml configuration file.
"""

from gemini_proxy.config.config import Settings, settings
from gemini_proxy.config.errors import ErrorCode, ErrorNames
from gemini_proxy.config.logger import config_logger

__all__ = [
    "ErrorCode",
    "ErrorNames",
    "Settings",
    "config_logger",
    "settings",
]
