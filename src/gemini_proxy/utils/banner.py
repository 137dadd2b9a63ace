"""Banner generation for application."""

import platform
import sys
from datetime import UTC, datetime

from pyfiglet import figlet_format

from gemini_proxy.config.config import Settings

__all__ = ["create_banner"]


def create_banner(settings: Settings, silent: bool = False) -> str:
    """Generate and optionally print a banner with server name and settings.

    API keys are never printed, only how many are configured.

    Args:
        settings: Application configuration settings
        silent: If True, suppress console output and return banner as string

    Returns:
        The complete banner as a string
    """
    lines: list[str] = []

    banner = figlet_format("GEMINI PROXY", font="slant")
    lines.extend([
        "\033[1;36m" + banner + "\033[0m",
        f"\033[1;33m⚡ Gemini OpenAI Proxy v{settings.version} ⚡\033[0m",
        f"\033[0;37m{'-' * 60}\033[0m",
    ])

    env_color = "\033[1;31m" if settings.app_env == "production" else "\033[1;32m"
    metrics = (
        f"http://{settings.metrics_addr}/metrics"
        if settings.metrics_addr
        else f"http://localhost:{settings.port}/metrics"
    )
    lines.extend([
        f"🌍 Environment: {env_color}{settings.app_env}\033[0m",
        f"🔌 API: http://{settings.host}:{settings.port}/v1",
        f"📋 Docs: http://localhost:{settings.port}/docs",
        f"📊 Metrics: {metrics}",
    ])

    lines.extend([
        "\n\033[1;33m🔑 Upstream Configuration\033[0m",
        f"  • API Keys: {len(settings.api_keys)}",
        f"  • Disconnect Poll Interval: {settings.disconnect_poll_interval}s",
    ])

    lines.extend([
        "\n\033[1;33m📝 Logging Configuration\033[0m",
        f"  • Log Level: {settings.log_level}",
        f"  • Log Path: {settings.log_path if settings.app_env == 'development' else 'stdout/stderr'}",  # noqa: E501
    ])

    lines.extend([
        "\n\033[1;33m⚙️ System Information\033[0m",
        f"  • OS: {platform.system()} {platform.release()}",
        f"  • Python: {sys.version.split()[0]}",
        f"  • Auto Reload: {'✅' if settings.reload else '❌'}",
        f"  • Started at: {datetime.now(UTC).strftime('%Y-%m-%d %H:%M:%S')} UTC",
        f"\033[0;37m{'-' * 60}\033[0m",
    ])

    banner_text = "\n".join(lines)
    if not silent:
        print(banner_text)  # noqa: T201
    return banner_text
