"""Declaration of the root package gemini_proxy."""

from gemini_proxy.app import app
from gemini_proxy.server import run

__all__ = ["app", "main"]


def main() -> None:
    """Run the application server using uv."""
    run()
