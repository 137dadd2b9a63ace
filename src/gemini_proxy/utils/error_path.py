"""Get the source location an error was raised from."""

import traceback

__all__ = ["get_error_path"]


def get_error_path(err: BaseException) -> str:
    """Extract formatted source location from an error traceback.

    Formats the innermost frame of the traceback, shortening paths inside
    the gemini_proxy package.

    Args:
        err: The raised error containing traceback information

    Returns:
        A formatted string containing the error's source location in the format:
        "filename:line (fn:function_name)", or "unknown" without a traceback
    """
    frames = traceback.extract_tb(err.__traceback__)
    if not frames:
        return "unknown"
    filename, line, func, _ = frames[-1]

    if "gemini_proxy" in filename:
        filename = "gemini_proxy" + filename.split("gemini_proxy")[-1]
    return f"{filename}:{line} (fn:{func})"
