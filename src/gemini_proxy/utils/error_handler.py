"""Global exception handlers for Application."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from gemini_proxy.common.app_error import AppError
from gemini_proxy.config.errors import ErrorCode, ErrorNames

from .error_path import get_error_path

__all__ = ["register_exception_handlers"]


_HTTP_ERRORS: dict[int, tuple[ErrorCode, ErrorNames]] = {
    status.HTTP_400_BAD_REQUEST: (ErrorCode.BAD_REQUEST, ErrorNames.BAD_REQUEST),
    status.HTTP_404_NOT_FOUND: (ErrorCode.NOT_FOUND, ErrorNames.NOT_FOUND),
    status.HTTP_405_METHOD_NOT_ALLOWED: (
        ErrorCode.METHOD_NOT_ALLOWED,
        ErrorNames.METHOD_NOT_ALLOWED,
    ),
}


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all global exception handlers to the FastAPI application.

    Registers handlers for:
    - Application errors (AppError)
    - Validation errors (RequestValidationError), reported as 400
    - Routing errors such as 404 and 405 (StarletteHTTPException)
    - Unexpected exceptions (ServerError)

    Args:
        app: The FastAPI application instance to register handlers with.
    """

    @app.exception_handler(AppError)
    def _handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        """Handle application-specific errors.

        The internal message is logged, the client only sees the public one.

        Args:
            request: The incoming HTTP request.
            exc: The application error that was raised.

        Returns:
            JSONResponse: A formatted error response with appropriate status code.
        """
        logger.error(
            "{}: {}",
            exc.error_code,
            exc.message,
            path=request.url.path,
            status_code=exc.status_code,
            source=get_error_path(exc),
        )
        return _make_response(exc.status_code, exc.error_code, exc.public_message)

    @app.exception_handler(RequestValidationError)
    def _handle_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle unreadable or malformed request bodies.

        Args:
            request: The incoming HTTP request.
            exc: The validation error raised while parsing the body.

        Returns:
            JSONResponse: A 400 error response.
        """
        logger.error(
            "Failed to parse request body: {}",
            exc.errors(),
            path=request.url.path,
            status_code=status.HTTP_400_BAD_REQUEST,
        )
        return _make_response(
            status.HTTP_400_BAD_REQUEST, ErrorCode.BAD_REQUEST, ErrorNames.BAD_REQUEST
        )

    @app.exception_handler(StarletteHTTPException)
    def _handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle errors raised by routing, e.g. a wrong HTTP method.

        Args:
            request: The incoming HTTP request.
            exc: The HTTP error.

        Returns:
            JSONResponse: An error response carrying the same status code.
        """
        code, name = _HTTP_ERRORS.get(
            exc.status_code, (ErrorCode.SERVER_ERROR, ErrorNames.INTERNAL_SERVER_ERROR)
        )
        logger.error(
            "{} {}",
            request.method,
            name,
            path=request.url.path,
            status_code=exc.status_code,
        )
        return _make_response(exc.status_code, code, name, exc.headers)

    @app.exception_handler(Exception)
    def _handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Handle any uncaught exceptions as 500 server errors.

        Args:
            request: The incoming HTTP request.
            exc: The uncaught exception.

        Returns:
            JSONResponse: A 500 error response.
        """
        logger.exception("{}", str(exc), source=get_error_path(exc))
        return _make_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCode.SERVER_ERROR,
            ErrorNames.INTERNAL_SERVER_ERROR,
        )


def _make_response(
    status_code: int,
    code: ErrorCode,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized JSON error response.

    Args:
        status_code: HTTP status code to return.
        code: Application-specific error code enum value.
        message: Human-readable error message.
        headers: Optional extra headers, e.g. ``Allow`` on 405.

    Returns:
        JSONResponse: A formatted JSON response with the error details.
    """
    return JSONResponse(
        status_code=status_code,
        content={"code": code, "message": message},
        headers=headers,
    )
