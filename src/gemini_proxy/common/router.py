"""Common router."""

from fastapi import APIRouter, Request, Response, status

__all__ = ["router"]


router = APIRouter(tags=["Common", "Health"])


@router.get("/", include_in_schema=False, summary="Root endpoint")
async def root() -> Response:
    """Root endpoint."""
    return Response("OK")


@router.get("/health", include_in_schema=False, summary="Health check endpoint")
async def health(request: Request) -> Response:
    """Report whether the upstream client pool is ready to serve requests."""
    if getattr(request.app.state, "client_pool", None) is None:
        return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
