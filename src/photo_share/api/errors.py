"""Mapping of application errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from photo_share.domain.errors import ClientError, StoreError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError) -> JSONResponse:
    """Report a client error as 400 with a short message."""
    logger.info("Rejected %s: %s", request.url.path, exc.message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message},
    )


async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    """Report a store failure as 500 with the underlying error serialized."""
    logger.exception("Store error in %s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=exc.to_dict(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the application's exception handlers."""
    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(StoreError, handle_store_error)
