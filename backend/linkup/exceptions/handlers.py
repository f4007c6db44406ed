from logging import getLogger

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from linkup.core.config import settings

from .base import AppError

logger = getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        # loc starts with the source ("path", "query", "body")
        field = ".".join(str(part) for part in error["loc"][1:]) or error["loc"][0]
        parts.append(f"Invalid {field}: {error['msg']}.")
    return " ".join(parts) or "Invalid request."


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(AppError)
    async def app_error_handler(_: Request, exc: AppError):
        content = {"detail": exc.detail}
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(f" {exc.status_code} Error: {exc.detail}", exc_info=exc)
            if settings.DEBUG and exc.__cause__ is not None:
                content["error"] = repr(exc.__cause__)
        else:
            logger.warning(f" {exc.status_code} Error: {exc.detail}")
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(_: Request, exc: RequestValidationError):
        detail = _describe_validation_error(exc)
        logger.warning(f" 400 Error: {detail}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail}
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        content = {"detail": "An unexpected error occurred."}
        if settings.DEBUG:
            content["error"] = repr(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=content,
        )
