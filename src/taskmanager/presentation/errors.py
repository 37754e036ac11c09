import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from src.taskmanager.domain.exceptions import TaskNotFoundError

logger = logging.getLogger(__name__)


async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(
        "Rejected invalid request",
        extra={"path": request.url.path, "errors": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain and validation errors to HTTP responses."""
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
