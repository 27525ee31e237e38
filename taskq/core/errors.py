from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from taskq.core.types import ErrorResponse, ErrorBody
from taskq.settings import settings


class TaskqError(Exception):
    """Base class for errors raised while interpreting commands."""


class CommandParseError(TaskqError):
    pass


class ScriptFormatError(TaskqError):
    pass


class TodoNotFoundError(TaskqError):
    def __init__(self, todo_id: int):
        super().__init__("Invalid Index")
        self.todo_id = todo_id


ERROR_MESSAGES = {
    "invalid_request": "The request body is not valid.",
    "invalid_script": "The script does not start with a valid command count.",
    "script_too_large": "The script has too many lines.",
    "internal_error": "Internal error.",
}


def _get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def json_error(request: Request, status_code: int, code: str, message: str | None = None) -> JSONResponse:
    payload = ErrorResponse(
        error=ErrorBody(
            code=code,  # type: ignore
            message=message or ERROR_MESSAGES.get(code, code),
            requestId=_get_request_id(request),
        )
    )
    return JSONResponse(status_code=status_code, content=payload.model_dump())


def validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return json_error(request, 400, "invalid_request")


def script_format_exception_handler(request: Request, exc: ScriptFormatError) -> JSONResponse:
    return json_error(request, 400, "invalid_script", str(exc) or None)


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    message = None
    if settings.debug:
        message = f"{exc.__class__.__name__}: {exc}"
    return json_error(request, 500, "internal_error", message)
