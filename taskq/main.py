from __future__ import annotations

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
import json

from taskq.settings import settings
from taskq.routes.health import router as health_router
from taskq.routes.run import router as run_router
from taskq.middlewares.request_id import RequestIdMiddleware
from taskq.core.logging import configure_logging, log_middleware
from taskq.core.errors import (
    ScriptFormatError,
    script_format_exception_handler,
    validation_exception_handler,
    unhandled_exception_handler,
)

# Custom JSONResponse that ensures UTF-8 encoding
class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"

    def render(self, content) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")

configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    default_response_class=UTF8JSONResponse
)

# --- Middlewares ---
app.middleware("http")(log_middleware)
app.add_middleware(RequestIdMiddleware)

# --- Routes ---
app.include_router(health_router)
app.include_router(run_router)

# --- Error Handlers ---
@app.exception_handler(RequestValidationError)
async def fastapi_validation_handler(request, exc: RequestValidationError):
    # unify FastAPI 422 into our 400
    return validation_exception_handler(
        request, ValidationError.from_exception_data("ValidationError", [])
    )


@app.exception_handler(ValidationError)
async def pydantic_validation_handler(request, exc: ValidationError):
    return validation_exception_handler(request, exc)


@app.exception_handler(ScriptFormatError)
async def script_format_handler(request, exc: ScriptFormatError):
    return script_format_exception_handler(request, exc)


@app.exception_handler(Exception)
async def any_exception_handler(request, exc: Exception):
    return unhandled_exception_handler(request, exc)
