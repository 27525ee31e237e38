from __future__ import annotations

import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware


class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        # Accept request id from header if present; otherwise generate one
        rid = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = rid
        response = await call_next(request)
        # a route may have replaced it with the id from the request body
        response.headers["x-request-id"] = getattr(request.state, "request_id", rid)
        return response
