from __future__ import annotations

import json
import logging
import sys
import time
from typing import Callable

from fastapi import Request

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    # stdout carries command output, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


async def log_middleware(request: Request, call_next: Callable):
    start = time.time()
    response = await call_next(request)
    elapsed_ms = int((time.time() - start) * 1000)

    log_obj = {
        "path": request.url.path,
        "method": request.method,
        "status": response.status_code,
        "requestId": getattr(request.state, "request_id", None),
        "commands": getattr(request.state, "command_count", None),
        "latencyMs": elapsed_ms,
    }
    print(json.dumps(log_obj, ensure_ascii=False))
    return response
