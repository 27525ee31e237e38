from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from taskq.core.errors import json_error
from taskq.core.types import CommandErrorItem, RunRequest, RunResponse
from taskq.domain.session import Session
from taskq.settings import settings

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/v1/run", response_model=RunResponse)
def run_script(req: RunRequest, request: Request):
    rid = req.requestId or getattr(request.state, "request_id", None) or ""
    # body id wins; the middleware echoes whatever ends up here
    request.state.request_id = rid

    if len(req.lines) > settings.max_script_lines:
        return json_error(request, 400, "script_too_large")

    # a fresh session per request; nothing is shared between requests
    session = Session()
    outcomes = session.run_script(req.lines)
    request.state.command_count = len(outcomes)

    output = []
    errors = []
    for outcome in outcomes:
        output.extend(outcome.output)
        if not outcome.ok:
            errors.append(
                CommandErrorItem(line=outcome.line_no, command=outcome.command, message=outcome.error)
            )

    logger.debug("request %s ran %d command(s), %d error(s)", rid, len(outcomes), len(errors))
    return RunResponse(output=output, errors=errors, requestId=rid)
