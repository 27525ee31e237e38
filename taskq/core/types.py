from __future__ import annotations

from typing import List, Literal, Optional
from pydantic import BaseModel, Field


class RunRequest(BaseModel):
    lines: List[str]
    requestId: Optional[str] = None


class CommandErrorItem(BaseModel):
    line: int
    command: str
    message: str


class RunResponse(BaseModel):
    output: List[str] = Field(default_factory=list)
    errors: List[CommandErrorItem] = Field(default_factory=list)
    requestId: str


class ErrorBody(BaseModel):
    code: Literal[
        "invalid_request",
        "invalid_script",
        "script_too_large",
        "internal_error",
    ]
    message: str
    requestId: str


class ErrorResponse(BaseModel):
    error: ErrorBody
