from __future__ import annotations

from typing import List

from taskq.domain.search import format_results

DONE_REPLY = "done"
ERROR_PREFIX = "Error: "


def build_reply(action: dict) -> List[str]:
    a_type = action.get("type")
    payload = action.get("payload") or {}

    if a_type == "add":
        return [str(payload["todo"]["id"])]

    if a_type == "done":
        return [DONE_REPLY]

    if a_type == "search":
        return format_results(payload.get("todos", []))

    if a_type == "error":
        return [ERROR_PREFIX + payload.get("message", "unknown error")]

    return []
