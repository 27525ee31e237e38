from __future__ import annotations

import logging

from taskq.core.errors import TodoNotFoundError
from taskq.domain import search as search_engine
from taskq.domain.todos import TodoStore
from taskq.utils.command_parser import ParsedCommand

logger = logging.getLogger(__name__)


def execute_command(*, store: TodoStore, command: ParsedCommand) -> dict:
    # ---- ADD ----
    if command.name == "add":
        todo = store.add(command.description or "", command.tags)
        return {"type": "add", "payload": {"todo": todo.to_dict()}}

    # ---- DONE ----
    if command.name == "done":
        try:
            todo = store.mark_done(command.todo_id)
        except TodoNotFoundError as exc:
            logger.warning("done: no todo with id %s", exc.todo_id)
            return {"type": "error", "payload": {"message": str(exc), "todo_id": exc.todo_id}}
        return {"type": "done", "payload": {"todo": todo.to_dict()}}

    # ---- SEARCH ----
    found = search_engine.search(store, command.words, set(command.tags))
    logger.debug(
        "search words=%s tags=%s -> %d result(s)", command.words, command.tags, len(found)
    )
    return {"type": "search", "payload": {"todos": [t.to_dict() for t in found]}}
