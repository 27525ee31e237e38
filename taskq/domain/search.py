from __future__ import annotations

from typing import AbstractSet, Iterable, List, Sequence

from taskq.domain.todos import Todo, TodoStore
from taskq.utils.text_matcher import matches

FOUND_HEADER = "{n} item(s) found"


def search(store: TodoStore, query_words: Sequence[str], query_tags: AbstractSet[str]) -> List[Todo]:
    """Todos matching the query, most recently created first."""
    tags = frozenset(query_tags)
    return [t for t in store.newest_first() if matches(t, query_words, tags)]


def format_todo(todo: dict) -> str:
    # todo is Todo.to_dict() output
    parts = [str(todo["id"]), f'"{todo["description"]}"']
    parts.extend(f"#{tag}" for tag in todo.get("tags", []))
    return " ".join(parts)


def format_results(todos: Iterable[dict]) -> List[str]:
    todos = list(todos)
    return [FOUND_HEADER.format(n=len(todos))] + [format_todo(t) for t in todos]
