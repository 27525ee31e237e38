from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from taskq.core.errors import TodoNotFoundError
from taskq.utils.text_matcher import PositionIndex, split_words

logger = logging.getLogger(__name__)


def _unique_tags(tags: Iterable[str]) -> Tuple[str, ...]:
    seen: Dict[str, None] = {}
    for t in tags:
        seen.setdefault(t, None)
    return tuple(seen)


class Todo:
    """
    One todo record. Only `completed` changes after creation; words and index
    are derived from the description once.
    """

    __slots__ = ("_id", "_description", "_tags", "_words", "_index", "completed")

    def __init__(self, id: int, description: str, tags: Iterable[str] = (), completed: bool = False):
        self._id = id
        self._description = description
        self._tags = _unique_tags(tags)
        self._words = tuple(split_words(description))
        self._index = PositionIndex.from_words(self._words)
        self.completed = completed

    @property
    def id(self) -> int:
        return self._id

    @property
    def description(self) -> str:
        return self._description

    @property
    def tags(self) -> Tuple[str, ...]:
        return self._tags

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def index(self) -> PositionIndex:
        return self._index

    def __repr__(self) -> str:
        return f"Todo(id={self._id!r}, description={self._description!r}, tags={self._tags!r}, completed={self.completed!r})"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "description": self.description,
            "tags": list(self.tags),
            "completed": self.completed,
        }


class TodoStore:
    """
    In-memory todo list.
    Ids come from a counter starting at 0; todos are never removed.
    """

    def __init__(self):
        self._items: List[Todo] = []
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Todo]:
        return iter(self._items)

    def newest_first(self) -> Iterator[Todo]:
        return reversed(self._items)

    @property
    def next_id(self) -> int:
        return self._next_id

    def add(self, description: str, tags: Iterable[str] = ()) -> Todo:
        todo = Todo(id=self._next_id, description=description, tags=tuple(tags))
        self._items.append(todo)
        self._next_id += 1
        logger.debug("added todo %s with %d tag(s)", todo.id, len(todo.tags))
        return todo

    def get(self, todo_id: int) -> Optional[Todo]:
        # ids are list positions since nothing is ever removed
        if 0 <= todo_id < len(self._items):
            return self._items[todo_id]
        return None

    def mark_done(self, todo_id: int) -> Todo:
        todo = self.get(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        todo.completed = True
        return todo
