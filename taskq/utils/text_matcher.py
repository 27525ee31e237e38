from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet, Iterable, List, Sequence, Tuple


def is_subsequence(needle: str, haystack: str) -> bool:
    """True if the characters of needle appear in haystack in order (gaps allowed)."""
    if len(needle) > len(haystack):
        return False

    i = 0
    for ch in haystack:
        if i == len(needle):
            break
        if ch == needle[i]:
            i += 1
    return i == len(needle)


def split_words(text: str) -> List[str]:
    return text.split()


@dataclass(frozen=True)
class PositionIndex:
    """
    Characters seen at each position across a set of words.

    slots[i] holds every character that is the i-th character of at least one
    word. A needle that is a subsequence of one of those words can always be
    walked through the slots greedily, so a failed walk proves no word matches.
    """

    slots: Tuple[FrozenSet[str], ...] = field(default_factory=tuple)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "PositionIndex":
        slots: List[set] = []
        for word in words:
            for i, ch in enumerate(word):
                if i >= len(slots):
                    slots.append(set())
                slots[i].add(ch)
        return cls(slots=tuple(frozenset(s) for s in slots))

    def may_contain(self, needle: str) -> bool:
        i = 0
        m = len(self.slots)
        for ch in needle:
            while i < m and ch not in self.slots[i]:
                i += 1
            if i >= m:
                return False
            i += 1
        return True


def any_word_contains(needle: str, words: Sequence[str]) -> bool:
    return any(is_subsequence(needle, w) for w in words)


def matches_words(query_words: Sequence[str], words: Sequence[str], index: PositionIndex | None = None) -> bool:
    for q in query_words:
        # cheap reject first; the exact check below decides
        if index is not None and not index.may_contain(q):
            return False
        if not any_word_contains(q, words):
            return False
    return True


def matches_tags(query_tags: AbstractSet[str], tags: Iterable[str]) -> bool:
    if not query_tags:
        return True
    return any(t in query_tags for t in tags)


def matches(todo, query_words: Sequence[str], query_tags: AbstractSet[str]) -> bool:
    """
    Word clause AND tag clause.

    Every query word must be a subsequence of some description word; when tags
    are given, the todo must share at least one of them. Completion state is
    not considered.
    """
    return matches_words(query_words, todo.words, todo.index) and matches_tags(query_tags, todo.tags)
