from __future__ import annotations

import re
from typing import List, Literal, NamedTuple, Optional

from pydantic import BaseModel, Field

from taskq.core.errors import CommandParseError

CommandName = Literal["add", "done", "search"]

TAG_PREFIX = "#"

# a quoted segment or a bare run of non-space characters, each ending at whitespace or end of line
_TOKEN_RE = re.compile(r'"([^"]*)"(?=\s|$)|([^\s"]+)(?=\s|$)')
_ID_RE = re.compile(r"\d+")


class Token(NamedTuple):
    text: str
    quoted: bool


class ParsedCommand(BaseModel):
    name: CommandName
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    todo_id: Optional[int] = None


def tokenize(line: str) -> List[Token]:
    tokens: List[Token] = []
    pos = 0
    n = len(line)
    while pos < n:
        if line[pos].isspace():
            pos += 1
            continue
        m = _TOKEN_RE.match(line, pos)
        if not m:
            if line[pos] == '"' and '"' not in line[pos + 1:]:
                raise CommandParseError("Unterminated quote")
            raise CommandParseError(f"Unexpected character at column {pos + 1}")
        if m.group(1) is not None:
            tokens.append(Token(m.group(1), True))
        else:
            tokens.append(Token(m.group(2), False))
        pos = m.end()
    return tokens


def _is_tag(token: Token) -> bool:
    return not token.quoted and token.text.startswith(TAG_PREFIX)


def _tag_name(token: Token) -> str:
    name = token.text[len(TAG_PREFIX):]
    if not name:
        raise CommandParseError("Empty tag")
    return name


def _parse_add(args: List[Token]) -> ParsedCommand:
    if not args or not args[0].quoted:
        raise CommandParseError("add expects a quoted description")
    tags: List[str] = []
    for tok in args[1:]:
        if not _is_tag(tok):
            raise CommandParseError(f"Unexpected argument: {tok.text}")
        name = _tag_name(tok)
        if name not in tags:
            tags.append(name)
    return ParsedCommand(name="add", description=args[0].text, tags=tags)


def _parse_done(args: List[Token]) -> ParsedCommand:
    if len(args) != 1:
        raise CommandParseError("done expects exactly one id")
    tok = args[0]
    if tok.quoted or not _ID_RE.fullmatch(tok.text):
        raise CommandParseError(f"Invalid id: {tok.text}")
    return ParsedCommand(name="done", todo_id=int(tok.text))


def _parse_search(args: List[Token]) -> ParsedCommand:
    words: List[str] = []
    tags: List[str] = []
    for tok in args:
        if _is_tag(tok):
            name = _tag_name(tok)
            if name not in tags:
                tags.append(name)
        else:
            words.append(tok.text)
    return ParsedCommand(name="search", words=words, tags=tags)


_PARSERS = {
    "add": _parse_add,
    "done": _parse_done,
    "search": _parse_search,
}


def parse_command(line: str) -> ParsedCommand:
    """Turn one command line into a ParsedCommand; raises CommandParseError."""
    tokens = tokenize(line)
    if not tokens:
        raise CommandParseError("Empty command")

    head = tokens[0]
    parser = None if head.quoted else _PARSERS.get(head.text)
    if parser is None:
        raise CommandParseError(f"Unknown command: {head.text}")
    return parser(tokens[1:])
