from __future__ import annotations

import itertools
import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from taskq.core.errors import CommandParseError, ScriptFormatError
from taskq.domain.executor import execute_command
from taskq.domain.reply_builder import ERROR_PREFIX, build_reply
from taskq.domain.todos import TodoStore
from taskq.utils.command_parser import parse_command

logger = logging.getLogger(__name__)

_COUNT_RE = re.compile(r"[0-9]+")


@dataclass
class CommandOutcome:
    line_no: int
    command: str
    output: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_line(self) -> Optional[str]:
        return ERROR_PREFIX + self.error if self.error is not None else None


def parse_count(line: str) -> int:
    text = line.strip()
    if not _COUNT_RE.fullmatch(text):
        raise ScriptFormatError(f"Invalid command count: {text!r}")
    return int(text)


class Session:
    """
    One interpreter run: a private TodoStore plus the command loop.
    Errors stay local to the command that raised them.
    """

    def __init__(self, store: TodoStore | None = None):
        self.store = store if store is not None else TodoStore()

    def run_line(self, line: str, line_no: int = 0) -> CommandOutcome:
        command = line.rstrip("\r\n")
        try:
            parsed = parse_command(command)
        except CommandParseError as exc:
            logger.warning("line %d: %s", line_no, exc)
            return CommandOutcome(line_no=line_no, command=command, error=str(exc))

        action = execute_command(store=self.store, command=parsed)
        if action["type"] == "error":
            return CommandOutcome(line_no=line_no, command=command, error=action["payload"]["message"])
        return CommandOutcome(line_no=line_no, command=command, output=build_reply(action))

    def iter_script(self, lines: Iterable[str]) -> Iterator[CommandOutcome]:
        """
        Run a script: a command count line followed by that many commands.
        Leading blank lines before the count are skipped.
        """
        it = iter(lines)
        count_line_no = 0
        count = None
        for raw in it:
            count_line_no += 1
            if raw.strip():
                count = parse_count(raw)
                break
        if count is None:
            raise ScriptFormatError("Missing command count")

        ran = 0
        line_no = count_line_no
        # never pull a line past the last declared command
        for raw in itertools.islice(it, count):
            line_no += 1
            ran += 1
            yield self.run_line(raw, line_no)

        if ran < count:
            logger.warning("script declared %d command(s) but only %d were given", count, ran)

    def run_script(self, lines: Iterable[str]) -> List[CommandOutcome]:
        return list(self.iter_script(lines))
