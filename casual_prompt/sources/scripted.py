from __future__ import annotations

from collections import deque
from typing import Iterable

from casual_prompt.core.base import LineSource


class ScriptedLineSource(LineSource):
    """
    Replays a fixed list of answers and records everything written.

    Useful for tests and for driving prompts from a non-interactive script:
    once the lines run out, read_line() raises EOFError exactly like a
    closed terminal.
    """

    _NAME = "scripted"

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._pending: deque[str] = deque(lines)
        self._written: list[str] = []
        self.reads = 0

    @property
    def name(self) -> str:
        return self._NAME

    @property
    def output(self) -> str:
        """Everything written so far, concatenated."""
        return "".join(self._written)

    @property
    def remaining(self) -> tuple[str, ...]:
        return tuple(self._pending)

    def write(self, text: str) -> None:
        self._written.append(text)

    def read_line(self) -> str:
        if not self._pending:
            raise EOFError("scripted input exhausted")
        self.reads += 1
        return self._pending.popleft().rstrip("\r\n")
