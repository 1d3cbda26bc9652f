from __future__ import annotations

import logging
import sys
from typing import TextIO

from casual_prompt.core.base import LineSource

logger = logging.getLogger(__name__)


class StdioLineSource(LineSource):
    """
    Terminal-backed source: prompts go to stdout, answers come from stdin.

    Streams default to whatever sys.stdin / sys.stdout are at call time, so
    redirection done after construction (pytest capture, contextlib.redirect_*)
    is honoured.
    """

    _NAME = "stdio"

    def __init__(
            self,
            stdin: TextIO | None = None,
            stdout: TextIO | None = None,
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def name(self) -> str:
        return self._NAME

    def write(self, text: str) -> None:
        out = self._stdout if self._stdout is not None else sys.stdout
        out.write(text)
        out.flush()

    def read_line(self) -> str:
        stream = self._stdin if self._stdin is not None else sys.stdin
        if stream is None or stream.closed:
            raise EOFError("stdin is not available")

        line = stream.readline()
        if line == "":
            # readline() only returns "" at end of file; a blank line is "\n"
            logger.debug("End of input on %s.", getattr(stream, "name", stream))
            raise EOFError("end of input")
        return _strip_terminator(line)


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
