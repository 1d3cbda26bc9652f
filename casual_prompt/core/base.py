from __future__ import annotations

from abc import ABC, abstractmethod


class LineSource(ABC):
    """
    Abstract input/output collaborator consumed by PromptSession.

    Contract:
    - write() emits text WITHOUT appending a newline and flushes it, so the
      user's answer appears on the same line as the prompt.
    - read_line() returns exactly one line with the trailing terminator
      stripped. An empty string is a blank line, not end-of-input.
    - read_line() MUST raise EOFError when no further lines are available.
      PromptSession translates that into InputExhausted.

    A source is owned by a single terminal call at a time; no thread-safety
    is required.
    """

    @property
    def name(self) -> str:
        """Identifier used in log records."""
        return type(self).__name__

    @abstractmethod
    def write(self, text: str) -> None:
        """Write text verbatim and flush."""

    @abstractmethod
    def read_line(self) -> str:
        """
        Read one line of input without its line terminator.

        Raises:
            EOFError: the source has no more lines.
        """

    def write_line(self, text: str) -> None:
        self.write(f"{text}\n")
