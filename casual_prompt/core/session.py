from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from casual_prompt.config import Settings, get_settings
from casual_prompt.core.base import LineSource
from casual_prompt.core.exceptions import (
    InputExhausted,
    ParseFailure,
    SessionConsumedError,
    ValidationFailure,
)
from casual_prompt.core.parsing import Parser, as_parser, resolve_parser
from casual_prompt.models import AttemptOutcome, DIAGNOSED_OUTCOMES

logger = logging.getLogger(__name__)

T = TypeVar("T")

Check = Callable[[T], bool]

_NO_DEFAULT: Any = object()


@dataclass(frozen=True)
class AttemptTrace:
    """
    Record of one line read by a session.

    `value` is set whenever the line parsed (or the default was used), even if
    a check then rejected it. `failed_check` is the index of the first check
    that returned false. `message` is the diagnostic written back to the
    source, None for accepted and silently skipped lines.
    """

    raw: str
    outcome: AttemptOutcome
    value: Any = None
    failed_check: int | None = None
    message: str | None = None


@dataclass(frozen=True)
class SessionTrace(Generic[T]):
    """Every attempt of a finished session plus the accepted value."""

    attempts: tuple[AttemptTrace, ...]
    value: T


class PromptSession(Generic[T]):
    """
    One prompt → read → parse → check → retry cycle.

    Loop rules:
    1. The prompt text is written without a newline before every read.
    2. End-of-input raises InputExhausted; the loop never spins on a closed
       stream.
    3. The line is trimmed. A blank line returns the default if one was set,
       otherwise it is re-prompted silently.
    4. A line the parser rejects gets a diagnostic and a re-prompt.
    5. Checks run in the order they were added and stop at the first one that
       returns false; that also gets a diagnostic and a re-prompt.
    6. There is no retry limit.

    Three terminal operations, each usable once per session:
      - get()      → value, exits the process on end-of-input
      - try_get()  → value, raises InputExhausted on end-of-input
      - trace()    → SessionTrace, raises InputExhausted on end-of-input
    """

    def __init__(
            self,
            text: str | None,
            parser: Parser[T],
            *,
            source: LineSource | None = None,
            settings: Settings | None = None,
    ) -> None:
        self._text = text
        self._parser = as_parser(parser)
        self._checks: list[Check[T]] = []
        self._default: Any = _NO_DEFAULT
        self._source = source
        self._settings = settings
        self._consumed = False

    @property
    def text(self) -> str | None:
        return self._text

    @property
    def checks(self) -> tuple[Check[T], ...]:
        return tuple(self._checks)

    @property
    def has_default(self) -> bool:
        return self._default is not _NO_DEFAULT

    # ------------------------------------------------------------------
    # Builder
    # ------------------------------------------------------------------

    def check(self, predicate: Check[T]) -> PromptSession[T]:
        """Require `predicate(value)` to be true. Evaluated only by the loop."""
        self._checks.append(predicate)
        return self

    def default(self, value: T) -> PromptSession[T]:
        """Return `value` for a blank line. Checks still apply to it."""
        self._default = value
        return self

    # ------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------

    def get(self) -> T:
        """
        Read until a value is accepted. On end-of-input the error is logged
        and the process exits with settings.abort_exit_code.
        """
        settings = self._resolve_settings()
        try:
            return self.try_get()
        except InputExhausted as exc:
            logger.error("%s", exc)
            raise SystemExit(settings.abort_exit_code) from exc

    def try_get(self) -> T:
        """
        Read until a value is accepted.

        Raises:
            InputExhausted: the source ended first.
        """
        return self._run().value

    def trace(self) -> SessionTrace[T]:
        """Same as try_get() but keeps the record of every attempt."""
        return self._run()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _run(self) -> SessionTrace[T]:
        if self._consumed:
            raise SessionConsumedError("PromptSession has already been used")
        self._consumed = True

        source = self._source if self._source is not None else _default_source()
        settings = self._resolve_settings()
        attempts: list[AttemptTrace] = []

        while True:
            if self._text is not None:
                source.write(self._text)

            try:
                line = source.read_line()
            except EOFError as exc:
                logger.info(
                    "Input exhausted on %s after %d attempt(s).",
                    source.name,
                    len(attempts),
                )
                if isinstance(exc, InputExhausted):
                    raise
                raise InputExhausted(self._text) from exc

            attempt = self._attempt(line, settings)
            attempts.append(attempt)

            logger.debug(
                "Attempt %d → outcome=%s raw=%r",
                len(attempts),
                attempt.outcome.value,
                attempt.raw,
            )

            if attempt.outcome in DIAGNOSED_OUTCOMES and attempt.message is not None:
                source.write_line(attempt.message)

            if attempt.outcome is AttemptOutcome.ACCEPTED:
                logger.info("Value accepted after %d attempt(s).", len(attempts))
                return SessionTrace(attempts=tuple(attempts), value=attempt.value)

    def _attempt(self, line: str, settings: Settings) -> AttemptTrace:
        raw = line.strip()

        if not raw:
            if not self.has_default:
                return AttemptTrace(raw=raw, outcome=AttemptOutcome.EMPTY)
            value = self._default
        else:
            try:
                value = self._parser(raw)
            except ParseFailure as exc:
                logger.debug("Parse failure: %s", exc)
                return AttemptTrace(
                    raw=raw,
                    outcome=AttemptOutcome.PARSE_FAILURE,
                    message=settings.format_diagnostic(raw),
                )

        try:
            self._validate(raw, value)
        except ValidationFailure as exc:
            logger.debug("Validation failure: %s", exc)
            return AttemptTrace(
                raw=raw,
                outcome=AttemptOutcome.VALIDATION_FAILURE,
                value=value,
                failed_check=exc.check_index,
                message=settings.format_diagnostic(raw),
            )

        return AttemptTrace(raw=raw, outcome=AttemptOutcome.ACCEPTED, value=value)

    def _validate(self, raw: str, value: T) -> None:
        """Raise ValidationFailure for the first check that returns false."""
        for index, predicate in enumerate(self._checks):
            if not predicate(value):
                raise ValidationFailure(raw, value, index)

    def _resolve_settings(self) -> Settings:
        return self._settings if self._settings is not None else get_settings()


def _default_source() -> LineSource:
    from casual_prompt.sources import StdioLineSource  # noqa: PLC0415

    return StdioLineSource()


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def prompt(
        text: str,
        target: Any = str,
        *,
        parser: Callable[[str], Any] | None = None,
        source: LineSource | None = None,
        settings: Settings | None = None,
) -> PromptSession[Any]:
    """
    Start a session that writes `text` before each read.

    `target` selects the conversion (see resolve_parser); an explicit
    `parser` callable takes precedence over it.

        age = prompt("Age: ", int).check(lambda v: v < 120).get()
    """
    resolved = as_parser(parser) if parser is not None else resolve_parser(target)
    return PromptSession(text, resolved, source=source, settings=settings)


def input(
        target: Any = str,
        *,
        parser: Callable[[str], Any] | None = None,
        source: LineSource | None = None,
        settings: Settings | None = None,
) -> PromptSession[Any]:
    """Start a session that reads without writing any prompt."""
    resolved = as_parser(parser) if parser is not None else resolve_parser(target)
    return PromptSession(None, resolved, source=source, settings=settings)
