from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError

from casual_prompt.core.exceptions import ParseFailure
from casual_prompt.models import ConfirmPolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")

Parser = Callable[[str], T]

# Exceptions a plain conversion callable (int, Decimal, a user function)
# raises for bad text. Anything else is a bug and propagates.
_CONVERSION_ERRORS: tuple[type[Exception], ...] = (ValueError, TypeError, ArithmeticError)


def as_parser(func: Callable[[str], T]) -> Parser[T]:
    """
    Wrap a conversion callable so every "bad text" failure surfaces as
    ParseFailure, the only error PromptSession treats as a re-prompt.
    """

    def parse(raw: str) -> T:
        try:
            return func(raw)
        except ParseFailure:
            raise
        except ValidationError as exc:
            # ValidationError is a ValueError; catch it first to keep the
            # readable message rather than the full multi-line dump.
            raise ParseFailure(raw, _first_message(exc)) from exc
        except _CONVERSION_ERRORS as exc:
            raise ParseFailure(raw, str(exc) or type(exc).__name__) from exc

    parse.__wrapped__ = func  # type: ignore[attr-defined]
    return parse


def resolve_parser(target: Any) -> Parser[Any]:
    """
    Pick the textual conversion for `target`.

    - str   → the trimmed line unchanged
    - int   → int() itself, so "42.0" is rejected rather than truncated
    - bool  → the default yes/no vocabulary (same words as confirm())
    - other → pydantic's string-mode validation for the type, which covers
              float, Decimal, Path, Enum, Literal, dates, UUID, ...
              Types pydantic cannot build a schema for fall back to calling
              the type itself with the line.
    """
    if target is str:
        return as_parser(_identity)
    if target is int:
        return as_parser(int)
    if target is bool:
        return as_parser(ConfirmPolicy.default().parse)

    try:
        adapter = TypeAdapter(target)
    except PydanticSchemaGenerationError:
        if not callable(target):
            raise TypeError(f"Cannot parse input as {target!r}") from None
        logger.debug("No pydantic schema for %r; calling it directly.", target)
        return as_parser(target)

    return as_parser(adapter.validate_strings)


def _identity(raw: str) -> str:
    return raw


def _first_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return errors[0]["msg"]
