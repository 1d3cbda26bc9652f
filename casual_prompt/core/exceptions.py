from __future__ import annotations

from typing import Any


class PromptError(Exception):
    """
    Base for all errors raised by casual_prompt.
    Only InputExhausted (and the loading/usage errors below) ever reach the
    caller; ParseFailure and ValidationFailure are absorbed by the retry loop.
    """


class ParseFailure(PromptError):
    """
    Raised by a parser when a trimmed line cannot be converted to the target
    type. Caught by PromptSession, reported as a diagnostic, then re-prompted.
    """

    def __init__(self, raw: str, reason: str | None = None) -> None:
        self.raw = raw
        self.reason = reason
        msg = f"Could not parse {raw!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class ValidationFailure(PromptError):
    """
    A parsed value was rejected by the validator at `check_index`.
    Same lifecycle as ParseFailure: never leaves the loop.
    """

    def __init__(self, raw: str, value: Any, check_index: int) -> None:
        self.raw = raw
        self.value = value
        self.check_index = check_index
        super().__init__(f"Value {value!r} rejected by check #{check_index}")


class InputExhausted(PromptError, EOFError):
    """
    The line source hit end-of-input before an acceptable value was read.
    Not recoverable by retrying. Also an EOFError so callers that already
    handle input() exhaustion catch it unchanged.
    """

    def __init__(self, prompt: str | None = None) -> None:
        self.prompt = prompt
        if prompt:
            msg = f"Input ended while waiting for a response to {prompt.strip()!r}"
        else:
            msg = "Input ended while waiting for a response"
        super().__init__(msg)


class SessionConsumedError(PromptError):
    """Raised when a terminal operation is called twice on the same session."""


class ResourceLoadError(PromptError):
    """
    Raised when a resource file (e.g. a confirm vocabulary YAML) cannot be
    read or does not have the expected shape.

    `cause` is optional; omit it for shape errors where there is no
    underlying exception.
    """

    def __init__(self, resource: str, cause: Exception | None = None) -> None:
        self.resource = resource
        self.cause = cause
        if cause is not None:
            msg = f"Failed to load resource '{resource}': {type(cause).__name__}: {cause}"
        else:
            msg = f"Resource error: {resource}"
        super().__init__(msg)
