from .base import LineSource
from .exceptions import (
    InputExhausted,
    ParseFailure,
    PromptError,
    ResourceLoadError,
    SessionConsumedError,
    ValidationFailure,
)
from .parsing import as_parser, resolve_parser
from .session import AttemptTrace, PromptSession, SessionTrace, input, prompt
from .confirm import confirm, confirm_default, load_confirm_policy, try_confirm

__all__ = [
    "LineSource",
    "PromptError",
    "ParseFailure",
    "ValidationFailure",
    "InputExhausted",
    "SessionConsumedError",
    "ResourceLoadError",
    "as_parser",
    "resolve_parser",
    "AttemptTrace",
    "PromptSession",
    "SessionTrace",
    "prompt",
    "input",
    "confirm",
    "confirm_default",
    "try_confirm",
    "load_confirm_policy",
]
