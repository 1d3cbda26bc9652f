"""
Typed, validated line input for command-line tools.

    from casual_prompt import confirm, prompt

    name = prompt("Please enter your name: ").get()
    age = prompt("Please enter your age: ", int).check(lambda v: v < 120).get()

    if not confirm("Are you sure you want to continue?"):
        raise SystemExit("Aborted!")
"""
from .config import Settings, get_settings
from .core import (
    AttemptTrace,
    InputExhausted,
    LineSource,
    PromptError,
    PromptSession,
    ResourceLoadError,
    SessionConsumedError,
    SessionTrace,
    confirm,
    confirm_default,
    input,
    load_confirm_policy,
    prompt,
    try_confirm,
)
from .models import AttemptOutcome, ConfirmPolicy
from .sources import ScriptedLineSource, StdioLineSource

__all__ = [
    "AttemptOutcome",
    "AttemptTrace",
    "ConfirmPolicy",
    "InputExhausted",
    "LineSource",
    "PromptError",
    "PromptSession",
    "ResourceLoadError",
    "ScriptedLineSource",
    "SessionConsumedError",
    "SessionTrace",
    "Settings",
    "StdioLineSource",
    "confirm",
    "confirm_default",
    "get_settings",
    "input",
    "load_confirm_policy",
    "prompt",
    "try_confirm",
]
