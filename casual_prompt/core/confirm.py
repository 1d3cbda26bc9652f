from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from casual_prompt.config import Settings, get_settings
from casual_prompt.core.base import LineSource
from casual_prompt.core.exceptions import ResourceLoadError
from casual_prompt.core.session import PromptSession
from casual_prompt.models import ConfirmPolicy

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def confirm(
        text: str,
        *,
        source: LineSource | None = None,
        policy: ConfirmPolicy | None = None,
        settings: Settings | None = None,
) -> bool:
    """
    Ask a yes/no question; a blank answer means no.

        if not confirm("Are you sure you want to continue?"):
            raise SystemExit("Aborted!")
    """
    return confirm_default(text, False, source=source, policy=policy, settings=settings)


def confirm_default(
        text: str,
        default: bool,
        *,
        source: LineSource | None = None,
        policy: ConfirmPolicy | None = None,
        settings: Settings | None = None,
) -> bool:
    """Ask a yes/no question; a blank answer returns `default`. Exits on end-of-input."""
    return _confirm_session(text, default, source, policy, settings).get()


def try_confirm(
        text: str,
        default: bool = False,
        *,
        source: LineSource | None = None,
        policy: ConfirmPolicy | None = None,
        settings: Settings | None = None,
) -> bool:
    """
    Fallible form of confirm_default().

    Raises:
        InputExhausted: the source ended before a yes/no answer.
    """
    return _confirm_session(text, default, source, policy, settings).try_get()


# ---------------------------------------------------------------------------
# Policy loading
# ---------------------------------------------------------------------------

def load_confirm_policy(path: Path) -> ConfirmPolicy:
    """
    Load a yes/no vocabulary from YAML:

        yes: [y, yes, sure]
        no:  [n, no, nope]

    A missing key keeps the default words for that side.
    """
    path = Path(path)
    try:
        # BaseLoader keeps every scalar a string; safe_load would turn bare
        # yes/no keys and words into booleans.
        raw = yaml.load(path.read_text(encoding="utf-8"), Loader=yaml.BaseLoader)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ResourceLoadError(str(path), exc) from exc

    if not isinstance(raw, dict):
        raise ResourceLoadError(f"{path}: expected a mapping with 'yes' and/or 'no' lists")

    try:
        policy = ConfirmPolicy.model_validate(raw)
    except ValidationError as exc:
        raise ResourceLoadError(str(path), exc) from exc

    logger.info(
        "Confirm policy loaded from %s: yes=%d words, no=%d words",
        path,
        len(policy.yes),
        len(policy.no),
    )
    return policy


def _resolve_policy(policy: ConfirmPolicy | None, settings: Settings) -> ConfirmPolicy:
    if policy is not None:
        return policy
    if settings.confirm_policy_path is not None:
        return load_confirm_policy(settings.confirm_policy_path)
    return ConfirmPolicy.default()


def _confirm_session(
        text: str,
        default: bool,
        source: LineSource | None,
        policy: ConfirmPolicy | None,
        settings: Settings | None,
) -> PromptSession[bool]:
    settings = settings if settings is not None else get_settings()
    policy = _resolve_policy(policy, settings)
    session: PromptSession[bool] = PromptSession(
        f"{text} {policy.hint(default)} ",
        policy.parse,
        source=source,
        settings=settings,
    )
    return session.default(default)
