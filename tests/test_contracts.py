from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from casual_prompt.config import get_settings
from casual_prompt.core.confirm import load_confirm_policy
from casual_prompt.core.exceptions import (
    InputExhausted,
    ParseFailure,
    PromptError,
    ResourceLoadError,
    SessionConsumedError,
    ValidationFailure,
)
from casual_prompt.models import AttemptOutcome, ConfirmPolicy, DIAGNOSED_OUTCOMES
from tests.conftest import make_settings


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class TestExceptions:
    def test_parse_failure_message(self) -> None:
        exc = ParseFailure("abc", "not a number")

        assert "abc" in str(exc)
        assert "not a number" in str(exc)
        assert exc.raw == "abc"
        assert exc.reason == "not a number"

    def test_parse_failure_without_reason(self) -> None:
        exc = ParseFailure("abc")
        assert str(exc) == "Could not parse 'abc'"

    def test_validation_failure_fields(self) -> None:
        exc = ValidationFailure("200", 200, 0)

        assert exc.value == 200
        assert exc.check_index == 0
        assert "200" in str(exc)

    def test_input_exhausted_mentions_prompt(self) -> None:
        exc = InputExhausted("Age: ")
        assert "'Age:'" in str(exc)
        assert exc.prompt == "Age: "

    def test_input_exhausted_without_prompt(self) -> None:
        assert InputExhausted().prompt is None

    def test_input_exhausted_is_eof_error(self) -> None:
        assert isinstance(InputExhausted(), EOFError)

    @pytest.mark.parametrize(
        "exc",
        [
            ParseFailure("x"),
            ValidationFailure("x", "x", 0),
            InputExhausted(),
            SessionConsumedError("used"),
            ResourceLoadError("res"),
        ],
    )
    def test_all_are_prompt_errors(self, exc: Exception) -> None:
        assert isinstance(exc, PromptError)

    def test_resource_load_error_message(self) -> None:
        cause = FileNotFoundError("no file")
        exc = ResourceLoadError("confirm.yaml", cause)

        assert "confirm.yaml" in str(exc)
        assert "FileNotFoundError" in str(exc)
        assert exc.resource == "confirm.yaml"
        assert exc.cause is cause

    def test_resource_load_error_without_cause(self) -> None:
        exc = ResourceLoadError("bad shape")
        assert str(exc) == "Resource error: bad shape"
        assert exc.cause is None


# ---------------------------------------------------------------------------
# ConfirmPolicy
# ---------------------------------------------------------------------------

class TestConfirmPolicy:
    def test_default_words(self) -> None:
        policy = ConfirmPolicy.default()
        assert policy.yes == frozenset({"y", "yes"})
        assert policy.no == frozenset({"n", "no"})

    def test_words_are_normalized(self) -> None:
        policy = ConfirmPolicy(yes=[" YES ", "Ok"], no=["Nope"])
        assert policy.yes == frozenset({"yes", "ok"})
        assert policy.no == frozenset({"nope"})

    def test_rejects_overlap(self) -> None:
        with pytest.raises(ValidationError, match="both yes and no"):
            ConfirmPolicy(yes=["y", "ok"], no=["n", "OK"])

    def test_rejects_empty_side(self) -> None:
        with pytest.raises(ValidationError):
            ConfirmPolicy(yes=[])

    def test_rejects_blank_word(self) -> None:
        with pytest.raises(ValidationError, match="reserved for the default"):
            ConfirmPolicy(no=["n", "  "])

    def test_rejects_single_string(self) -> None:
        with pytest.raises(ValidationError):
            ConfirmPolicy(yes="yes")

    def test_is_frozen(self) -> None:
        policy = ConfirmPolicy()
        with pytest.raises(ValidationError):
            policy.yes = frozenset({"sure"})  # type: ignore[misc]

    def test_parse(self) -> None:
        policy = ConfirmPolicy()
        assert policy.parse(" Yes") is True
        assert policy.parse("N") is False

    def test_parse_unknown_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match=r"\[y/n\]"):
            ConfirmPolicy().parse("maybe")

    @pytest.mark.parametrize(
        ("default", "expected"),
        [(True, "[Y/n]"), (False, "[y/N]"), (None, "[y/n]")],
    )
    def test_hint(self, default: bool | None, expected: str) -> None:
        assert ConfirmPolicy().hint(default) == expected

    def test_hint_uses_shortest_word(self) -> None:
        policy = ConfirmPolicy(yes=["yes", "ja"], no=["nein", "no"])
        assert policy.hint(False) == "[ja/NO]"


# ---------------------------------------------------------------------------
# Policy loading
# ---------------------------------------------------------------------------

class TestLoadConfirmPolicy:
    def test_bare_yes_no_keys_stay_strings(self, tmp_path: Path) -> None:
        path = tmp_path / "confirm.yaml"
        path.write_text(textwrap.dedent("""
            yes: [y, yes, on]
            no: [n, no, off]
        """))

        policy = load_confirm_policy(path)

        assert policy.yes == frozenset({"y", "yes", "on"})
        assert policy.no == frozenset({"n", "no", "off"})

    def test_missing_key_keeps_default(self, tmp_path: Path) -> None:
        path = tmp_path / "confirm.yaml"
        path.write_text("yes: [sure]\n")

        policy = load_confirm_policy(path)

        assert policy.yes == frozenset({"sure"})
        assert policy.no == frozenset({"n", "no"})

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceLoadError) as exc_info:
            load_confirm_policy(tmp_path / "missing.yaml")
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "confirm.yaml"
        path.write_text("yes: [y\n")

        with pytest.raises(ResourceLoadError):
            load_confirm_policy(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "confirm.yaml"
        path.write_text("- y\n- n\n")

        with pytest.raises(ResourceLoadError, match="expected a mapping"):
            load_confirm_policy(path)

    def test_invalid_policy_wraps_validation_error(self, tmp_path: Path) -> None:
        path = tmp_path / "confirm.yaml"
        path.write_text("yes: [ok]\nno: [ok]\n")

        with pytest.raises(ResourceLoadError) as exc_info:
            load_confirm_policy(path)
        assert isinstance(exc_info.value.cause, ValidationError)

    def test_directory_path(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceLoadError) as exc_info:
            load_confirm_policy(tmp_path)
        assert isinstance(exc_info.value.cause, OSError)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "confirm.yaml"
        path.write_bytes(b"yes: [\xff]\n")

        with pytest.raises(ResourceLoadError) as exc_info:
            load_confirm_policy(path)
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestSettings:
    def test_defaults(self) -> None:
        s = make_settings()
        assert s.diagnostic_template == "error: invalid value '{raw}'"
        assert s.abort_exit_code == 1
        assert s.confirm_policy_path is None

    def test_format_diagnostic(self) -> None:
        assert make_settings().format_diagnostic("abc") == "error: invalid value 'abc'"

    def test_format_diagnostic_keeps_braces_in_input(self) -> None:
        assert make_settings().format_diagnostic("{0}") == "error: invalid value '{0}'"

    def test_template_requires_placeholder(self) -> None:
        with pytest.raises(ValidationError, match="must contain"):
            make_settings(diagnostic_template="error!")

    @pytest.mark.parametrize("code", [0, 256])
    def test_exit_code_bounds(self, code: int) -> None:
        with pytest.raises(ValidationError):
            make_settings(abort_exit_code=code)

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CASUAL_ABORT_EXIT_CODE", "4")
        monkeypatch.setenv("CASUAL_CONFIRM_POLICY", "/etc/casual/confirm.yaml")

        s = make_settings()

        assert s.abort_exit_code == 4
        assert s.confirm_policy_path == Path("/etc/casual/confirm.yaml")

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_get_settings_cache_clear(self) -> None:
        s1 = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not s1


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class TestEnums:
    def test_outcome_values(self) -> None:
        assert AttemptOutcome.ACCEPTED == "accepted"
        assert AttemptOutcome.PARSE_FAILURE == "parse_failure"
        assert AttemptOutcome.VALIDATION_FAILURE == "validation_failure"
        assert AttemptOutcome.EMPTY == "empty"

    def test_diagnosed_outcomes(self) -> None:
        assert DIAGNOSED_OUTCOMES == {
            AttemptOutcome.PARSE_FAILURE,
            AttemptOutcome.VALIDATION_FAILURE,
        }
