from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, Field, field_validator, model_validator

_DEFAULT_YES = frozenset({"y", "yes"})
_DEFAULT_NO = frozenset({"n", "no"})


class ConfirmPolicy(BaseModel):
    """
    Vocabulary used by confirm() to map an answer to a boolean.

    Words are compared case-insensitively after stripping whitespace. A blank
    answer is never part of the vocabulary: it always resolves to the caller's
    default, so "" is rejected here.
    """

    model_config = {"frozen": True}

    yes: frozenset[str] = Field(default=_DEFAULT_YES)
    no: frozenset[str] = Field(default=_DEFAULT_NO)

    @field_validator("yes", "no", mode="before")
    @classmethod
    def normalize_words(cls, v: Any) -> Any:
        if isinstance(v, str):
            raise ValueError("expected a list of words, not a single string")
        if isinstance(v, Iterable):
            return frozenset(str(word).strip().lower() for word in v)
        return v

    @field_validator("yes", "no")
    @classmethod
    def reject_empty(cls, v: frozenset[str]) -> frozenset[str]:
        if not v:
            raise ValueError("at least one word is required")
        if "" in v:
            raise ValueError("blank answers are reserved for the default")
        return v

    @model_validator(mode="after")
    def check_disjoint(self) -> ConfirmPolicy:
        overlap = self.yes & self.no
        if overlap:
            raise ValueError(f"words cannot mean both yes and no: {sorted(overlap)}")
        return self

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------

    @classmethod
    def default(cls) -> ConfirmPolicy:
        return cls()

    def parse(self, raw: str) -> bool:
        """Map an answer to True/False. Raises ValueError for unknown words."""
        word = raw.strip().lower()
        if word in self.yes:
            return True
        if word in self.no:
            return False
        raise ValueError(f"expected one of {self.hint(default=None)}")

    def hint(self, default: bool | None) -> str:
        """
        Bracketed answer hint, e.g. "[y/N]". The letter matching `default`
        is upper-cased; with no default both stay lower-case.
        """
        yes, no = _shortest(self.yes), _shortest(self.no)
        if default is True:
            yes = yes.upper()
        elif default is False:
            no = no.upper()
        return f"[{yes}/{no}]"


def _shortest(words: frozenset[str]) -> str:
    return min(words, key=lambda w: (len(w), w))
