from enum import Enum


class AttemptOutcome(str, Enum):
    ACCEPTED = "accepted"
    PARSE_FAILURE = "parse_failure"
    VALIDATION_FAILURE = "validation_failure"
    # Blank line with no default configured: re-prompted silently.
    EMPTY = "empty"


# Outcomes that write a diagnostic line before re-prompting.
DIAGNOSED_OUTCOMES: frozenset[AttemptOutcome] = frozenset(
    {
        AttemptOutcome.PARSE_FAILURE,
        AttemptOutcome.VALIDATION_FAILURE,
    }
)
