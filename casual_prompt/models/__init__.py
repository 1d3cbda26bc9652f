from .enums import AttemptOutcome, DIAGNOSED_OUTCOMES
from .policy import ConfirmPolicy

__all__ = [
    "AttemptOutcome",
    "DIAGNOSED_OUTCOMES",
    "ConfirmPolicy",
]
