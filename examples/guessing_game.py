"""
Number guessing game built on casual_prompt.

    python examples/guessing_game.py

Set CASUAL_LOG_LEVEL=DEBUG to see every attempt the prompt loop makes.
"""
from __future__ import annotations

import logging
import os
import random
import sys

from casual_prompt import confirm, prompt

logger = logging.getLogger(__name__)

_LOW, _HIGH = 0, 255


def _configure_logging() -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=os.getenv("CASUAL_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s %(message)s",
    )


def play_round(secret: int) -> int:
    """Ask for guesses until `secret` is found. Returns the number of guesses."""
    guesses = 0
    while True:
        guess = (
            prompt("Enter your guess: ", int)
            .check(lambda v: _LOW <= v <= _HIGH)
            .get()
        )
        guesses += 1

        if guess < secret:
            print("Too low!")
        elif guess > secret:
            print("Too high!")
        else:
            print("You got it!")
            print(f"The number was: {secret}\n")
            return guesses


def main() -> None:
    _configure_logging()
    print("Try guess the number I am thinking of ...")
    print(f"  (hint: it's between {_LOW} and {_HIGH})\n")

    while True:
        guesses = play_round(random.randint(_LOW, _HIGH))
        logger.info("Round finished in %d guess(es).", guesses)
        if not confirm("Do you want to play again?"):
            break


if __name__ == "__main__":  # pragma: no cover
    main()
