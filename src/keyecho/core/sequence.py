"""Random key sequence generation per round and difficulty."""

import random
from typing import Optional

from keyecho.exceptions import InvalidRoundError
from keyecho.models import Difficulty

DIGITS = "1234567890"
LETTERS = "QWERTYUIOPASDFGHJKLZXCVBNM"

ALPHABETS: dict[Difficulty, str] = {
    Difficulty.EASY: DIGITS,
    Difficulty.MEDIUM: LETTERS,
    Difficulty.HARD: DIGITS + LETTERS,
}

BASE_LENGTH = 2
LENGTH_STEP = 2


def alphabet_for(difficulty: Difficulty) -> str:
    """Return the symbols a difficulty draws from."""
    return ALPHABETS[Difficulty(difficulty)]


def sequence_length(round_number: int) -> int:
    """
    Number of symbols in a round's sequence (2, 4, 6, 8, 10 for rounds 1-5).

    Raises:
        InvalidRoundError: If round_number is below 1
    """
    if round_number < 1:
        raise InvalidRoundError(round_number)
    return BASE_LENGTH + (round_number - 1) * LENGTH_STEP


def generate_sequence(
    round_number: int,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
) -> tuple[str, ...]:
    """
    Generate the target sequence for a round.

    Each position is drawn independently and uniformly from the difficulty's
    alphabet, so repeats are allowed.

    Args:
        round_number: Round number (>= 1)
        difficulty: Difficulty tier selecting the alphabet
        rng: Random source; pass a seeded random.Random for reproducible output

    Returns:
        Tuple of one-character symbols

    Raises:
        InvalidRoundError: If round_number is below 1
    """
    length = sequence_length(round_number)
    alphabet = alphabet_for(difficulty)
    source = rng or random
    return tuple(source.choice(alphabet) for _ in range(length))
