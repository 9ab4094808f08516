"""Tests for sequence generation."""

import random

import pytest

from keyecho.core import ALPHABETS, alphabet_for, generate_sequence, sequence_length
from keyecho.exceptions import InvalidRoundError
from keyecho.models import Difficulty


@pytest.mark.unit
class TestAlphabets:
    """Test the per-difficulty alphabets."""

    def test_easy_is_digits(self):
        assert alphabet_for(Difficulty.EASY) == "1234567890"

    def test_medium_is_letters(self):
        letters = alphabet_for(Difficulty.MEDIUM)
        assert len(letters) == 26
        assert set(letters) == set("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

    def test_hard_is_union(self):
        hard = alphabet_for(Difficulty.HARD)
        assert len(hard) == 36
        assert set(hard) == set(ALPHABETS[Difficulty.EASY]) | set(ALPHABETS[Difficulty.MEDIUM])

    def test_accepts_string_value(self):
        assert alphabet_for("medium") == alphabet_for(Difficulty.MEDIUM)


@pytest.mark.unit
class TestSequenceLength:
    """Test round length growth."""

    @pytest.mark.parametrize("round_number,expected", [(1, 2), (2, 4), (3, 6), (4, 8), (5, 10)])
    def test_length_per_round(self, round_number, expected):
        assert sequence_length(round_number) == expected

    def test_round_beyond_five_still_grows(self):
        assert sequence_length(6) == 12

    @pytest.mark.parametrize("round_number", [0, -1])
    def test_invalid_round_raises(self, round_number):
        with pytest.raises(InvalidRoundError):
            sequence_length(round_number)

    def test_invalid_round_is_value_error(self):
        with pytest.raises(ValueError):
            generate_sequence(0, Difficulty.EASY)


@pytest.mark.unit
class TestGenerateSequence:
    """Test generate_sequence."""

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_length_and_membership(self, difficulty):
        rng = random.Random(7)
        alphabet = alphabet_for(difficulty)
        for round_number in range(1, 6):
            sequence = generate_sequence(round_number, difficulty, rng)
            assert len(sequence) == 2 + (round_number - 1) * 2
            assert all(symbol in alphabet for symbol in sequence)

    def test_returns_tuple_of_single_characters(self):
        sequence = generate_sequence(3, Difficulty.HARD, random.Random(1))
        assert isinstance(sequence, tuple)
        assert all(len(symbol) == 1 for symbol in sequence)

    def test_seeded_rng_is_reproducible(self):
        first = generate_sequence(5, Difficulty.HARD, random.Random(42))
        second = generate_sequence(5, Difficulty.HARD, random.Random(42))
        assert first == second

    def test_repeats_are_possible(self):
        # 10 draws from 10 digits, over many seeds at least one has a repeat
        assert any(
            len(set(generate_sequence(5, Difficulty.EASY, random.Random(seed)))) < 10
            for seed in range(20)
        )

    def test_default_rng(self):
        sequence = generate_sequence(1, Difficulty.EASY)
        assert len(sequence) == 2
