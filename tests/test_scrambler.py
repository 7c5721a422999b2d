"""Tests for unscramble.services.scrambler.scramble."""

import random
from collections import Counter

import pytest

from unscramble.config.game_settings import WORD_LIST
from unscramble.services.scrambler import scramble


class IdentityRandom:
    """randint that always picks the upper bound, so every swap is a no-op."""

    def randint(self, low, high):
        return high


class TestScramble:
    @pytest.mark.parametrize("word", sorted(set(WORD_LIST)))
    def test_every_vocabulary_word_scrambles_to_a_permutation(self, word):
        rng = random.Random(word)
        for _ in range(50):
            scrambled = scramble(word, rng)
            assert len(scrambled) == len(word)
            assert Counter(scrambled) == Counter(word)

    def test_same_seed_gives_same_scramble(self):
        assert scramble("JAVASCRIPT", random.Random(3)) == scramble("JAVASCRIPT", random.Random(3))

    def test_scramble_may_return_the_word_itself(self):
        assert scramble("PYTHON", IdentityRandom()) == "PYTHON"

    def test_single_letter_word(self):
        assert scramble("A", random.Random(0)) == "A"

    def test_empty_word(self):
        assert scramble("", random.Random(0)) == ""

    def test_produces_more_than_one_order(self):
        rng = random.Random(99)
        orders = {scramble("BOOTSTRAP", rng) for _ in range(30)}
        assert len(orders) > 1
