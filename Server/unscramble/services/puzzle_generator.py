"""
Puzzle Generator

Selects the distinct words of a round and scrambles each of them.
"""

import logging
import random
from typing import List, Sequence

from ..models.puzzle import PuzzleEntry
from .scrambler import scramble

logger = logging.getLogger(__name__)


class PuzzleGenerator:
    """
    Builds round puzzles from a vocabulary.

    The vocabulary may contain duplicates; selection rejects repeated draws so
    every round holds `count` distinct words.
    """

    def __init__(self, vocabulary: Sequence[str], count: int, rng=random,
                 reshuffle_solved: bool = False):
        """
        Args:
            vocabulary: Candidate words
            count: Number of distinct words per round
            rng: Source of randomness exposing choice() and randint()
            reshuffle_solved: Re-scramble words whose scramble equals the word

        Raises:
            ValueError: If the vocabulary cannot supply `count` distinct words
        """
        if count < 1:
            raise ValueError("A round needs at least one word")

        distinct = len(set(vocabulary))
        if distinct < count:
            raise ValueError(
                f"Vocabulary has {distinct} distinct words, cannot select {count}"
            )

        self.vocabulary = list(vocabulary)
        self.count = count
        self.rng = rng
        self.reshuffle_solved = reshuffle_solved

    def generate(self) -> List[PuzzleEntry]:
        """
        Draws `count` distinct words and scrambles each.

        Returns:
            List[PuzzleEntry]: Entries in selection order, all unsolved
        """
        selected: List[str] = []
        while len(selected) < self.count:
            word = self.rng.choice(self.vocabulary)
            if word not in selected:
                selected.append(word)

        puzzle = [PuzzleEntry(word=word, scrambled=self._scramble(word)) for word in selected]
        logger.debug("Generated puzzle: %s", [entry.word for entry in puzzle])
        return puzzle

    def _scramble(self, word: str) -> str:
        scrambled = scramble(word, self.rng)
        # A word made of one repeated letter can never differ from its scramble
        if self.reshuffle_solved and len(set(word)) > 1:
            while scrambled == word:
                scrambled = scramble(word, self.rng)
        return scrambled
