"""
Scrambler

Random permutation of a word's letters.
"""

import random


def scramble(word: str, rng=random) -> str:
    """
    Shuffles the letters of a word with a Fisher-Yates pass.

    The result is always a permutation of the input but may equal it.

    Args:
        word: Word to scramble
        rng: Source of randomness exposing randint(); the random module by default

    Returns:
        str: The scrambled letters
    """
    letters = list(word)
    for i in range(len(letters) - 1, 0, -1):
        j = rng.randint(0, i)
        letters[i], letters[j] = letters[j], letters[i]
    return ''.join(letters)
