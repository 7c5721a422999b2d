"""
Game Configuration Constants Module

Defines the vocabulary and the fixed rules of an unscramble round.
All game parameters are centralized here to enable easy modification.
"""

import json
import os
from typing import List, Final, Optional

# Core Round Configuration Constants
WORDS_PER_ROUND: Final[int] = 5
"""
Number of distinct words in every round. The round is complete once this many
words have been solved.
"""

BLINK_DURATION_SECONDS: Final[float] = 1.0
"""
How long a freshly solved word stays highlighted.
"""

COMPLETION_MESSAGE: Final[str] = "Congrats! You finished this level!"


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load the vocabulary from words.json.

    Returns:
        List[str]: List of uppercase candidate words (duplicates allowed)

    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If the file is malformed, empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not all(isinstance(word, str) for word in word_list):
        raise ValueError("Every entry in words.json must be a string")

    return [word.strip().upper() for word in word_list]

# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(word_list: Optional[List[str]] = None,
                                 words_per_round: int = WORDS_PER_ROUND) -> bool:
    """
    Validates the integrity and consistency of the vocabulary.

    This function performs validation to ensure:
    1. The list is not empty
    2. Character validation: only alphabetic characters, no empty entries
    3. Format validation: consistent uppercase formatting
    4. Capacity validation: enough distinct words to fill one round

    Duplicate entries are allowed; round selection guarantees distinct words.

    Args:
        word_list: Words to validate, defaults to WORD_LIST
        words_per_round: Number of distinct words a round needs

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    words = WORD_LIST if word_list is None else word_list

    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if not word:
            raise ValueError(f"Word at index {index} is empty")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    distinct_words = len(set(words))
    if distinct_words < words_per_round:
        raise ValueError(
            f"Word list has {distinct_words} distinct words, "
            f"a round needs {words_per_round}"
        )

    return True


def get_word_statistics(word_list: Optional[List[str]] = None) -> dict:
    """
    Analyzes the vocabulary and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of entries in the vocabulary
            - distinct_words: Number of distinct entries
            - avg_word_length: Average letters per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Top five letters
            - repeated_letter_words: Words containing a letter more than once
    """
    words = WORD_LIST if word_list is None else word_list
    if not words:
        return {"error": "Word list is empty"}

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    repeated = sorted({word for word in words if len(set(word)) < len(word)})

    return {
        "total_words": len(words),
        "distinct_words": len(set(words)),
        "avg_word_length": round(sum(len(word) for word in words) / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5],
        "repeated_letter_words": repeated
    }


# Module initialization: Validate configuration on import
validate_word_list_integrity()
