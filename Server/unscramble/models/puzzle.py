"""
Puzzle Data Models

Contains the round, word and tile structures of the unscramble game, plus the
read-only snapshot types handed to clients.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class RoundStatus(Enum):
    """Lifecycle state of a round."""
    PLAYING = "PLAYING"
    COMPLETE = "COMPLETE"


@dataclass(frozen=True)
class PuzzleEntry:
    """One word of a round as produced by the puzzle generator."""
    word: str
    scrambled: str
    solved: bool = False  # Informational only; WordState.solved is authoritative


@dataclass(frozen=True)
class Tile:
    """
    A single letter instance with a stable identity.

    The id is assigned once from the letter and its position in the scrambled
    word, so repeated letters ("ASSESS") still get distinct ids.
    """
    letter: str
    id: str


@dataclass
class WordState:
    """Mutable per-word state owned by the round controller."""
    target_word: str
    tiles: List[Tile]
    is_blinking: bool = False
    solved: bool = False  # Already counted toward the round's solved_count
    blink_token: int = 0


@dataclass
class RoundState:
    """Aggregate state of one round."""
    round_id: str
    puzzle: List[PuzzleEntry]
    word_states: List[WordState]
    solved_count: int = 0
    status: RoundStatus = RoundStatus.PLAYING

    @property
    def is_complete(self) -> bool:
        return self.status is RoundStatus.COMPLETE


@dataclass
class WordSnapshot:
    """Client-facing view of one word."""
    index: int
    length: int
    tiles: List[Dict[str, str]]
    is_blinking: bool
    solved: bool
    word: Optional[str] = None  # Only revealed once solved


@dataclass
class RoundSnapshot:
    """Client-facing view of a round."""
    game_id: Optional[str]
    round_id: str
    status: str
    solved_count: int
    total_words: int
    is_complete: bool
    words: List[WordSnapshot] = field(default_factory=list)
    message: Optional[str] = None


@dataclass
class ReorderResult:
    """Outcome of a reorder request."""
    applied: bool
    solved: bool
    state: RoundSnapshot
