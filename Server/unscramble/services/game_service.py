"""
Game Service

Keeps the in-memory unscramble games and routes client actions to them.
"""

import random
import uuid
from typing import Callable, Dict, List, Optional, Tuple

from ..config.game_settings import WORD_LIST, WORDS_PER_ROUND, BLINK_DURATION_SECONDS
from ..models.puzzle import ReorderResult, RoundSnapshot
from .puzzle_generator import PuzzleGenerator
from .round_controller import RoundController
from .scheduler import ThreadingScheduler

GameListener = Callable[[str, str, Dict], None]


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - One round controller per game
    - Validation of reorder requests coming from clients
    - Fan-out of round events to registered listeners
    """

    def __init__(self,
                 word_list: Optional[List[str]] = None,
                 words_per_round: int = WORDS_PER_ROUND,
                 blink_seconds: float = BLINK_DURATION_SECONDS,
                 scheduler=None,
                 rng=None,
                 reshuffle_solved: bool = False):
        self.games: Dict[str, RoundController] = {}  # Store active games by game_id
        self.word_list = (WORD_LIST if word_list is None else word_list).copy()
        self.blink_seconds = blink_seconds
        self.scheduler = scheduler or ThreadingScheduler()
        self.listeners: List[GameListener] = []

        # Fails fast if the vocabulary is too small for a round
        self.generator = PuzzleGenerator(
            self.word_list,
            words_per_round,
            rng=rng or random.Random(),
            reshuffle_solved=reshuffle_solved
        )

    def add_listener(self, listener: GameListener) -> None:
        """Registers listener(game_id, event, data) for events of every game."""
        self.listeners.append(listener)

    def create_new_game(self) -> str:
        """
        Creates a new game session and starts its first round.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        controller = RoundController(
            self.generator, self.scheduler,
            blink_seconds=self.blink_seconds, game_id=game_id
        )
        controller.add_listener(lambda event, data: self._notify(game_id, event, data))
        self.games[game_id] = controller
        return game_id

    def get_game_state(self, game_id: str) -> Optional[RoundSnapshot]:
        """
        Returns the current round snapshot for a session.

        Args:
            game_id: Unique game identifier

        Returns:
            RoundSnapshot or None if game not found
        """
        controller = self.games.get(game_id)
        if controller is None:
            return None
        return controller.snapshot()

    def is_valid_reorder(self, game_id: str, data) -> Tuple[bool, str]:
        """
        Validates the shape of a reorder request.

        Unknown tile ids and word indices outside the round are not errors;
        they are resolved by the round as a no-op.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if game_id not in self.games:
            return False, "Game not found"

        if not isinstance(data, dict):
            return False, "Reorder payload is required"

        for key in ('word_index', 'source_tile_id', 'target_tile_id'):
            if key not in data:
                return False, f"'{key}' is required"

        word_index = data['word_index']
        if not isinstance(word_index, int) or isinstance(word_index, bool):
            return False, "'word_index' must be an integer"

        if not isinstance(data['source_tile_id'], str) or not isinstance(data['target_tile_id'], str):
            return False, "Tile ids must be strings"

        return True, ""

    def reorder_tiles(self, game_id: str, word_index: int,
                      source_tile_id: str, target_tile_id: str) -> Optional[ReorderResult]:
        """
        Applies a drag-and-drop reorder to one word of a game.

        Returns:
            ReorderResult or None if game not found
        """
        controller = self.games.get(game_id)
        if controller is None:
            return None

        applied = controller.request_reorder(word_index, source_tile_id, target_tile_id)
        return ReorderResult(
            applied=applied,
            solved=controller.is_solved(word_index),
            state=controller.snapshot()
        )

    def new_set(self, game_id: str) -> Optional[RoundSnapshot]:
        """
        Replaces the current round of a game with a freshly generated one.

        Returns:
            RoundSnapshot or None if game not found
        """
        controller = self.games.get(game_id)
        if controller is None:
            return None
        return controller.new_set()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory and cancels its timers.

        Returns:
            bool: True if game was deleted, False if not found
        """
        controller = self.games.pop(game_id, None)
        if controller is None:
            return False
        controller.close()
        return True

    def _notify(self, game_id: str, event: str, data: Dict) -> None:
        for listener in list(self.listeners):
            listener(game_id, event, data)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(**kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    if _game_service is not None:
        for controller in _game_service.games.values():
            controller.close()
    _game_service = GameService(**kwargs)
    return _game_service
