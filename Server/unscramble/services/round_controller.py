"""
Round Controller

Owns the state of one unscramble round and drives its lifecycle:
round start, reorders, solved detection, highlight timers and completion.
"""

import logging
import threading
import uuid
from functools import partial
from typing import Callable, Dict, List, Optional

from ..config.game_settings import BLINK_DURATION_SECONDS, COMPLETION_MESSAGE
from ..models.puzzle import RoundSnapshot, RoundState, RoundStatus, WordSnapshot, WordState
from .scheduler import ScheduledCall
from .tiles import build_tiles, find_tile_index, is_solved, reorder

logger = logging.getLogger(__name__)

Listener = Callable[[str, Dict], None]


class RoundController:
    """
    Single source of truth for a round.

    All mutation goes through the public entry points, each of which runs to
    completion under one lock. Timer callbacks carry the round id and a
    per-word token and do nothing once either is out of date.

    Events passed to listeners:
    - round_started:  {round_id}
    - word_solved:    {round_id, word_index, word, solved_count}
    - round_complete: {round_id, solved_count, message}
    - blink_cleared:  {round_id, word_index}
    """

    def __init__(self, generator, scheduler, blink_seconds: float = BLINK_DURATION_SECONDS,
                 game_id: Optional[str] = None):
        self.generator = generator
        self.scheduler = scheduler
        self.blink_seconds = blink_seconds
        self.game_id = game_id
        self.total_words = generator.count

        self._lock = threading.RLock()
        self._listeners: List[Listener] = []
        self._pending: Dict[int, ScheduledCall] = {}
        self._state: Optional[RoundState] = None

        self.start_round()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_round(self) -> RoundSnapshot:
        """
        Discards the current round and starts a fresh one.

        Returns:
            RoundSnapshot: The new round's state
        """
        with self._lock:
            self._cancel_pending()
            puzzle = self.generator.generate()
            self._state = RoundState(
                round_id=str(uuid.uuid4()),
                puzzle=puzzle,
                word_states=[
                    WordState(target_word=entry.word, tiles=build_tiles(entry.scrambled))
                    for entry in puzzle
                ]
            )
            # A scramble that already spells its word is highlighted but not counted
            for index, word_state in enumerate(self._state.word_states):
                if is_solved(word_state):
                    self._start_blink(index)

            logger.debug("Round %s started for game %s", self._state.round_id, self.game_id)
            self._emit('round_started', {'round_id': self._state.round_id})
            return self.snapshot()

    new_set = start_round

    def close(self) -> None:
        """Cancels pending timers and drops listeners."""
        with self._lock:
            self._cancel_pending()
            self._listeners.clear()

    # ------------------------------------------------------------------
    # Reorders
    # ------------------------------------------------------------------

    def request_reorder(self, word_index: int, source_tile_id: str, target_tile_id: str) -> bool:
        """
        Handles a finished drag: the tile source_tile_id was dropped on target_tile_id.

        Returns:
            bool: False if the references could not be resolved (nothing changed)
        """
        with self._lock:
            word_state = self._word_state(word_index)
            if word_state is None:
                return False

            source_index = find_tile_index(word_state.tiles, source_tile_id)
            target_index = find_tile_index(word_state.tiles, target_tile_id)
            if source_index is None or target_index is None:
                logger.debug("Unknown tile reference %r -> %r in word %s",
                             source_tile_id, target_tile_id, word_index)
                return False

            return self.move_tile(word_index, source_index, target_index)

    def move_tile(self, word_index: int, source_index: int, target_index: int) -> bool:
        """
        Moves a tile within a word and evaluates the result.

        A word counts toward solved_count the first time it is spelled
        correctly in a round. Every move that leaves it spelled correctly
        restarts its highlight.

        Returns:
            bool: True if the move was applied
        """
        with self._lock:
            if self._state.is_complete:
                logger.debug("Ignoring reorder on completed round %s", self._state.round_id)
                return False

            word_state = self._word_state(word_index)
            if word_state is None:
                return False

            length = len(word_state.tiles)
            if not (0 <= source_index < length and 0 <= target_index < length):
                logger.debug("Reorder indices %s -> %s out of range for word %s",
                             source_index, target_index, word_index)
                return False

            word_state.tiles = reorder(word_state.tiles, source_index, target_index)

            if is_solved(word_state):
                self._start_blink(word_index)
                if not word_state.solved:
                    self._mark_solved(word_index)

            return True

    def is_solved(self, word_index: int) -> bool:
        """Whether the word currently spells its target."""
        with self._lock:
            word_state = self._word_state(word_index)
            return word_state is not None and is_solved(word_state)

    def _mark_solved(self, word_index: int) -> None:
        state = self._state
        word_state = state.word_states[word_index]
        word_state.solved = True
        state.solved_count += 1
        if state.solved_count >= self.total_words:
            state.status = RoundStatus.COMPLETE

        self._emit('word_solved', {
            'round_id': state.round_id,
            'word_index': word_index,
            'word': word_state.target_word,
            'solved_count': state.solved_count
        })

        if state.is_complete:
            self._emit('round_complete', {
                'round_id': state.round_id,
                'solved_count': state.solved_count,
                'message': COMPLETION_MESSAGE
            })

    # ------------------------------------------------------------------
    # Highlight timers
    # ------------------------------------------------------------------

    def _start_blink(self, word_index: int) -> None:
        word_state = self._state.word_states[word_index]

        pending = self._pending.pop(word_index, None)
        if pending is not None:
            pending.cancel()

        word_state.blink_token += 1
        word_state.is_blinking = True
        self._pending[word_index] = self.scheduler.schedule(
            self.blink_seconds,
            partial(self._on_blink_expired, self._state.round_id, word_index, word_state.blink_token)
        )

    def _on_blink_expired(self, round_id: str, word_index: int, token: int) -> None:
        with self._lock:
            state = self._state
            if state is None or state.round_id != round_id:
                logger.debug("Stale highlight timer for round %s ignored", round_id)
                return

            word_state = self._word_state(word_index)
            if word_state is None or word_state.blink_token != token:
                return

            word_state.is_blinking = False
            self._pending.pop(word_index, None)
            self._emit('blink_cleared', {'round_id': round_id, 'word_index': word_index})

    def _cancel_pending(self) -> None:
        for call in self._pending.values():
            call.cancel()
        self._pending.clear()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def round_id(self) -> str:
        return self._state.round_id

    @property
    def solved_count(self) -> int:
        return self._state.solved_count

    @property
    def status(self) -> RoundStatus:
        return self._state.status

    @property
    def is_complete(self) -> bool:
        return self._state.is_complete

    def snapshot(self) -> RoundSnapshot:
        """Read-only view of the round for rendering."""
        with self._lock:
            state = self._state
            words = [
                WordSnapshot(
                    index=index,
                    length=len(word_state.target_word),
                    tiles=[{'id': tile.id, 'letter': tile.letter} for tile in word_state.tiles],
                    is_blinking=word_state.is_blinking,
                    solved=word_state.solved,
                    word=word_state.target_word if word_state.solved else None
                )
                for index, word_state in enumerate(state.word_states)
            ]
            return RoundSnapshot(
                game_id=self.game_id,
                round_id=state.round_id,
                status=state.status.value,
                solved_count=state.solved_count,
                total_words=self.total_words,
                is_complete=state.is_complete,
                words=words,
                message=COMPLETION_MESSAGE if state.is_complete else None
            )

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _emit(self, event: str, data: Dict) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, data)
            except Exception:
                logger.exception("Listener failed while handling %s", event)

    def _word_state(self, word_index) -> Optional[WordState]:
        if not isinstance(word_index, int) or isinstance(word_index, bool):
            return None
        if not 0 <= word_index < len(self._state.word_states):
            return None
        return self._state.word_states[word_index]
