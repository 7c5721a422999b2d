"""
Services Package

Contains the puzzle engine and the game session service.
"""

from .game_service import GameService, get_game_service, initialize_game_service
from .puzzle_generator import PuzzleGenerator
from .round_controller import RoundController
from .scheduler import ScheduledCall, SocketIOScheduler, ThreadingScheduler
from .scrambler import scramble
from .tiles import build_tiles, find_tile_index, is_solved, reorder

__all__ = [
    'GameService', 'get_game_service', 'initialize_game_service',
    'PuzzleGenerator', 'RoundController',
    'ScheduledCall', 'SocketIOScheduler', 'ThreadingScheduler',
    'scramble', 'build_tiles', 'find_tile_index', 'is_solved', 'reorder'
]
