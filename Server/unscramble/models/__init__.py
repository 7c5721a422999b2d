"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .puzzle import (
    PuzzleEntry, ReorderResult, RoundSnapshot, RoundState, RoundStatus,
    Tile, WordSnapshot, WordState
)

__all__ = [
    'PuzzleEntry', 'ReorderResult', 'RoundSnapshot', 'RoundState', 'RoundStatus',
    'Tile', 'WordSnapshot', 'WordState'
]
