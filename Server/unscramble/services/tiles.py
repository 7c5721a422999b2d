"""
Tile State Manager

Builds identified tiles from scrambled letters and moves them around.
"""

from typing import List, Optional, Sequence

from ..models.puzzle import Tile, WordState


def build_tiles(scrambled: str) -> List[Tile]:
    """Pairs every scrambled letter with an id made of the letter and its index."""
    return [Tile(letter=letter, id=f"{letter}-{index}") for index, letter in enumerate(scrambled)]


def find_tile_index(tiles: Sequence[Tile], tile_id: str) -> Optional[int]:
    """Returns the current position of a tile id, or None if it is not in the word."""
    for index, tile in enumerate(tiles):
        if tile.id == tile_id:
            return index
    return None


def reorder(tiles: Sequence[Tile], source_index: int, target_index: int) -> List[Tile]:
    """
    Moves one tile from source_index to target_index.

    The tile is removed and reinserted, so the tiles in between shift by one
    position. Ids never change. Indices outside the word leave the order as is.

    Args:
        tiles: Current tile order
        source_index: Position of the tile being dragged
        target_index: Position it is dropped on

    Returns:
        List[Tile]: A new list with the resulting order
    """
    moved = list(tiles)
    if not (0 <= source_index < len(moved) and 0 <= target_index < len(moved)):
        return moved

    tile = moved.pop(source_index)
    moved.insert(target_index, tile)
    return moved


def tiles_to_letters(tiles: Sequence[Tile]) -> str:
    return ''.join(tile.letter for tile in tiles)


def is_solved(word_state: WordState) -> bool:
    """True when the current tile order spells the target word."""
    return tiles_to_letters(word_state.tiles) == word_state.target_word
