"""Tests for tile identity, reordering and solved detection."""

import random
from collections import Counter

from unscramble.models.puzzle import Tile, WordState
from unscramble.services.tiles import (
    build_tiles, find_tile_index, is_solved, reorder, tiles_to_letters
)


class TestBuildTiles:
    def test_ids_pair_letter_with_scrambled_position(self):
        tiles = build_tiles("TLMH")
        assert [tile.id for tile in tiles] == ["T-0", "L-1", "M-2", "H-3"]
        assert tiles_to_letters(tiles) == "TLMH"

    def test_repeated_letters_get_distinct_ids(self):
        tiles = build_tiles("SSESAS")
        ids = [tile.id for tile in tiles]
        assert len(ids) == 6
        assert len(set(ids)) == 6
        assert [tile.id for tile in tiles if tile.letter == "S"] == ["S-0", "S-1", "S-3", "S-5"]


class TestReorder:
    def test_moves_single_tile_instead_of_swapping(self):
        tiles = build_tiles("TLMH")
        assert tiles_to_letters(reorder(tiles, 3, 0)) == "HTLM"
        assert tiles_to_letters(reorder(tiles, 0, 3)) == "LMHT"

    def test_input_is_left_untouched(self):
        tiles = build_tiles("TLMH")
        reorder(tiles, 3, 0)
        assert tiles_to_letters(tiles) == "TLMH"

    def test_inverse_move_restores_exact_ids(self):
        tiles = build_tiles("SSESAS")
        for source in range(6):
            for target in range(6):
                moved = reorder(tiles, source, target)
                assert reorder(moved, target, source) == tiles

    def test_letter_multiset_never_changes(self):
        rng = random.Random(8)
        tiles = build_tiles("BANANA")
        original = Counter(tile.letter for tile in tiles)
        for _ in range(500):
            tiles = reorder(tiles, rng.randrange(6), rng.randrange(6))
            assert Counter(tile.letter for tile in tiles) == original
            assert len({tile.id for tile in tiles}) == 6

    def test_out_of_range_indices_are_a_no_op(self):
        tiles = build_tiles("CSS")
        assert reorder(tiles, 5, 0) == tiles
        assert reorder(tiles, 0, -1) == tiles

    def test_same_index_keeps_order(self):
        tiles = build_tiles("CSS")
        assert reorder(tiles, 1, 1) == tiles


class TestFindTileIndex:
    def test_finds_current_position(self):
        tiles = reorder(build_tiles("TLMH"), 3, 0)
        assert find_tile_index(tiles, "H-3") == 0
        assert find_tile_index(tiles, "T-0") == 1

    def test_unknown_id_returns_none(self):
        assert find_tile_index(build_tiles("TLMH"), "Z-9") is None


class TestIsSolved:
    def test_matching_order_is_solved(self):
        state = WordState(target_word="HTML", tiles=build_tiles("HTML"))
        assert is_solved(state)

    def test_wrong_order_is_not_solved(self):
        state = WordState(target_word="HTML", tiles=build_tiles("HTLM"))
        assert not is_solved(state)

    def test_repeated_calls_agree(self):
        state = WordState(target_word="CSS", tiles=[Tile("C", "C-1"), Tile("S", "S-0"), Tile("S", "S-2")])
        assert [is_solved(state) for _ in range(5)] == [True] * 5
