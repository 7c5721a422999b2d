"""Tests for unscramble.services.game_service."""

import random

import pytest

from unscramble.config.game_settings import WORD_LIST
from unscramble.services.game_service import GameService, get_game_service, initialize_game_service
from unscramble.services.scheduler import ThreadingScheduler

from conftest import moves_to_solve


def solve_html(service, game_id):
    tiles = service.get_game_state(game_id).words[0].tiles
    result = None
    for source_id, target_id in moves_to_solve(tiles, "HTML"):
        result = service.reorder_tiles(game_id, 0, source_id, target_id)
    return result


class TestConstruction:
    def test_defaults_use_the_vocabulary(self):
        service = GameService()
        assert service.word_list == WORD_LIST
        assert service.generator.count == 5
        assert isinstance(service.scheduler, ThreadingScheduler)

    def test_small_vocabulary_fails_fast(self):
        with pytest.raises(ValueError):
            GameService(word_list=["HTML", "CSS"], words_per_round=5)

    def test_initialize_replaces_global_instance(self, scheduler):
        first = initialize_game_service(scheduler=scheduler)
        game_id = first.create_new_game()
        second = initialize_game_service(scheduler=scheduler)
        assert get_game_service() is second
        assert game_id not in second.games


class TestGames:
    def test_create_and_read_game(self, game_service):
        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)
        assert state.game_id == game_id
        assert state.total_words == 1
        assert state.words[0].length == 4

    def test_games_are_independent(self, game_service):
        first = game_service.create_new_game()
        second = game_service.create_new_game()
        solve_html(game_service, first)
        assert game_service.get_game_state(first).solved_count == 1
        assert game_service.get_game_state(second).solved_count == 0

    def test_unknown_game(self, game_service):
        assert game_service.get_game_state("missing") is None
        assert game_service.reorder_tiles("missing", 0, "H-0", "T-1") is None
        assert game_service.new_set("missing") is None
        assert game_service.delete_game("missing") is False

    def test_reorder_reports_solve_and_completion(self, game_service):
        game_id = game_service.create_new_game()
        result = solve_html(game_service, game_id)
        assert result.applied is True
        assert result.solved is True
        assert result.state.is_complete is True
        assert result.state.words[0].word == "HTML"

    def test_unresolvable_reorder_is_not_applied(self, game_service):
        game_id = game_service.create_new_game()
        before = game_service.get_game_state(game_id)
        result = game_service.reorder_tiles(game_id, 0, "Q-0", "Q-1")
        assert result.applied is False
        assert result.state == before

    def test_new_set_resets_the_round(self, game_service):
        game_id = game_service.create_new_game()
        solve_html(game_service, game_id)
        state = game_service.new_set(game_id)
        assert state.solved_count == 0
        assert state.is_complete is False

    def test_delete_game_cancels_timers(self, game_service, scheduler):
        game_id = game_service.create_new_game()
        solve_html(game_service, game_id)
        assert scheduler.live_calls()
        assert game_service.delete_game(game_id) is True
        assert scheduler.live_calls() == []
        assert game_id not in game_service.games

    def test_listeners_receive_game_events(self, game_service, scheduler):
        received = []
        game_service.add_listener(lambda game_id, event, data: received.append((game_id, event)))
        game_id = game_service.create_new_game()
        solve_html(game_service, game_id)
        scheduler.advance(1.0)
        assert received == [
            (game_id, "word_solved"),
            (game_id, "round_complete"),
            (game_id, "blink_cleared"),
        ]


class TestIsValidReorder:
    @pytest.fixture
    def game_id(self, game_service):
        return game_service.create_new_game()

    def test_valid_payload(self, game_service, game_id):
        payload = {"word_index": 0, "source_tile_id": "H-0", "target_tile_id": "T-1"}
        assert game_service.is_valid_reorder(game_id, payload) == (True, "")

    def test_unknown_game(self, game_service):
        assert game_service.is_valid_reorder("missing", {}) == (False, "Game not found")

    @pytest.mark.parametrize("payload", [
        None,
        [],
        {"source_tile_id": "H-0", "target_tile_id": "T-1"},
        {"word_index": 0, "target_tile_id": "T-1"},
        {"word_index": 0, "source_tile_id": "H-0"},
        {"word_index": "0", "source_tile_id": "H-0", "target_tile_id": "T-1"},
        {"word_index": True, "source_tile_id": "H-0", "target_tile_id": "T-1"},
        {"word_index": 0, "source_tile_id": 1, "target_tile_id": "T-1"},
    ])
    def test_malformed_payloads(self, game_service, game_id, payload):
        is_valid, error = game_service.is_valid_reorder(game_id, payload)
        assert is_valid is False
        assert error

    def test_out_of_range_index_is_left_to_the_round(self, game_service, game_id):
        payload = {"word_index": 9, "source_tile_id": "H-0", "target_tile_id": "T-1"}
        assert game_service.is_valid_reorder(game_id, payload) == (True, "")


class TestRandomizedRounds:
    def test_seeded_service_is_reproducible(self, scheduler):
        first = GameService(scheduler=scheduler, rng=random.Random(3))
        second = GameService(scheduler=scheduler, rng=random.Random(3))
        a = first.get_game_state(first.create_new_game())
        b = second.get_game_state(second.create_new_game())
        assert [w.tiles for w in a.words] == [w.tiles for w in b.words]
