"""
Tests for game state mutation and the round-based game driver.
"""

import unittest

import numpy as np

from agents.random_agent import RandomAgent
from agents.simple_agents import BiggestFirstAgent, QuitterAgent
from engine.board import FIRST_ROUND_CORNERS, Board
from engine.coords import CoordSet
from engine.errors import InvalidMoveError, PieceNotOwnedError, UnknownPlayerError
from engine.game import Game, GamePhase, GameState, make_players, play_turn
from engine.legality import get_player_inputs
from engine.move_generator import GIVE_UP, Move
from engine.pieces import get_piece_by_id, get_pieces


class ScriptedAgent:
    """Returns a fixed decision every turn."""

    def __init__(self, decision):
        self.decision = decision

    def make_move(self, inputs, pieces):
        return self.decision

    def description(self):
        return "Scripted"


class CountingQuitter:
    """Gives up on its first turn and counts how often it is asked."""

    def __init__(self):
        self.calls = 0

    def make_move(self, inputs, pieces):
        self.calls += 1
        return GIVE_UP

    def description(self):
        return "CountingQuitter"


class TestGameState(unittest.TestCase):
    """Test GameState mutation."""

    def setUp(self):
        self.state = GameState.new_game([QuitterAgent() for _ in range(4)])

    def test_new_game(self):
        self.assertEqual([player.id for player in self.state.players], [1, 2, 3, 4])
        for player in self.state.players:
            self.assertEqual(len(player.pieces), 21)
            self.assertEqual(player.moves, [])
            self.assertTrue(player.still_playing)
        self.assertTrue(np.all(self.state.board.grid == 0))

    def test_players_do_not_share_inventories(self):
        p1, p2, _, _ = self.state.players
        p1.pieces.pop()
        self.assertEqual(len(p2.pieces), 21)

    def test_make_players_requires_four_agents(self):
        with self.assertRaises(ValueError):
            make_players([QuitterAgent() for _ in range(3)])
        with self.assertRaises(ValueError):
            make_players([QuitterAgent() for _ in range(5)])

    def test_apply_move(self):
        player = self.state.players[1]
        domino = get_piece_by_id(2)
        move = Move(domino, CoordSet([(0, 18), (0, 19)]))

        self.state.apply_move(player, move)

        self.assertEqual(len(player.pieces), 20)
        self.assertFalse(player.has_piece(domino))
        self.assertEqual(player.moves, [move])
        self.assertEqual(self.state.board.get_cell((0, 18)), 2)
        self.assertEqual(self.state.board.get_cell((0, 19)), 2)
        self.assertEqual(self.state.board.count_cells(2), 2)

    def test_apply_move_with_unheld_piece(self):
        player = self.state.players[0]
        monomino = get_piece_by_id(1)
        self.state.apply_move(player, Move(monomino, CoordSet([(0, 0)])))

        with self.assertRaises(PieceNotOwnedError):
            self.state.apply_move(player, Move(monomino, CoordSet([(5, 5)])))
        # Nothing was mutated by the rejected move.
        self.assertEqual(self.state.board.get_cell((5, 5)), 0)
        self.assertEqual(len(player.moves), 1)
        self.assertEqual(len(player.pieces), 20)

    def test_give_up(self):
        player = self.state.players[2]
        self.state.give_up(player)
        self.assertFalse(player.still_playing)
        self.assertEqual([p.id for p in self.state.active_players()], [1, 2, 4])

    def test_get_player(self):
        self.assertEqual(self.state.get_player(3).id, 3)
        with self.assertRaises(UnknownPlayerError):
            self.state.get_player(5)


class TestPlayTurn(unittest.TestCase):
    """Test a single agent decision."""

    def test_invalid_move_is_raised(self):
        monomino = get_piece_by_id(1)
        state = GameState.new_game([ScriptedAgent(Move(monomino, CoordSet([(0, 0)])))] * 4)
        state.board.place_cells([(0, 0)], 2)
        player = state.players[0]

        with self.assertRaises(InvalidMoveError):
            play_turn(state, player, get_player_inputs(state.board, player.id))
        self.assertEqual(len(player.pieces), 21)

    def test_give_up_withdraws_player(self):
        state = GameState.new_game([ScriptedAgent(GIVE_UP)] * 4)
        player = state.players[0]
        moved = play_turn(state, player, get_player_inputs(state.board, player.id))
        self.assertFalse(moved)
        self.assertFalse(player.still_playing)

    def test_unexpected_decision(self):
        state = GameState.new_game([ScriptedAgent(None)] * 4)
        player = state.players[0]
        with self.assertRaises(TypeError):
            play_turn(state, player, get_player_inputs(state.board, player.id))


class TestGame(unittest.TestCase):
    """Test the round-based game driver."""

    def test_player_who_gives_up_is_skipped_but_scored(self):
        quitter = CountingQuitter()
        game = Game()
        state = game.play([RandomAgent(seed=1), quitter, RandomAgent(seed=2), RandomAgent(seed=3)])

        self.assertGreater(game.rounds_played, 2)
        self.assertEqual(quitter.calls, 1)
        player = state.players[1]
        self.assertFalse(player.still_playing)
        self.assertEqual(player.moves, [])

        scores = state.get_scores()
        self.assertEqual(scores.get(player.id), 0)
        self.assertEqual(scores.pieces_remaining[player.id], 21)
        self.assertEqual(state.get_ranking()[player.id], 4)

    def test_quitters_end_after_first_round(self):
        game = Game()
        state = game.play([QuitterAgent() for _ in range(4)])

        self.assertTrue(game.is_done)
        self.assertEqual(game.rounds_played, 1)
        self.assertEqual(state.get_scores().points, {1: 0, 2: 0, 3: 0, 4: 0})
        self.assertEqual(state.get_ranking(), {1: 1, 2: 1, 3: 1, 4: 1})

    def test_round_lifecycle(self):
        game = Game()
        self.assertIs(game.phase, GamePhase.NOT_STARTED)
        with self.assertRaises(RuntimeError):
            game.play_round()

        game.start([QuitterAgent() for _ in range(4)])
        self.assertIs(game.phase, GamePhase.FIRST_ROUND)
        with self.assertRaises(RuntimeError):
            game.start([QuitterAgent() for _ in range(4)])

        self.assertFalse(game.play_round())
        self.assertIs(game.phase, GamePhase.DONE)
        with self.assertRaises(RuntimeError):
            game.play_round()

    def test_first_round_uses_seat_corners(self):
        game = Game()
        state = game.start([BiggestFirstAgent(seed=seat) for seat in range(4)])
        self.assertTrue(game.play_round())
        self.assertIs(game.phase, GamePhase.SUBSEQUENT_ROUNDS)

        for seat, player in enumerate(state.players):
            corner = FIRST_ROUND_CORNERS[seat]
            self.assertEqual(len(player.moves), 1)
            self.assertIn(corner, player.moves[0].cells)
            self.assertEqual(player.moves[0].points, 5)
            self.assertEqual(state.board.get_cell(corner), player.id)

    def test_full_random_game(self):
        game = Game()
        started, rounds, finished = [], [], []
        game.on_game_start(started.append)
        game.on_round_done(rounds.append)
        game.on_game_done(finished.append)

        state = game.play([RandomAgent(seed=seat) for seat in range(4)])

        self.assertTrue(game.is_done)
        self.assertEqual(len(started), 1)
        self.assertEqual(len(rounds), game.rounds_played)
        self.assertEqual(finished, [state])
        self.assertEqual(state.active_players(), [])

        for player in state.players:
            self.assertGreater(len(player.moves), 0)
            self.assertEqual(len(player.moves) + len(player.pieces), len(get_pieces()))
            placed = sum(move.points for move in player.moves)
            self.assertEqual(state.board.count_cells(player.id), placed)

    def test_own_pieces_never_share_an_edge(self):
        state = Game().play([RandomAgent(seed=seat + 10) for seat in range(4)])
        for player in state.players:
            moves = player.moves
            for i, move in enumerate(moves):
                for other in moves[i + 1:]:
                    for row, col in move.cells:
                        for neighbour in [(row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)]:
                            self.assertNotIn(neighbour, other.cells)

    def test_board_copy_is_independent(self):
        board = Board()
        board.place_cells([(1, 1)], 1)
        copy = board.copy()
        copy.place_cells([(2, 2)], 2)
        self.assertEqual(board.get_cell((2, 2)), 0)
        self.assertEqual(copy.get_cell((1, 1)), 1)


if __name__ == "__main__":
    unittest.main()
