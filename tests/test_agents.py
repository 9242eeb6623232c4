"""
Tests for the baseline, priority and ranking agents and the agent registry.
"""

import numpy as np
import pytest

from agents.random_agent import RandomAgent
from agents.ranking_agent import RankingAgent
from agents.registry import build_agent, build_agent_from_config
from agents.simple_agents import BiggestFirstAgent, HardestFirstAgent, PriorityAgent, QuitterAgent
from engine.board import Board
from engine.coords import CoordSet
from engine.legality import first_round_inputs, get_player_inputs
from engine.move_generator import GIVE_UP, Move
from engine.pieces import get_piece_by_id, get_pieces
from schemas.game_config import AgentConfig, AgentType


@pytest.fixture
def opening_inputs():
    return first_round_inputs(Board(), 1, (0, 0))


def test_quitter_always_gives_up(opening_inputs):
    agent = QuitterAgent()
    assert agent.make_move(opening_inputs, list(get_pieces())) is GIVE_UP
    assert agent.description() == "Quitter"


def test_random_agent_plays_from_corner(opening_inputs):
    agent = RandomAgent(seed=42)
    move = agent.make_move(opening_inputs, list(get_pieces()))
    assert isinstance(move, Move)
    assert (0, 0) in move.cells
    assert opening_inputs.validate_move(move.cells) is None


def test_random_agent_is_reproducible(opening_inputs):
    pieces = list(get_pieces())
    first = RandomAgent(seed=3).make_move(opening_inputs, pieces)
    second = RandomAgent(seed=3).make_move(opening_inputs, pieces)
    assert first.piece.id == second.piece.id
    assert first.cells == second.cells


def test_random_agent_gives_up_without_moves(opening_inputs):
    agent = RandomAgent(seed=0)
    assert agent.make_move(opening_inputs, []) is GIVE_UP
    assert agent.make_move(get_player_inputs(Board(), 1), list(get_pieces())) is GIVE_UP


def test_biggest_first_opens_with_a_pentomino(opening_inputs):
    agent = BiggestFirstAgent(seed=1)
    move = agent.make_move(opening_inputs, list(get_pieces()))
    assert move.points == 5
    assert agent.description() == "BiggestFirst"


def test_hardest_first_opens_with_the_long_pentomino(opening_inputs):
    agent = HardestFirstAgent(seed=1)
    move = agent.make_move(opening_inputs, list(get_pieces()))
    assert move.piece.name == "Pentomino I"
    assert agent.description() == "HardestFirst"


def test_priority_agent_skips_pieces_without_moves(opening_inputs):
    x_pentomino = next(piece for piece in get_pieces() if piece.name == "Pentomino X")
    monomino = get_piece_by_id(1)
    # X cannot cover a corner, so the next priority is played instead.
    agent = PriorityAgent(lambda piece: 1 if piece is x_pentomino else 0, seed=0)
    move = agent.make_move(opening_inputs, [monomino, x_pentomino])
    assert move.piece is monomino


def test_ranking_agent_requires_four_weights():
    with pytest.raises(ValueError):
        RankingAgent([1, 2, 3])
    with pytest.raises(ValueError):
        RankingAgent([1, 2, 3, 4, 5])


def test_ranking_agent_description():
    assert RankingAgent([2.5, 1.4, 0.4, 1]).description() == "Ranking[2.5, 1.4, 0.4, 1.0]"
    assert RankingAgent([0, 1, 1, 0]).description() == "Ranking[0.0, 1.0, 1.0, 0.0]"


def test_ranking_agent_weights_cells(opening_inputs):
    move = RankingAgent([1, 0, 0, 0]).make_move(opening_inputs, list(get_pieces()))
    assert move.points == 5


def test_ranking_agent_weights_difficulty(opening_inputs):
    move = RankingAgent([0, 0, 1, 0]).make_move(opening_inputs, list(get_pieces()))
    assert move.piece.name == "Pentomino I"


def test_ranking_agent_gives_up_without_moves(opening_inputs):
    assert RankingAgent([1, 1, 1, 1]).make_move(opening_inputs, []) is GIVE_UP


def test_compute_features_in_opening(opening_inputs):
    agent = RankingAgent([1, 1, 1, 1])
    monomino = get_piece_by_id(1)
    features = agent.compute_features(opening_inputs, [Move(monomino, CoordSet([(0, 0)]))])
    assert np.array_equal(features[0], [1, 0, 1, 0])


def test_compute_features_counts_blocked_opponent_start_points():
    board = Board()
    board.place_cells([(3, 3)], 1)
    board.place_cells([(5, 5)], 2)
    inputs = get_player_inputs(board, 1)
    assert len(inputs.start_points) == 4

    agent = RankingAgent([1, 1, 1, 1])
    move = Move(get_piece_by_id(1), CoordSet([(4, 4)]))
    features = agent.compute_features(inputs, [move])
    assert np.array_equal(features[0], [1, 1, 1, 1])
    # Measuring moves leaves the board untouched.
    assert board.get_cell((4, 4)) == 0


def test_build_agent_by_type():
    assert isinstance(build_agent("random", seed=1), RandomAgent)
    assert isinstance(build_agent(AgentType.QUITTER), QuitterAgent)
    assert isinstance(build_agent("Biggest_First"), BiggestFirstAgent)
    assert isinstance(build_agent("hardest_first"), HardestFirstAgent)

    agent = build_agent("ranking", weights=[1, 2, 3, 4])
    assert isinstance(agent, RankingAgent)
    assert agent.weights == [1.0, 2.0, 3.0, 4.0]


def test_build_agent_errors():
    with pytest.raises(ValueError, match="Unknown agent type"):
        build_agent("alphazero")
    with pytest.raises(ValueError, match="require weights"):
        build_agent("ranking")


def test_build_agent_from_config():
    agent = build_agent_from_config(AgentConfig(type="ranking", weights=[0, 1, 1, 1]))
    assert agent.description() == "Ranking[0.0, 1.0, 1.0, 1.0]"
