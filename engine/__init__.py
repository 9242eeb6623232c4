"""
Blokus game engine package.

This package contains the core game logic for Blokus, including:
- Board grid and board-bounded coordinate sets
- Piece forms and their rotations/reflections
- Start point / exclusion legality rules
- Legal move generation
- Game state, the round-based driver, scoring and ranking
"""

from .board import Board, Color
from .coords import Coord, CoordSet
from .errors import BlokusError, InvalidMoveError, PieceNotOwnedError, UnknownPlayerError
from .game import Game, GamePhase, GameState, Player, make_players
from .legality import PlayerInputs, first_round_inputs, get_board_state, get_player_inputs
from .move_generator import GIVE_UP, GiveUp, Move, generate_move, generate_valid_moves
from .pieces import Piece, PieceForm, generate_variants, get_pieces
from .scoring import Scores, get_scores, scores_to_ranking

__all__ = [
    'Board', 'Color', 'Coord', 'CoordSet',
    'BlokusError', 'InvalidMoveError', 'PieceNotOwnedError', 'UnknownPlayerError',
    'Game', 'GamePhase', 'GameState', 'Player', 'make_players',
    'PlayerInputs', 'first_round_inputs', 'get_board_state', 'get_player_inputs',
    'GIVE_UP', 'GiveUp', 'Move', 'generate_move', 'generate_valid_moves',
    'Piece', 'PieceForm', 'generate_variants', 'get_pieces',
    'Scores', 'get_scores', 'scores_to_ranking',
]
