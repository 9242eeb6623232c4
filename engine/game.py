"""
Game state and the round-based game driver.

GameState is the single mutable aggregate of a game; all mutation goes
through apply_move() and give_up(). Game advances a GameState one round at
a time so that a caller (a renderer, a tournament) regains control between
rounds.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from .board import FIRST_ROUND_CORNERS, PLAYER_IDS, Board
from .errors import InvalidMoveError, PieceNotOwnedError, UnknownPlayerError
from .legality import PlayerInputs, first_round_inputs, get_player_inputs
from .move_generator import GiveUp, Move
from .pieces import Piece, get_pieces
from .scoring import Scores, get_scores, scores_to_ranking

if TYPE_CHECKING:
    from agents.base import Agent

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Player:
    """A seat in the game: its agent, unplayed pieces and move history."""
    id: int
    agent: "Agent"
    pieces: List[Piece] = field(default_factory=lambda: list(get_pieces()))
    moves: List[Move] = field(default_factory=list)
    still_playing: bool = True

    def has_piece(self, piece: Piece) -> bool:
        return any(held.id == piece.id for held in self.pieces)

    def __repr__(self):
        return (
            f"Player(id={self.id}, agent={self.agent.description()!r}, "
            f"pieces={len(self.pieces)}, moves={len(self.moves)}, "
            f"still_playing={self.still_playing})"
        )


def make_players(agents: Sequence["Agent"]) -> List[Player]:
    """Seat four agents as players 1-4, each holding all 21 pieces."""
    if len(agents) != len(PLAYER_IDS):
        raise ValueError(f"A game requires exactly {len(PLAYER_IDS)} agents, got {len(agents)}")
    return [Player(player_id, agent) for player_id, agent in zip(PLAYER_IDS, agents)]


class GameState:
    """The board plus the ordered list of players."""

    def __init__(self, players: List[Player], board: Optional[Board] = None):
        self.board = board if board is not None else Board()
        self.players = players

    @classmethod
    def new_game(cls, agents: Sequence["Agent"]) -> "GameState":
        return cls(make_players(agents))

    def get_player(self, player_id: int) -> Player:
        for player in self.players:
            if player.id == player_id:
                return player
        raise UnknownPlayerError(f"Unknown player id: {player_id}")

    def apply_move(self, player: Player, move: Move) -> None:
        """
        Place a move on the board for a player.

        The piece is removed from the player's hand, the move is recorded in
        their history, and their id is written into every cell.

        Raises:
            PieceNotOwnedError: the player does not hold the move's piece
        """
        for index, held in enumerate(player.pieces):
            if held.id == move.piece.id:
                break
        else:
            raise PieceNotOwnedError(
                f"Player {player.id} does not hold piece {move.piece.id} ({move.piece.name})"
            )

        del player.pieces[index]
        player.moves.append(move)
        self.board.place_cells(move.cells, player.id)

    def give_up(self, player: Player) -> None:
        """Withdraw a player; they are skipped from now on but still scored."""
        player.still_playing = False

    def get_player_inputs(self, player: Player) -> PlayerInputs:
        return get_player_inputs(self.board, player.id)

    def active_players(self) -> List[Player]:
        return [player for player in self.players if player.still_playing]

    def get_scores(self) -> Scores:
        return get_scores(self)

    def get_ranking(self):
        return scores_to_ranking(self.get_scores())


GameCallback = Callable[[GameState], None]


class GamePhase(Enum):
    """Driver state machine phases."""
    NOT_STARTED = "not_started"
    FIRST_ROUND = "first_round"
    SUBSEQUENT_ROUNDS = "subsequent_rounds"
    DONE = "done"


def play_turn(state: GameState, player: Player, inputs: PlayerInputs) -> bool:
    """
    Ask a player's agent for a decision and apply it.

    Returns:
        True if the player moved, False if they gave up

    Raises:
        InvalidMoveError: the agent proposed a move validation rejects
        TypeError: the agent returned neither a Move nor a GiveUp
    """
    decision = player.agent.make_move(inputs, list(player.pieces))
    if isinstance(decision, Move):
        rejection = inputs.validate_move(decision.cells)
        if rejection:
            raise InvalidMoveError(
                f"Player {player.id} proposed an invalid move! [{decision.cells}]: {rejection}"
            )
        state.apply_move(player, decision)
        logger.debug(f"Player {player.id} placed {decision.piece.name}")
        return True
    if isinstance(decision, GiveUp):
        state.give_up(player)
        logger.debug(f"Player {player.id} gave up with {len(player.pieces)} pieces left")
        return False
    raise TypeError(f"Player {player.id} returned an unexpected value: {decision!r}")


class Game:
    """
    Round-based game driver.

    The first round forces each seat onto its board corner; later rounds
    derive each still-playing player's inputs from the board. The game is
    over once a round passes in which nobody moved.
    """

    def __init__(self):
        self.state: Optional[GameState] = None
        self.phase = GamePhase.NOT_STARTED
        self.rounds_played = 0
        self._game_start: List[GameCallback] = []
        self._round_done: List[GameCallback] = []
        self._game_done: List[GameCallback] = []

    def on_game_start(self, *funcs: GameCallback) -> None:
        self._game_start.extend(funcs)

    def on_round_done(self, *funcs: GameCallback) -> None:
        self._round_done.extend(funcs)

    def on_game_done(self, *funcs: GameCallback) -> None:
        self._game_done.extend(funcs)

    @property
    def is_done(self) -> bool:
        return self.phase is GamePhase.DONE

    def start(self, agents: Sequence["Agent"]) -> GameState:
        """Create a fresh game state for four agents."""
        if self.phase is not GamePhase.NOT_STARTED:
            raise RuntimeError("Game has already been started")
        self.state = GameState.new_game(agents)
        self.phase = GamePhase.FIRST_ROUND
        logger.info(
            "Game started: " + ", ".join(
                f"{player.id}={player.agent.description()}" for player in self.state.players
            )
        )
        self._run_callbacks(self._game_start)
        return self.state

    def play_round(self) -> bool:
        """
        Advance the game by exactly one round.

        Returns:
            True if at least one player moved and the game continues
        """
        if self.phase is GamePhase.NOT_STARTED:
            raise RuntimeError("Game has not been started")
        if self.phase is GamePhase.DONE:
            raise RuntimeError("Game is already over")

        state = self.state
        keep_going = False
        if self.phase is GamePhase.FIRST_ROUND:
            for seat, player in enumerate(state.players):
                inputs = first_round_inputs(state.board, player.id, FIRST_ROUND_CORNERS[seat])
                keep_going = play_turn(state, player, inputs) or keep_going
            self.phase = GamePhase.SUBSEQUENT_ROUNDS
        else:
            for player in state.players:
                if not player.still_playing:
                    continue
                inputs = state.get_player_inputs(player)
                keep_going = play_turn(state, player, inputs) or keep_going

        self.rounds_played += 1
        logger.debug(f"Round {self.rounds_played} done, {len(state.active_players())} players still playing")
        self._run_callbacks(self._round_done)

        if not keep_going:
            self.phase = GamePhase.DONE
            scores = state.get_scores()
            logger.info(f"Game over after {self.rounds_played} rounds: scores={scores.points}")
            self._run_callbacks(self._game_done)
        return keep_going

    def play(self, agents: Sequence["Agent"]) -> GameState:
        """Play a complete game and return its final state."""
        self.start(agents)
        while self.play_round():
            pass
        return self.state

    def _run_callbacks(self, funcs: List[GameCallback]) -> None:
        for func in funcs:
            func(self.state)
