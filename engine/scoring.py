"""
Scoring and ranking for finished (or in-progress) games.

Standard Blokus scoring: one point per occupied cell, a 15 point bonus for
placing every piece, and 5 more if the last piece placed was the monomino.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Tuple

from .errors import UnknownPlayerError

if TYPE_CHECKING:
    from .game import GameState

ALL_PIECES_BONUS = 15
MONOMINO_LAST_BONUS = 5


@dataclass
class Scores:
    """Per-player points and pieces remaining."""
    points: Dict[int, int] = field(default_factory=dict)
    pieces_remaining: Dict[int, int] = field(default_factory=dict)

    def get(self, player_id: int) -> int:
        """Points for a player; unknown ids are a logic error."""
        try:
            return self.points[player_id]
        except KeyError:
            raise UnknownPlayerError(f"Unknown player id: {player_id}") from None

    def player_ids(self):
        return list(self.points)

    def rank_key(self, player_id: int) -> Tuple[int, int]:
        """Sort key: more points first, then fewer pieces remaining."""
        return (-self.get(player_id), self.pieces_remaining.get(player_id, 0))

    def compare(self, a: int, b: int) -> int:
        """
        Compare two players.

        Returns a negative number if a ranks ahead of b, positive if b
        ranks ahead, and 0 if they are tied.
        """
        key_a = self.rank_key(a)
        key_b = self.rank_key(b)
        return (key_a > key_b) - (key_a < key_b)


def get_scores(state: "GameState") -> Scores:
    """Compute the current scores for every player in the game."""
    scores = Scores()
    for player in state.players:
        points = state.board.count_cells(player.id)
        if not player.pieces:
            points += ALL_PIECES_BONUS
            if player.moves and player.moves[-1].piece.is_monomino:
                points += MONOMINO_LAST_BONUS
        scores.points[player.id] = points
        scores.pieces_remaining[player.id] = len(player.pieces)
    return scores


def scores_to_ranking(scores: Scores) -> Dict[int, int]:
    """
    Convert scores to 1-based competition ranks.

    Tied players share a rank and the next rank skips by the size of the
    tie, e.g. 1, 2, 2, 4.
    """
    ordered = sorted(scores.player_ids(), key=scores.rank_key)

    ranking: Dict[int, int] = {}
    for index, player_id in enumerate(ordered):
        if index > 0 and scores.compare(ordered[index - 1], player_id) == 0:
            ranking[player_id] = ranking[ordered[index - 1]]
        else:
            ranking[player_id] = index + 1
    return ranking


def get_winners(scores: Scores):
    """Player ids sharing rank 1."""
    ranking = scores_to_ranking(scores)
    return sorted(player_id for player_id, rank in ranking.items() if rank == 1)
