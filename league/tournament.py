"""
Tournaments: repeated four-agent games scored with ranking points.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from agents.base import Agent
from engine.game import Game, GameCallback, GameState, Player
from engine.scoring import Scores, scores_to_ranking

logger = logging.getLogger(__name__)

# Ranking points per finishing place, Mario Kart 64 style.
RANKING_POINTS: Dict[int, int] = {1: 9, 2: 6, 3: 3, 4: 1}


def get_ranking_points(rank: int) -> int:
    try:
        return RANKING_POINTS[rank]
    except KeyError:
        raise KeyError(f"Unknown rank: {rank}") from None


@dataclass
class GameResult:
    """Score and rank of each agent in a single game, keyed by description."""
    agent_scores: Dict[str, int]
    agent_ranking: Dict[str, int]


def player_scores_to_game_result(players: Sequence[Player], scores: Scores) -> GameResult:
    ranking = scores_to_ranking(scores)
    agent_scores = {}
    agent_ranking = {}
    for player in players:
        desc = player.agent.description()
        agent_scores[desc] = scores.get(player.id)
        agent_ranking[desc] = ranking[player.id]
    return GameResult(agent_scores, agent_ranking)


@dataclass(eq=False)
class AgentRecord:
    """Lifetime statistics for an agent across tournaments."""
    agent: Agent
    total_ranking_points: int = 0
    games_played: int = 0

    def mean_ranking(self) -> float:
        """Average ranking points per game played."""
        if self.games_played == 0:
            return 0.0
        return self.total_ranking_points / self.games_played


TournamentCallback = Callable[["Tournament"], None]


class Tournament:
    """
    Four agents play a fixed number of games against each other.

    Seating is shuffled every game. After each game every agent earns
    ranking points for its finishing place.
    """

    def __init__(self, agents: Sequence[Agent], rounds: int, seed: Optional[int] = None):
        if len(agents) != 4:
            raise ValueError(f"A tournament requires exactly 4 agents, got {len(agents)}")
        descriptions = [agent.description() for agent in agents]
        if len(set(descriptions)) != len(descriptions):
            raise ValueError(f"Tournament agents must have distinct descriptions: {descriptions}")
        if rounds < 1:
            raise ValueError(f"rounds must be positive, got {rounds}")

        self.agents = list(agents)
        self.rounds = rounds
        self.results: List[GameResult] = []
        # Number of ranking points accumulated by each agent during the tournament.
        self.agent_points: Dict[str, int] = {desc: 0 for desc in descriptions}
        self.rng = random.Random(seed)

        self._tournament_start: List[TournamentCallback] = []
        self._on_result: List[TournamentCallback] = []
        self._tournament_done: List[TournamentCallback] = []
        self._game_start: List[GameCallback] = []
        self._round_done: List[GameCallback] = []

    def on_tournament_start(self, *funcs: TournamentCallback) -> None:
        self._tournament_start.extend(funcs)

    def on_result(self, *funcs: TournamentCallback) -> None:
        self._on_result.extend(funcs)

    def on_tournament_done(self, *funcs: TournamentCallback) -> None:
        self._tournament_done.extend(funcs)

    def on_game_start(self, *funcs: GameCallback) -> None:
        self._game_start.extend(funcs)

    def on_round_done(self, *funcs: GameCallback) -> None:
        self._round_done.extend(funcs)

    def run(self) -> "Tournament":
        """Play every game of the tournament."""
        self._run_callbacks(self._tournament_start)
        while len(self.results) < self.rounds:
            self.play_game()
        self._run_callbacks(self._tournament_done)
        return self

    def play_game(self) -> GameResult:
        # Have the agents play in different order each game.
        game_agents = list(self.agents)
        self.rng.shuffle(game_agents)

        game = Game()
        game.on_game_start(*self._game_start)
        game.on_round_done(*self._round_done)
        state = game.play(game_agents)
        return self._record_game(state)

    def _record_game(self, state: GameState) -> GameResult:
        result = player_scores_to_game_result(state.players, state.get_scores())
        for desc, rank in result.agent_ranking.items():
            self.agent_points[desc] += get_ranking_points(rank)

        self.results.append(result)
        logger.info(
            f"Tournament game {len(self.results)}/{self.rounds}: ranking={result.agent_ranking}"
        )
        self._run_callbacks(self._on_result)
        return result

    def best_agent(self) -> Agent:
        """The agent with the most ranking points; earlier agents win ties."""
        return max(self.agents, key=lambda agent: self.agent_points[agent.description()])

    def _run_callbacks(self, funcs: List[TournamentCallback]) -> None:
        for func in funcs:
            func(self)
