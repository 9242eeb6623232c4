"""
Genetic tuning of RankingAgent weights.

Each generation of four agents plays a tournament. Lifetime records are
kept for every agent seen, the weakest are pruned, and the next generation
mixes the last winner, strong veterans and mutated copies of the best
ranking agent.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Sequence

from agents.base import Agent
from agents.ranking_agent import RankingAgent
from agents.simple_agents import HardestFirstAgent
from league.config import EvolutionConfig
from league.tournament import AgentRecord, Tournament

logger = logging.getLogger(__name__)

WEIGHT_RANGE = (-2.0, 2.0)
MAX_MUTATION = 2.0


def random_weights(rng: random.Random, num_weights: int = RankingAgent.NUM_WEIGHTS) -> List[float]:
    """Fresh weights drawn uniformly from WEIGHT_RANGE, one decimal place."""
    low, high = WEIGHT_RANGE
    return [round(rng.uniform(low, high), 1) for _ in range(num_weights)]


def _mutation(rng: random.Random) -> float:
    return rng.random() * MAX_MUTATION * rng.choice([1, -1])


def mutate_all_weights(rng: random.Random, weights: Sequence[float]) -> List[float]:
    """Nudge every weight by up to +/- MAX_MUTATION."""
    return [round(weight + _mutation(rng), 1) for weight in weights]


def mutate_weights(rng: random.Random, weights: Sequence[float]) -> List[float]:
    """Nudge a single randomly chosen weight by up to +/- MAX_MUTATION."""
    new_weights = list(weights)
    idx = rng.randrange(len(new_weights))
    new_weights[idx] = round(new_weights[idx] + _mutation(rng), 1)
    return new_weights


def sort_records(records: Sequence[AgentRecord]) -> List[AgentRecord]:
    """Highest mean ranking points first."""
    return sorted(records, key=lambda record: record.mean_ranking(), reverse=True)


class Darwin:
    """Runs generations of tournaments and breeds new ranking agents."""

    def __init__(self, config: Optional[EvolutionConfig] = None):
        self.config = config or EvolutionConfig()
        self.rng = random.Random(self.config.random_seed)
        self.records: Dict[str, AgentRecord] = {}
        self.rounds = 0

    def evolve(self, generation: Sequence[Agent]) -> List[AgentRecord]:
        """
        Run config.generations tournaments starting from generation.

        Returns:
            Surviving agent records, best first
        """
        generation = list(generation)
        records: List[AgentRecord] = []
        for index in range(self.config.generations):
            tournament = self.run_tournament(generation)
            best_agent = self.tournament_done(tournament)
            records = self.current_records()
            if index + 1 < self.config.generations:
                generation = self.make_generation(records, best_agent)
        return records

    def run_tournament(self, generation: Sequence[Agent]) -> Tournament:
        for agent in generation:
            desc = agent.description()
            if desc not in self.records:
                self.records[desc] = AgentRecord(agent)

        tournament = Tournament(
            generation,
            self.config.games_per_tournament,
            seed=self.rng.randrange(2 ** 32),
        )
        return tournament.run()

    def tournament_done(self, tournament: Tournament) -> Agent:
        """
        Fold a finished tournament into the lifetime records.

        Returns:
            The tournament's best agent
        """
        self.rounds += 1

        # Update lifetime statistics.
        for desc, points in tournament.agent_points.items():
            record = self.records.get(desc)
            if record is None:
                raise KeyError(f"Unknown agent! {desc}")
            record.total_ranking_points += points
            record.games_played += len(tournament.results)
        best_agent = tournament.best_agent()

        # Sort and prune the low performers.
        records = sort_records(self.records.values())[:self.config.population_cap]
        self.records = {record.agent.description(): record for record in records}

        logger.info(f"Results after N(rounds)={self.rounds}")
        for record in records:
            logger.info(
                f"Agent {record.agent.description()} => ({record.total_ranking_points} / "
                f"{record.games_played}) = {record.mean_ranking():.3f}"
            )
        return best_agent

    def current_records(self) -> List[AgentRecord]:
        return sort_records(self.records.values())

    def make_generation(self, records: Sequence[AgentRecord], best_agent: Agent) -> List[Agent]:
        """
        Pick the next four agents.

        Every least_played_interval-th round gives the least experienced
        agents a turn. Otherwise the last winner plays again alongside up to
        two agents from the top quartile, and the rest are mutations of the
        top-ranked agent.
        """
        if self.rounds % self.config.least_played_interval == 0:
            logger.info("Picking players with the least experience")
            least_played = sorted(records, key=lambda record: record.games_played)
            return [record.agent for record in least_played[:4]]

        top_agent = records[0].agent

        # The winner of the last round always plays again.
        generation = [best_agent]
        seen = {best_agent.description()}

        # Top-ranked agents should prove their value against comparable
        # opponents rather than inflate their points against weak ones.
        quartile = list(records[:len(records) // 4])
        self.rng.shuffle(quartile)
        for record in quartile:
            if len(generation) == 3:
                break
            desc = record.agent.description()
            if desc in seen:
                continue
            seen.add(desc)
            generation.append(record.agent)

        while len(generation) < 4:
            if isinstance(top_agent, RankingAgent):
                if self.rng.random() < self.config.mutate_all_probability:
                    new_weights = mutate_all_weights(self.rng, top_agent.weights)
                else:
                    new_weights = mutate_weights(self.rng, top_agent.weights)
            else:
                new_weights = random_weights(self.rng)

            new_agent = RankingAgent(new_weights)
            desc = new_agent.description()
            if desc in seen:
                continue
            seen.add(desc)
            generation.append(new_agent)
        return generation


def seed_generation() -> List[Agent]:
    """The starting line-up: one priority agent and three ranking agents."""
    return [
        HardestFirstAgent(),
        RankingAgent([2.5, 1.4, 0.4, 0]),
        RankingAgent([0, 1, 1, 0]),
        RankingAgent([1, 1, 1, 0]),
    ]
