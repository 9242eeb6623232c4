"""
Tournaments and genetic weight tuning for Blokus agents.
"""

from league.config import EvolutionConfig
from league.evolution import Darwin, seed_generation
from league.tournament import AgentRecord, GameResult, Tournament, get_ranking_points

__all__ = [
    "AgentRecord",
    "Darwin",
    "EvolutionConfig",
    "GameResult",
    "Tournament",
    "get_ranking_points",
    "seed_generation",
]
