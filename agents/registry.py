"""
Agent registry: build agents from an AgentType or an AgentConfig.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

from schemas.game_config import AgentConfig, AgentType

from agents.base import Agent
from agents.random_agent import RandomAgent
from agents.ranking_agent import RankingAgent
from agents.simple_agents import BiggestFirstAgent, HardestFirstAgent, QuitterAgent

AgentFactory = Callable[[Optional[int], Optional[Sequence[float]]], Agent]

AGENT_FACTORIES: Dict[AgentType, AgentFactory] = {
    AgentType.RANDOM: lambda seed, weights: RandomAgent(seed=seed),
    AgentType.QUITTER: lambda seed, weights: QuitterAgent(),
    AgentType.BIGGEST_FIRST: lambda seed, weights: BiggestFirstAgent(seed=seed),
    AgentType.HARDEST_FIRST: lambda seed, weights: HardestFirstAgent(seed=seed),
    AgentType.RANKING: lambda seed, weights: RankingAgent(weights),
}


def build_agent(
    agent_type: AgentType | str,
    seed: Optional[int] = None,
    weights: Optional[Sequence[float]] = None,
) -> Agent:
    """
    Build an agent by type.

    Raises:
        ValueError: unknown agent type, or a ranking agent without weights
    """
    try:
        agent_type = AgentType(agent_type.lower() if isinstance(agent_type, str) else agent_type)
    except ValueError:
        raise ValueError(f"Unknown agent type: {agent_type}") from None
    if agent_type is AgentType.RANKING and weights is None:
        raise ValueError("Ranking agents require weights")
    return AGENT_FACTORIES[agent_type](seed, weights)


def build_agent_from_config(config: AgentConfig) -> Agent:
    return build_agent(config.type, seed=config.seed, weights=config.weights)
