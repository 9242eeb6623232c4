"""
Blokus agents: random, priority heuristics and the weighted ranking agent.
"""

from agents.base import Agent, Decision
from agents.random_agent import RandomAgent
from agents.ranking_agent import RankingAgent
from agents.registry import build_agent, build_agent_from_config
from agents.simple_agents import BiggestFirstAgent, HardestFirstAgent, QuitterAgent

__all__ = [
    "Agent",
    "Decision",
    "RandomAgent",
    "RankingAgent",
    "QuitterAgent",
    "BiggestFirstAgent",
    "HardestFirstAgent",
    "build_agent",
    "build_agent_from_config",
]
