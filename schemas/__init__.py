"""
Pydantic schemas for configuring Blokus games.
"""

from .game_config import AgentConfig, AgentType, GameConfig

__all__ = [
    "AgentConfig",
    "AgentType",
    "GameConfig",
]
