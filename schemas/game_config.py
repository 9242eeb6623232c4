"""
Pydantic schemas for game configuration.
"""

import json
from enum import Enum
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, model_validator


class AgentType(str, Enum):
    """Types of agents that can take a seat."""
    RANDOM = "random"
    QUITTER = "quitter"
    BIGGEST_FIRST = "biggest_first"
    HARDEST_FIRST = "hardest_first"
    RANKING = "ranking"


class AgentConfig(BaseModel):
    """Configuration for an agent."""
    type: AgentType
    weights: Optional[List[float]] = Field(
        default=None, description="Feature weights, required for ranking agents"
    )
    seed: Optional[int] = None

    @model_validator(mode="after")
    def check_weights(self) -> "AgentConfig":
        if self.type == AgentType.RANKING and self.weights is None:
            raise ValueError("ranking agents require weights")
        if self.type != AgentType.RANKING and self.weights is not None:
            raise ValueError(f"{self.type.value} agents do not take weights")
        return self


class GameConfig(BaseModel):
    """Configuration for a single Blokus game."""
    players: List[AgentConfig] = Field(..., min_length=4, max_length=4)
    seed: Optional[int] = Field(default=None, description="Seed for seating order")
    shuffle_seats: bool = Field(default=True, description="Shuffle agents into random seats")
    show_start_points: bool = Field(default=False, description="Mark start points when rendering")

    class Config:
        json_schema_extra = {
            "example": {
                "players": [
                    {"type": "biggest_first", "seed": 1},
                    {"type": "ranking", "weights": [2.5, 1.4, 0.4, 1.0]},
                    {"type": "ranking", "weights": [0, 1, 1, 1]},
                    {"type": "ranking", "weights": [1, 1, 1, 1]}
                ],
                "seed": 42,
                "shuffle_seats": True,
                "show_start_points": False
            }
        }

    @classmethod
    def default(cls) -> "GameConfig":
        """The demo line-up: one priority agent against three ranking agents."""
        return cls(players=[
            AgentConfig(type=AgentType.BIGGEST_FIRST),
            AgentConfig(type=AgentType.RANKING, weights=[2.5, 1.4, 0.4, 1]),
            AgentConfig(type=AgentType.RANKING, weights=[0, 1, 1, 1]),
            AgentConfig(type=AgentType.RANKING, weights=[1, 1, 1, 1]),
        ])

    @classmethod
    def from_file(cls, config_path: Path) -> "GameConfig":
        """Load config from YAML or JSON file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                config_dict = yaml.safe_load(f)
            elif config_path.suffix.lower() == ".json":
                config_dict = json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        return cls.model_validate(config_dict)
