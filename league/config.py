"""
Evolution configuration for tuning RankingAgent weights.

Configuration can be provided via CLI arguments or YAML/JSON config files.
"""

import argparse
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml


@dataclass
class EvolutionConfig:
    """
    Structured evolution configuration.

    Attributes:
        generations: Number of tournaments (generations) to run
        games_per_tournament: Games played by each generation of four agents
        population_cap: Number of best agent records kept between generations
        least_played_interval: Every N-th generation is made of the least-played agents
        mutate_all_probability: Chance that a new agent mutates every weight instead of one
        random_seed: Random seed for reproducibility (None = no seed)
        logging_verbosity: Logging level (0=ERROR, 1=INFO, 2=DEBUG)
        log_dir: Base directory for run logs (None = console only)
    """

    generations: int = 10
    games_per_tournament: int = 5
    population_cap: int = 30
    least_played_interval: int = 5
    mutate_all_probability: float = 0.25
    random_seed: Optional[int] = None
    logging_verbosity: int = 1
    log_dir: Optional[str] = None

    def __post_init__(self):
        if self.generations < 1:
            raise ValueError(f"generations must be positive, got {self.generations}")
        if self.games_per_tournament < 1:
            raise ValueError(f"games_per_tournament must be positive, got {self.games_per_tournament}")
        if self.population_cap < 4:
            raise ValueError(f"population_cap must be at least 4, got {self.population_cap}")
        if self.least_played_interval < 1:
            raise ValueError(f"least_played_interval must be positive, got {self.least_played_interval}")
        if not 0.0 <= self.mutate_all_probability <= 1.0:
            raise ValueError(
                f"mutate_all_probability must be in [0, 1], got {self.mutate_all_probability}"
            )
        if self.logging_verbosity not in (0, 1, 2):
            raise ValueError(f"logging_verbosity must be 0, 1 or 2, got {self.logging_verbosity}")

    @property
    def log_level(self) -> int:
        return {0: logging.ERROR, 1: logging.INFO, 2: logging.DEBUG}[self.logging_verbosity]

    @classmethod
    def from_dict(cls, config_dict: dict) -> "EvolutionConfig":
        """Create config from dictionary."""
        # Filter out unknown keys
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_dict = {k: v for k, v in config_dict.items() if k in valid_keys}
        return cls(**filtered_dict)

    @classmethod
    def from_file(cls, config_path: Path) -> "EvolutionConfig":
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

        return cls.from_dict(config_dict or {})

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            field.name: getattr(self, field.name)
            for field in self.__dataclass_fields__.values()
        }

    def save_to_file(self, config_path: Path):
        """Save config to YAML or JSON file."""
        config_path = Path(config_path)
        config_dict = self.to_dict()

        with open(config_path, "w") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
            elif config_path.suffix.lower() == ".json":
                json.dump(config_dict, f, indent=2, sort_keys=False)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    def log_config(self, logger: logging.Logger):
        """Log the effective configuration."""
        logger.info("=" * 80)
        logger.info("Evolution Configuration")
        logger.info("=" * 80)
        logger.info(f"Generations: {self.generations}")
        logger.info(f"Games per Tournament: {self.games_per_tournament}")
        logger.info(f"Population Cap: {self.population_cap}")
        logger.info(f"Least-Played Interval: {self.least_played_interval}")
        logger.info(f"Mutate-All Probability: {self.mutate_all_probability}")
        logger.info(f"Random Seed: {self.random_seed}")
        logger.info(f"Logging Verbosity: {self.logging_verbosity}")
        logger.info(f"Log Dir: {self.log_dir if self.log_dir else 'None (console only)'}")
        logger.info("=" * 80)


def create_arg_parser() -> argparse.ArgumentParser:
    """Create argument parser for the evolution script."""
    parser = argparse.ArgumentParser(
        description="Evolve RankingAgent weights through repeated tournaments",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML or JSON config file (overrides CLI args)"
    )
    parser.add_argument(
        "--generations",
        type=int,
        default=10,
        help="Number of generations (tournaments) to run"
    )
    parser.add_argument(
        "--games-per-tournament",
        type=int,
        default=5,
        help="Games played by each generation"
    )
    parser.add_argument(
        "--population-cap",
        type=int,
        default=30,
        help="Number of agent records kept between generations"
    )
    parser.add_argument(
        "--least-played-interval",
        type=int,
        default=5,
        help="Every N-th generation is made of the least-played agents"
    )
    parser.add_argument(
        "--mutate-all-probability",
        type=float,
        default=0.25,
        help="Chance of mutating every weight of a new agent instead of one"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        dest="random_seed",
        help="Random seed for reproducibility"
    )
    parser.add_argument(
        "--verbosity",
        type=int,
        choices=[0, 1, 2],
        default=1,
        dest="logging_verbosity",
        help="Logging verbosity: 0=ERROR, 1=INFO, 2=DEBUG"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Base directory for timestamped run logs"
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> EvolutionConfig:
    """Parse CLI arguments into an EvolutionConfig; a --config file wins over flags."""
    args = create_arg_parser().parse_args(argv)
    if args.config:
        return EvolutionConfig.from_file(Path(args.config))

    config_dict = vars(args)
    config_dict.pop("config")
    return EvolutionConfig.from_dict(config_dict)
