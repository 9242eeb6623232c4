"""
Tests for evolution and game configuration.
"""

from __future__ import annotations

import json
import logging

import pytest
import yaml
from pydantic import ValidationError

from league.config import EvolutionConfig, parse_args
from schemas.game_config import AgentConfig, AgentType, GameConfig


def test_evolution_config_defaults():
    config = EvolutionConfig()
    assert config.generations == 10
    assert config.games_per_tournament == 5
    assert config.population_cap == 30
    assert config.least_played_interval == 5
    assert config.mutate_all_probability == 0.25
    assert config.random_seed is None
    assert config.log_level == logging.INFO


@pytest.mark.parametrize("kwargs", [
    {"generations": 0},
    {"games_per_tournament": 0},
    {"population_cap": 3},
    {"least_played_interval": 0},
    {"mutate_all_probability": 1.5},
    {"logging_verbosity": 3},
])
def test_evolution_config_validation(kwargs):
    with pytest.raises(ValueError):
        EvolutionConfig(**kwargs)


def test_evolution_config_from_dict_ignores_unknown_keys():
    config = EvolutionConfig.from_dict({"generations": 3, "learning_rate": 0.1})
    assert config.generations == 3


def test_evolution_config_yaml_round_trip(tmp_path):
    path = tmp_path / "evolution.yaml"
    EvolutionConfig(generations=4, random_seed=9, logging_verbosity=2).save_to_file(path)

    with open(path) as f:
        assert yaml.safe_load(f)["generations"] == 4

    config = EvolutionConfig.from_file(path)
    assert config.generations == 4
    assert config.random_seed == 9
    assert config.log_level == logging.DEBUG


def test_evolution_config_json(tmp_path):
    path = tmp_path / "evolution.json"
    path.write_text(json.dumps({"population_cap": 8, "games_per_tournament": 2}))
    config = EvolutionConfig.from_file(path)
    assert config.population_cap == 8
    assert config.games_per_tournament == 2


def test_evolution_config_file_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        EvolutionConfig.from_file(tmp_path / "missing.yaml")
    bad = tmp_path / "evolution.toml"
    bad.write_text("generations = 2")
    with pytest.raises(ValueError):
        EvolutionConfig.from_file(bad)


def test_parse_args():
    config = parse_args(["--generations", "3", "--seed", "42", "--verbosity", "0", "--population-cap", "12"])
    assert config.generations == 3
    assert config.random_seed == 42
    assert config.logging_verbosity == 0
    assert config.population_cap == 12


def test_parse_args_config_file_wins(tmp_path):
    path = tmp_path / "evolution.yaml"
    path.write_text("generations: 7\n")
    config = parse_args(["--config", str(path), "--generations", "2"])
    assert config.generations == 7


def test_game_config_default():
    config = GameConfig.default()
    assert len(config.players) == 4
    assert config.players[0].type is AgentType.BIGGEST_FIRST
    assert config.players[1].weights == [2.5, 1.4, 0.4, 1.0]
    assert config.shuffle_seats


def test_game_config_requires_four_players():
    with pytest.raises(ValidationError):
        GameConfig(players=[AgentConfig(type="random")] * 3)


def test_agent_config_weights():
    with pytest.raises(ValidationError):
        AgentConfig(type="ranking")
    with pytest.raises(ValidationError):
        AgentConfig(type="random", weights=[1, 1, 1, 1])
    assert AgentConfig(type="ranking", weights=[1, 0, 0, 0]).weights == [1.0, 0.0, 0.0, 0.0]


def test_game_config_from_yaml(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text(
        "players:\n"
        "  - type: quitter\n"
        "  - type: random\n"
        "    seed: 3\n"
        "  - type: hardest_first\n"
        "  - type: ranking\n"
        "    weights: [1, 1, 1, 1]\n"
        "seed: 5\n"
    )
    config = GameConfig.from_file(path)
    assert [player.type for player in config.players] == [
        AgentType.QUITTER, AgentType.RANDOM, AgentType.HARDEST_FIRST, AgentType.RANKING
    ]
    assert config.players[1].seed == 3
    assert config.seed == 5


def test_agent_config_fields():
    assert set(AgentConfig.model_fields) == {"type", "weights", "seed"}
    config = AgentConfig.model_validate({"type": "random", "seed": 4})
    assert config.seed == 4
    assert config.weights is None
