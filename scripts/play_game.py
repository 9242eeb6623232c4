"""
Play a single four-player Blokus game between configured agents.

Prints the board after every round and the final scores and ranking.
"""

import argparse
import logging
import os
import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from agents.registry import build_agent_from_config
from engine.game import Game, GameState
from engine.legality import get_player_inputs
from schemas.game_config import GameConfig
from utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def print_state(state: GameState, show_start_points: bool = False, player_id: int = 1) -> None:
    highlight = None
    if show_start_points:
        highlight = get_player_inputs(state.board, player_id).start_points
    print(state.board.render(highlight))
    print()


def main(config: GameConfig) -> GameState:
    agents = [build_agent_from_config(agent_config) for agent_config in config.players]
    if config.shuffle_seats:
        # Have the agents play in different order each game.
        random.Random(config.seed).shuffle(agents)

    game = Game()
    game.on_game_start(lambda state: print_state(state, config.show_start_points))
    game.on_round_done(lambda state: print_state(state, config.show_start_points))
    state = game.play(agents)

    scores = state.get_scores()
    ranking = state.get_ranking()
    print(f"Game over after {game.rounds_played} rounds")
    for player in sorted(state.players, key=lambda p: ranking[p.id]):
        print(
            f"#{ranking[player.id]} player {player.id} ({player.agent.description()}): "
            f"{scores.get(player.id)} points, {len(player.pieces)} pieces left"
        )
    return state


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play one Blokus game")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML or JSON game config")
    parser.add_argument("--seed", type=int, default=None, help="Seed for seating order")
    parser.add_argument("--verbosity", type=int, choices=[0, 1, 2], default=1,
                        help="Logging verbosity: 0=ERROR, 1=INFO, 2=DEBUG")
    args = parser.parse_args()

    setup_logging({0: logging.ERROR, 1: logging.INFO, 2: logging.DEBUG}[args.verbosity])
    game_config = GameConfig.from_file(Path(args.config)) if args.config else GameConfig.default()
    if args.seed is not None:
        game_config.seed = args.seed
    main(game_config)
