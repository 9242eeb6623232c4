"""
Evolve RankingAgent weights through repeated tournaments.
"""

import logging
import os
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from league.config import EvolutionConfig, parse_args
from league.evolution import Darwin, seed_generation
from utils.logging_setup import setup_logging, setup_run_logging

logger = logging.getLogger(__name__)


def main(config: EvolutionConfig):
    if config.log_dir:
        run_dir, log_file = setup_run_logging(Path(config.log_dir), "evolution", config.log_level)
        config.save_to_file(run_dir / "config.yaml")
        logger.info(f"Logging to {log_file}")
    else:
        setup_logging(config.log_level)
    config.log_config(logger)

    darwin = Darwin(config)
    records = darwin.evolve(seed_generation())

    logger.info("Final standings:")
    for rank, record in enumerate(records, start=1):
        logger.info(
            f"{rank:2d}. {record.agent.description()} mean={record.mean_ranking():.3f} "
            f"games={record.games_played}"
        )
    return records


if __name__ == "__main__":
    main(parse_args())
