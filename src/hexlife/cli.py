#!/usr/bin/env python3
"""
Command-line driver for hexlife.

Builds a board from a file or at random, then prints the initial generation
and every nth generation after it while updating the board.
"""

import logging
import sys
from typing import Optional, Sequence, TextIO

from .config import SimulationConfig, parse_args
from .core.board import Board
from .errors import HexlifeError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def run_simulation(board: Board, config: SimulationConfig, out: Optional[TextIO] = None) -> None:
    """Print generation 0 and every print_every-th generation up to config.generations."""
    out = out if out is not None else sys.stdout
    for gen in range(config.generations + 1):
        if gen % config.print_every == 0:
            print(f"Gen {gen}", file=out)
            print(board, file=out)
        board.update()


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    """Entry point. Returns the process exit code."""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    config, errors = parse_args(argv)
    if errors:
        for error in errors:
            logger.error(str(error))
        return 1

    try:
        board = Board.construct(config.board_source(), config.topology, seed=config.seed)
    except HexlifeError as e:
        logger.error(f"Cannot build board: {e}")
        return 1

    logger.info(f"Simulating {config.generations} generations on {board!r}")
    run_simulation(board, config, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
