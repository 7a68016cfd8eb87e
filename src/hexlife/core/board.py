"""Game of Life board over a square or hexagonal topology.

A board owns the current grid and a neighbor table built once from the
grid size and topology. Each update reads the whole current generation and
writes a brand-new grid, which replaces the old one only after every cell
has been computed.
"""

import numpy as np
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union
import logging

from ..errors import InvalidGridError, InvalidParameterError
from .grid import Grid
from .render import render
from .rules import rule_for
from .topology import NeighborTable, Topology, build_neighbor_table

logger = logging.getLogger(__name__)

BoardSource = Union[str, Path, Tuple[float, int]]

SCORE_DECIMALS = 9


class Board:
    """Cellular automaton board with a fixed topology.

    Attributes:
        topology: Neighbor-adjacency policy, fixed for the board's lifetime
        grid: Current generation
        neighbors: Precomputed neighbor table, indexed [row][col]
        generation: Number of updates applied so far
    """

    def __init__(self, grid: Grid, topology: Union[Topology, str, int] = Topology.HEX6):
        """Wrap a grid and build its neighbor table.

        Raises:
            UnknownTopologyError: If topology names no known topology
        """
        self.topology = Topology.parse(topology)
        self.grid = grid
        self.neighbors: NeighborTable = build_neighbor_table(self.topology, grid.size)
        self.generation = 0
        self._rule = rule_for(self.topology)

        logger.debug(f"Created {self.topology.name} board {grid.size}x{grid.size}, alive={grid.count_alive()}")

    @classmethod
    def from_lines(cls, lines: Iterable[str], topology: Union[Topology, str, int] = Topology.HEX6) -> 'Board':
        """Build a board from lines of 'X' and '.' glyphs."""
        return cls(Grid.from_lines(lines), topology)

    @classmethod
    def from_file(cls, path: Union[str, Path], topology: Union[Topology, str, int] = Topology.HEX6) -> 'Board':
        """Build a board from a text file of glyph lines.

        Raises:
            InvalidGridError: If the file cannot be read or its grid is malformed
        """
        try:
            text = Path(path).read_text(encoding="ascii")
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidGridError(f"Cannot read board file {path}: {e}") from e
        logger.debug(f"Loading board from {path}")
        return cls.from_lines(text.splitlines(), topology)

    @classmethod
    def random(cls, probability: float, size: int, topology: Union[Topology, str, int] = Topology.HEX6,
               seed: Optional[int] = None) -> 'Board':
        """Build a size x size board with cells alive at the given probability."""
        return cls(Grid.random(probability, size, np.random.default_rng(seed)), topology)

    @classmethod
    def construct(cls, source: BoardSource, topology: Union[Topology, str, int] = Topology.HEX6,
                  seed: Optional[int] = None) -> 'Board':
        """Build a board from a file path or a (probability, size) pair.

        Raises:
            InvalidParameterError: If source is neither a path nor a pair
        """
        topology = Topology.parse(topology)
        if isinstance(source, (str, Path)):
            return cls.from_file(source, topology)
        if isinstance(source, tuple) and len(source) == 2:
            probability, size = source
            return cls.random(probability, size, topology, seed=seed)
        raise InvalidParameterError(f"Board source must be a path or a (probability, size) pair, got {source!r}")

    @property
    def size(self) -> int:
        return self.grid.size

    def neighbor_score(self, row: int, col: int) -> float:
        """Sum of weights of the live neighbors of (row, col).

        Rounded so that sums of 0.3 weights land exactly on the rule
        thresholds (2.0 + 3 * 0.3 compares equal to 2.9).
        """
        state = self.grid.state
        score = 0.0
        for n_row, n_col, weight in self.neighbors[row][col]:
            if state[n_row, n_col]:
                score += weight
        return round(score, SCORE_DECIMALS)

    def update(self) -> int:
        """Advance one generation.

        Returns:
            Number of live cells in the new generation
        """
        size = self.grid.size
        new_state = np.zeros((size, size), dtype=bool)

        for row in range(size):
            for col in range(size):
                alive = bool(self.grid.state[row, col])
                new_state[row, col] = self._rule(alive, self.neighbor_score(row, col))

        self.grid = Grid(size, new_state)
        self.generation += 1

        live_count = self.grid.count_alive()
        logger.debug(f"Generation {self.generation}: alive={live_count}")
        return live_count

    def run(self, generations: int) -> List[int]:
        """Apply update() repeatedly and return the live count after each."""
        return [self.update() for _ in range(generations)]

    def render(self) -> List[str]:
        """Text lines for the current generation."""
        return render(self)

    def __str__(self) -> str:
        return '\n'.join(self.render())

    def __repr__(self) -> str:
        return f"Board({self.topology.name}, {self.size}x{self.size}, generation={self.generation}, alive={self.grid.count_alive()})"
