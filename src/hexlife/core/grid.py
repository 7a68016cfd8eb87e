"""Square cell grid backing every board.

The grid stores cell states in a numpy boolean array (True=alive,
False=dead) and knows how to load itself from glyph lines or sample itself
at random. Its size is fixed at construction.
"""

import numpy as np
from typing import Iterable, List, Optional, Tuple
import logging

from ..errors import InvalidGridError, InvalidParameterError

logger = logging.getLogger(__name__)

ALIVE_GLYPH = 'X'
DEAD_GLYPH = '.'


class Grid:
    """Square 2D boolean grid of cell states.

    Attributes:
        size: Side length in cells
        state: (size, size) numpy boolean array (True=alive, False=dead)
    """

    def __init__(self, size: int, initial_state: Optional[np.ndarray] = None):
        """Initialize a size x size grid.

        Args:
            size: Side length (cells)
            initial_state: Optional initial (size, size) state array

        Raises:
            InvalidParameterError: If size is not positive
            InvalidGridError: If initial_state shape doesn't match
        """
        if size <= 0:
            raise InvalidParameterError(f"Grid size must be positive, got {size}")

        self.size = size

        if initial_state is not None:
            if initial_state.shape != (size, size):
                raise InvalidGridError(f"Initial state shape {initial_state.shape} doesn't match grid size {(size, size)}")
            self.state = initial_state.astype(bool, copy=True)
        else:
            self.state = np.zeros((size, size), dtype=bool)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> 'Grid':
        """Parse a grid from lines of 'X' (alive) and '.' (dead) glyphs.

        Trailing newline characters are stripped from each line.

        Raises:
            InvalidGridError: If the input is empty, ragged, not square or
                contains a glyph other than 'X' or '.'
        """
        rows = [line.rstrip('\r\n') for line in lines]
        if not rows or not rows[0]:
            raise InvalidGridError("Grid input is empty")

        width = len(rows[0])
        for row_idx, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGridError(f"Row {row_idx} has length {len(row)}, expected {width}")
            for col_idx, glyph in enumerate(row):
                if glyph not in (ALIVE_GLYPH, DEAD_GLYPH):
                    raise InvalidGridError(f"Illegal glyph {glyph!r} at row {row_idx}, column {col_idx}")

        if len(rows) != width:
            raise InvalidGridError(f"Grid must be square, got {len(rows)} rows of length {width}")

        state = np.array([[glyph == ALIVE_GLYPH for glyph in row] for row in rows], dtype=bool)
        return cls(width, state)

    @classmethod
    def random(cls, probability: float, size: int, rng: Optional[np.random.Generator] = None) -> 'Grid':
        """Sample a grid where each cell is alive with the given probability.

        Args:
            probability: Chance of each cell being alive (0.0 to 1.0)
            size: Side length (cells)
            rng: Optional numpy random generator

        Raises:
            InvalidParameterError: If probability is outside [0, 1] or size <= 0
        """
        if not 0.0 <= probability <= 1.0:
            raise InvalidParameterError(f"Probability must be within [0, 1], got {probability}")
        if size <= 0:
            raise InvalidParameterError(f"Grid size must be positive, got {size}")

        rng = rng if rng is not None else np.random.default_rng()
        return cls(size, rng.random((size, size)) < probability)

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid."""
        return Grid(self.size, self.state)

    def glyph_rows(self) -> List[List[str]]:
        """Cell glyphs row by row."""
        return [[ALIVE_GLYPH if cell else DEAD_GLYPH for cell in row] for row in self.state]

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.sum(self.state))

    def density(self) -> float:
        """Get fraction of cells that are alive."""
        return self.count_alive() / (self.size * self.size)

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.state)

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        """Access cell state using grid[row, col] syntax."""
        row, col = key
        return bool(self.state[row, col])

    def __setitem__(self, key: Tuple[int, int], value: bool) -> None:
        """Set cell state using grid[row, col] = value syntax."""
        row, col = key
        self.state[row, col] = value

    def __eq__(self, other: object) -> bool:
        """Check equality with another grid."""
        if not isinstance(other, Grid):
            return False
        return self.size == other.size and np.array_equal(self.state, other.state)

    def __str__(self) -> str:
        return '\n'.join(''.join(row) for row in self.glyph_rows())

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        density_pct = self.density() * 100
        return f"Grid({self.size}x{self.size}, alive={self.count_alive()}, density={density_pct:.1f}%)"
