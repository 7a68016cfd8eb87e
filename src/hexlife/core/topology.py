"""Neighbor enumeration for the three board topologies.

Hex grids are stored as a row-offset ("brick wall") rectangular array: odd
rows are shifted half a cell to the right, so which diagonal cells count as
adjacent depends on the parity of the row.
"""

from enum import Enum
from typing import NamedTuple, Tuple, Union
import logging

from ..errors import UnknownTopologyError

logger = logging.getLogger(__name__)

TIER1_WEIGHT = 1.0
TIER2_WEIGHT = 0.3

# Moore offsets in row-major order
MOORE_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if not (dr == 0 and dc == 0)
)

# Offsets dropped from the Moore set to get hex adjacency, keyed by row parity
HEX_EXCLUDED = {
    0: {(-1, 1), (1, 1)},
    1: {(-1, -1), (1, -1)},
}

# Second ring of the 12-neighbor hex topology, keyed by row parity
HEX_TIER2_OFFSETS = {
    0: ((-2, 0), (2, 0), (-1, -2), (-1, 1), (1, -2), (1, 1)),
    1: ((-2, 0), (2, 0), (-1, -1), (-1, 2), (1, -1), (1, 2)),
}


class Topology(Enum):
    """Neighbor-adjacency policy of a board."""

    SQUARE8 = "8"
    HEX6 = "6"
    HEX12 = "12"

    @property
    def is_hex(self) -> bool:
        return self is not Topology.SQUARE8

    @classmethod
    def parse(cls, value: Union["Topology", str, int]) -> "Topology":
        """Resolve a topology from an enum member, "6"/"8"/"12" or 6/8/12.

        Raises:
            UnknownTopologyError: If value names no known topology
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            raise UnknownTopologyError(
                f"Unknown topology {value!r}, expected one of 6, 8 or 12"
            ) from None


class NeighborEntry(NamedTuple):
    """One neighbor relation: position plus its weight in the score."""

    row: int
    col: int
    weight: float


NeighborTable = Tuple[Tuple[Tuple[NeighborEntry, ...], ...], ...]


def _in_bounds(size: int, row: int, col: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def _offset_entries(size: int, row: int, col: int, offsets, weight: float) -> list[NeighborEntry]:
    entries = []
    for dr, dc in offsets:
        r, c = row + dr, col + dc
        if _in_bounds(size, r, c):
            entries.append(NeighborEntry(r, c, weight))
    return entries


def square8_neighbors(size: int, row: int, col: int) -> list[NeighborEntry]:
    """All 8 Moore neighbors, clipped at the grid edges."""
    return _offset_entries(size, row, col, MOORE_OFFSETS, TIER1_WEIGHT)


def hex6_neighbors(size: int, row: int, col: int) -> list[NeighborEntry]:
    """The 6 hex-adjacent cells: Moore neighbors minus two by row parity."""
    excluded = HEX_EXCLUDED[row % 2]
    offsets = [offset for offset in MOORE_OFFSETS if offset not in excluded]
    return _offset_entries(size, row, col, offsets, TIER1_WEIGHT)


def hex12_neighbors(size: int, row: int, col: int) -> list[NeighborEntry]:
    """Hex6 neighbors followed by the 6 weaker second-tier cells."""
    tier2 = _offset_entries(size, row, col, HEX_TIER2_OFFSETS[row % 2], TIER2_WEIGHT)
    return hex6_neighbors(size, row, col) + tier2


_ENUMERATORS = {
    Topology.SQUARE8: square8_neighbors,
    Topology.HEX6: hex6_neighbors,
    Topology.HEX12: hex12_neighbors,
}


def neighbors_of(topology: Topology, size: int, row: int, col: int) -> list[NeighborEntry]:
    """Enumerate the in-bounds neighbors of (row, col) for a topology.

    Args:
        topology: Board topology
        size: Side length of the square grid
        row: Cell row
        col: Cell column

    Returns:
        Ordered list of NeighborEntry, none outside [0, size)

    Raises:
        UnknownTopologyError: If topology cannot be resolved
    """
    return _ENUMERATORS[Topology.parse(topology)](size, row, col)


def build_neighbor_table(topology: Topology, size: int) -> NeighborTable:
    """Precompute neighbors for every cell of a size x size grid.

    The table depends only on size and topology, so a board builds it once
    and reuses it for every generation.
    """
    topology = Topology.parse(topology)
    enumerate_cell = _ENUMERATORS[topology]
    table = tuple(
        tuple(tuple(enumerate_cell(size, row, col)) for col in range(size))
        for row in range(size)
    )
    logger.debug(f"Built {topology.name} neighbor table for {size}x{size} grid")
    return table
