"""
hexlife: Game of Life on square and hexagonal grids

Boards over three topologies: a square grid with 8 Moore neighbors, a
row-offset hex grid with 6 neighbors, and the same hex grid extended with 6
weaker second-tier neighbors.
"""

from .core import Board, Grid, NeighborEntry, Topology, build_neighbor_table, neighbors_of, next_state, render
from .errors import HexlifeError, InvalidGridError, InvalidParameterError, OptionError, UnknownTopologyError

__version__ = "0.1.0"

__all__ = [
    'Board',
    'Grid',
    'HexlifeError',
    'InvalidGridError',
    'InvalidParameterError',
    'NeighborEntry',
    'OptionError',
    'Topology',
    'UnknownTopologyError',
    'build_neighbor_table',
    'neighbors_of',
    'next_state',
    'render',
]
