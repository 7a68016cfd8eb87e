"""Board, grid, topology and rule primitives."""

from .topology import NeighborEntry, Topology, build_neighbor_table, neighbors_of
from .grid import ALIVE_GLYPH, DEAD_GLYPH, Grid
from .rules import next_state
from .render import render
from .board import Board

__all__ = [
    "ALIVE_GLYPH",
    "DEAD_GLYPH",
    "Board",
    "Grid",
    "NeighborEntry",
    "Topology",
    "build_neighbor_table",
    "neighbors_of",
    "next_state",
    "render",
]
