"""
Survival and birth rules for each topology.

Square8 and Hex6 use the classic Conway rule on an integer neighbor count.
Hex12 adds fractional second-tier contributions, so its rule uses open
interval thresholds instead of exact counts.
"""

from typing import Set

from .topology import Topology

# Classic Conway rule, shared by the square and 6-neighbor hex boards
SURVIVAL_SET: Set[float] = {2.0, 3.0}
BIRTH_SET: Set[float] = {3.0}

# 12-neighbor hex thresholds, all exclusive
HEX12_BIRTH_RANGE = (2.3, 2.9)
HEX12_SURVIVAL_RANGE = (2.0, 3.3)


def conway_next_state(alive: bool, neighbor_score: float) -> bool:
    """Classic Conway rule applied to a neighbor score of whole weights.

    Args:
        alive: Current cell state (True=alive, False=dead)
        neighbor_score: Sum of weights of live neighbors

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        return neighbor_score in SURVIVAL_SET
    return neighbor_score in BIRTH_SET


def hex12_next_state(alive: bool, neighbor_score: float) -> bool:
    """Fractional-threshold rule for the 12-neighbor hex board."""
    low, high = HEX12_SURVIVAL_RANGE if alive else HEX12_BIRTH_RANGE
    return low < neighbor_score < high


_RULES = {
    Topology.SQUARE8: conway_next_state,
    Topology.HEX6: conway_next_state,
    Topology.HEX12: hex12_next_state,
}


def next_state(topology: Topology, alive: bool, neighbor_score: float) -> bool:
    """Next state of a cell under the given topology's rule."""
    return _RULES[Topology.parse(topology)](alive, neighbor_score)


def rule_for(topology: Topology):
    """Return the (alive, score) -> bool rule function of a topology."""
    return _RULES[Topology.parse(topology)]
