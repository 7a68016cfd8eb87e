"""Simulation configuration and command-line option parsing.

Options keep the single-dash spelling of the original tool (-size, -g, ...).
Values are read as raw strings and converted by an explicit validator that
reports one OptionError per bad flag instead of stopping at the first.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple
import logging
import sys

from .core.board import BoardSource
from .core.topology import Topology
from .errors import OptionError

logger = logging.getLogger(__name__)

DEFAULT_TOPOLOGY = Topology.HEX6
DEFAULT_SIZE = 100
DEFAULT_PROBABILITY = 0.5
DEFAULT_GENERATIONS = 10
DEFAULT_PRINT_EVERY = 1

VALUE_FLAGS = ("-size", "-f", "-g", "-p", "-i", "-seed")


@dataclass
class SimulationConfig:
    """Settings for one simulation run.

    Attributes:
        topology: Board topology
        size: Side length of a random board (ignored when file is set)
        file: Optional path of a board file
        probability: Chance of a random cell being alive (ignored when file is set)
        generations: Number of updates to run
        print_every: Render every nth generation
        seed: Optional seed for random board generation
    """

    topology: Topology = DEFAULT_TOPOLOGY
    size: int = DEFAULT_SIZE
    file: Optional[Path] = None
    probability: float = DEFAULT_PROBABILITY
    generations: int = DEFAULT_GENERATIONS
    print_every: int = DEFAULT_PRINT_EVERY
    seed: Optional[int] = None

    def board_source(self) -> BoardSource:
        """File path if one was given, else the (probability, size) pair."""
        if self.file is not None:
            return self.file
        return (self.probability, self.size)


class _TopologyAction(argparse.Action):
    """Store a topology flag, noting when an earlier one is overridden."""

    def __init__(self, option_strings, dest, **kwargs):
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest) is not None:
            logger.info("Board configuration specified more than once. Overriding previous rule.")
        setattr(namespace, self.dest, self.const)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexlife",
        description="Game of Life on square and hexagonal grids",
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument("-h", "-help", action="help", help="show this help message and exit")
    parser.add_argument("-6", dest="topology", action=_TopologyAction, const=Topology.HEX6,
                        help="use 6 neighbor rules on a hex grid (default)")
    parser.add_argument("-8", dest="topology", action=_TopologyAction, const=Topology.SQUARE8,
                        help="use 8 neighbor rules on a rectangular grid")
    parser.add_argument("-12", dest="topology", action=_TopologyAction, const=Topology.HEX12,
                        help="use 12 neighbor rules on a hex grid")
    parser.add_argument("-size", metavar="SIZE", help=f"set grid size to SIZE by SIZE (default: {DEFAULT_SIZE})")
    parser.add_argument("-f", dest="file", metavar="FNAME", help="read initial configuration from file")
    parser.add_argument("-g", dest="generations", metavar="GENS",
                        help=f"number of generations to simulate (default: {DEFAULT_GENERATIONS})")
    parser.add_argument("-p", dest="print_every", metavar="GEN_PRINT",
                        help=f"print every nth generation (default: {DEFAULT_PRINT_EVERY})")
    parser.add_argument("-i", dest="probability", metavar="PROB",
                        help=f"probability of cell alive initially (default: {DEFAULT_PROBABILITY})")
    parser.add_argument("-seed", metavar="SEED", help="seed for the random initial board")
    return parser


def _parse_int(flag: str, raw: str, minimum: int, errors: List[OptionError]) -> Optional[int]:
    try:
        value = int(raw)
    except ValueError:
        errors.append(OptionError(flag, raw, "not an integer"))
        return None
    if value < minimum:
        errors.append(OptionError(flag, raw, f"must be at least {minimum}"))
        return None
    return value


def _parse_probability(flag: str, raw: str, errors: List[OptionError]) -> Optional[float]:
    try:
        value = float(raw)
    except ValueError:
        errors.append(OptionError(flag, raw, "not a number"))
        return None
    if not 0.0 <= value <= 1.0:
        errors.append(OptionError(flag, raw, "must be within [0, 1]"))
        return None
    return value


def config_from_namespace(args: argparse.Namespace) -> Tuple[SimulationConfig, List[OptionError]]:
    """Validate raw parsed options into a SimulationConfig.

    Returns:
        (config, errors) - config holds defaults for every invalid flag
    """
    config = SimulationConfig()
    errors: List[OptionError] = []

    if args.topology is not None:
        config.topology = args.topology

    if args.file is not None:
        config.file = Path(args.file)
        if args.size is not None:
            logger.info("Ignoring -size. Reading size from file")
        if args.probability is not None:
            logger.info("Ignoring -i. Getting board from file")

    if args.size is not None:
        size = _parse_int("-size", args.size, 1, errors)
        if size is not None:
            config.size = size
    if args.generations is not None:
        generations = _parse_int("-g", args.generations, 0, errors)
        if generations is not None:
            config.generations = generations
    if args.print_every is not None:
        print_every = _parse_int("-p", args.print_every, 1, errors)
        if print_every is not None:
            config.print_every = print_every
    if args.probability is not None:
        probability = _parse_probability("-i", args.probability, errors)
        if probability is not None:
            config.probability = probability
    if args.seed is not None:
        config.seed = _parse_int("-seed", args.seed, 0, errors)

    return config, errors


def _attach_values(argv: Sequence[str]) -> List[str]:
    """Join each value flag with the token after it, e.g. ["-g", "-1"] -> ["-g=-1"].

    The -6/-8/-12 flags make argparse read negative numbers as options, so a
    value like -1 would otherwise never reach the validator.
    """
    joined = []
    idx = 0
    while idx < len(argv):
        token = argv[idx]
        if token in VALUE_FLAGS and idx + 1 < len(argv):
            joined.append(f"{token}={argv[idx + 1]}")
            idx += 2
        else:
            joined.append(token)
            idx += 1
    return joined


def parse_args(argv: Optional[Sequence[str]] = None) -> Tuple[SimulationConfig, List[OptionError]]:
    """Parse command-line arguments into a config plus any option errors.

    Only -h/-help exits; every other problem is returned as an OptionError.
    """
    argv = sys.argv[1:] if argv is None else argv
    try:
        args, extras = build_parser().parse_known_args(_attach_values(argv))
    except argparse.ArgumentError as e:
        return SimulationConfig(), [OptionError(e.argument_name or "", "", e.message)]

    config, errors = config_from_namespace(args)
    errors.extend(OptionError(extra, "", "unrecognized option") for extra in extras)
    return config, errors
