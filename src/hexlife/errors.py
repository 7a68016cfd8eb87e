"""Exceptions raised by hexlife.

Every error is a validation failure raised synchronously at construction
time. They derive from ValueError so existing callers catching ValueError
keep working.
"""

from dataclasses import dataclass


class HexlifeError(ValueError):
    """Base class for all hexlife errors."""


class InvalidGridError(HexlifeError):
    """Input grid is empty, not square, ragged or contains an unknown glyph."""


class InvalidParameterError(HexlifeError):
    """Out-of-range probability or size for random board generation."""


class UnknownTopologyError(HexlifeError):
    """Topology selector is not one of Square8, Hex6 or Hex12."""


@dataclass(frozen=True)
class OptionError:
    """One invalid command-line flag.

    Attributes:
        flag: Flag as typed on the command line (e.g. "-size")
        value: Raw value passed to the flag
        reason: Human-readable explanation
    """

    flag: str
    value: str
    reason: str

    def __str__(self) -> str:
        if not self.value:
            return f"{self.flag}: {self.reason}"
        return f"Invalid value {self.value!r} passed to {self.flag}: {self.reason}"
