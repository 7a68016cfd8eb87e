"""Text rendering of boards.

Square boards print each row as contiguous glyphs. Hex boards separate
cells with spaces and indent odd rows by one space, so alternating rows sit
half a cell apart like the brick-wall layout they model.
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .board import Board


def render(board: 'Board') -> List[str]:
    """Render the current generation as a list of text lines."""
    rows = board.grid.glyph_rows()
    if not board.topology.is_hex:
        return [''.join(row) for row in rows]
    return [(' ' if row_idx % 2 == 1 else '') + ' '.join(row) for row_idx, row in enumerate(rows)]
