"""Cropping of the working grid to the occupied region."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.constants import DEFAULT_MARGIN
from ..core.exceptions import EmptyInputError
from ..core.models import WordPlacement
from .grid import WorkingGrid


@dataclass
class TrimResult:
    """Cropped letters plus the offset from working-grid coordinates."""

    grid: List[List[Optional[str]]]
    offset_row: int
    offset_col: int

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0


def trim_grid(
    grid: WorkingGrid,
    placements: Sequence[WordPlacement],
    margin: int = DEFAULT_MARGIN,
) -> TrimResult:
    """Crop ``grid`` to the bounding box of ``placements`` plus ``margin``.

    The margin is clamped to the physical edges of the working grid.
    """

    if not placements:
        raise EmptyInputError("No placements to trim around")

    min_row = min(p.start_row for p in placements)
    max_row = max(p.end_row for p in placements)
    min_col = min(p.start_col for p in placements)
    max_col = max(p.end_col for p in placements)

    min_row = max(0, min_row - margin)
    min_col = max(0, min_col - margin)
    max_row = min(grid.bounds.rows - 1, max_row + margin)
    max_col = min(grid.bounds.cols - 1, max_col + margin)

    cropped = [list(row[min_col:max_col + 1]) for row in grid.cells[min_row:max_row + 1]]
    return TrimResult(grid=cropped, offset_row=min_row, offset_col=min_col)
