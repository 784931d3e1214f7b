"""Working grid representation and placement helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..core.constants import DEFAULT_MAX_SIZE, Bounds, Direction
from ..core.exceptions import PlacementConflictError
from ..core.models import WordPlacement, path_cells
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values driving the working grid."""

    size: int = DEFAULT_MAX_SIZE

    def bounds(self) -> Bounds:
        return Bounds(rows=self.size, cols=self.size)


class WorkingGrid:
    """Square letter buffer owned by a single generation call.

    Cells hold one letter or ``None``. Words are committed in order and the
    resulting placements are kept alongside the buffer; the buffer is thrown
    away once the trimmer has cut the occupied region out of it.
    """

    def __init__(self, config: GridConfig) -> None:
        if config.size <= 0:
            raise ValueError(f"Grid size must be positive, got {config.size}")
        self.config = config
        self.bounds = config.bounds()
        self.cells: List[List[Optional[str]]] = [
            [None for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)
        ]
        self.placements: List[WordPlacement] = []

    @property
    def size(self) -> int:
        return self.config.size

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def letter_at(self, row: int, col: int) -> Optional[str]:
        """Return the letter at ``(row, col)``; off-grid cells read as empty."""

        if not self.bounds.contains(row, col):
            return None
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.letter_at(row, col) is None

    def filled_count(self) -> int:
        return sum(1 for row in self.cells for letter in row if letter is not None)

    def anchor_position(self, word: str) -> tuple[int, int]:
        """Start coordinates that center ``word`` across the middle row."""

        return self.size // 2, (self.size - len(word)) // 2

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def place_word(self, placement: WordPlacement) -> None:
        """Commit a placement, writing its letters into the buffer.

        Only bounds and letter agreement are checked here; adjacency rules
        belong to the validator, which callers consult beforehand.
        """

        cells = path_cells(placement.start_row, placement.start_col, placement.direction, placement.length)
        for index, (row, col) in enumerate(cells):
            if not self.bounds.contains(row, col):
                raise PlacementConflictError(
                    f"{placement.word} extends outside the grid at {(row, col)}"
                )
            existing = self.cells[row][col]
            if existing is not None and existing != placement.word[index]:
                raise PlacementConflictError(
                    f"{placement.word} conflicts with {existing!r} at {(row, col)}"
                )

        for index, (row, col) in enumerate(cells):
            self.cells[row][col] = placement.word[index]
        self.placements.append(placement)
        LOGGER.debug(
            "Placed %s %s at (%s,%s)",
            placement.word,
            placement.direction.value,
            placement.start_row,
            placement.start_col,
        )

    def place_anchor(self, word: str, clue: str) -> WordPlacement:
        """Place the first word across, centered in the grid."""

        row, col = self.anchor_position(word)
        placement = WordPlacement(word=word, clue=clue, start_row=row, start_col=col, direction=Direction.ACROSS)
        self.place_word(placement)
        return placement

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def rows_as_text(self, empty: str = ".") -> List[str]:
        return ["".join(letter or empty for letter in row) for row in self.cells]
