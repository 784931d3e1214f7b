"""Placement legality checks and finished-puzzle validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Set, Tuple

from ..core.constants import Direction
from ..core.exceptions import ValidationError
from ..core.models import CrosswordPuzzle, path_cells
from .grid import WorkingGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class PlacementValidator:
    """Decides whether a proposed word position is legal on a working grid."""

    def __init__(self, grid: WorkingGrid) -> None:
        self.grid = grid

    def can_place(self, word: str, row: int, col: int, direction: Direction) -> bool:
        if not word:
            return False
        if not self._fits(len(word), row, col, direction):
            return False

        dr, dc = direction.step
        for index, (r, c) in enumerate(path_cells(row, col, direction, len(word))):
            current = self.grid.letter_at(r, c)
            if current is not None:
                if current != word[index]:
                    return False
                continue
            # A fresh letter must not touch anything sideways.
            if not self.grid.is_empty(r + dc, c + dr) or not self.grid.is_empty(r - dc, c - dr):
                return False

        if not self.grid.is_empty(row - dr, col - dc):
            return False
        end_row = row + dr * len(word)
        end_col = col + dc * len(word)
        return self.grid.is_empty(end_row, end_col)

    def _fits(self, length: int, row: int, col: int, direction: Direction) -> bool:
        if row < 0 or col < 0:
            return False
        size = self.grid.size
        if direction == Direction.ACROSS:
            return row < size and col + length <= size
        return col < size and row + length <= size


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic integrity checks over a finished puzzle."""

    def validate(self, puzzle: CrosswordPuzzle) -> ValidationResult:
        try:
            self._check_dimensions(puzzle)
            self._check_letters(puzzle)
            self._check_numbering(puzzle)
            self._check_coverage(puzzle)
            self._check_runs(puzzle)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_dimensions(self, puzzle: CrosswordPuzzle) -> None:
        if len(puzzle.grid) != puzzle.rows:
            raise ValidationError(f"Grid has {len(puzzle.grid)} rows, expected {puzzle.rows}")
        for index, row in enumerate(puzzle.grid):
            if len(row) != puzzle.cols:
                raise ValidationError(f"Row {index} has {len(row)} cells, expected {puzzle.cols}")

    def _check_letters(self, puzzle: CrosswordPuzzle) -> None:
        for word in puzzle.words:
            for index, (r, c) in enumerate(word.cells):
                if not (0 <= r < puzzle.rows and 0 <= c < puzzle.cols):
                    raise ValidationError(f"Word {word.word} leaves the grid at ({r},{c})")
                letter = puzzle.cell(r, c).letter
                if letter != word.word[index]:
                    raise ValidationError(
                        f"Word {word.word} expects {word.word[index]!r} at ({r},{c}), found {letter!r}"
                    )

    def _check_numbering(self, puzzle: CrosswordPuzzle) -> None:
        numbers = [word.number for word in puzzle.words]
        if numbers != list(range(1, len(puzzle.words) + 1)):
            raise ValidationError(f"Clue numbers out of placement order: {numbers}")
        for word in puzzle.words:
            stamped = puzzle.cell(word.start_row, word.start_col).number
            starters = {
                other.number
                for other in puzzle.words
                if (other.start_row, other.start_col) == (word.start_row, word.start_col)
            }
            if stamped not in starters:
                raise ValidationError(
                    f"Start cell of {word.word} carries number {stamped}, expected one of {sorted(starters)}"
                )

    def _check_coverage(self, puzzle: CrosswordPuzzle) -> None:
        covered: Set[Tuple[int, int]] = set()
        for word in puzzle.words:
            covered.update(word.cells)
        for r in range(puzzle.rows):
            for c in range(puzzle.cols):
                if puzzle.cell(r, c).letter is not None and (r, c) not in covered:
                    raise ValidationError(f"Letter at ({r},{c}) belongs to no word")

    def _check_runs(self, puzzle: CrosswordPuzzle) -> None:
        """Every run of two or more letters must read as exactly one word."""

        entries = {(w.start_row, w.start_col, w.direction, w.word) for w in puzzle.words}
        for run in self._runs(puzzle):
            if run not in entries:
                row, col, direction, text = run
                raise ValidationError(
                    f"Unintended {direction.value} sequence {text!r} at ({row},{col})"
                )

    @staticmethod
    def _runs(puzzle: CrosswordPuzzle) -> Iterator[Tuple[int, int, Direction, str]]:
        for direction in (Direction.ACROSS, Direction.DOWN):
            outer = puzzle.rows if direction == Direction.ACROSS else puzzle.cols
            inner = puzzle.cols if direction == Direction.ACROSS else puzzle.rows
            for i in range(outer):
                j = 0
                while j < inner:
                    r, c = (i, j) if direction == Direction.ACROSS else (j, i)
                    if puzzle.cell(r, c).letter is None:
                        j += 1
                        continue
                    letters: List[str] = []
                    while j < inner:
                        rr, cc = (i, j) if direction == Direction.ACROSS else (j, i)
                        letter = puzzle.cell(rr, cc).letter
                        if letter is None:
                            break
                        letters.append(letter)
                        j += 1
                    if len(letters) >= 2:
                        yield r, c, direction, "".join(letters)
