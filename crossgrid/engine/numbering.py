"""Clue numbering and assembly of the public puzzle structure."""

from __future__ import annotations

from typing import List, Sequence

from ..core.models import CrosswordCell, CrosswordPuzzle, CrosswordWord, WordPlacement
from .trimmer import TrimResult


def assemble_puzzle(trimmed: TrimResult, placements: Sequence[WordPlacement]) -> CrosswordPuzzle:
    """Number the placements and build the cell grid.

    Numbers follow placement order (1 for the anchor, 2 for the next word
    committed, and so on), not the reading order of the start cells. When two
    words share a start cell the later number is the one stamped on it.
    """

    cells: List[List[CrosswordCell]] = [
        [CrosswordCell(letter=letter) for letter in row] for row in trimmed.grid
    ]

    words: List[CrosswordWord] = []
    for index, placement in enumerate(placements):
        number = index + 1
        row = placement.start_row - trimmed.offset_row
        col = placement.start_col - trimmed.offset_col
        cells[row][col].number = number
        words.append(
            CrosswordWord(
                word=placement.word,
                clue=placement.clue,
                direction=placement.direction,
                start_row=row,
                start_col=col,
                number=number,
            )
        )

    return CrosswordPuzzle(grid=cells, words=words, rows=trimmed.rows, cols=trimmed.cols)
