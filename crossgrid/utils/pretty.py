"""Pretty-print helpers for finished puzzles."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..core.models import CrosswordCell, CrosswordPuzzle, CrosswordWord


BLACK = "#"


def cell_symbol(cell: CrosswordCell) -> str:
    return BLACK if cell.is_black else cell.letter


def format_puzzle(puzzle: CrosswordPuzzle) -> str:
    width = puzzle.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * max(0, 3 * width - 1))
    for r in range(puzzle.rows):
        row_cells = [cell_symbol(puzzle.cell(r, c)) for c in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_clues(words: List[CrosswordWord]) -> List[str]:
    return [f"  {w.number:>2}. {w.clue or '-'} ({len(w.word)})" for w in words]


def print_puzzle_stats(
    puzzle: CrosswordPuzzle,
    requested: Optional[int] = None,
    *,
    stream=None,
) -> None:
    """Print grid, size and clue lists for a finished puzzle."""

    stream = stream or sys.stdout
    print(format_puzzle(puzzle), file=stream)

    total_cells = puzzle.rows * puzzle.cols
    letter_cells = sum(1 for row in puzzle.grid for cell in row if not cell.is_black)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {puzzle.rows} x {puzzle.cols} ({total_cells} cells)", file=stream)
    if total_cells:
        print(f"  Letters:       {letter_cells} ({letter_cells / total_cells * 100:.0f}%)", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    if requested is not None:
        print(f"  Placed:        {len(puzzle.words)} of {requested}", file=stream)
    else:
        print(f"  Placed:        {len(puzzle.words)}", file=stream)

    across = puzzle.across_clues()
    down = puzzle.down_clues()
    if across:
        print(file=stream)
        print("Across", file=stream)
        for line in format_clues(across):
            print(line, file=stream)
    if down:
        print(file=stream)
        print("Down", file=stream)
        for line in format_clues(down):
            print(line, file=stream)

    if puzzle.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in puzzle.validation_messages:
            print(f"  {msg}", file=stream)
