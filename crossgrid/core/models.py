"""Data models supporting the crossword engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .constants import Direction


def path_cells(start_row: int, start_col: int, direction: Direction, length: int) -> List[Tuple[int, int]]:
    """Return the coordinates covered by a word of ``length`` letters."""

    dr, dc = direction.step
    return [(start_row + dr * i, start_col + dc * i) for i in range(length)]


@dataclass(frozen=True)
class Concept:
    """A term with the definition used as its clue."""

    term: str
    definition: str = ""


@dataclass(frozen=True)
class WordPlacement:
    """A word committed to the working grid, in absolute coordinates."""

    word: str
    clue: str
    start_row: int
    start_col: int
    direction: Direction

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def end_row(self) -> int:
        return self.start_row + (self.length - 1 if self.direction == Direction.DOWN else 0)

    @property
    def end_col(self) -> int:
        return self.start_col + (self.length - 1 if self.direction == Direction.ACROSS else 0)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        return path_cells(self.start_row, self.start_col, self.direction, self.length)


@dataclass
class CrosswordCell:
    """A cell of the finished puzzle.

    Only ``letter`` and ``number`` are produced by the engine. ``user_input``
    and ``is_correct`` start out blank and belong to whoever renders the grid.
    """

    letter: Optional[str] = None
    user_input: str = ""
    number: Optional[int] = None
    is_correct: bool = False

    @property
    def is_black(self) -> bool:
        return self.letter is None

    def to_jsonable(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "letter": self.letter,
            "userInput": self.user_input,
            "isCorrect": self.is_correct,
        }
        if self.number is not None:
            payload["number"] = self.number
        return payload


@dataclass(frozen=True)
class CrosswordWord:
    """A numbered clue entry, in trimmed-grid coordinates."""

    word: str
    clue: str
    direction: Direction
    start_row: int
    start_col: int
    number: int

    @property
    def cells(self) -> List[Tuple[int, int]]:
        return path_cells(self.start_row, self.start_col, self.direction, len(self.word))

    def covers(self, row: int, col: int) -> bool:
        if self.direction == Direction.ACROSS:
            return row == self.start_row and self.start_col <= col < self.start_col + len(self.word)
        return col == self.start_col and self.start_row <= row < self.start_row + len(self.word)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "clue": self.clue,
            "direction": self.direction.value,
            "startRow": self.start_row,
            "startCol": self.start_col,
            "number": self.number,
        }


@dataclass
class CrosswordPuzzle:
    """The finished puzzle handed to the rendering layer."""

    grid: List[List[CrosswordCell]]
    words: List[CrosswordWord] = field(default_factory=list)
    rows: int = 0
    cols: int = 0
    validation_messages: List[str] = field(default_factory=list)

    def cell(self, row: int, col: int) -> CrosswordCell:
        return self.grid[row][col]

    def across_clues(self) -> List[CrosswordWord]:
        return sorted((w for w in self.words if w.direction == Direction.ACROSS), key=lambda w: w.number)

    def down_clues(self) -> List[CrosswordWord]:
        return sorted((w for w in self.words if w.direction == Direction.DOWN), key=lambda w: w.number)

    def word_at(self, row: int, col: int, direction: Direction) -> Optional[CrosswordWord]:
        """Return the word running in ``direction`` through ``(row, col)``, if any."""

        for word in self.words:
            if word.direction == direction and word.covers(row, col):
                return word
        return None

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "grid": [[cell.to_jsonable() for cell in row] for row in self.grid],
            "words": [word.to_jsonable() for word in self.words],
            "rows": self.rows,
            "cols": self.cols,
        }
