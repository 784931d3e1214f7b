"""Shared constants and enumerations for the crossword engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


DEFAULT_MAX_SIZE = 20
DEFAULT_MAX_CONCEPTS = 15
DEFAULT_MARGIN = 1


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
