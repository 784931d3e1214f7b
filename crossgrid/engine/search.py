"""Greedy intersection search for new words."""

from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import Direction
from ..core.models import WordPlacement
from .validator import PlacementValidator


def find_placement(
    validator: PlacementValidator,
    word: str,
    clue: str,
    placed: Sequence[WordPlacement],
) -> Optional[WordPlacement]:
    """Return the first legal placement of ``word`` crossing a placed word.

    Placed words are tried in placement order, then each letter of ``word``
    against each letter of the placed word. The new word always runs
    perpendicular to the word it crosses. The first position the validator
    accepts wins; this is not a search for the densest layout.
    """

    for existing in placed:
        direction = existing.direction.perpendicular
        for i, letter in enumerate(word):
            for j, other in enumerate(existing.word):
                if other != letter:
                    continue
                if existing.direction == Direction.ACROSS:
                    row, col = existing.start_row - i, existing.start_col + j
                else:
                    row, col = existing.start_row + j, existing.start_col - i
                if validator.can_place(word, row, col, direction):
                    return WordPlacement(
                        word=word,
                        clue=clue,
                        start_row=row,
                        start_col=col,
                        direction=direction,
                    )
    return None
