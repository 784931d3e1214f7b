"""Crossword generation orchestration.

Pipeline:
  1. Build: anchor the first concept, then greedily cross each following
     concept with the words already on the working grid.
  2. Trim: cut the occupied region (plus margin) out of the working grid.
  3. Assemble: number the words and build the public cell grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_MARGIN, DEFAULT_MAX_CONCEPTS, DEFAULT_MAX_SIZE
from ..core.exceptions import EmptyInputError
from ..core.models import Concept, CrosswordPuzzle, WordPlacement
from ..data.concepts import ConceptLike, parse_concepts
from ..data.normalization import normalize_term
from .grid import GridConfig, WorkingGrid
from .numbering import assemble_puzzle
from .search import find_placement
from .trimmer import trim_grid
from .validator import PlacementValidator, PuzzleValidator
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    max_size: int = DEFAULT_MAX_SIZE
    max_concepts: int = DEFAULT_MAX_CONCEPTS
    margin: int = DEFAULT_MARGIN
    sort_by_length: bool = True
    validate_output: bool = True

    def to_grid_config(self, anchor_length: int = 0) -> GridConfig:
        return GridConfig(size=max(self.max_size, anchor_length))


class CrosswordGenerator:
    """Lays concepts out as a crossword.

    The layout is greedy: each concept after the first is placed at the first
    legal crossing found, and a concept that cannot cross anything already on
    the grid is left out. Callers must not assume every concept they pass in
    ends up in the puzzle; compare ``len(puzzle.words)`` with what was asked.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        self.validator = PuzzleValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, concepts: Iterable[ConceptLike]) -> Optional[CrosswordPuzzle]:
        """Return a puzzle, or ``None`` when nothing could be placed."""

        ordered = self.prepare_concepts(concepts)
        if not ordered:
            LOGGER.info("No concepts supplied, nothing to build")
            return None

        grid, placements = self.build(ordered)
        try:
            trimmed = trim_grid(grid, placements, margin=self.config.margin)
        except EmptyInputError as exc:
            LOGGER.warning("Could not build a crossword: %s", exc)
            return None

        puzzle = assemble_puzzle(trimmed, placements)
        LOGGER.info(
            "Crossword built with %s/%s words on a %sx%s grid",
            len(puzzle.words),
            len(ordered),
            puzzle.rows,
            puzzle.cols,
        )
        if self.config.validate_output:
            validation = self.validator.validate(puzzle)
            puzzle.validation_messages = list(validation.messages)
        return puzzle

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------
    def prepare_concepts(self, concepts: Iterable[ConceptLike]) -> List[Concept]:
        """Normalize terms, longest first, capped at ``max_concepts``."""

        prepared = [
            Concept(term=normalize_term(concept.term), definition=concept.definition)
            for concept in parse_concepts(concepts)
        ]
        if self.config.sort_by_length:
            prepared.sort(key=lambda concept: len(concept.term), reverse=True)
        return prepared[: self.config.max_concepts]

    def build(self, concepts: Sequence[Concept]) -> Tuple[WorkingGrid, List[WordPlacement]]:
        """Place ``concepts`` in order on a fresh working grid."""

        if not concepts:
            return WorkingGrid(self.config.to_grid_config()), []

        anchor = concepts[0]
        grid = WorkingGrid(self.config.to_grid_config(anchor_length=len(anchor.term)))
        if grid.size > self.config.max_size:
            LOGGER.info("Widening working grid to %s for anchor %s", grid.size, anchor.term)
        grid.place_anchor(anchor.term, anchor.definition)

        checker = PlacementValidator(grid)
        for concept in concepts[1:]:
            placement = find_placement(checker, concept.term, concept.definition, grid.placements)
            if placement is None:
                LOGGER.debug("No legal crossing for %s, leaving it out", concept.term)
                continue
            grid.place_word(placement)
        return grid, list(grid.placements)


def generate_crossword(
    concepts: Iterable[ConceptLike],
    config: Optional[GeneratorConfig] = None,
) -> Optional[CrosswordPuzzle]:
    """Convenience wrapper around :meth:`CrosswordGenerator.generate`."""

    return CrosswordGenerator(config).generate(concepts)
