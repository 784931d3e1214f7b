"""Crossword generation engine for study concepts.

This package exposes the public API surface via:

- ``crossgrid.engine.generator.CrosswordGenerator``: lays concepts out as a puzzle.
- ``crossgrid.engine.generator.generate_crossword``: one-call convenience wrapper.
- ``crossgrid.core.models``: the ``Concept`` input and ``CrosswordPuzzle`` output types.
"""

from .core.models import Concept, CrosswordCell, CrosswordPuzzle, CrosswordWord
from .engine.generator import CrosswordGenerator, GeneratorConfig, generate_crossword

__all__ = [
    "Concept",
    "CrosswordCell",
    "CrosswordGenerator",
    "CrosswordPuzzle",
    "CrosswordWord",
    "GeneratorConfig",
    "generate_crossword",
]

__version__ = "0.1.0"
