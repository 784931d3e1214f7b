"""Custom exception hierarchy for crossword generation."""


class CrosswordError(Exception):
    """Base exception for engine failures."""


class EmptyInputError(CrosswordError):
    """Raised when there is nothing to build a puzzle from."""


class PlacementConflictError(CrosswordError):
    """Raised when a word is committed over conflicting letters or off the grid."""


class ConceptError(CrosswordError):
    """Raised when concept input cannot be parsed."""


class ConceptSourceError(CrosswordError):
    """Raised when the concept service cannot deliver concepts."""


class ValidationError(CrosswordError):
    """Raised when the puzzle integrity checks fail."""
