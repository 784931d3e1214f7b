"""Concept input parsing and loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Union

from ..core.exceptions import ConceptError
from ..core.models import Concept
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

ConceptLike = Union[Concept, Mapping[str, Any]]


def to_concept(item: ConceptLike) -> Concept:
    """Coerce a mapping with ``term``/``definition`` keys into a :class:`Concept`."""

    if isinstance(item, Concept):
        return item
    if not isinstance(item, Mapping):
        raise ConceptError(f"Concept must be a mapping, got {type(item).__name__}")
    term = item.get("term")
    if not isinstance(term, str):
        raise ConceptError(f"Concept term must be a string, got {term!r}")
    definition = item.get("definition", "")
    if definition is None:
        definition = ""
    if not isinstance(definition, str):
        raise ConceptError(f"Concept definition for {term!r} must be a string")
    return Concept(term=term, definition=definition)


def parse_concepts(items: Iterable[ConceptLike]) -> List[Concept]:
    """Parse concepts, dropping entries whose term is blank."""

    concepts: List[Concept] = []
    for item in items:
        concept = to_concept(item)
        if not concept.term.strip():
            LOGGER.warning("Skipping concept with empty term (definition=%r)", concept.definition)
            continue
        concepts.append(concept)
    return concepts


def parse_concept_arg(raw: str) -> Concept:
    """Parse a ``TERM:Definition`` command-line entry. The definition is optional."""

    term, _, definition = raw.partition(":")
    term = term.strip()
    if not term:
        raise ConceptError(f"Missing term in {raw!r}")
    return Concept(term=term, definition=definition.strip())


def load_concepts_file(path: Path | str) -> List[Concept]:
    """Load concepts from a JSON list or a ``{"concepts": [...]}`` document."""

    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConceptError(f"Cannot read concepts from {path}: {exc}") from exc

    if isinstance(payload, Mapping):
        payload = payload.get("concepts")
    if not isinstance(payload, list):
        raise ConceptError(f"{path} does not contain a list of concepts")
    concepts = parse_concepts(payload)
    LOGGER.info("Loaded %s concepts from %s", len(concepts), path)
    return concepts


__all__ = ["ConceptLike", "load_concepts_file", "parse_concept_arg", "parse_concepts", "to_concept"]
