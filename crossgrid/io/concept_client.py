"""HTTP client for the study app's concept generation endpoint."""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import requests

from ..core.exceptions import ConceptError, ConceptSourceError
from ..core.models import Concept
from ..data.concepts import parse_concepts
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class StudyApiClient:
    """Fetches ``{term, definition}`` concepts from ``POST /api/generate/concepts``."""

    CONCEPTS_PATH = "/api/generate/concepts"

    def __init__(
        self,
        base_url: Optional[str] = None,
        base_url_env: str = "CROSSGRID_API_BASE",
        timeout_seconds: float = 60.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or os.environ.get(base_url_env) or "http://localhost:3001").rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def fetch_concepts(
        self,
        content: str = "",
        count: int = 5,
        grade: Optional[int] = None,
        language: str = "sv",
        topic_hint: str = "",
    ) -> List[Concept]:
        """Ask the service for concepts drawn from ``content`` or ``topic_hint``."""

        url = f"{self.base_url}{self.CONCEPTS_PATH}"
        payload: Dict[str, Any] = {
            "content": content,
            "count": count,
            "language": language,
            "topicHint": topic_hint,
        }
        if grade is not None:
            payload["grade"] = grade

        try:
            response = self.session.post(url, json=payload, timeout=self.timeout_seconds)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise ConceptSourceError(f"Concept request failed: {exc}") from exc
        except ValueError as exc:
            raise ConceptSourceError(f"Concept service returned invalid JSON: {exc}") from exc

        concepts = self._extract_concepts(data)
        LOGGER.info("Fetched %s concepts from %s", len(concepts), url)
        return concepts

    @staticmethod
    def _extract_concepts(payload: Any) -> List[Concept]:
        raw = payload.get("concepts") if isinstance(payload, dict) else None
        if not isinstance(raw, list):
            LOGGER.warning("Concept response missing concept list: %s", payload)
            raise ConceptSourceError("Concept service response has no concept list")
        try:
            return parse_concepts(raw)
        except ConceptError as exc:
            raise ConceptSourceError(f"Malformed concept in response: {exc}") from exc
