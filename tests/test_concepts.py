import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

from crossgrid.core.exceptions import ConceptError, ConceptSourceError
from crossgrid.core.models import Concept
from crossgrid.data.concepts import load_concepts_file, parse_concept_arg, parse_concepts
from crossgrid.data.normalization import normalize_term
from crossgrid.io.concept_client import StudyApiClient


class NormalizationTests(unittest.TestCase):
    def test_uppercases_and_strips(self) -> None:
        self.assertEqual(normalize_term("  äpple "), "ÄPPLE")

    def test_combining_marks_are_composed(self) -> None:
        self.assertEqual(normalize_term("a\u0308ng"), "ÄNG")

    def test_expanding_uppercase_keeps_one_cell(self) -> None:
        self.assertEqual(normalize_term("straße"), "STRAßE")


class ConceptParsingTests(unittest.TestCase):
    def test_mappings_and_concepts_are_accepted(self) -> None:
        concepts = parse_concepts(
            [{"term": "sol", "definition": "Lyser"}, {"term": "måne"}, Concept("hav", "Salt vatten")]
        )
        self.assertEqual(concepts, [Concept("sol", "Lyser"), Concept("måne", ""), Concept("hav", "Salt vatten")])

    def test_blank_terms_are_dropped(self) -> None:
        self.assertEqual(parse_concepts([{"term": " ", "definition": "x"}]), [])

    def test_malformed_entries_raise(self) -> None:
        with self.assertRaises(ConceptError):
            parse_concepts(["sol"])
        with self.assertRaises(ConceptError):
            parse_concepts([{"definition": "no term"}])
        with self.assertRaises(ConceptError):
            parse_concepts([{"term": "sol", "definition": 3}])

    def test_command_line_entry(self) -> None:
        self.assertEqual(parse_concept_arg("KATT: Ett husdjur"), Concept("KATT", "Ett husdjur"))
        self.assertEqual(parse_concept_arg("KATT"), Concept("KATT", ""))
        with self.assertRaises(ConceptError):
            parse_concept_arg(":Ett husdjur")

    def test_load_file_formats(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            as_list = Path(tmpdir) / "list.json"
            as_list.write_text(json.dumps([{"term": "sol", "definition": "Lyser"}]), encoding="utf-8")
            wrapped = Path(tmpdir) / "wrapped.json"
            wrapped.write_text(json.dumps({"concepts": [{"term": "sol", "definition": "Lyser"}]}), encoding="utf-8")

            self.assertEqual(load_concepts_file(as_list), [Concept("sol", "Lyser")])
            self.assertEqual(load_concepts_file(wrapped), [Concept("sol", "Lyser")])

    def test_load_file_errors(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            broken = Path(tmpdir) / "broken.json"
            broken.write_text("{not json", encoding="utf-8")
            wrong_shape = Path(tmpdir) / "shape.json"
            wrong_shape.write_text(json.dumps({"terms": []}), encoding="utf-8")

            with self.assertRaises(ConceptError):
                load_concepts_file(broken)
            with self.assertRaises(ConceptError):
                load_concepts_file(wrong_shape)
            with self.assertRaises(ConceptError):
                load_concepts_file(Path(tmpdir) / "missing.json")


class StudyApiClientTests(unittest.TestCase):
    def _client(self, payload=None) -> StudyApiClient:
        session = MagicMock()
        response = MagicMock()
        response.json.return_value = payload
        session.post.return_value = response
        return StudyApiClient(base_url="http://api.test/", session=session)

    def test_fetch_concepts(self) -> None:
        client = self._client(
            {
                "success": True,
                "concepts": [
                    {"term": "Fotosyntes", "definition": "Växter gör socker"},
                    {"term": "Klorofyll", "definition": "Grönt färgämne"},
                ],
                "count": 2,
            }
        )
        concepts = client.fetch_concepts(content="Text om växter", count=2, grade=5)

        self.assertEqual([c.term for c in concepts], ["Fotosyntes", "Klorofyll"])
        client.session.post.assert_called_once_with(
            "http://api.test/api/generate/concepts",
            json={"content": "Text om växter", "count": 2, "language": "sv", "topicHint": "", "grade": 5},
            timeout=60.0,
        )

    def test_base_url_from_environment(self) -> None:
        with patch.dict(os.environ, {"CROSSGRID_API_BASE": "http://env.test/"}):
            client = StudyApiClient(session=MagicMock())
        self.assertEqual(client.base_url, "http://env.test")

    def test_transport_errors_are_wrapped(self) -> None:
        client = self._client()
        client.session.post.side_effect = requests.ConnectionError("boom")
        with self.assertRaises(ConceptSourceError):
            client.fetch_concepts(topic_hint="växter")

    def test_http_errors_are_wrapped(self) -> None:
        client = self._client()
        client.session.post.return_value.raise_for_status.side_effect = requests.HTTPError("400")
        with self.assertRaises(ConceptSourceError):
            client.fetch_concepts(topic_hint="växter")

    def test_missing_concept_list(self) -> None:
        client = self._client({"error": "Ange ett tema"})
        with self.assertRaises(ConceptSourceError):
            client.fetch_concepts()

    def test_malformed_concepts(self) -> None:
        client = self._client({"concepts": [{"definition": "no term"}]})
        with self.assertRaises(ConceptSourceError):
            client.fetch_concepts(topic_hint="växter")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
