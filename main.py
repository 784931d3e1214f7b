"""CLI entrypoint for the concept crossword generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from crossgrid.core.exceptions import ConceptError, ConceptSourceError
from crossgrid.core.models import Concept
from crossgrid.data.concepts import load_concepts_file, parse_concept_arg
from crossgrid.engine.generator import CrosswordGenerator, GeneratorConfig
from crossgrid.io.concept_client import StudyApiClient
from crossgrid.utils.logger import configure_logging
from crossgrid.utils.pretty import print_puzzle_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a crossword from term/definition concepts",
    )
    parser.add_argument(
        "--concepts-file",
        type=Path,
        metavar="FILE",
        help='JSON file with a list of {"term", "definition"} objects (or {"concepts": [...]})',
    )
    parser.add_argument(
        "--concept",
        action="append",
        metavar="TERM:DEFINITION",
        help="Concept given on the command line; repeatable",
    )
    parser.add_argument(
        "--from-api",
        action="store_true",
        help="Fetch concepts from the study app's concept endpoint (CROSSGRID_API_BASE)",
    )
    parser.add_argument("--content", type=str, default="", help="Study text sent with --from-api")
    parser.add_argument("--topic", type=str, default="", help="Topic hint sent with --from-api")
    parser.add_argument("--count", type=int, default=5, help="Number of concepts to request")
    parser.add_argument("--grade", type=int, default=None, help="School grade sent with --from-api")
    parser.add_argument("--language", type=str, default="sv", help="Concept language for --from-api")
    parser.add_argument("--max-size", type=int, default=20, help="Side length of the working grid")
    parser.add_argument(
        "--max-concepts",
        type=int,
        default=15,
        help="Maximum number of concepts considered for placement",
    )
    parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Keep the given concept order instead of placing longest terms first",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--pretty", action="store_true", help="Print the grid and clue lists")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_concepts(args: argparse.Namespace, parser: argparse.ArgumentParser) -> List[Concept]:
    concepts: List[Concept] = []
    try:
        if args.concepts_file:
            concepts.extend(load_concepts_file(args.concepts_file))
        for raw in args.concept or []:
            concepts.append(parse_concept_arg(raw))
        if args.from_api:
            client = StudyApiClient()
            concepts.extend(
                client.fetch_concepts(
                    content=args.content,
                    count=args.count,
                    grade=args.grade,
                    language=args.language,
                    topic_hint=args.topic,
                )
            )
    except (ConceptError, ConceptSourceError) as exc:
        parser.error(str(exc))
    return concepts


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if not (args.concepts_file or args.concept or args.from_api):
        parser.error("provide --concepts-file, --concept or --from-api")
    if args.max_size <= 0:
        parser.error("--max-size must be positive")
    if args.max_concepts <= 0:
        parser.error("--max-concepts must be positive")

    concepts = collect_concepts(args, parser)
    config = GeneratorConfig(
        max_size=args.max_size,
        max_concepts=args.max_concepts,
        sort_by_length=not args.no_sort,
    )
    puzzle = CrosswordGenerator(config).generate(concepts)
    if puzzle is None:
        print("Could not build a crossword from these concepts. Try adding more concepts.", file=sys.stderr)
        return 1

    if args.pretty:
        print_puzzle_stats(puzzle, requested=min(len(concepts), config.max_concepts))

    output_text = json.dumps(puzzle.to_jsonable(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    elif not args.pretty:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
