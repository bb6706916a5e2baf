from __future__ import annotations

import argparse
import json

from cardgen.core.config import settings
from cardgen.modules.flashcards.backend import backend_from_settings
from cardgen.modules.flashcards.main import FlashcardsGenerator
from cardgen.modules.flashcards.models import GenerationRequest
from cardgen.modules.flashcards.validation import TopicValidator


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="flashcards-gen", description="Flashcards generator CLI"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate flashcards for a subject and topic")
    g.add_argument("--subject", "-s", required=True, help="Subject, e.g. Biology")
    g.add_argument("--topic", "-t", required=True, help="Topic, e.g. Pollination")
    g.add_argument("--count", "-n", type=int, default=5, help="Number of cards (1-15)")
    g.add_argument(
        "--offline",
        action="store_true",
        help="Skip the live backend even if one is configured",
    )

    s = sub.add_parser("suggest", help="Suggest topics for a subject")
    s.add_argument("--subject", "-s", required=True, help="Subject, e.g. History")

    args = parser.parse_args(argv)
    if args.cmd == "generate":
        backend = None if args.offline else backend_from_settings(settings.generation)
        svc = FlashcardsGenerator(backend, timeout=settings.generation.timeout_seconds)
        result = svc.generate_sync(
            GenerationRequest(subject=args.subject, topic=args.topic, card_count=args.count)
        )
        print(json.dumps(result.model_dump(exclude_none=True), indent=2, ensure_ascii=False))
        return 0 if result.success else 1
    if args.cmd == "suggest":
        print(json.dumps(TopicValidator.suggest_topics(args.subject), indent=2))
        return 0

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
