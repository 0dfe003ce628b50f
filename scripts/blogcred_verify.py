#!/usr/bin/env python3
# scripts/blogcred_verify.py

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from blogcred.core.config import load_config
from blogcred.moderation.posts import parse_sources
from blogcred.verification.schema import Recommendation, VerificationResult
from blogcred.verification.verifier import ContentVerifier, verify_content

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("blogcred_verify")

EXIT_CODES = {
    Recommendation.APPROVE: 0,
    Recommendation.REVIEW: 1,
    Recommendation.REJECT: 2,
}


def collect_sources(args: argparse.Namespace) -> List[str]:
    """Merge --source flags with the one-per-line --sources-file."""
    sources = list(args.source or [])
    if args.sources_file:
        sources_path = Path(args.sources_file)
        sources.extend(parse_sources(sources_path.read_text(encoding="utf-8")))
    return sources


def print_report(result: VerificationResult) -> None:
    print(f"Score: {result.score}/100  Recommendation: {result.recommendation.value}")
    if result.sub_scores is not None:
        print("Sub-scores:")
        for name, value in result.sub_scores.model_dump().items():
            print(f"  {name:<10} {value:6.1f}")
    if result.sources:
        print("Sources:")
        for source in result.sources:
            print(
                f"  [{source.credibility_score:3d}] {source.domain} ({source.type.value})"
            )
    if result.warnings:
        print("Warnings:")
        for warning in result.warnings:
            print(f"  - {warning}")


def main():
    parser = argparse.ArgumentParser(
        description="blogcred article credibility check",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Score an article body stored in a file
  blogcred_verify.py --title "Novo golpe via PIX" --content-file post.md \\
                     --source https://www.cert.br/docs

  # Machine-readable output with sources listed one per line
  blogcred_verify.py --title "..." --content "..." --sources-file sources.txt --json

Exit status is 0 for approve, 1 for review and 2 for reject.
        """,
    )

    parser.add_argument("--title", required=True, help="Article title")
    content_group = parser.add_mutually_exclusive_group(required=True)
    content_group.add_argument("--content", help="Article body text")
    content_group.add_argument("--content-file", help="File containing the article body")
    parser.add_argument(
        "--source", action="append", help="Declared source URL (repeatable)"
    )
    parser.add_argument("--sources-file", help="File with one source URL per line")
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="Configuration file path (default: config/config.yaml)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}")
        sys.exit(3)

    try:
        if args.content_file:
            content = Path(args.content_file).read_text(encoding="utf-8")
        else:
            content = args.content
        sources = collect_sources(args)
    except OSError as e:
        logger.error(f"Failed to read input: {e}")
        sys.exit(3)

    verifier = ContentVerifier(config.scoring)
    result = asyncio.run(verify_content(args.title, content, sources, verifier=verifier))

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
    else:
        print_report(result)

    sys.exit(EXIT_CODES[result.recommendation])


if __name__ == "__main__":
    main()
