# src/blogcred/verification/sources.py

import logging
import re
from typing import List, Sequence, Tuple
from urllib.parse import urlsplit

from blogcred.verification.lists import match_trusted_categories
from blogcred.verification.schema import SourceType, VerifiedSource

logger = logging.getLogger(__name__)

NO_SOURCE_SCORE = 50
DEFAULT_SOURCE_SCORE = 60
LOW_CREDIBILITY_THRESHOLD = 60

_PROTOCOL_PREFIX = re.compile(r"^https?://", re.IGNORECASE)
_WWW_PREFIX = re.compile(r"^www\.", re.IGNORECASE)

# Registry category -> credibility, in precedence order
CATEGORY_CREDIBILITY: Tuple[Tuple[str, int], ...] = (
    ("academic", 95),
    ("government", 90),
    ("cybersecurity", 85),
    ("techNews", 80),
)

# Registry category -> source type, in precedence order
CATEGORY_TYPES: Tuple[Tuple[str, SourceType], ...] = (
    ("academic", SourceType.ACADEMIC),
    ("government", SourceType.GOVERNMENT),
    ("techNews", SourceType.NEWS),
    ("cybersecurity", SourceType.TECH),
)


def _naive_domain(source: str) -> str:
    """Strip protocol and www. and keep everything before the first slash."""
    stripped = _WWW_PREFIX.sub("", _PROTOCOL_PREFIX.sub("", source.strip()))
    return stripped.split("/")[0].lower()


def extract_domain(source: str) -> str:
    """
    Extract the host of a source URL, lowercased and without a leading www.

    Falls back to plain string handling when the source does not parse as an
    absolute URL (e.g. "example.com/article").
    """
    candidate = source.strip()
    try:
        parsed = urlsplit(candidate)
        host = parsed.hostname if parsed.scheme else None
    except ValueError:
        host = None

    if not host:
        return _naive_domain(candidate)

    return _WWW_PREFIX.sub("", host)


def calculate_source_credibility(domain: str) -> int:
    """
    Score a domain against the trusted registry and TLD heuristics.

    Args:
        domain: Normalized domain

    Returns:
        Credibility score (0-100)
    """
    categories = match_trusted_categories(domain)
    for category, credibility in CATEGORY_CREDIBILITY:
        if category in categories:
            return credibility

    if domain.endswith(".gov") or domain.endswith(".gov.br"):
        return 90
    if domain.endswith(".edu") or domain.endswith(".org"):
        return 75

    return DEFAULT_SOURCE_SCORE


def identify_source_type(domain: str) -> SourceType:
    """Classify a domain by registry membership, defaulting to unknown."""
    categories = match_trusted_categories(domain)
    for category, source_type in CATEGORY_TYPES:
        if category in categories:
            return source_type
    return SourceType.UNKNOWN


def analyze_sources(
    sources: Sequence[str],
    warnings: List[str],
    verified_sources: List[VerifiedSource],
    no_source_score: int = NO_SOURCE_SCORE,
    low_credibility_threshold: int = LOW_CREDIBILITY_THRESHOLD,
) -> float:
    """
    Score declared sources and record one VerifiedSource per non-blank entry.

    A failure on one source is logged and the source is recorded with the
    naive domain and default credibility; the batch always completes.

    Args:
        sources: Source strings in submission order
        warnings: Shared warning list, appended in place
        verified_sources: Shared source list, appended in place
        no_source_score: Score returned when no source was declared
        low_credibility_threshold: Credibility below which a source is flagged

    Returns:
        Mean credibility of the sources, or no_source_score when none were declared.
    """
    declared = [source for source in sources if source and source.strip()]
    if not declared:
        warnings.append("No source provided for verification")
        return no_source_score

    total_score = 0
    for source in declared:
        try:
            domain = extract_domain(source)
            credibility = calculate_source_credibility(domain)
            source_type = identify_source_type(domain)
        except Exception as e:
            logger.warning(f"Failed to verify source {source!r}: {e}")
            warnings.append(f"Could not verify source: {source}")
            domain = _naive_domain(source)
            credibility = DEFAULT_SOURCE_SCORE
            source_type = SourceType.UNKNOWN

        if credibility < low_credibility_threshold:
            warnings.append(f"Low-credibility source: {domain}")

        verified_sources.append(
            VerifiedSource(
                url=source,
                domain=domain,
                credibility_score=credibility,
                type=source_type,
            )
        )
        total_score += credibility

    mean_score = total_score / len(declared)
    logger.debug(f"Source score: {mean_score:.2f} over {len(declared)} sources")
    return mean_score
