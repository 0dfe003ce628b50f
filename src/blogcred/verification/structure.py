# src/blogcred/verification/structure.py

import logging
import re
from typing import List

from blogcred.verification.lists import TECHNICAL_TERMS_PATTERN

logger = logging.getLogger(__name__)

MIN_CONTENT_LENGTH = 200
MIN_PARAGRAPHS = 2
SHORT_CONTENT_PENALTY = 20
FEW_PARAGRAPHS_PENALTY = 15
TECHNICAL_BONUS = 10

_DIGIT = re.compile(r"\d")


def analyze_structure(content: str, warnings: List[str]) -> int:
    """
    Score body length, paragraphing and technical density.

    Args:
        content: Article body
        warnings: Shared warning list, appended in place

    Returns:
        Score clamped to [0, 100].
    """
    score = 100

    if len(content) < MIN_CONTENT_LENGTH:
        score -= SHORT_CONTENT_PENALTY
        warnings.append("Content too short for adequate verification")

    paragraphs = [line for line in content.split("\n") if line.strip()]
    if len(paragraphs) < MIN_PARAGRAPHS:
        score -= FEW_PARAGRAPHS_PENALTY
        warnings.append("Inadequate structure (too few paragraphs)")

    if _DIGIT.search(content) and TECHNICAL_TERMS_PATTERN.search(content):
        score += TECHNICAL_BONUS

    score = max(0, min(100, score))
    logger.debug(f"Structure score: {score} ({len(paragraphs)} paragraphs)")
    return score
