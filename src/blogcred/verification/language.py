# src/blogcred/verification/language.py

import logging
from typing import List

from blogcred.verification.lists import SENSATIONALIST_PATTERNS

logger = logging.getLogger(__name__)

PATTERN_PENALTY = 10
EXCLAMATION_ALLOWANCE = 3
EXCLAMATION_PENALTY = 5


def analyze_language(text: str, warnings: List[str]) -> int:
    """
    Score sensationalist phrasing and punctuation abuse.

    Every match of a sensationalist pattern costs 10 points and each pattern
    that matches adds one warning listing its matches. Exclamation marks past
    the third cost 5 points each.

    Args:
        text: Title and body joined by a space
        warnings: Shared warning list, appended in place

    Returns:
        Score between 0 and 100.
    """
    score = 100

    for pattern in SENSATIONALIST_PATTERNS:
        matches = pattern.findall(text)
        if matches:
            score -= len(matches) * PATTERN_PENALTY
            warnings.append(f"Sensationalist language detected: {', '.join(matches)}")

    exclamation_count = text.count("!")
    if exclamation_count > EXCLAMATION_ALLOWANCE:
        score -= (exclamation_count - EXCLAMATION_ALLOWANCE) * EXCLAMATION_PENALTY
        warnings.append("Excessive use of exclamation marks")

    score = max(0, score)
    logger.debug(f"Language score: {score}")
    return score
