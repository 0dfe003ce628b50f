# src/blogcred/verification/keywords.py

import logging
from typing import List

from blogcred.verification.lists import SUSPICIOUS_KEYWORDS

logger = logging.getLogger(__name__)

KEYWORD_PENALTY = 15


def analyze_keywords(text: str, warnings: List[str]) -> int:
    """Deduct 15 points per suspicious phrase found in the text (floor 0)."""
    score = 100
    lowered = text.lower()

    for keyword in SUSPICIOUS_KEYWORDS:
        if keyword in lowered:
            score -= KEYWORD_PENALTY
            warnings.append(f'Suspicious keyword found: "{keyword}"')

    score = max(0, score)
    logger.debug(f"Keyword score: {score}")
    return score
